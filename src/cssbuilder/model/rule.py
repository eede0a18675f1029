"""Rule model: a selector owning an ordered, duplicate-free declaration list."""

from __future__ import annotations

from dataclasses import dataclass, field

from cssbuilder.model.declaration import Declaration


@dataclass
class Rule:
    """A named selector block.

    ``name`` is emitted verbatim, so it may be any selector string:
    ``.btn``, ``#card``, ``div``, ``div > p``, ``div.my-class``.
    """

    name: str
    declarations: list[Declaration] = field(default_factory=list)
    indent: str = "    "

    def __post_init__(self) -> None:
        unique: list[Declaration] = []
        for decl in self.declarations:
            if all(existing.text != decl.text for existing in unique):
                unique.append(decl)
        self.declarations = unique

    def add_property(self, key: str, *values: str) -> Rule:
        """Append ``key: values`` unless the exact same text is already present.

        Example: ``rule.add_property("margin", "10px", "20px")`` adds
        ``margin: 10px 20px``. Returns the rule for chaining.
        """
        decl = Declaration.of(key, *values)
        if self._contains(decl.text):
            return self
        self.declarations.append(decl)
        return self

    def has_property(self, key: str, *values: str) -> bool:
        return self._contains(Declaration.of(key, *values).text)

    def _contains(self, text: str) -> bool:
        # Reads the public list; callers may edit declarations directly.
        return any(decl.text == text for decl in self.declarations)

    def render(self) -> str:
        """Render the rule as a CSS block, declarations in insertion order."""
        parts = [self.name, " {\n"]
        for decl in self.declarations:
            parts.append(f"{self.indent}{decl.text};\n")
        parts.append("}\n")
        return "".join(parts)
