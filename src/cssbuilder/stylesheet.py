"""StyleSheet: ordered rule registry plus ``:root`` variables, with serialization.

Example:
    sheet = StyleSheet()
    sheet.add_rule(".btn").add_property("padding", "10px", "15px")
    css = sheet.generate()              # text only
    css = sheet.generate("styles.css")  # text, also written to disk
"""

from __future__ import annotations

import logging
from pathlib import Path

from cssbuilder.config import GeneratorConfig
from cssbuilder.errors import PathError, WriteError
from cssbuilder.model.rule import Rule
from cssbuilder.model.variables import VariableSet, get_variable

__all__ = ["StyleSheet", "new_stylesheet"]

logger = logging.getLogger(__name__)


class StyleSheet:
    """A mutable stylesheet owning its variables and rules.

    Not thread-safe; give each worker its own sheet or guard it externally.
    """

    def __init__(
        self,
        variables: VariableSet | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.variables = variables if variables is not None else VariableSet()
        self._rules: list[Rule] = []
        self._index: dict[str, Rule] = {}

    # --- rule registry --------------------------------------------------------

    def add_rule(self, name: str) -> Rule:
        """Return the rule registered under *name*, creating it if needed.

        Any selector string works: ``.my-class``, ``#my-id``, ``div``,
        ``div > p``, ``div.my-class``. No validation is performed.
        """
        rule = self._index.get(name)
        if rule is None:
            rule = Rule(name=name, indent=self.config.indent)
            self._index[name] = rule
            self._rules.append(rule)
        return rule

    def add_class(self, name: str) -> Rule:
        """Register the class selector ``.name``."""
        return self.add_rule("." + name)

    def get_rule(self, name: str) -> Rule | None:
        return self._index.get(name)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    # --- variables ------------------------------------------------------------

    def set_variable(self, name: str, value: str) -> None:
        self.variables.set_variable(name, value)

    @staticmethod
    def get_variable(name: str) -> str:
        return get_variable(name)

    # --- serialization --------------------------------------------------------

    def render(self) -> str:
        """Render the ``:root`` block followed by every rule in registration order."""
        parts = [self.variables.render_root(self.config.indent)]
        parts.extend(rule.render() for rule in self._rules)
        return "".join(parts)

    def generate(self, path: str | Path | None = None) -> str:
        """Render the stylesheet and optionally write it to *path*.

        Raises:
            PathError: *path* does not end with the required suffix.
            WriteError: the file could not be written.

        Both errors carry the generated text in ``exc.css``.
        """
        css = self.render()
        logger.debug("Generated stylesheet: %d rule(s), %d chars", len(self._rules), len(css))
        if path is None:
            return css

        target = str(path)
        suffix = self.config.required_suffix
        if not target.endswith(suffix):
            logger.warning("Refusing to write %s: path must end with %s", target, suffix)
            raise PathError(
                f"file path must end with {suffix} extension",
                path=target,
                css=css,
            )

        try:
            # newline="" keeps "\n" line endings on every platform.
            with open(target, "w", encoding=self.config.encoding, newline="") as fh:
                fh.write(css)
        except OSError as exc:
            logger.warning("Failed to write %s: %s", target, exc)
            raise WriteError(
                f"error writing css file: {exc}",
                path=target,
                css=css,
                cause=exc,
            ) from exc

        logger.info("Wrote stylesheet to %s", target)
        return css

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"StyleSheet(rules={[r.name for r in self._rules]}, external={list(self.variables.external)})"


def new_stylesheet() -> StyleSheet:
    """Return an empty stylesheet with default variables."""
    return StyleSheet()
