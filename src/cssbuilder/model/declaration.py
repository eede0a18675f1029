"""Declaration model: a single ``key: values`` pair inside a rule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A CSS declaration such as ``margin: 10px 20px``.

    Two declarations are considered duplicates when their rendered ``text``
    is identical, not when their keys match.
    """

    key: str  # "margin", "color", "--accent"
    values: tuple[str, ...] = ()  # ("10px", "20px")

    @classmethod
    def of(cls, key: str, *values: str) -> Declaration:
        return cls(key=key, values=tuple(values))

    @property
    def text(self) -> str:
        return self.key + ": " + " ".join(self.values)

    def __str__(self) -> str:
        return self.text
