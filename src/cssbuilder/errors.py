"""Error hierarchy for stylesheet generation."""
from __future__ import annotations

from typing import Any


class CSSBuilderError(Exception):
    """Base error for all cssbuilder errors.

    ``css`` holds whatever text was generated before the failure so callers
    never lose the in-memory result.
    """

    def __init__(
        self, message: str, *, css: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.css = css
        self.cause = cause


class PathError(CSSBuilderError):
    """The destination path does not end with the required suffix."""

    def __init__(self, message: str, *, path: str = "", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.path = path


class WriteError(CSSBuilderError):
    """Writing the generated stylesheet to disk failed."""

    def __init__(self, message: str, *, path: str = "", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.path = path


class DefinitionError(CSSBuilderError):
    """A stylesheet definition (JSON file or CLI option) is malformed."""
