"""cssbuilder: programmatic builder for CSS text."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import GeneratorConfig
from cssbuilder.errors import CSSBuilderError, DefinitionError, PathError, WriteError
from cssbuilder.model import Declaration, Rule, VariableSet, get_variable
from cssbuilder.stylesheet import StyleSheet, new_stylesheet

__all__ = [
    "__version__",
    # config
    "GeneratorConfig",
    # errors
    "CSSBuilderError",
    "PathError",
    "WriteError",
    "DefinitionError",
    # model
    "Declaration",
    "Rule",
    "VariableSet",
    "get_variable",
    # stylesheet
    "StyleSheet",
    "new_stylesheet",
]
