"""cssbuilder model layer -- public type re-exports."""

from cssbuilder.model.declaration import Declaration
from cssbuilder.model.rule import Rule
from cssbuilder.model.variables import VARIABLE_SCHEMA, VariableSet, get_variable

__all__ = [
    # declaration
    "Declaration",
    # rule
    "Rule",
    # variables
    "VARIABLE_SCHEMA",
    "VariableSet",
    "get_variable",
]
