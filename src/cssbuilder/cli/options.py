"""Shared click options for commands that accept variable overrides."""

from __future__ import annotations

import click

from cssbuilder.definition import parse_assignment
from cssbuilder.errors import DefinitionError
from cssbuilder.stylesheet import StyleSheet

var_option = click.option(
    "--var",
    "var_assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Add or overwrite an external :root variable (repeatable)",
)

token_option = click.option(
    "--token",
    "token_assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Override a built-in token such as ColorPrimary (repeatable)",
)


def apply_overrides(
    sheet: StyleSheet, token_assignments: tuple[str, ...], var_assignments: tuple[str, ...]
) -> None:
    """Apply ``--token`` and ``--var`` options on top of *sheet*."""
    for raw in token_assignments:
        name, value = parse_assignment(raw)
        try:
            sheet.variables.set_token(name, value)
        except KeyError as exc:
            raise DefinitionError(str(exc.args[0])) from None
    for raw in var_assignments:
        name, value = parse_assignment(raw)
        sheet.set_variable(name, value)
