"""CLI command: cssbuilder vars -- print the :root variable block."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli.options import apply_overrides, token_option, var_option
from cssbuilder.errors import DefinitionError
from cssbuilder.stylesheet import StyleSheet


@click.command("vars")
@token_option
@var_option
def variables(token_assignments: tuple[str, ...], var_assignments: tuple[str, ...]) -> None:
    """Print the :root block with the built-in tokens and any extra variables."""
    sheet = StyleSheet()
    try:
        apply_overrides(sheet, token_assignments, var_assignments)
    except DefinitionError as exc:
        click.echo(f"Definition error: {exc}", err=True)
        sys.exit(1)
    click.echo(sheet.variables.render_root(sheet.config.indent), nl=False)
