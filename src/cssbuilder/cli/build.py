"""CLI command: cssbuilder build -- render a JSON definition to CSS."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli.options import apply_overrides, token_option, var_option
from cssbuilder.definition import load_definition
from cssbuilder.errors import DefinitionError, PathError, WriteError


@click.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o", "--output", default=None, help="Write the stylesheet to this .css file"
)
@token_option
@var_option
def build(
    definition: str,
    output: str | None,
    token_assignments: tuple[str, ...],
    var_assignments: tuple[str, ...],
) -> None:
    """Build a stylesheet from a JSON DEFINITION file.

    Prints the generated CSS, or writes it to OUTPUT when given. Exits with
    code 1 if the definition is malformed or the file cannot be written.
    """
    try:
        sheet = load_definition(definition)
        apply_overrides(sheet, token_assignments, var_assignments)
    except DefinitionError as exc:
        click.echo(f"Definition error: {exc}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(sheet.generate(), nl=False)
        return

    try:
        sheet.generate(output)
    except (PathError, WriteError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {len(sheet.rules)} rule(s) to {output}")
