"""List command for displaying the sections of a style guide."""

from __future__ import annotations

import json

import click
from rich.markup import escape
from rich.table import Table

from kssdoc.cli.commands.common import build_styleguide, console, parse_options, setup_logging


@click.command("list")
@parse_options
@click.option("--json", "as_json", is_flag=True, help="Print the style guide as JSON")
def list_sections(
    sources: tuple[str, ...],
    config_path: str | None,
    mask: str | None,
    custom: tuple[str, ...],
    markdown: bool | None,
    header: bool | None,
    verbose: bool,
    as_json: bool,
) -> None:
    """List documented sections found in SOURCES.

    SOURCES are directories searched recursively for stylesheets.
    """
    setup_logging(verbose)
    styleguide = build_styleguide(sources, config_path, mask, custom, markdown, header)

    if as_json:
        click.echo(json.dumps(styleguide.to_dict(), indent=2))
        return

    if not len(styleguide):
        console.print("[yellow]No style guide sections found[/yellow]")
        return

    table = Table(show_header=True)
    table.add_column("Reference")
    table.add_column("Header")
    table.add_column("Weight", justify="right")
    table.add_column("Modifiers", justify="right")
    table.add_column("Params", justify="right")
    table.add_column("Source")

    for section in styleguide:
        flags = ""
        if section.deprecated:
            flags += " [red](deprecated)[/red]"
        if section.experimental:
            flags += " [yellow](experimental)[/yellow]"
        table.add_row(
            escape(section.reference) + flags,
            escape(section.header),
            str(section.weight),
            str(len(section.modifiers)) if section.modifiers else "-",
            str(len(section.parameters)) if section.parameters else "-",
            f"{escape(section.source_file.name)}:{section.source_file.line}",
        )

    console.print(table)
    console.print(f"\n{len(styleguide)} sections in {len(styleguide.files)} files")
