"""Show command for displaying one style guide section."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from kssdoc.cli.commands.common import build_styleguide, console, parse_options, setup_logging
from kssdoc.schemas import Section


@click.command()
@click.argument("reference")
@parse_options
def show(
    reference: str,
    sources: tuple[str, ...],
    config_path: str | None,
    mask: str | None,
    custom: tuple[str, ...],
    markdown: bool | None,
    header: bool | None,
    verbose: bool,
) -> None:
    """Show every section with REFERENCE found in SOURCES."""
    setup_logging(verbose)
    styleguide = build_styleguide(sources, config_path, mask, custom, markdown, header)

    sections = styleguide.sections(reference)
    if not sections:
        console.print(f"[red]Error:[/red] Section '{escape(reference)}' not found")
        raise SystemExit(1)

    for section in sections:
        _print_section(section)


def _print_section(section: Section) -> None:
    lines = [f"[bold]{escape(section.header or section.reference)}[/bold]"]
    if section.description:
        lines.append("")
        lines.append(escape(section.description.strip()))
    lines.append("")
    lines.append(f"Weight: {section.weight}")
    if section.deprecated:
        lines.append("[red]Deprecated[/red]")
    if section.experimental:
        lines.append("[yellow]Experimental[/yellow]")
    for name, value in section.custom_properties.items():
        lines.append(f"{escape(name)}: {escape(value)}")
    lines.append(f"Source: {escape(section.source_file.name)}:{section.source_file.line}")

    console.print(Panel("\n".join(lines), title=escape(section.reference)))

    if section.modifiers:
        table = Table(title="Modifiers", show_header=True)
        table.add_column("Name")
        table.add_column("Description")
        for modifier in section.modifiers:
            table.add_row(escape(modifier.name), escape(modifier.description))
        console.print(table)

    if section.parameters:
        table = Table(title="Parameters", show_header=True)
        table.add_column("Name")
        table.add_column("Default")
        table.add_column("Description")
        for parameter in section.parameters:
            table.add_row(
                escape(parameter.name),
                escape(parameter.default_value) or "-",
                escape(parameter.description),
            )
        console.print(table)

    if section.markup:
        console.print("[bold]Markup:[/bold]")
        console.print(escape(section.markup))
