"""Options and helpers shared by the parsing commands."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from kssdoc.config import load_config
from kssdoc.styleguide import StyleGuide
from kssdoc.traverse import traverse

console = Console()


def parse_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the source and parsing options to a command."""
    options = [
        click.argument("sources", nargs=-1, type=click.Path(file_okay=False)),
        click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
                     help="Config file (defaults to ./.kssdoc.yaml)"),
        click.option("--mask", "-m", default=None, help="File name mask, e.g. '*.css|*.scss'"),
        click.option("--custom", "-c", multiple=True, help="Custom property to extract"),
        click.option("--markdown/--no-markdown", default=None, help="Render descriptions as Markdown"),
        click.option("--header/--no-header", default=None, help="Extract section headers"),
        click.option("--verbose", "-v", is_flag=True, help="Show debug logging"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_styleguide(
    sources: tuple[str, ...],
    config_path: str | None,
    mask: str | None,
    custom: tuple[str, ...],
    markdown: bool | None,
    header: bool | None,
) -> StyleGuide:
    """Load config, apply command line overrides and parse the sources.

    Exits with status 1 on any configuration or file error.
    """
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError, yaml.YAMLError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    options = config.options
    if markdown is not None:
        options = replace(options, markdown=markdown)
    if header is not None:
        options = replace(options, header=header)
    if custom:
        options = replace(options, custom=tuple(custom))

    directories = list(sources) or config.source
    if not directories:
        console.print("[red]Error:[/red] No source directories given")
        raise SystemExit(1)

    try:
        return traverse(directories, options, mask=mask or config.mask)
    except (FileNotFoundError, OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)
