"""Main CLI entry point for kssdoc."""

import click

from kssdoc import __version__
from kssdoc.cli.commands.list_sections import list_sections
from kssdoc.cli.commands.show import show


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """kssdoc - Style guide sections from stylesheet comments.

    Reads documentation comments tagged with @styleguide from CSS, Less,
    Sass and Stylus files.

    \b
    COMMANDS:
      kssdoc list styles/                List every documented section
      kssdoc list styles/ --json         Dump the style guide as JSON
      kssdoc show forms.button styles/   Show one section in detail

    \b
    CONFIGURATION:
      Options can be stored in .kssdoc.yaml (source, mask, markdown,
      header, custom). Command line options take precedence.
    """
    pass


cli.add_command(list_sections)
cli.add_command(show)


if __name__ == "__main__":
    cli()
