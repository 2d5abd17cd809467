"""CLI commands for kssdoc."""

from kssdoc.cli.commands.list_sections import list_sections
from kssdoc.cli.commands.show import show

__all__ = [
    "list_sections",
    "show",
]
