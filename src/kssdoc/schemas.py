"""Core style guide data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ParseOptions:
    """Options that alter the parsed output."""

    markdown: bool = True
    header: bool = True
    custom: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParseOptions:
        """Create options from a configuration mapping.

        Args:
            data: Mapping with optional ``markdown``, ``header`` and ``custom`` keys.

        Returns:
            ParseOptions instance.

        Raises:
            ValueError: If a value has the wrong type.
        """
        markdown = data.get("markdown", True)
        header = data.get("header", True)
        custom = data.get("custom") or []

        if not isinstance(markdown, bool):
            raise ValueError(f"'markdown' must be a boolean, got {markdown!r}")
        if not isinstance(header, bool):
            raise ValueError(f"'header' must be a boolean, got {header!r}")
        if isinstance(custom, str):
            custom = [custom]
        if not isinstance(custom, (list, tuple)) or not all(isinstance(name, str) for name in custom):
            raise ValueError(f"'custom' must be a list of property names, got {custom!r}")

        return cls(markdown=markdown, header=header, custom=tuple(custom))


@dataclass(frozen=True)
class SourceFile:
    """Where a section was found."""

    name: str = ""
    base: str = ""
    path: str = ""
    line: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "base": self.base,
            "path": self.path,
            "line": self.line,
        }


@dataclass(frozen=True)
class Modifier:
    """A documented class, pseudo-class or element variant."""

    name: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class Parameter:
    """A documented mixin or function input."""

    name: str
    default_value: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "defaultValue": self.default_value,
            "description": self.description,
        }


@dataclass(frozen=True)
class Section:
    """A single documented, referenceable style guide entry.

    Sections are built from one comment block carrying a ``@styleguide`` tag
    and are never modified after parsing.
    """

    reference: str
    header: str = ""
    description: str = ""
    modifiers: tuple[Modifier, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    markup: str = ""
    weight: int = 0
    deprecated: bool = False
    experimental: bool = False
    custom: tuple[tuple[str, str], ...] = ()
    source_file: SourceFile = field(default_factory=SourceFile)
    raw: str = ""

    @property
    def custom_properties(self) -> dict[str, str]:
        """Requested custom properties by name, in request order."""
        return dict(self.custom)

    def to_dict(self) -> dict[str, Any]:
        """Convert section to dictionary.

        Custom properties are merged onto the top level under their own names.
        """
        data: dict[str, Any] = {
            "reference": self.reference,
            "header": self.header,
            "description": self.description,
            "modifiers": [m.to_dict() for m in self.modifiers],
            "parameters": [p.to_dict() for p in self.parameters],
            "markup": self.markup,
            "weight": self.weight,
            "deprecated": self.deprecated,
            "experimental": self.experimental,
            "sourceFile": self.source_file.to_dict(),
        }
        data.update(self.custom_properties)
        return data
