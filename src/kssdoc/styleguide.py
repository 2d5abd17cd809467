"""The style guide aggregate returned by parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator

from kssdoc.schemas import Section


@dataclass(frozen=True)
class StyleGuide:
    """All files and sections found in one parse.

    Sections keep the order they were parsed in. References need not be
    unique; every duplicate is kept.
    """

    files: tuple[str, ...] = ()
    sections_list: tuple[Section, ...] = ()

    def __len__(self) -> int:
        return len(self.sections_list)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections_list)

    def section(self, reference: str) -> Section | None:
        """Find the first section with exactly this reference."""
        for section in self.sections_list:
            if section.reference == reference:
                return section
        return None

    def sections(self, query: str | re.Pattern[str] | None = None) -> list[Section]:
        """Get sections, optionally filtered by reference.

        Args:
            query: None for every section, a string for an exact reference
                match, or a compiled pattern searched against each reference.

        Returns:
            Matching sections in parse order.
        """
        if query is None:
            return list(self.sections_list)
        if isinstance(query, re.Pattern):
            return [s for s in self.sections_list if query.search(s.reference)]
        return [s for s in self.sections_list if s.reference == query]

    def references(self) -> list[str]:
        """Get the reference of every section, duplicates included."""
        return [section.reference for section in self.sections_list]

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": list(self.files),
            "sections": [section.to_dict() for section in self.sections_list],
        }
