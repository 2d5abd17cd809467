"""Splitting comment text into lead text and ``@tag`` values."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

TAG_START = re.compile(r"^\s*@([\w-]+)(.*)$")


@dataclass
class Annotation:
    """Lead text and tags of one comment block.

    Every tag maps to the ordered list of its values, whether it appeared
    once or many times.
    """

    text: str = ""
    tags: dict[str, list[str]] = field(default_factory=dict)

    def has(self, name: str) -> bool:
        return name in self.tags

    def first(self, name: str, default: str = "") -> str:
        """Get the first value of a tag."""
        values = self.tags.get(name)
        return values[0] if values else default

    def all(self, name: str) -> list[str]:
        """Get all values of a tag, in order."""
        return list(self.tags.get(name, []))


def parse_annotations(text: str) -> Annotation:
    """Parse comment text into lead text and tags.

    A tag starts on a line beginning with ``@name``. Its value is the rest of
    that line plus every following line up to the next tag, trimmed.

    Args:
        text: Comment text with delimiters already removed.

    Returns:
        Parsed Annotation.
    """
    lead: list[str] = []
    tags: dict[str, list[str]] = {}
    name: str | None = None
    value: list[str] = []

    def flush() -> None:
        if name is not None:
            tags.setdefault(name, []).append("\n".join(value).strip())

    for line in text.split("\n"):
        match = TAG_START.match(line)
        if match:
            flush()
            name = match.group(1)
            value = [match.group(2)]
        elif name is None:
            lead.append(line)
        else:
            value.append(line)
    flush()

    return Annotation(text="\n".join(lead).strip(), tags=tags)
