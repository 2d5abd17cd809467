"""Parsing documented stylesheet source into a style guide."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from kssdoc.annotations import parse_annotations
from kssdoc.comments import find_comment_blocks
from kssdoc.markdown import MarkdownRenderer
from kssdoc.schemas import ParseOptions, Section, SourceFile
from kssdoc.sections import SectionBuilder
from kssdoc.styleguide import StyleGuide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceInput:
    """A stylesheet file and its contents."""

    contents: str
    path: str = ""
    base: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SourceInput:
        return cls(
            contents=data.get("contents", ""),
            path=str(data.get("path") or ""),
            base=str(data.get("base") or ""),
        )

    @property
    def is_file(self) -> bool:
        return bool(self.path)

    def source_file(self) -> SourceFile:
        """Describe this input, with the name relative to its base."""
        name = self.path
        if self.base and self.path:
            # Always use forward slashes, whatever the platform.
            name = os.path.relpath(self.path, self.base).replace("\\", "/")
        return SourceFile(name=name, base=self.base, path=self.path)


ParseInput = Union[str, Sequence[Union[str, SourceInput, Mapping[str, Any]]]]


class StyleGuideParser:
    """Parser turning documented stylesheets into a StyleGuide."""

    def __init__(self, options: ParseOptions | None = None) -> None:
        """Initialize parser with options.

        Args:
            options: Parse options. Defaults to ParseOptions().
        """
        self.options = options or ParseOptions()
        renderer = MarkdownRenderer() if self.options.markdown else None
        self._builder = SectionBuilder(self.options, renderer)

    def parse_source(self, source: SourceInput) -> list[Section]:
        """Parse the sections of a single input.

        Args:
            source: The input to parse.

        Returns:
            Sections in the order their comment blocks appear.
        """
        source_file = source.source_file()
        sections = []

        for block in find_comment_blocks(source.contents):
            annotation = parse_annotations(block.text)
            section = self._builder.build(block, annotation, source_file)
            if section is not None:
                sections.append(section)

        logger.debug("Parsed %d sections from %s", len(sections), source.path or "<string>")
        return sections

    def parse(self, sources: Sequence[SourceInput], max_workers: int | None = None) -> StyleGuide:
        """Parse many inputs into one style guide.

        Args:
            sources: Inputs to parse.
            max_workers: Parse inputs on a thread pool of this size. Results
                are always joined in input order.

        Returns:
            The StyleGuide.
        """
        if max_workers and len(sources) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = list(executor.map(self.parse_source, sources))
        else:
            results = [self.parse_source(source) for source in sources]

        files = tuple(source.path for source in sources if source.is_file)
        sections = tuple(section for result in results for section in result)
        return StyleGuide(files=files, sections_list=sections)


def normalize_input(input: ParseInput) -> list[SourceInput]:
    """Turn any accepted input shape into a list of SourceInput."""
    if isinstance(input, str):
        return [SourceInput(contents=input)]

    sources = []
    for item in input:
        if isinstance(item, str):
            sources.append(SourceInput(contents=item))
        elif isinstance(item, SourceInput):
            sources.append(item)
        elif isinstance(item, Mapping):
            sources.append(SourceInput.from_mapping(item))
        else:
            raise TypeError(f"Cannot parse input of type {type(item).__name__}")
    return sources


def parse(
    input: ParseInput,
    options: ParseOptions | None = None,
    *,
    max_workers: int | None = None,
) -> StyleGuide:
    """Parse a string, a list of strings, or a list of file records.

    File records are SourceInput objects or mappings with ``path``, ``base``
    and ``contents`` keys.

    Args:
        input: The input to parse.
        options: Parse options. Defaults to ParseOptions().
        max_workers: Optional thread pool size for parsing files in parallel.

    Returns:
        The StyleGuide.
    """
    return StyleGuideParser(options).parse(normalize_input(input), max_workers=max_workers)
