"""Building style guide sections from parsed comment annotations."""

from __future__ import annotations

import logging
import re

from kssdoc.annotations import Annotation
from kssdoc.comments import CommentBlock
from kssdoc.markdown import MarkdownRenderer
from kssdoc.schemas import Modifier, Parameter, ParseOptions, Section, SourceFile

logger = logging.getLogger(__name__)

REFERENCE_TAG = "styleguide"

DESCRIPTION_SEPARATOR = re.compile(r"\s+-\s+")
LEADING_SEPARATOR = re.compile(r"^\s+-\s+")
DEFAULT_SEPARATOR = re.compile(r"\s+=\s+")
HORIZONTAL_WHITESPACE_RUN = re.compile(r"[ \t]{2,}")
LEADING_INTEGER = re.compile(r"^[+-]?\d+")
HEX_WEIGHT = re.compile(r"^0[xX][0-9a-fA-F]+$")
TRAILING_ZERO_PARTS = re.compile(r"(?:\.0)+$")


def fold_description(description: str) -> str:
    """Join a multi-line description into a single line.

    Single-line descriptions are returned untouched, so repeated spaces
    inside them survive.
    """
    if "\n" not in description:
        return description
    description = description.replace("\n", " ")
    return HORIZONTAL_WHITESPACE_RUN.sub(" ", description)


def _split_entry(entry: str) -> tuple[str, str]:
    """Split ``NAME - DESCRIPTION`` at the first separator."""
    name = DESCRIPTION_SEPARATOR.split(entry, maxsplit=1)[0]
    description = LEADING_SEPARATOR.sub("", entry[len(name):], count=1)
    return name, fold_description(description)


def create_modifiers(
    entries: list[str], options: ParseOptions, renderer: MarkdownRenderer | None = None
) -> list[Modifier]:
    """Turn raw ``@modifier`` values into Modifier objects.

    Args:
        entries: Raw modifier lines, e.g. ``":hover - Highlight"``.
        options: Parse options.
        renderer: Markdown renderer used when Markdown is enabled.

    Returns:
        Modifiers in the order given.
    """
    if options.markdown and renderer is None:
        renderer = MarkdownRenderer()

    modifiers = []
    for entry in entries:
        name, description = _split_entry(entry)
        if options.markdown:
            description = renderer.inline(description)
        modifiers.append(Modifier(name=name, description=description))
    return modifiers


def create_parameters(
    entries: list[str], options: ParseOptions, renderer: MarkdownRenderer | None = None
) -> list[Parameter]:
    """Turn raw ``@param`` values into Parameter objects.

    Args:
        entries: Raw parameter lines, e.g. ``"@color = #fff - Button color"``.
        options: Parse options.
        renderer: Markdown renderer used when Markdown is enabled.

    Returns:
        Parameters in the order given.
    """
    if options.markdown and renderer is None:
        renderer = MarkdownRenderer()

    parameters = []
    for entry in entries:
        name, description = _split_entry(entry)
        default_value = ""

        if DEFAULT_SEPARATOR.search(name):
            tokens = DEFAULT_SEPARATOR.split(name)
            name, default_value = tokens[0], tokens[1]

        if options.markdown:
            description = renderer.inline(description)
        parameters.append(
            Parameter(name=name, default_value=default_value, description=description)
        )
    return parameters


def parse_weight(value: str) -> int:
    """Parse a weight value, falling back to 0 for anything non-numeric.

    Numeric values keep only their leading integer digits, so "1.5" and
    "1e3" both give 1. Hexadecimal integers such as "0x10" are accepted.
    """
    value = value.strip()
    if HEX_WEIGHT.match(value):
        return int(value, 16)
    if "_" in value:
        return 0
    try:
        float(value)
    except ValueError:
        return 0
    match = LEADING_INTEGER.match(value)
    return int(match.group(0)) if match else 0


def normalize_reference(reference: str) -> str:
    """Drop a trailing dot and trailing ".0" parts, so "8.0" reads as "8"."""
    reference = reference.rstrip(".")
    return TRAILING_ZERO_PARTS.sub("", reference) or reference


class SectionBuilder:
    """Builds Section objects from comment blocks and their annotations."""

    def __init__(
        self, options: ParseOptions | None = None, renderer: MarkdownRenderer | None = None
    ) -> None:
        """Initialize the builder.

        Args:
            options: Parse options. Defaults to ParseOptions().
            renderer: Markdown renderer. Created on demand when omitted.
        """
        self.options = options or ParseOptions()
        self._renderer = renderer

    @property
    def renderer(self) -> MarkdownRenderer:
        if self._renderer is None:
            self._renderer = MarkdownRenderer()
        return self._renderer

    def build(
        self,
        block: CommentBlock,
        annotation: Annotation,
        source_file: SourceFile | None = None,
    ) -> Section | None:
        """Build a section, or None if the block has no reference.

        Args:
            block: The comment block the annotation came from.
            annotation: Lead text and tags of the block.
            source_file: Where the block was found; the line is taken from the block.

        Returns:
            The new Section, or None when the block carries no ``@styleguide`` tag.
        """
        reference = annotation.first(REFERENCE_TAG).strip()
        reference = normalize_reference(reference)
        if not reference:
            logger.debug("Skipping comment block at line %d without a reference", block.line)
            return None

        options = self.options

        header = ""
        if options.header:
            header = annotation.text.replace("\n", " ")

        description = annotation.first("description")
        if options.markdown:
            description = self.renderer.block(description)

        renderer = self.renderer if options.markdown else None
        modifiers = create_modifiers(annotation.all("modifier"), options, renderer)
        parameters = create_parameters(annotation.all("param"), options, renderer)

        custom = tuple((name, annotation.first(name)) for name in options.custom)

        source = source_file or SourceFile()
        return Section(
            reference=reference,
            header=header,
            description=description,
            modifiers=tuple(modifiers),
            parameters=tuple(parameters),
            markup=annotation.first("markup"),
            weight=parse_weight(annotation.first("weight")),
            deprecated=annotation.has("deprecated"),
            experimental=annotation.has("experimental"),
            custom=custom,
            source_file=SourceFile(
                name=source.name, base=source.base, path=source.path, line=block.line
            ),
            raw=block.raw,
        )
