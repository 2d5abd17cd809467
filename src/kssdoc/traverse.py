"""Finding and parsing stylesheets on disk."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

from kssdoc.parser import SourceInput, StyleGuideParser
from kssdoc.schemas import ParseOptions
from kssdoc.styleguide import StyleGuide

logger = logging.getLogger(__name__)

DEFAULT_MASK = "*.css|*.less|*.sass|*.scss|*.styl|*.stylus"


def compile_mask(mask: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a ``*.css|*.less`` style mask into a file name pattern."""
    if isinstance(mask, re.Pattern):
        return mask
    pattern = "|".join(re.escape(part).replace(r"\*", ".*") for part in mask.split("|"))
    return re.compile(f"(?:{pattern})$")


def discover_files(directory: Path, mask: str | re.Pattern[str] = DEFAULT_MASK) -> list[Path]:
    """Find all files under a directory matching the mask.

    Args:
        directory: Directory to search recursively.
        mask: Glob-like alternatives separated by ``|``, or a compiled pattern.

    Returns:
        Matching files, sorted by path.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Source directory not found: {directory}")

    pattern = compile_mask(mask)
    files = [p for p in directory.glob("**/*") if p.is_file() and pattern.search(p.name)]
    return sorted(files)


def read_source(path: Path, base: Path) -> SourceInput:
    """Read a stylesheet from disk."""
    logger.debug("Reading %s", path)
    return SourceInput(contents=path.read_text(encoding="utf-8"), path=str(path), base=str(base))


def traverse(
    directories: str | Path | Sequence[str | Path],
    options: ParseOptions | None = None,
    mask: str | re.Pattern[str] = DEFAULT_MASK,
    max_workers: int | None = None,
) -> StyleGuide:
    """Parse every matching stylesheet below one or more directories.

    Args:
        directories: Directory or directories to search.
        options: Parse options.
        mask: File name mask.
        max_workers: Optional thread pool size for parsing.

    Returns:
        The StyleGuide.
    """
    if isinstance(directories, (str, Path)):
        directories = [directories]

    sources = []
    for directory in directories:
        base = Path(directory)
        for path in discover_files(base, mask):
            sources.append(read_source(path, base))

    logger.debug("Found %d stylesheets", len(sources))
    return StyleGuideParser(options).parse(sources, max_workers=max_workers)
