"""Comment block extraction from stylesheet source text.

The extractor is a line-oriented state machine. It recognises three kinds of
blocks:

- single-line blocks: runs of consecutive ``//`` lines
- multi-line blocks: opened by a line that is exactly ``/*``
- docblocks: opened by a line that is exactly ``/**``

Multi-line blocks and docblocks close on a line that is exactly ``*/``. Any
block still open at the end of the input is closed and kept.

Delimiters are matched per line only, so a ``/*`` on its own line inside a CSS
string is treated as a real delimiter.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

DOCBLOCK_START = re.compile(r"^\s*/\*\*\s*$")
MULTI_START = re.compile(r"^\s*/\*\s*$")
MULTI_FINISH = re.compile(r"^\s*\*/\s*$")
SINGLE_LINE = re.compile(r"^\s*//")

SINGLE_LINE_MARKER = re.compile(r"^\s*//\s?")
DOCBLOCK_MARKER = re.compile(r"^\s*\*\s?")
LEADING_WHITESPACE = re.compile(r"^\s*")
STAR_MARKER = re.compile(r"^\*\s?")


class BlockState(Enum):
    """State of the extractor, doubling as the kind of an open block."""

    IDLE = "idle"
    SINGLE_LINE = "single-line"
    MULTI_LINE = "multi-line"
    DOCBLOCK = "docblock"


class LineKind(Enum):
    """Classification of a physical line."""

    DOCBLOCK_START = "docblock-start"
    MULTI_START = "multi-start"
    MULTI_FINISH = "multi-finish"
    SINGLE_LINE = "single-line"
    OTHER = "other"
    END_OF_INPUT = "end-of-input"


class Action(Enum):
    """What the extractor does with a line."""

    IGNORE = "ignore"
    OPEN = "open"
    APPEND = "append"
    CLOSE = "close"
    CLOSE_AND_RESCAN = "close-and-rescan"


# (state, line kind) -> (action, next state). Missing entries fall back to
# the state's default in _DEFAULTS.
TRANSITIONS: dict[tuple[BlockState, LineKind], tuple[Action, BlockState]] = {
    (BlockState.IDLE, LineKind.DOCBLOCK_START): (Action.OPEN, BlockState.DOCBLOCK),
    (BlockState.IDLE, LineKind.MULTI_START): (Action.OPEN, BlockState.MULTI_LINE),
    (BlockState.IDLE, LineKind.SINGLE_LINE): (Action.OPEN, BlockState.SINGLE_LINE),
    (BlockState.SINGLE_LINE, LineKind.SINGLE_LINE): (Action.APPEND, BlockState.SINGLE_LINE),
    (BlockState.MULTI_LINE, LineKind.MULTI_FINISH): (Action.CLOSE, BlockState.IDLE),
    (BlockState.MULTI_LINE, LineKind.END_OF_INPUT): (Action.CLOSE_AND_RESCAN, BlockState.IDLE),
    (BlockState.DOCBLOCK, LineKind.MULTI_FINISH): (Action.CLOSE, BlockState.IDLE),
    (BlockState.DOCBLOCK, LineKind.END_OF_INPUT): (Action.CLOSE_AND_RESCAN, BlockState.IDLE),
}

_DEFAULTS: dict[BlockState, tuple[Action, BlockState]] = {
    BlockState.IDLE: (Action.IGNORE, BlockState.IDLE),
    BlockState.SINGLE_LINE: (Action.CLOSE_AND_RESCAN, BlockState.IDLE),
    BlockState.MULTI_LINE: (Action.APPEND, BlockState.MULTI_LINE),
    BlockState.DOCBLOCK: (Action.APPEND, BlockState.DOCBLOCK),
}


@dataclass(frozen=True)
class CommentBlock:
    """A comment block found in source text."""

    line: int
    text: str
    raw: str
    kind: BlockState = BlockState.MULTI_LINE


@dataclass
class _BlockBuilder:
    """Accumulates the lines of the block currently open."""

    kind: BlockState
    line: int
    raw: list[str] = field(default_factory=list)
    text: list[str] = field(default_factory=list)
    indent: str | None = None

    def add_interior(self, line: str) -> None:
        self.raw.append(line)

        if self.kind is BlockState.DOCBLOCK:
            self.text.append(DOCBLOCK_MARKER.sub("", line, count=1))
            return

        if self.kind is BlockState.SINGLE_LINE:
            self.text.append(SINGLE_LINE_MARKER.sub("", line, count=1))
            return

        # Multi-line: the first non-blank line sets the indentation that is
        # stripped from every later line.
        if self.indent is None:
            if line == "":
                return
            self.indent = LEADING_WHITESPACE.match(line).group(0)
        if self.indent and line.startswith(self.indent):
            line = line[len(self.indent):]
        self.text.append(line)

    def build(self) -> CommentBlock:
        lines = self.text
        # Plain /* blocks written in the " * " style lose their markers too.
        if self.kind is BlockState.MULTI_LINE and _all_starred(lines):
            lines = [STAR_MARKER.sub("", line, count=1) for line in lines]
        text = "\n".join(lines).strip("\n")
        raw = "\n".join(self.raw) + "\n"
        return CommentBlock(line=self.line, text=text, raw=raw, kind=self.kind)


def _all_starred(lines: list[str]) -> bool:
    content = [line for line in lines if line != ""]
    return bool(content) and all(line.startswith("*") for line in content)


def classify_line(line: str) -> LineKind:
    """Classify a line with trailing whitespace already removed."""
    if DOCBLOCK_START.match(line):
        return LineKind.DOCBLOCK_START
    if MULTI_START.match(line):
        return LineKind.MULTI_START
    if MULTI_FINISH.match(line):
        return LineKind.MULTI_FINISH
    if SINGLE_LINE.match(line):
        return LineKind.SINGLE_LINE
    return LineKind.OTHER


def find_comment_blocks(content: str) -> list[CommentBlock]:
    """Find all comment blocks in a string.

    Args:
        content: Source text using any line ending convention.

    Returns:
        Comment blocks in order of occurrence.
    """
    content = content.replace("\r\n", "\n").replace("\r", "\n")
    lines = content.split("\n")

    blocks: list[CommentBlock] = []
    state = BlockState.IDLE
    current: _BlockBuilder | None = None

    # One extra event past the last line closes any block left open.
    events = [(number, line.rstrip()) for number, line in enumerate(lines, start=1)]
    events.append((len(lines) + 1, None))

    for number, line in events:
        kind = LineKind.END_OF_INPUT if line is None else classify_line(line)

        while True:
            action, next_state = TRANSITIONS.get((state, kind), _DEFAULTS[state])

            if action is Action.OPEN:
                current = _BlockBuilder(kind=next_state, line=number)
                if next_state is BlockState.SINGLE_LINE:
                    current.add_interior(line)
                else:
                    current.raw.append(line)
            elif action is Action.APPEND:
                current.add_interior(line)
            elif action in (Action.CLOSE, Action.CLOSE_AND_RESCAN):
                if action is Action.CLOSE:
                    current.raw.append(line)
                blocks.append(current.build())
                current = None

            state = next_state
            # A line that closed a single-line block may open the next block.
            if action is not Action.CLOSE_AND_RESCAN or kind is LineKind.END_OF_INPUT:
                break

    logger.debug("Found %d comment blocks", len(blocks))
    return blocks
