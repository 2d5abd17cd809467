"""Markdown rendering for section and modifier descriptions."""

from __future__ import annotations

from markdown_it import MarkdownIt


class MarkdownRenderer:
    """Renders Markdown to HTML in block or inline mode.

    Block mode wraps paragraphs in ``<p>`` tags; inline mode renders a single
    run of text without any wrapping paragraph.
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark").enable(["table", "strikethrough"])

    def block(self, text: str) -> str:
        """Render full Markdown, paragraphs included."""
        return self._md.render(text)

    def inline(self, text: str) -> str:
        """Render Markdown without an outer paragraph."""
        return self._md.renderInline(text)
