"""Rich-text rendering of clue and category text for board cells.

Clue text from the category service occasionally carries inline HTML such as
``<i>Moby Dick</i>`` and escaped quotes. Cells are Qt labels that accept a
subset of HTML, so the text goes through markdown-it's ``zero`` preset with
only inline HTML switched on. Everything else, including ``*``, ``_``, ``#``
and ``>``, is shown literally and HTML-escaped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class ClueTextRenderer:
    """Converts clue text into HTML fragments for rich-text labels."""

    enable_html: bool = True
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("zero", {"html": self.enable_html}).enable("html_inline")

    def render_fragment(self, text: str) -> str:
        """Render clue text into an inline HTML fragment."""

        cleaned = text.replace("\\'", "'").replace('\\"', '"').strip()
        if not cleaned:
            return ""
        html = self._markdown.render(cleaned).strip()
        if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
            html = html[len("<p>"):-len("</p>")]
        return html


renderer = ClueTextRenderer()
# Shared instance; MarkdownIt is safe to reuse for read-only renders.
