"""HTML rendering for question prompts.

Quiz data carries plain text, so prompts go through markdown-it's ``zero``
preset: only paragraphs are recognised, every other character is kept as
typed, and HTML special characters are escaped before the fragment reaches
a rich-text ``QLabel``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class PromptRenderer:
    """Converts plain prompt text into HTML fragments for Qt rich-text widgets."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("zero")

    def render_fragment(self, prompt_text: str) -> str:
        """Render ``prompt_text`` verbatim as an HTML paragraph fragment."""

        sanitized = prompt_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized).strip()


# Shared instance; all rendering happens on the Qt GUI thread.
renderer = PromptRenderer()
