"""Rendering of parsed segments.

Two targets are supported: escaped HTML for embedding in a document, and a
Rich ``Text`` for terminal display. Neither re-parses the source text.
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence

from rich.color import Color
from rich.style import Style
from rich.text import Text

from tagstyle.segments import Segment
from tagstyle.validator import ValidationWarning

# Segment flag -> CSS class
STYLE_CLASSES = (
    ("bold", "bold"),
    ("italic", "italic"),
    ("underline", "underline"),
    ("monospace", "mono"),
)

LINK_ATTRS = 'target="_blank" rel="noopener noreferrer"'


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for text content and attribute values."""
    return html.escape(text, quote=True)


def segment_to_html(segment: Segment) -> str:
    classes = [css for flag, css in STYLE_CLASSES if getattr(segment, flag)]

    attrs = ""
    if classes:
        attrs += f' class="{" ".join(classes)}"'
    if segment.color is not None:
        attrs += f' style="color: {segment.color.to_css()}"'

    content = escape_html(segment.text)
    if segment.link:
        href = escape_html(segment.link)
        return f'<a href="{href}" {LINK_ATTRS}{attrs}>{content}</a>'
    return f"<span{attrs}>{content}</span>"


def render_html(segments: Iterable[Segment]) -> str:
    """Render segments to an HTML fragment, one element per segment."""
    return "".join(segment_to_html(segment) for segment in segments)


def segment_style(segment: Segment) -> Style:
    """Rich style for a segment. Monospace has no terminal equivalent."""
    color = None
    if segment.color is not None:
        color = Color.from_rgb(*segment.color)
    return Style(
        color=color,
        bold=segment.bold or None,
        italic=segment.italic or None,
        underline=segment.underline or None,
        link=segment.link,
    )


def render_text(segments: Iterable[Segment]) -> Text:
    """Render segments to a Rich Text for terminal output."""
    text = Text()
    for segment in segments:
        if segment.styled:
            text.append(segment.text, style=segment_style(segment))
        else:
            text.append(segment.text)
    return text


def render_warnings_html(warnings: Sequence[ValidationWarning]) -> str:
    """Render validation warnings as a single line of escaped spans."""
    return " · ".join(
        f'<span class="validation-warning validation-warning--{w.kind.value}">'
        f"⚠ {escape_html(w.message)}</span>"
        for w in warnings
    )
