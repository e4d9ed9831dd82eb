"""One-shot preview: substitute, then parse/render and validate side by side."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tagstyle.errors import MissingTextError
from tagstyle.parser import parse
from tagstyle.placeholders import apply_placeholders, parse_placeholder_map
from tagstyle.render import render_html
from tagstyle.segments import Segment
from tagstyle.validator import ValidationWarning, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preview:
    """Everything a host UI needs to show for one input."""

    source: str
    text: str
    segments: list[Segment] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    html: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.warnings


def preview(source: str, placeholders: str | dict[str, str] = "") -> Preview:
    """Run both pipelines over ``source`` after placeholder substitution.

    Args:
        source: Raw tagged text.
        placeholders: Either a ``key=value`` block or an already parsed mapping.

    Validation always runs, even if rendering fails; a render failure is
    reported through ``error`` instead of raising.
    """
    if source is None:
        raise MissingTextError()

    mapping = parse_placeholder_map(placeholders) if isinstance(placeholders, str) else placeholders
    text = apply_placeholders(source, mapping)

    warnings = validate(text)

    segments: list[Segment] = []
    rendered = ""
    error = None
    try:
        segments = parse(text)
        rendered = render_html(segments)
    except Exception as e:
        logger.exception("Failed to render preview")
        error = f"Error: {e}"

    return Preview(
        source=source,
        text=text,
        segments=segments,
        warnings=warnings,
        html=rendered,
        error=error,
    )
