"""Best-effort parsing of tagged text into styled segments.

The parser never fails on malformed markup: unknown tags, bad arguments and
unbalanced closers simply have no effect. Use ``tagstyle.validator`` to find
out what was wrong.
"""

from __future__ import annotations

import logging

from tagstyle.errors import MissingTextError
from tagstyle.scanner import TAG_PATTERN, TagToken, scan
from tagstyle.segments import Segment, build_segments
from tagstyle.style import StyleStack

logger = logging.getLogger(__name__)


def parse(text: str) -> list[Segment]:
    """Parse ``text`` into a flat list of styled segments.

    Raises:
        MissingTextError: if ``text`` is None.
    """
    if text is None:
        raise MissingTextError()

    # Fast path: no tags possible
    if "<" not in text:
        return [Segment(text)] if text else []

    segments: list[Segment] = []
    stack = StyleStack()

    for item in scan(text):
        if isinstance(item, TagToken):
            stack.feed(item)
        else:
            segments.extend(build_segments(item, stack.current))

    logger.debug("Parsed %d chars into %d segments", len(text), len(segments))
    return segments


def strip_tags(text: str) -> str:
    """Remove every recognised tag, leaving the literal text."""
    if text is None:
        raise MissingTextError()
    return TAG_PATTERN.sub("", text)
