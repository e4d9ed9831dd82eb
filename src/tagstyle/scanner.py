"""Format tag scanning.

Tags look like ``<name>``, ``</name>`` or ``<name:argument>``. Anything that
doesn't match the grammar is literal text; the scanner never raises.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from tagstyle.colors import NAMED_COLORS

TAG_PATTERN = re.compile(r"<(/?)([a-zA-Z0-9_]+)(?::([^>]+))?>")

# Aliases: normalize alternative tag names to canonical ones
TAG_ALIASES = {
    "c": "color",
    "colour": "color",
    "grnt": "gradient",
    "b": "bold",
    "i": "italic",
    "em": "italic",
    "u": "underline",
    "mono": "monospace",
    "url": "link",
    "r": "reset",
}

STYLE_TAGS = frozenset(
    {"color", "gradient", "bold", "italic", "underline", "monospace", "link", "reset"}
)

# Tags that never take (or match) a closing counterpart
SELF_CLOSING_TAGS = frozenset({"reset", "r"})

KNOWN_TAGS = STYLE_TAGS | frozenset(TAG_ALIASES) | frozenset(NAMED_COLORS)


def canonical_name(name: str) -> str:
    """Fold case and aliases, e.g. ``'B'`` -> ``'bold'``, ``'Colour'`` -> ``'color'``."""
    key = name.lower()
    return TAG_ALIASES.get(key, key)


@dataclass(frozen=True)
class TagToken:
    """A single recognised tag.

    ``name`` keeps the case it was written with; compare via ``key``.
    """

    closing: bool
    name: str
    argument: str | None = None
    start: int = 0
    end: int = 0

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def canonical(self) -> str:
        return canonical_name(self.name)

    @property
    def self_closing(self) -> bool:
        return self.key in SELF_CLOSING_TAGS

    @property
    def known(self) -> bool:
        return self.key in KNOWN_TAGS

    def __str__(self) -> str:
        slash = "/" if self.closing else ""
        arg = f":{self.argument}" if self.argument is not None else ""
        return f"<{slash}{self.name}{arg}>"


def tokens(text: str) -> Iterator[TagToken]:
    """Yield every tag in ``text``, left to right."""
    for match in TAG_PATTERN.finditer(text):
        yield TagToken(
            closing=match.group(1) == "/",
            name=match.group(2),
            argument=match.group(3),
            start=match.start(),
            end=match.end(),
        )


def scan(text: str) -> Iterator[str | TagToken]:
    """Split ``text`` into literal runs and tag tokens.

    Literal runs are yielded as plain (non-empty) strings, tags as
    TagToken instances, in source order.
    """
    pos = 0
    for token in tokens(text):
        if token.start > pos:
            yield text[pos:token.start]
        yield token
        pos = token.end

    if pos < len(text):
        yield text[pos:]
