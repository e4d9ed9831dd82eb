"""Placeholder substitution: ``{0}``, ``{name}`` and friends.

Placeholders are substituted before parsing, so replacement values may
themselves contain format tags.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

LINE_SPLIT_PATTERN = re.compile(r"\r?\n")


def normalize_key(key: str) -> str:
    """Wrap ``key`` in braces unless it already is, e.g. ``'0'`` -> ``'{0}'``."""
    if key.startswith("{") and key.endswith("}"):
        return key
    return f"{{{key}}}"


def parse_placeholder_map(block: str) -> dict[str, str]:
    """Parse a newline-delimited ``key=value`` block.

    Blank lines and lines without an ``=`` after the first character are
    ignored. Keys and values are trimmed and keys normalized to ``{key}``.
    """
    mapping: dict[str, str] = {}
    if not block:
        return mapping

    for line in LINE_SPLIT_PATTERN.split(block.strip()):
        eq = line.find("=")
        if eq <= 0:
            continue
        key = line[:eq].strip()
        if not key:
            continue
        mapping[normalize_key(key)] = line[eq + 1:].strip()
    return mapping


def apply_placeholders(text: str, mapping: Mapping[str, Any]) -> str:
    """Replace every occurrence of each mapped ``{key}`` in ``text``.

    Tokens with no mapping are left as they are. Substitution is a single
    pass, so values are never themselves substituted.
    """
    values = {normalize_key(key): str(value) for key, value in mapping.items()}
    if not values:
        return text
    # Longest first so overlapping keys match the longest token
    pattern = re.compile("|".join(map(re.escape, sorted(values, key=len, reverse=True))))
    return pattern.sub(lambda match: values[match.group(0)], text)


@dataclass(frozen=True)
class Placeholder:
    """A named placeholder; ``{name}`` in text is replaced by ``str(value)``."""

    name: str
    value: Any

    @classmethod
    def of(cls, name: str, value: Any) -> Placeholder:
        if name is None:
            raise ValueError("Placeholder name cannot be None")
        return cls(name, value)


def substitute(text: str, *placeholders: Placeholder) -> str:
    return apply_placeholders(text, {p.name: p.value for p in placeholders})
