"""Color values and the fixed named-color palette."""

from __future__ import annotations

import re
from typing import NamedTuple


class Rgb(NamedTuple):
    """An RGB triple with 8-bit channels."""

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


NAMED_COLORS = {
    "black": Rgb(0, 0, 0),
    "dark_blue": Rgb(0, 0, 170),
    "dark_green": Rgb(0, 170, 0),
    "dark_aqua": Rgb(0, 170, 170),
    "dark_red": Rgb(170, 0, 0),
    "dark_purple": Rgb(170, 0, 170),
    "gold": Rgb(255, 170, 0),
    "gray": Rgb(170, 170, 170),
    "dark_gray": Rgb(85, 85, 85),
    "blue": Rgb(85, 85, 255),
    "green": Rgb(85, 255, 85),
    "aqua": Rgb(85, 255, 255),
    "red": Rgb(255, 85, 85),
    "light_purple": Rgb(255, 85, 255),
    "yellow": Rgb(255, 255, 85),
    "white": Rgb(255, 255, 255),
}

HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def parse_hex_color(value: str | None) -> Rgb | None:
    """Parse ``#rrggbb`` or ``rrggbb`` into an Rgb, or None if malformed."""
    if not value:
        return None
    match = HEX_COLOR_PATTERN.fullmatch(value)
    if match is None:
        return None
    r, g, b = (int(group, 16) for group in match.groups())
    return Rgb(r, g, b)


def resolve_color(arg: str | None) -> Rgb | None:
    """Resolve a tag argument as a named color first, then as hex."""
    if not arg:
        return None
    named = NAMED_COLORS.get(arg.lower())
    if named is not None:
        return named
    return parse_hex_color(arg)


def is_valid_color(arg: str | None) -> bool:
    return resolve_color(arg) is not None


def parse_gradient_colors(arg: str | None) -> list[Rgb]:
    """Resolve each ``:``-separated part of a gradient argument.

    Parts that don't resolve are skipped, so the result may be shorter than
    the number of parts (or empty).
    """
    if not arg:
        return []
    colors = []
    for part in arg.split(":"):
        color = resolve_color(part.strip())
        if color is not None:
            colors.append(color)
    return colors
