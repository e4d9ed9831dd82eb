"""Linear color interpolation across gradient stops."""

from __future__ import annotations

import math
from collections.abc import Sequence

from tagstyle.colors import Rgb


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _lerp(a: int, b: int, t: float) -> int:
    return _round_half_up(a + (b - a) * t)


def interpolate(stops: Sequence[Rgb], position: float) -> Rgb:
    """Color at ``position`` (clamped to 0..1) along ``stops``.

    With a single stop every position maps to that stop. Channels are
    interpolated independently and rounded to the nearest integer.
    """
    if not stops:
        raise ValueError("Gradient needs at least one color stop")
    if len(stops) == 1:
        return stops[0]

    clamped = max(0.0, min(1.0, position))
    scaled = clamped * (len(stops) - 1)
    index = min(int(math.floor(scaled)), len(stops) - 2)
    local = scaled - index

    start, end = stops[index], stops[index + 1]
    return Rgb(
        _lerp(start.r, end.r, local),
        _lerp(start.g, end.g, local),
        _lerp(start.b, end.b, local),
    )


def gradient_positions(length: int) -> list[float]:
    """Normalized position of each character in a run of ``length``."""
    if length <= 0:
        return []
    if length == 1:
        return [0.0]
    return [i / (length - 1) for i in range(length)]
