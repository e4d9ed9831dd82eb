"""Styled text segments produced by the parser."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from tagstyle.colors import Rgb
from tagstyle.gradient import gradient_positions, interpolate
from tagstyle.style import StyleState


@dataclass(frozen=True)
class Segment:
    """A run of text sharing one concrete style.

    Gradients are already resolved at this point: a segment only ever carries
    a single concrete ``color``.
    """

    text: str
    color: Rgb | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    monospace: bool = False
    link: str | None = None

    @property
    def styled(self) -> bool:
        return any(
            (self.color is not None, self.bold, self.italic, self.underline,
             self.monospace, self.link is not None)
        )

    def as_dict(self) -> dict[str, Any]:
        """Plain dict with only the attributes that are set."""
        data: dict[str, Any] = {"text": self.text}
        if self.color is not None:
            data["color"] = self.color._asdict()
        for flag in ("bold", "italic", "underline", "monospace"):
            if getattr(self, flag):
                data[flag] = True
        if self.link is not None:
            data["link"] = self.link
        return data


def _segment(text: str, state: StyleState, color: Rgb | None) -> Segment:
    return Segment(
        text=text,
        color=color,
        bold=state.bold,
        italic=state.italic,
        underline=state.underline,
        monospace=state.monospace,
        link=state.link or None,
    )


def build_segments(text: str, state: StyleState) -> list[Segment]:
    """Turn one literal run into segments under ``state``.

    Gradient runs explode into one segment per character.
    """
    if not text:
        return []

    if state.gradient:
        return [
            _segment(ch, state, interpolate(state.gradient, position))
            for ch, position in zip(text, gradient_positions(len(text)))
        ]

    return [_segment(text, state, state.color)]


def plain_text(segments: Iterable[Segment]) -> str:
    return "".join(segment.text for segment in segments)
