"""Style state and the nesting stack used while parsing."""

from __future__ import annotations

from dataclasses import dataclass, replace

from tagstyle.colors import NAMED_COLORS, Rgb, parse_gradient_colors, resolve_color
from tagstyle.scanner import TagToken, canonical_name


@dataclass(frozen=True)
class StyleState:
    """The cumulative formatting active at a point in the text.

    ``color`` and ``gradient`` are mutually exclusive; use ``with_color`` and
    ``with_gradient`` rather than ``replace`` to set them.
    """

    color: Rgb | None = None
    gradient: tuple[Rgb, ...] | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    monospace: bool = False
    link: str | None = None

    def with_color(self, color: Rgb) -> StyleState:
        return replace(self, color=color, gradient=None)

    def with_gradient(self, stops) -> StyleState:
        return replace(self, color=None, gradient=tuple(stops))

    @property
    def is_base(self) -> bool:
        return self == BASE_STYLE


BASE_STYLE = StyleState()


def apply_tag(state: StyleState, name: str, argument: str | None = None) -> StyleState:
    """Return the state produced by opening tag ``name`` on top of ``state``.

    Unknown tags and arguments that fail to resolve leave the state unchanged.
    """
    key = name.lower()
    if key in NAMED_COLORS:
        return state.with_color(NAMED_COLORS[key])

    tag = canonical_name(key)
    if tag == "color":
        color = resolve_color(argument)
        return state.with_color(color) if color is not None else state
    if tag == "gradient":
        stops = parse_gradient_colors(argument)
        return state.with_gradient(stops) if stops else state
    if tag == "bold":
        return replace(state, bold=True)
    if tag == "italic":
        return replace(state, italic=True)
    if tag == "underline":
        return replace(state, underline=True)
    if tag == "monospace":
        return replace(state, monospace=True)
    if tag == "link":
        return replace(state, link=argument) if argument else state
    if tag == "reset":
        return BASE_STYLE
    return state


class StyleStack:
    """Call-scoped stack of style states.

    The base state is always at the bottom and is never popped. Every opening
    tag pushes a frame, even when it has no effect, so that closing tags
    stay balanced against it.
    """

    def __init__(self) -> None:
        self._states: list[StyleState] = [BASE_STYLE]

    @property
    def current(self) -> StyleState:
        return self._states[-1]

    @property
    def depth(self) -> int:
        return len(self._states)

    def open(self, token: TagToken) -> StyleState:
        if token.self_closing:
            # reset replaces the top frame instead of nesting a new one
            self._states[-1] = BASE_STYLE
        else:
            self._states.append(apply_tag(self.current, token.name, token.argument))
        return self.current

    def close(self) -> StyleState:
        if len(self._states) > 1:
            self._states.pop()
        return self.current

    def feed(self, token: TagToken) -> StyleState:
        if token.closing:
            return self.close()
        return self.open(token)
