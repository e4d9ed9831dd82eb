"""Tests for style resolution and the style stack."""

from tagstyle.colors import NAMED_COLORS, Rgb
from tagstyle.scanner import tokens
from tagstyle.style import BASE_STYLE, StyleStack, StyleState, apply_tag

RED = NAMED_COLORS["red"]
BLUE = NAMED_COLORS["blue"]


def tag(source):
    return next(tokens(source))


class TestApplyTag:
    def test_named_color(self):
        assert apply_tag(BASE_STYLE, "red").color == RED

    def test_named_color_case_insensitive(self):
        assert apply_tag(BASE_STYLE, "RED").color == RED

    def test_color_aliases(self):
        for name in ("color", "c", "colour"):
            assert apply_tag(BASE_STYLE, name, "#0a0b0c").color == Rgb(10, 11, 12)

    def test_color_with_named_argument(self):
        assert apply_tag(BASE_STYLE, "color", "blue").color == BLUE

    def test_unresolvable_color_is_noop(self):
        state = StyleState(bold=True)
        assert apply_tag(state, "color", "#zzzzzz") is state
        assert apply_tag(state, "color") is state

    def test_gradient_clears_color(self):
        state = apply_tag(StyleState(color=RED), "gradient", "red:blue")
        assert state.color is None
        assert state.gradient == (RED, BLUE)

    def test_color_clears_gradient(self):
        state = apply_tag(StyleState(gradient=(RED, BLUE)), "gold")
        assert state.gradient is None
        assert state.color == NAMED_COLORS["gold"]

    def test_gradient_without_resolvable_stops_is_noop(self):
        assert apply_tag(BASE_STYLE, "grnt", "nope:nada") is BASE_STYLE
        assert apply_tag(BASE_STYLE, "gradient") is BASE_STYLE

    def test_flags(self):
        assert apply_tag(BASE_STYLE, "b").bold
        assert apply_tag(BASE_STYLE, "em").italic
        assert apply_tag(BASE_STYLE, "u").underline
        assert apply_tag(BASE_STYLE, "mono").monospace

    def test_flags_are_idempotent(self):
        once = apply_tag(BASE_STYLE, "bold")
        assert apply_tag(once, "bold") == once

    def test_link(self):
        assert apply_tag(BASE_STYLE, "url", "https://x.y").link == "https://x.y"
        assert apply_tag(BASE_STYLE, "link") is BASE_STYLE

    def test_reset(self):
        state = StyleState(color=RED, bold=True, link="x")
        assert apply_tag(state, "reset") == BASE_STYLE

    def test_unknown_tag_is_noop(self):
        state = StyleState(italic=True)
        assert apply_tag(state, "sparkle", "arg") is state

    def test_previous_state_is_untouched(self):
        state = StyleState(color=RED)
        apply_tag(state, "bold")
        assert state == StyleState(color=RED)


class TestStyleStack:
    def test_starts_at_base(self):
        stack = StyleStack()
        assert stack.current == BASE_STYLE
        assert stack.depth == 1

    def test_push_and_pop(self):
        stack = StyleStack()
        stack.feed(tag("<bold>"))
        stack.feed(tag("<red>"))
        assert stack.current == StyleState(color=RED, bold=True)
        stack.feed(tag("</red>"))
        assert stack.current == StyleState(bold=True)

    def test_pops_by_depth_not_name(self):
        stack = StyleStack()
        stack.feed(tag("<bold>"))
        stack.feed(tag("<italic>"))
        stack.feed(tag("</bold>"))
        assert stack.current == StyleState(bold=True)

    def test_base_is_never_popped(self):
        stack = StyleStack()
        stack.feed(tag("</bold>"))
        stack.feed(tag("</bold>"))
        assert stack.depth == 1
        assert stack.current == BASE_STYLE

    def test_noop_tags_still_push(self):
        stack = StyleStack()
        stack.feed(tag("<color:nope>"))
        stack.feed(tag("<sparkle>"))
        assert stack.depth == 3

    def test_reset_replaces_top(self):
        stack = StyleStack()
        stack.feed(tag("<bold>"))
        stack.feed(tag("<red>"))
        stack.feed(tag("<reset>"))
        assert stack.depth == 3
        assert stack.current.is_base
        stack.feed(tag("</red>"))
        assert stack.current == StyleState(bold=True)
