"""Tests for placeholder parsing and substitution."""

import pytest

from tagstyle.placeholders import (
    Placeholder,
    apply_placeholders,
    normalize_key,
    parse_placeholder_map,
    substitute,
)


class TestParsePlaceholderMap:
    def test_numbered_keys(self):
        assert parse_placeholder_map("{0}=Alice\n{1}=5") == {"{0}": "Alice", "{1}": "5"}

    def test_bare_keys_are_bracketed(self):
        assert parse_placeholder_map("player = Steve") == {"{player}": "Steve"}

    def test_ignores_blank_and_malformed_lines(self):
        block = "\n\n=nokey\nnovalue\n  \n{0}=ok\n"
        assert parse_placeholder_map(block) == {"{0}": "ok"}

    def test_windows_line_endings(self):
        assert parse_placeholder_map("a=1\r\nb=2") == {"{a}": "1", "{b}": "2"}

    def test_value_may_contain_equals(self):
        assert parse_placeholder_map("expr=a=b") == {"{expr}": "a=b"}

    def test_empty_value(self):
        assert parse_placeholder_map("x=") == {"{x}": ""}

    def test_empty_block(self):
        assert parse_placeholder_map("") == {}

    def test_later_lines_win(self):
        assert parse_placeholder_map("0=a\n{0}=b") == {"{0}": "b"}


class TestApplyPlaceholders:
    def test_replaces_all_keys(self):
        mapping = parse_placeholder_map("{0}=Alice\n{1}=5")
        assert apply_placeholders("Hi {0}, you have {1} items", mapping) == (
            "Hi Alice, you have 5 items"
        )

    def test_every_occurrence(self):
        assert apply_placeholders("{0} and {0}", {"{0}": "x"}) == "x and x"

    def test_unknown_keys_untouched(self):
        assert apply_placeholders("Hi {2}", {"{0}": "x"}) == "Hi {2}"

    def test_bare_mapping_keys(self):
        assert apply_placeholders("{name}!", {"name": "Bob"}) == "Bob!"

    def test_special_characters_in_key(self):
        assert apply_placeholders("{a.b*}", {"{a.b*}": "ok"}) == "ok"

    def test_values_may_contain_tags(self):
        assert apply_placeholders("Hi {0}", {"0": "<bold>Al</bold>"}) == "Hi <bold>Al</bold>"

    def test_empty_mapping(self):
        assert apply_placeholders("{0}", {}) == "{0}"

    def test_values_are_not_substituted_again(self):
        assert apply_placeholders("{0}", {"0": "{1}", "1": "x"}) == "{1}"
        assert apply_placeholders("{0}", {"1": "x", "0": "{1}"}) == "{1}"

    def test_swapping_values(self):
        assert apply_placeholders("{a} {b}", {"a": "{b}", "b": "{a}"}) == "{b} {a}"


class TestPlaceholder:
    def test_substitute(self):
        text = substitute(
            "{player} has {coins} coins",
            Placeholder.of("player", "Steve"),
            Placeholder.of("coins", 5),
        )
        assert text == "Steve has 5 coins"

    def test_name_required(self):
        with pytest.raises(ValueError):
            Placeholder.of(None, "x")

    def test_normalize_key(self):
        assert normalize_key("0") == "{0}"
        assert normalize_key("{0}") == "{0}"
