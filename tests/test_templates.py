"""Tests for preset templates."""

import pytest

from tagstyle.templates import TEMPLATES, get_template


class TestTemplates:
    def test_names_are_unique(self):
        names = [t.name for t in TEMPLATES]
        assert len(names) == len(set(names))

    def test_lookup_ignores_case(self):
        assert get_template("rainbow").name == "Rainbow"

    def test_unknown(self):
        with pytest.raises(KeyError):
            get_template("nope")
