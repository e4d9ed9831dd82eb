"""Tests for the interactive preview app."""

import pytest
from textual.widgets import TextArea

from tagstyle.config import TagstyleConfig
from tagstyle.templates import TEMPLATES
from tagstyle.tui import PreviewApp
from tagstyle.validator import WarningKind


@pytest.mark.asyncio
async def test_initial_preview():
    app = PreviewApp(TagstyleConfig(), "<bold>x")
    async with app.run_test() as pilot:
        await pilot.pause()
        assert [w.kind for w in app.last_result.warnings] == [WarningKind.UNCLOSED]


@pytest.mark.asyncio
async def test_placeholders_from_config():
    config = TagstyleConfig()
    config.placeholders = {"0": "Steve"}
    app = PreviewApp(config, "Hi {0}")
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.last_result.text == "Hi Steve"


@pytest.mark.asyncio
async def test_template_button():
    app = PreviewApp(TagstyleConfig(), "")
    async with app.run_test() as pilot:
        await pilot.click("#template-0")
        await pilot.pause()
        assert app.query_one("#source", TextArea).text == TEMPLATES[0].value


@pytest.mark.asyncio
async def test_clear_input():
    app = PreviewApp(TagstyleConfig(), "<red>hello</red>")
    async with app.run_test() as pilot:
        await pilot.press("ctrl+k")
        await pilot.pause()
        assert app.query_one("#source", TextArea).text == ""
        assert app.last_result.segments == []
