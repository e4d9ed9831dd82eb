"""Interactive live preview built on Textual."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.theme import Theme
from textual.widgets import Button, Footer, Static, TextArea

from tagstyle.config import TagstyleConfig
from tagstyle.pipeline import Preview, preview
from tagstyle.render import render_text
from tagstyle.templates import DEFAULT_TEXT, TEMPLATES


def create_tagstyle_theme() -> Theme:
    """Nord-based theme; the named tag colors are exposed as variables."""
    polar_night_1 = "#3B4252"
    polar_night_2 = "#434C5E"
    snow_storm_2 = "#ECEFF4"
    frost_0 = "#8FBCBB"
    frost_3 = "#5E81AC"
    aurora_red = "#BF616A"
    aurora_yellow = "#EBCB8B"
    aurora_green = "#A3BE8C"

    return Theme(
        name="tagstyle",
        primary=frost_3,
        secondary=aurora_green,
        accent=frost_0,
        foreground=snow_storm_2,
        success=aurora_green,
        warning=aurora_yellow,
        error=aurora_red,
        surface=polar_night_1,
        panel=polar_night_2,
        dark=True,
    )


def format_warnings(result: Preview) -> Text:
    if result.error:
        return Text(result.error, style="bold red")
    if not result.warnings:
        return Text("No warnings", style="green")
    return Text(" · ".join(f"⚠ {w.message}" for w in result.warnings), style="yellow")


class PreviewApp(App):
    TITLE = "Tagstyle Preview"

    CSS = """
    #source { height: 6; }
    #placeholders { height: 4; }
    #preview { padding: 1; border: round $primary; }
    #warnings { padding: 0 1; }
    .templates-row { height: auto; }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+k", "clear_input", "Clear", priority=True),
        Binding("f2", "toggle_footer", "Toggle Help"),
    ]

    def __init__(self, config: TagstyleConfig, initial: str = DEFAULT_TEXT):
        self.config = config
        self.initial = initial
        self.footer_visible = False
        self.last_result: Preview | None = None
        super().__init__()

    def compose(self) -> ComposeResult:
        with Vertical():
            with Horizontal(classes="templates-row"):
                for index, template in enumerate(TEMPLATES):
                    yield Button(template.name, id=f"template-{index}")
            yield TextArea(self.initial, id="source")
            placeholders = "\n".join(f"{k}={v}" for k, v in self.config.placeholders.items())
            yield TextArea(placeholders, id="placeholders")
            yield Static(id="preview")
            yield Static(id="warnings")
        footer = Footer()
        footer.display = False
        yield footer

    def on_mount(self) -> None:
        self.register_theme(create_tagstyle_theme())
        self.theme = "tagstyle"
        self.refresh_preview()

    def refresh_preview(self) -> None:
        source = self.query_one("#source", TextArea).text
        placeholders = self.query_one("#placeholders", TextArea).text
        result = preview(source, placeholders)
        self.last_result = result
        self.query_one("#preview", Static).update(render_text(result.segments))
        self.query_one("#warnings", Static).update(format_warnings(result))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.refresh_preview()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("template-"):
            template = TEMPLATES[int(button_id.removeprefix("template-"))]
            self.query_one("#source", TextArea).text = template.value
            self.refresh_preview()

    def action_clear_input(self) -> None:
        self.query_one("#source", TextArea).text = ""
        self.refresh_preview()

    def action_toggle_footer(self) -> None:
        """Toggle the visibility of the footer."""
        footer = self.query_one(Footer)
        self.footer_visible = not self.footer_visible
        footer.display = self.footer_visible
