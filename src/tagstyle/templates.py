"""Preset example messages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Template:
    name: str
    value: str


TEMPLATES = (
    Template("Welcome", "Welcome, <bold><green>{0}</green></bold>! Have fun playing."),
    Template("Rainbow", "<gradient:red:yellow:green:aqua:blue:light_purple>Rainbow text!</gradient>"),
    Template("Error", "<red><bold>Error:</bold></red> <white>Something went wrong.</white>"),
    Template("Link", "Visit <link:https://hytale.com>Hytale</link> for more info."),
    Template("Mixed", "<bold>Bold</bold> <italic>Italic</italic> <underline>Underline</underline> <monospace>Mono</monospace>"),
    Template("Reset", "<red>Red text</red> <reset>Back to default"),
)

DEFAULT_TEXT = (
    "Hello <bold>World</bold>! Try <gradient:red:blue>rainbow</gradient> "
    "or <link:https://hytale.com>Hytale</link>."
)


def get_template(name: str) -> Template:
    """Look up a template by name, ignoring case."""
    for template in TEMPLATES:
        if template.name.lower() == name.lower():
            return template
    raise KeyError(f"Unknown template: {name}")
