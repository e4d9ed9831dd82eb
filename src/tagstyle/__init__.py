"""Inline format tags: parsing, validation and rendering."""

from .colors import NAMED_COLORS, Rgb
from .errors import MissingTextError, TagstyleError
from .parser import parse, strip_tags
from .placeholders import Placeholder, apply_placeholders, parse_placeholder_map, substitute
from .pipeline import Preview, preview
from .render import render_html, render_text
from .segments import Segment
from .validator import ValidationWarning, WarningKind, validate

__all__ = [
    "NAMED_COLORS",
    "Rgb",
    "MissingTextError",
    "TagstyleError",
    "parse",
    "strip_tags",
    "Placeholder",
    "apply_placeholders",
    "parse_placeholder_map",
    "substitute",
    "Preview",
    "preview",
    "render_html",
    "render_text",
    "Segment",
    "ValidationWarning",
    "WarningKind",
    "validate",
]
__version__ = "0.1.0"
