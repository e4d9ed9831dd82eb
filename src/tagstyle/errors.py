"""Errors raised by the tagstyle pipelines."""

from __future__ import annotations


class TagstyleError(Exception):
    """Base class for tagstyle errors."""


class MissingTextError(TagstyleError, TypeError):
    """Raised when None is passed where text is required.

    This is the only input that aborts parsing or validation; malformed
    markup never raises.
    """

    def __init__(self, message: str = "Text cannot be None") -> None:
        super().__init__(message)
