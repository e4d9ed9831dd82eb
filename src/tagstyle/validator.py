"""Structural validation of tagged text.

This pass shares the scanner with the parser but keeps its own stack of open
tag names, matched by name rather than by depth. It reports problems the
parser silently tolerates.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any

from tagstyle.colors import is_valid_color
from tagstyle.errors import MissingTextError
from tagstyle.scanner import TagToken, tokens

logger = logging.getLogger(__name__)


class WarningKind(enum.Enum):
    UNCLOSED = "unclosed"
    INVALID_COLOR = "invalid-color"
    UNKNOWN_TAG = "unknown-tag"


@dataclass(frozen=True)
class ValidationWarning:
    kind: WarningKind
    message: str
    tag: str | None = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.tag is not None:
            data["tag"] = self.tag
        return data

    def __str__(self) -> str:
        return self.message


def _check_color_argument(token: TagToken) -> ValidationWarning | None:
    """Return a warning if a color/gradient tag has a bad argument."""
    if not token.argument:
        return None

    if token.canonical == "color":
        if not is_valid_color(token.argument):
            return ValidationWarning(
                WarningKind.INVALID_COLOR, f"Invalid color: {token.argument}", token.key
            )
    elif token.canonical == "gradient":
        # Only the first bad stop is reported
        for part in token.argument.split(":"):
            stop = part.strip()
            if not is_valid_color(stop):
                return ValidationWarning(
                    WarningKind.INVALID_COLOR, f"Invalid gradient color: {stop}", token.key
                )
    return None


def validate(text: str) -> list[ValidationWarning]:
    """Check ``text`` for unbalanced, unknown and malformed tags.

    Returns:
        Warnings in scan order, followed by one ``unclosed`` warning for each
        tag still open at the end of the text.
    """
    if text is None:
        raise MissingTextError()

    warnings: list[ValidationWarning] = []
    if "<" not in text:
        return warnings

    open_tags: list[str] = []

    for token in tokens(text):
        name = token.key

        if token.closing:
            # Match the most recent opener with the same name, wherever it is
            for idx in range(len(open_tags) - 1, -1, -1):
                if open_tags[idx] == name:
                    del open_tags[idx]
                    break
            else:
                warnings.append(
                    ValidationWarning(
                        WarningKind.UNCLOSED,
                        f"Closing tag </{name}> has no matching opening tag",
                        name,
                    )
                )
            continue

        if not token.self_closing:
            open_tags.append(name)

        if not token.known:
            warnings.append(
                ValidationWarning(WarningKind.UNKNOWN_TAG, f"Unknown tag: <{name}>", name)
            )

        color_warning = _check_color_argument(token)
        if color_warning is not None:
            warnings.append(color_warning)

    for name in open_tags:
        warnings.append(
            ValidationWarning(WarningKind.UNCLOSED, f"Unclosed tag: <{name}>", name)
        )

    logger.debug("Validated %d chars: %d warnings", len(text), len(warnings))
    return warnings
