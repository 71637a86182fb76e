"""Errors reported to callers of the solver."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a textual condition record cannot be decoded.

    ``part`` names the half of the record that failed: ``"pattern"`` or
    ``"groups"``.
    """

    def __init__(self, part: str, text: str, reason: str):
        super().__init__(f"cannot parse {part} {text!r}: {reason}")
        self.part = part
        self.text = text
        self.reason = reason


class ConfigError(ValueError):
    """Raised when solver options are malformed."""
