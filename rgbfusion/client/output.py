#
# rgbfusion - Copyright (C) 2026 The rgbfusion Authors
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
"""
CLI output styling with semantic design tokens.

Exposes only semantic methods (key, value, error, etc.), not colors.
Respects the NO_COLOR env var and TTY detection.
"""

import os
from enum import Enum, auto
from typing import Optional, TextIO

# ─────────────────────────────────────────────────────────────────────────────
# Design Tokens (internal)
# ─────────────────────────────────────────────────────────────────────────────


class _Token(Enum):
    """Semantic design tokens, mapping UI concepts to colors."""

    KEY = auto()  # Zone and peripheral labels
    VALUE = auto()  # Types, effects
    ERROR = auto()


_THEME: dict = {
    _Token.KEY: (128, 255, 234),  # Neon Cyan
    _Token.VALUE: (225, 53, 255),  # Electric Purple
    _Token.ERROR: (255, 99, 99),  # Red
}


# ─────────────────────────────────────────────────────────────────────────────
# Output Class
# ─────────────────────────────────────────────────────────────────────────────


class Output:
    """
    CLI output with semantic styling.

    All public methods use UI concepts (key, value), not colors.
    """

    def __init__(self, stream: Optional[TextIO] = None, force_color: Optional[bool] = None):
        self._color_enabled = self._detect_color(stream, force_color)

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def _detect_color(self, stream, force: Optional[bool]) -> bool:
        """Detect if color output should be enabled."""
        if force is not None:
            return force
        # NO_COLOR standard: https://no-color.org/
        if os.environ.get("NO_COLOR"):
            return False
        if stream is None or not hasattr(stream, "isatty") or not stream.isatty():
            return False
        return os.environ.get("TERM") != "dumb"

    # ─────────────────────────────────────────────────────────────────────────
    # Internal styling
    # ─────────────────────────────────────────────────────────────────────────

    def _rgb(self, r: int, g: int, b: int, text: str) -> str:
        if not self._color_enabled:
            return text
        return f"\x1b[38;2;{r};{g};{b}m{text}\x1b[0m"

    def _bold(self, text: str) -> str:
        if not self._color_enabled:
            return text
        return f"\x1b[1m{text}\x1b[0m"

    def _apply(self, token: _Token, text: str, bold: bool = False) -> str:
        rgb = _THEME.get(token)
        result = text
        if rgb is not None:
            result = self._rgb(*rgb, result)
        if bold:
            result = self._bold(result)
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Semantic methods
    # ─────────────────────────────────────────────────────────────────────────

    def key(self, text: str) -> str:
        """Format a zone or peripheral label."""
        return self._apply(_Token.KEY, text)

    def value(self, text: str) -> str:
        """Format a value."""
        return self._apply(_Token.VALUE, text)

    def error(self, message: str) -> str:
        """Format an error message."""
        return self._apply(_Token.ERROR, message, bold=True)

    def kv(self, k: str, v: str) -> str:
        """Format a "label: value" line."""
        return f"{self.key(k)}: {self.value(v)}"
