"""Format checks for identifiers."""

from __future__ import annotations

import re

_PAN = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")


def is_valid_pan(text: str) -> bool:
    """Whether ``text`` begins with a PAN: five capital letters, four digits
    and one capital letter."""
    return _PAN.match(text) is not None