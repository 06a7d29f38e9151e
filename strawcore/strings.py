"""ASCII case conversion that leaves every other character untouched."""

from __future__ import annotations

import string

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_uppercase(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_TO_UPPER)


def to_lowercase(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_TO_LOWER)