"""Lenient readers for the -f and -l command line values."""

from __future__ import annotations

import re
from typing import Optional

from lcrparams.constants import MAX_TARGET_LENGTH, MIN_TARGET_LENGTH
from lcrparams.core.types import Focus

# Optional leading whitespace, optional sign, at least one digit
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_focus(value: Optional[str]) -> Focus:
    """Only the exact string 'narrow' selects NARROW; anything else is DIVERSE."""
    return Focus.NARROW if value == "narrow" else Focus.DIVERSE


def parse_target_length(value: str) -> Optional[int]:
    """Read a leading decimal integer the way ``sscanf("%d")`` does.

    Trailing characters are ignored ("20aa" -> 20). Returns None when the
    value does not start with an integer.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def in_target_range(length: Optional[int]) -> bool:
    return length is not None and MIN_TARGET_LENGTH <= length <= MAX_TARGET_LENGTH
