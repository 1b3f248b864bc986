"""Fraction parsing for quantities such as '1½' or '2 1/4'."""
from __future__ import annotations

import re

# Unicode vulgar fractions and their values
FRACTIONS = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_MIXED_RE = re.compile(r"(\d+)\s+(\d+)\s*/\s*(\d+)")
_SLASH_RE = re.compile(r"(\d+)\s*/\s*(\d+)")


def _parse_fraction(numerator: str, denominator: str, text: str) -> float:
    if float(denominator) == 0:
        raise ValueError(f"Fraction has zero denominator: '{text}'")
    return float(numerator) / float(denominator)


def extract_fractional(text: str) -> float:
    """Parse a fractional quantity.

    Handles vulgar fractions (optionally after a whole number), slash
    fractions, mixed slash fractions and plain decimals.

    Raises:
        ValueError: If the text is not a recognized fraction format

    Examples:
        >>> extract_fractional("1½")
        1.5
        >>> extract_fractional("2 1/4")
        2.25
        >>> extract_fractional("3/4")
        0.75
    """
    trimmed = text.strip()

    for glyph, value in FRACTIONS.items():
        if glyph in trimmed:
            whole_part = trimmed.split(glyph)[0].strip()
            if not whole_part:
                return value
            if not _DECIMAL_RE.fullmatch(whole_part):
                break
            return float(whole_part) + value

    if _DECIMAL_RE.fullmatch(trimmed):
        return float(trimmed)

    match = _MIXED_RE.fullmatch(trimmed)
    if match:
        whole, numerator, denominator = match.groups()
        return float(whole) + _parse_fraction(numerator, denominator, trimmed)

    match = _SLASH_RE.fullmatch(trimmed)
    if match:
        return _parse_fraction(*match.groups(), trimmed)

    raise ValueError(f"Unrecognized fraction format: '{trimmed}'")
