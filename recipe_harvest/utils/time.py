"""Duration parsing: turn '1 hour 30 min' or 'PT1H30M' into minutes."""
from __future__ import annotations

import logging
import math
import re
from typing import Any

from bs4.element import Tag

from ..exceptions import ElementNotFoundInHtml
from .fractions import extract_fractional

_LOGGER = logging.getLogger(__name__)

_FRACTION_GLYPHS = "¼½¾⅓⅔⅕⅖⅗"

TIME_REGEX = re.compile(
    r"(?:\D*(?P<days>\d+)\s*(?:days|D))?"
    rf"(?:[^\d{_FRACTION_GLYPHS}]*(?P<hours>[\d.\s/?{_FRACTION_GLYPHS}]+)\s*(?:hours|hrs|hr|h|óra|:))?"
    r"(?:\D*(?P<minutes>\d+(?:\.\d+)?)\s*(?:minutes|mins|min|m|perc|$))?"
    r"(?:\D*(?P<seconds>\d+)\s*(?:seconds|secs|sec|s))?",
    re.IGNORECASE,
)

ISO_DURATION_REGEX = re.compile(
    r"P(?:(?P<weeks>\d+(?:\.\d+)?)W)?(?:(?P<days>\d+(?:\.\d+)?)D)?"
    r"(?:T(?:(?P<hours>\d+(?:\.\d+)?)H)?(?:(?P<minutes>\d+(?:\.\d+)?)M)?"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?",
    re.IGNORECASE,
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _parse_iso_duration(text: str) -> float | None:
    """Return the duration in minutes, or None if text is not ISO 8601."""
    match = ISO_DURATION_REGEX.fullmatch(text)
    if not match or not any(match.groupdict().values()):
        return None
    parts = {key: float(value) if value else 0.0 for key, value in match.groupdict().items()}
    return (
        parts["weeks"] * 7 * 24 * 60
        + parts["days"] * 24 * 60
        + parts["hours"] * 60
        + parts["minutes"]
        + parts["seconds"] / 60
    )


def get_minutes(element: Any) -> int | None:
    """Parse a duration and return it in whole minutes.

    Args:
        element: A duration string, a number of minutes, or a bs4 Tag

    Returns:
        Minutes, or None when the text holds no (or a zero) duration.
        Ranges such as '12-15 minutes' use their upper bound.

    Raises:
        ElementNotFoundInHtml: If element is None
        ValueError: If element is of an unsupported type

    Examples:
        >>> get_minutes("PT1H30M")
        90
        >>> get_minutes("1 hour 30 minutes")
        90
        >>> get_minutes("0")
    """
    if element is None:
        raise ElementNotFoundInHtml("Time element not found")

    if isinstance(element, Tag):
        time_text = element.get_text()
    elif isinstance(element, bool):
        raise ValueError(f"Unexpected format for time element: {element!r}")
    elif isinstance(element, (int, float)):
        minutes = _round_half_up(element)
        return minutes or None
    elif isinstance(element, str):
        time_text = element
    else:
        raise ValueError(f"Unexpected format for time element: {element!r}")

    time_text = time_text.strip()
    if time_text.isdigit():
        return int(time_text) or None

    # Ranges keep their upper bound
    if "-" in time_text:
        time_text = time_text.split("-")[1].strip()
    if " to " in time_text:
        time_text = time_text.split(" to ")[1].strip()

    if not time_text:
        return None

    if time_text[0] in "Pp":
        iso_minutes = _parse_iso_duration(time_text)
        if iso_minutes is not None:
            return math.ceil(iso_minutes) or None

    match = TIME_REGEX.search(time_text)
    if not match or not any(match.groupdict().values()):
        return None

    days = float(match.group("days") or 0)
    minutes = float(match.group("minutes") or 0)
    seconds = float(match.group("seconds") or 0)

    hours = 0.0
    hours_matched = match.group("hours")
    if hours_matched and hours_matched.strip():
        try:
            hours = extract_fractional(hours_matched)
        except ValueError:
            _LOGGER.debug("Could not parse hours from %r", hours_matched)

    total_minutes = minutes + hours * 60 + days * 24 * 60 + seconds / 60
    return _round_half_up(total_minutes) or None
