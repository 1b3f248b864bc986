"""Yield parsing: turn 'Serves 4-6' into '6 servings'."""
from __future__ import annotations

import re
from typing import Any

from bs4.element import Tag

from ..exceptions import ElementNotFoundInHtml

SERVE_REGEX_NUMBER = re.compile(r"(\D*(?P<items>\d+(\.\d*)?)?\D*)")

SERVE_REGEX_ITEMS = re.compile(
    r"\bsandwiches\b|\btacquitos\b|\bappetizer\b|\bporzioni\b|\b(large |small )?buns\b",
    re.IGNORECASE,
)

SERVE_REGEX_TO = re.compile(r"\d+(\s+to\s+|-)\d+", re.IGNORECASE)

# (singular, plural). Later entries win ties on match length.
RECIPE_YIELD_TYPES = [
    ("batch", "batches"),
    ("cake", "cakes"),
    ("cookie", "cookies"),
    ("muffin", "muffins"),
    ("cupcake", "cupcakes"),
    ("loaf", "loaves"),
    ("pie", "pies"),
    ("cup", "cups"),
    ("pint", "pints"),
    ("gallon", "gallons"),
    ("ounce", "ounces"),
    ("pound", "pounds"),
    ("gram", "grams"),
    ("liter", "liters"),
    ("piece", "pieces"),
    ("layer", "layers"),
    ("scoop", "scoops"),
    ("bar", "bars"),
    ("patty", "patties"),
    ("hamburger bun", "hamburger buns"),
    ("pancake", "pancakes"),
    ("item", "items"),
    ("dozen", "dozen"),
]


def format_quantity(quantity: float) -> str:
    """Format a count without a trailing '.0'.

    Examples:
        >>> format_quantity(2.0)
        '2'
        >>> format_quantity(2.5)
        '2.5'
    """
    if quantity == int(quantity):
        return str(int(quantity))
    return str(quantity)


def _format_count_label(count: float, singular: str, plural: str) -> str:
    return f"{format_quantity(count)} {singular if count == 1 else plural}"


def get_yields(element: Any) -> str:
    """Parse a yield description into '<count> <unit>'.

    Recipes that make a number of things (cookies, loaves, dozen...) keep
    that unit; everything else is expressed in servings.

    Args:
        element: Yield text or a bs4 Tag

    Raises:
        ElementNotFoundInHtml: If element is None
        ValueError: If the text is empty

    Examples:
        >>> get_yields("Serves 4-6")
        '6 servings'
        >>> get_yields("Makes 2 dozen cookies")
        '2 cookies'
        >>> get_yields("1")
        '1 serving'
    """
    if element is None:
        raise ElementNotFoundInHtml("Yield element not found")

    serve_text = element.get_text() if isinstance(element, Tag) else str(element)
    if not serve_text:
        raise ValueError("Cannot extract yield information from empty string")

    range_match = SERVE_REGEX_TO.search(serve_text)
    if range_match:
        numbers = re.findall(r"\d+", range_match.group(0))
        serve_text = serve_text.replace(range_match.group(0), numbers[-1], 1)

    number_match = SERVE_REGEX_NUMBER.match(serve_text)
    matched = float(number_match.group("items") or 0) if number_match else 0.0

    serve_text_lower = serve_text.lower()
    best_match = None
    best_match_length = 0

    for singular, plural in RECIPE_YIELD_TYPES:
        if singular in serve_text_lower:
            match_length = len(singular)
        elif plural in serve_text_lower:
            match_length = len(plural)
        else:
            continue

        # Longest match wins ('hamburger bun' over 'bun'); ties go to the later entry
        if match_length >= best_match_length:
            best_match_length = match_length
            best_match = _format_count_label(matched, singular, plural)

    if best_match:
        return best_match

    if SERVE_REGEX_ITEMS.search(serve_text):
        return _format_count_label(matched, "item", "items")

    return _format_count_label(matched, "serving", "servings")
