"""String cleanup helpers shared by the parsers and plugins."""
from __future__ import annotations

import re

from bs4 import BeautifulSoup

from ..const import HTML_PARSER

_WHITESPACE_RE = re.compile(r"\s+")

# schema.org/RestrictedDiet members
DIET_NAMES = {
    "DiabeticDiet": "Diabetic Diet",
    "GlutenFreeDiet": "Gluten Free Diet",
    "HalalDiet": "Halal Diet",
    "HinduDiet": "Hindu Diet",
    "KosherDiet": "Kosher Diet",
    "LowCalorieDiet": "Low Calorie Diet",
    "LowFatDiet": "Low Fat Diet",
    "LowLactoseDiet": "Low Lactose Diet",
    "LowSaltDiet": "Low Salt Diet",
    "VeganDiet": "Vegan Diet",
    "VegetarianDiet": "Vegetarian Diet",
}


def _markup_to_text(text: str) -> str:
    if "<" not in text and "&" not in text:
        return text
    return BeautifulSoup(text, HTML_PARSER).get_text()


def html_to_text(text: str) -> str:
    """Drop markup and decode entities until the text stops changing.

    Escaped markup (&lt;p&gt;) and double-escaped entities (&amp;amp;) are
    handled by the repeated passes. A bare '<' or '>' is kept as text.
    """
    previous = None
    while previous != text:
        previous = text
        text = _markup_to_text(text)
    return text


def strip_tags(text: str) -> str:
    """Remove markup and decode entities, leaving whitespace untouched."""
    if not text or not isinstance(text, str):
        return ""
    return _markup_to_text(text)


def normalize_string(text: str) -> str:
    """Clean a scraped string.

    Drops markup, decodes HTML entities, replaces special whitespace and
    collapses runs of whitespace into single spaces.

    Examples:
        >>> normalize_string("&lt;p&gt;Hello&nbsp;&nbsp;World&lt;/p&gt;")
        'Hello World'
    """
    cleaned = html_to_text(text)
    cleaned = (
        cleaned.replace("\xa0", " ")
        .replace("\u200b", "")
        .replace("\r\n", " ")
        .replace("\n", " ")
        .replace("\t", " ")
        .replace("u0026#039;", "'")
        .strip()
    )

    # Some sites double every parenthesis
    if "((" in cleaned and "))" in cleaned:
        cleaned = cleaned.replace("((", "(").replace("))", ")")

    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def csv_to_tags(csv: str, lowercase: bool = False) -> list[str]:
    """Split comma separated text into unique tags.

    Duplicates are detected case-insensitively; the first spelling wins.

    Examples:
        >>> csv_to_tags("Italian, Pasta, italian, Dinner")
        ['Italian', 'Pasta', 'Dinner']
    """
    seen: set[str] = set()
    tags = []
    for raw_tag in csv.split(","):
        tag = raw_tag.strip()
        if tag and tag.lower() not in seen:
            seen.add(tag.lower())
            tags.append(tag.lower() if lowercase else tag)
    return tags


def format_diet_name(diet_input: str) -> str | None:
    """Turn a schema.org diet identifier into a readable label.

    Accepts both the bare member name and its full URL. Returns None when
    nothing is left after removing the schema.org prefix.

    Examples:
        >>> format_diet_name("http://schema.org/VeganDiet")
        'Vegan Diet'
        >>> format_diet_name("Paleo")
        'Paleo'
    """
    diet = diet_input
    if "schema.org/" in diet:
        diet = diet.split("schema.org/")[-1]

    if not diet.strip():
        return None

    for key, label in DIET_NAMES.items():
        if key in diet:
            return label

    return diet
