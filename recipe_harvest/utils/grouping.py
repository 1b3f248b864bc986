"""
Ingredient grouping.

Many recipe plugins print ingredients under section headings ("For the
sauce") while the page's schema.org data only has a flat list. This module
maps the headed HTML list back onto the canonical flat list.
"""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from ..models.recipe import IngredientGroup
from .strings import normalize_string

_LOGGER = logging.getLogger(__name__)

_ASCII_FRACTIONS = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

# Markup of popular recipe card plugins: (heading selectors, item selectors)
DEFAULT_GROUPINGS = (
    (
        (".wprm-recipe-ingredient-group h4", ".wprm-recipe-group-name"),
        (".wprm-recipe-ingredient", ".wprm-recipe-ingredients li"),
    ),
    (
        (".tasty-recipes-ingredients-body p strong", ".tasty-recipes-ingredients h4"),
        (".tasty-recipes-ingredients-body ul li", ".tasty-recipes-ingredients ul li"),
    ),
)


def _normalize_fractions(text: str) -> str:
    for glyph, ascii_fraction in _ASCII_FRACTIONS.items():
        text = text.replace(glyph, ascii_fraction)
    return text


def _bigrams(text: str) -> set[str]:
    return {text[i:i + 2] for i in range(len(text) - 1)}


def score_sentence_similarity(first: str, second: str) -> float:
    """Dice coefficient of the character bigrams of two strings."""
    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0
    first_bigrams = _bigrams(first)
    second_bigrams = _bigrams(second)
    intersection = len(first_bigrams & second_bigrams)
    return 2 * intersection / (len(first_bigrams) + len(second_bigrams))


def best_match(test_string: str, target_strings: list[str]) -> int:
    """Return the index of the target most similar to test_string.

    Ties go to the earliest target.
    """
    normalized_test = _normalize_fractions(test_string)
    scores = [
        score_sentence_similarity(normalized_test, _normalize_fractions(target))
        for target in target_strings
    ]
    return max(range(len(scores)), key=lambda index: (scores[index], -index))


def _detect_selectors(soup: BeautifulSoup) -> tuple[str | None, str | None]:
    for heading_selectors, element_selectors in DEFAULT_GROUPINGS:
        for heading in heading_selectors:
            if not soup.select_one(heading):
                continue
            for element in element_selectors:
                if soup.select_one(element):
                    return heading, element
    return None, None


def group_ingredients(
    ingredients_list: list[str],
    soup: BeautifulSoup,
    group_heading: str | None = None,
    group_element: str | None = None,
) -> list[IngredientGroup]:
    """Group the canonical ingredient list by the headings found in the HTML.

    Args:
        ingredients_list: The flat ingredient list (usually from schema.org)
        soup: The parsed page
        group_heading: CSS selector of the group headings
        group_element: CSS selector of the ingredient items

    Returns:
        Ingredient groups in page order. When no selectors are given and none
        can be detected, a single group without purpose holds every ingredient.

    Raises:
        ValueError: If the page lists a different number of ingredients than
            ingredients_list
    """
    if not group_heading or not group_element:
        group_heading, group_element = _detect_selectors(soup)
    if not group_heading or not group_element:
        return [IngredientGroup(purpose=None, ingredients=list(ingredients_list))]

    found_ingredients = soup.select(group_element)
    if len(found_ingredients) != len(ingredients_list):
        raise ValueError(
            f"Found {len(found_ingredients)} grouped ingredients but was "
            f"expecting to find {len(ingredients_list)}."
        )

    headings = {id(tag) for tag in soup.select(group_heading)}
    remaining = list(ingredients_list)
    groupings: dict[str | None, list[str]] = {}
    current_heading = None

    # Selector groups come back in document order
    for tag in soup.select(f"{group_heading}, {group_element}"):
        if id(tag) in headings:
            current_heading = normalize_string(tag.get_text()) or None
            groupings.setdefault(current_heading, [])
            continue

        index = best_match(normalize_string(tag.get_text()), remaining)
        groupings.setdefault(current_heading, []).append(remaining.pop(index))

    _LOGGER.debug(
        "Grouped %d ingredients into %d groups", len(ingredients_list), len(groupings)
    )
    return [
        IngredientGroup(purpose=purpose, ingredients=ingredients)
        for purpose, ingredients in groupings.items()
        if ingredients
    ]
