"""AllRecipes (https://www.allrecipes.com/)."""
from __future__ import annotations

from ..abstract import AbstractScraper


class AllRecipesScraper(AbstractScraper):
    """Every field comes from the page's schema.org data."""

    def host(self) -> str:
        return "allrecipes.com"
