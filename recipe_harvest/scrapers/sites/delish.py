"""Delish (https://www.delish.com/)."""
from __future__ import annotations

from ...models.recipe import IngredientGroup
from ...utils.grouping import group_ingredients
from ..abstract import AbstractScraper


class DelishScraper(AbstractScraper):
    def host(self) -> str:
        return "delish.com"

    def ingredient_groups(self) -> list[IngredientGroup]:
        return group_ingredients(
            self.ingredients(),
            self.soup,
            ".ingredients-body h3",
            ".ingredient-lists li",
        )
