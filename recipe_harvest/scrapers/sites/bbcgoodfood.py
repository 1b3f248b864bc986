"""BBC Good Food (https://www.bbcgoodfood.com/)."""
from __future__ import annotations

from ...models.recipe import IngredientGroup
from ...utils.grouping import group_ingredients
from ..abstract import AbstractScraper


class BBCGoodFoodScraper(AbstractScraper):
    def host(self) -> str:
        return "bbcgoodfood.com"

    def ingredient_groups(self) -> list[IngredientGroup]:
        return group_ingredients(
            self.ingredients(),
            self.soup,
            ".recipe__ingredients h3",
            ".recipe__ingredients li",
        )
