"""Models package."""
from .recipe import IngredientGroup, Recipe

__all__ = ["IngredientGroup", "Recipe"]
