"""
Recipe data models for recipe-harvest.

This module defines the Pydantic models used to structure the record a
scraper assembles from a recipe page.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class IngredientGroup(BaseModel):
    """Ingredients that share a heading on the page.

    Attributes:
        purpose: The section heading (e.g., 'For the sauce'), None when unheaded
        ingredients: The ingredients of the section, in page order
    """

    purpose: str | None = Field(
        default=None,
        description="The section heading, e.g. 'For the sauce'"
    )
    ingredients: list[str] = Field(
        description="The ingredients listed under the heading"
    )


class Recipe(BaseModel):
    """The complete record extracted from a recipe page.

    Fields that were not found on the page stay unset, which is different
    from being set to an empty value.
    """

    title: str = Field(description="The title of the recipe")
    author: str | None = Field(default=None, description="Author of the recipe")
    canonical_url: str = Field(description="Canonical or original URL of the recipe")
    site_name: str | None = Field(default=None, description="Name of the website")
    host: str = Field(description="Host of the recipe URL, without 'www.'")
    language: str | None = Field(default=None, description="Language code, e.g. 'en'")
    ingredients: list[str] = Field(description="All ingredients, in page order")
    ingredient_groups: list[IngredientGroup] | None = Field(
        default=None,
        description="Ingredients grouped under their section headings"
    )
    instructions: str = Field(description="Instructions joined with newlines")
    instructions_list: list[str] | None = Field(
        default=None,
        description="Instructions as separate steps"
    )
    category: str | None = Field(default=None, description="e.g. 'Dessert'")
    yields: str | None = Field(default=None, description="e.g. '4 servings'")
    description: str | None = Field(default=None)
    total_time: int | None = Field(default=None, description="Total time in minutes")
    cook_time: int | None = Field(default=None, description="Cook time in minutes")
    prep_time: int | None = Field(default=None, description="Prep time in minutes")
    cuisine: str | None = Field(default=None, description="e.g. 'Italian'")
    cooking_method: str | None = Field(default=None, description="e.g. 'Baking'")
    ratings: float | None = Field(default=None, description="Average rating")
    ratings_count: int | None = Field(default=None, description="Number of ratings")
    equipment: list[str] | None = Field(default=None)
    nutrients: dict[str, str] | None = Field(
        default=None,
        description="Nutrition facts keyed by schema.org property name"
    )
    dietary_restrictions: list[str] | None = Field(default=None)
    image: str | None = Field(default=None, description="URL of the recipe image")
    keywords: list[str] | None = Field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the fields that were actually found."""
        return self.model_dump(exclude_unset=True)
