"""
Schema.org Recipe Parser.

This module extracts recipe data from the JSON-LD blocks embedded in a page.
Pages often carry several blocks (a WebSite, the author's Person, a Recipe,
sometimes the Recipe twice); they are merged into a single recipe record and
cross-referenced entities are resolved when fields are read.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from bs4 import BeautifulSoup

from ..const import HTML_PARSER, JSON_LD_SCRIPT_TYPE, SCHEMA_ORG_HOST
from ..exceptions import SchemaOrgException
from ..utils.strings import csv_to_tags, format_diet_name, normalize_string
from ..utils.time import get_minutes
from ..utils.yields import get_yields

_LOGGER = logging.getLogger(__name__)
_EMPTY_VALUES = (None, "", [], {})


def _types_of(item: Any) -> list[str]:
    if not isinstance(item, dict):
        return []
    item_type = item.get("@type")
    if isinstance(item_type, str):
        return [item_type]
    if isinstance(item_type, list):
        return [t for t in item_type if isinstance(t, str)]
    return []


def contains_schema_type(item: Any, schema_type: str) -> bool:
    """Check if an entity's @type mentions schema_type.

    The match is a case-insensitive substring match because producers use
    both exact ('Recipe') and compound ('RecipeArticle') type names.
    """
    wanted = schema_type.lower()
    return any(wanted in item_type.lower() for item_type in _types_of(item))


def _graph_nodes(item: dict[str, Any]) -> list[dict[str, Any]]:
    graph = item.get("@graph")
    if graph is None:
        return []
    nodes = graph if isinstance(graph, list) else [graph]
    return [node for node in nodes if isinstance(node, dict)]


def find_entities(item: Any, schema_type: str) -> list[dict[str, Any]]:
    """Return the item and/or its @graph nodes that match schema_type."""
    if not isinstance(item, dict):
        return []
    if contains_schema_type(item, schema_type):
        return [item]
    return [node for node in _graph_nodes(item) if contains_schema_type(node, schema_type)]


def find_entity(item: Any, schema_type: str) -> dict[str, Any] | None:
    entities = find_entities(item, schema_type)
    return entities[0] if entities else None


class SchemaOrg:
    """Parses the schema.org (JSON-LD) data of a recipe page.

    Attributes:
        data: The merged recipe entity, empty when the page has no recipe
        people: Person entities keyed by @id or url
        ratings_data: AggregateRating entities keyed by @id
        website_name: Name of the page's WebSite entity, if any
    """

    def __init__(self, page_data: str | BeautifulSoup) -> None:
        """Initialize the parser.

        Args:
            page_data: Raw HTML or an already parsed document
        """
        self.data: dict[str, Any] = {}
        self.people: dict[str, dict[str, Any]] = {}
        self.ratings_data: dict[str, dict[str, Any]] = {}
        self.website_name: str | None = None

        soup = page_data if isinstance(page_data, BeautifulSoup) else BeautifulSoup(page_data, HTML_PARSER)
        self._extract(self._load_json_ld(soup))

    @staticmethod
    def _load_json_ld(soup: BeautifulSoup) -> list[Any]:
        items: list[Any] = []
        for idx, script in enumerate(soup.find_all("script", type=JSON_LD_SCRIPT_TYPE)):
            content = script.string
            if not content or not content.strip():
                continue
            try:
                parsed = json.loads(content)
            except (json.JSONDecodeError, TypeError) as e:
                _LOGGER.debug("Skipping invalid JSON-LD script %d: %s", idx, e)
                continue
            if isinstance(parsed, list):
                items.extend(parsed)
            else:
                items.append(parsed)
        return [item for item in items if isinstance(item, dict)]

    def _extract(self, items: list[dict[str, Any]]) -> None:
        for item in items:
            website = find_entity(item, "WebSite")
            if website and website.get("name"):
                self.website_name = website["name"]

            for person in find_entities(item, "Person"):
                key = person.get("@id") or person.get("url")
                if isinstance(key, str):
                    self.people[key] = person

            for rating in find_entities(item, "AggregateRating"):
                if isinstance(rating.get("@id"), str):
                    self.ratings_data[rating["@id"]] = rating

        for item in items:
            context = item.get("@context")
            if isinstance(context, str) and SCHEMA_ORG_HOST not in context:
                continue

            if contains_schema_type(item, "Recipe"):
                recipe = item
            elif contains_schema_type(item, "WebPage") and item.get("mainEntity"):
                recipe = item["mainEntity"]
            else:
                recipe = find_entity(item, "Recipe")

            if not recipe or not contains_schema_type(recipe, "Recipe"):
                continue

            # The first recipe wins; later duplicates only fill missing or empty keys
            if not self.data:
                self.data = dict(recipe)
            else:
                for key, value in recipe.items():
                    if self.data.get(key) in _EMPTY_VALUES:
                        self.data[key] = value

        _LOGGER.debug(
            "Parsed %d JSON-LD items (recipe found: %s)", len(items), bool(self.data)
        )

    @property
    def has_data(self) -> bool:
        """Whether the page holds a schema.org recipe."""
        return bool(self.data)

    def _require(self, *keys: str, message: str) -> Any:
        """Return the value of the first present key or raise SchemaOrgException."""
        for key in keys:
            if key in self.data and self.data[key] is not None:
                return self.data[key]
        raise SchemaOrgException(message)

    def _resolve_rating(self) -> dict[str, Any] | None:
        ratings = self.data.get("aggregateRating") or find_entity(self.data, "AggregateRating")
        if isinstance(ratings, list) and ratings:
            ratings = ratings[0]
        if not isinstance(ratings, dict):
            return None
        rating_id = ratings.get("@id")
        if isinstance(rating_id, str) and rating_id in self.ratings_data:
            return self.ratings_data[rating_id]
        return ratings

    def _read_duration(self, key: str) -> int | None:
        value = self.data.get(key)
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get("maxValue")
            if value is None:
                return None
        try:
            return get_minutes(value)
        except ValueError as e:
            _LOGGER.debug("Unreadable %s value %r: %s", key, value, e)
            return None

    def site_name(self) -> str:
        if not self.website_name:
            raise SchemaOrgException("Site name not found in SchemaOrg")
        return normalize_string(self.website_name)

    def language(self) -> str:
        return self._require("inLanguage", "language", message="Language not found in SchemaOrg")

    def title(self) -> str:
        title = self._require("name", message="Title not found in SchemaOrg")
        if isinstance(title, list):
            title = title[0] if title else ""
        return normalize_string(str(title))

    def category(self) -> str:
        category = self._require("recipeCategory", message="Category not found in SchemaOrg")
        if isinstance(category, list):
            return ",".join(normalize_string(str(c)) for c in category)
        return normalize_string(str(category))

    def author(self) -> str:
        author = self._require("author", "Author", message="Author not found in SchemaOrg")

        if isinstance(author, list):
            if not author:
                raise SchemaOrgException("Author not found in SchemaOrg")
            author = author[0]

        if isinstance(author, dict):
            author_key = author.get("@id") or author.get("url")
            if isinstance(author_key, str) and author_key in self.people:
                author = self.people[author_key]
            author = author.get("name")

        if not isinstance(author, str) or not author.strip():
            raise SchemaOrgException("Author not found in SchemaOrg")
        return author.strip()

    def total_time(self) -> int:
        """Total time in minutes, falling back to prep time plus cook time."""
        if not any(key in self.data for key in ("totalTime", "prepTime", "cookTime")):
            raise SchemaOrgException("Cooking time information not found in SchemaOrg")

        total_time = self._read_duration("totalTime")
        if total_time:
            return total_time

        prep_time = self._read_duration("prepTime") or 0
        cook_time = self._read_duration("cookTime") or 0
        if prep_time or cook_time:
            return prep_time + cook_time

        raise SchemaOrgException("Cooking time information not found in SchemaOrg")

    def cook_time(self) -> int:
        cook_time = self._read_duration("cookTime")
        if not cook_time:
            raise SchemaOrgException("Cooktime information not found in SchemaOrg")
        return cook_time

    def prep_time(self) -> int:
        prep_time = self._read_duration("prepTime")
        if not prep_time:
            raise SchemaOrgException("Preptime information not found in SchemaOrg")
        return prep_time

    def yields(self) -> str:
        yield_data = self._require(
            "recipeYield", "yield", message="Servings information not found in SchemaOrg"
        )
        if isinstance(yield_data, list):
            yield_data = yield_data[0] if yield_data else None
        if yield_data is None or yield_data == "":
            raise SchemaOrgException("Servings information not found in SchemaOrg")
        return get_yields(str(yield_data))

    def image(self) -> str:
        image = self._require("image", message="Image not found in SchemaOrg")

        if isinstance(image, list):
            image = image[0] if image else None
        if isinstance(image, dict):
            image = image.get("url")
        if isinstance(image, list):
            image = image[0] if image else None

        # Relative URLs cannot be resolved reliably
        if not isinstance(image, str) or not image.startswith(("http://", "https://", "//")):
            raise SchemaOrgException("No absolute image URL in SchemaOrg")
        return image

    def ingredients(self) -> list[str]:
        ingredients = self._require(
            "recipeIngredient", "ingredients", message="Ingredients not found in SchemaOrg"
        )

        if isinstance(ingredients, str):
            ingredients = [ingredients]
        if not isinstance(ingredients, list):
            raise SchemaOrgException("Ingredients not found in SchemaOrg")

        flattened: list[Any] = []
        for ingredient in ingredients:
            if isinstance(ingredient, list):
                flattened.extend(ingredient)
            else:
                flattened.append(ingredient)

        return [
            normalize_string(str(ingredient))
            for ingredient in flattened
            if ingredient and normalize_string(str(ingredient))
        ]

    def nutrients(self) -> dict[str, str]:
        nutrition = self._require("nutrition", message="Nutrition information not found in SchemaOrg")
        if not isinstance(nutrition, dict):
            raise SchemaOrgException("Nutrition information not found in SchemaOrg")

        return {
            normalize_string(key): normalize_string(str(value))
            for key, value in nutrition.items()
            if key and value and not key.startswith("@") and key != "type"
        }

    def _extract_howto_instructions_text(self, schema_item: Any) -> list[str]:
        instructions_gist: list[str] = []

        if isinstance(schema_item, str):
            instructions_gist.append(schema_item)
        elif contains_schema_type(schema_item, "HowToSection"):
            section_name = schema_item.get("name") or schema_item.get("Name")
            if section_name:
                instructions_gist.append(section_name)
            items = schema_item.get("itemListElement") or []
            if isinstance(items, dict):
                items = [items]
            for item in items:
                instructions_gist.extend(self._extract_howto_instructions_text(item))
        elif contains_schema_type(schema_item, "HowToStep"):
            text = schema_item.get("text") or ""
            name = schema_item.get("name")
            # Skip names that merely repeat the start of the step text
            if name and not text.startswith(name.rstrip(".")):
                instructions_gist.append(name)

            nested = schema_item.get("itemListElement")
            if isinstance(nested, dict) and nested.get("text"):
                instructions_gist.append(nested["text"])
            elif text:
                instructions_gist.append(text)

        return instructions_gist

    def instructions(self) -> str:
        instructions = self._require(
            "recipeInstructions", "RecipeInstructions", message="Instructions not found in SchemaOrg"
        )

        if isinstance(instructions, list) and instructions and all(
            isinstance(item, list) for item in instructions
        ):
            instructions = [step for item in instructions for step in item]

        if isinstance(instructions, dict):
            instructions = instructions.get("itemListElement") or []
            if isinstance(instructions, dict):
                instructions = [instructions]

        if isinstance(instructions, list):
            instructions_gist: list[str] = []
            for item in instructions:
                instructions_gist.extend(self._extract_howto_instructions_text(item))
            return "\n".join(
                line for line in (normalize_string(i) for i in instructions_gist) if line
            )

        return instructions if isinstance(instructions, str) else ""

    def ratings(self) -> float:
        ratings = self._resolve_rating()
        value = ratings.get("ratingValue") if ratings else self.data.get("aggregateRating")
        if value is None or isinstance(value, (dict, list)):
            raise SchemaOrgException("No ratingValue in SchemaOrg.")
        try:
            return round(float(str(value).replace(",", ".")), 2)
        except ValueError as e:
            raise SchemaOrgException(f"Invalid ratingValue in SchemaOrg: {value!r}") from e

    def ratings_count(self) -> int:
        """Number of ratings; a count of zero is reported as missing."""
        ratings = self._resolve_rating()
        count = None
        if ratings:
            count = ratings.get("ratingCount") or ratings.get("reviewCount")
        if count is None:
            raise SchemaOrgException("No ratingCount in SchemaOrg.")
        try:
            count = int(float(str(count).replace(",", "")))
        except ValueError as e:
            raise SchemaOrgException(f"Invalid ratingCount in SchemaOrg: {count!r}") from e
        if count == 0:
            raise SchemaOrgException("No ratingCount in SchemaOrg.")
        return count

    def cuisine(self) -> str:
        cuisine = self._require("recipeCuisine", message="No cuisine data in SchemaOrg.")
        if isinstance(cuisine, list):
            return ",".join(normalize_string(str(c)) for c in cuisine)
        return normalize_string(str(cuisine))

    def description(self) -> str:
        description = self._require("description", message="No description data in SchemaOrg.")
        if isinstance(description, list):
            description = description[0] if description else ""
        return normalize_string(str(description))

    def cooking_method(self) -> str:
        cooking_method = self._require("cookingMethod", message="No cooking method data in SchemaOrg")
        if isinstance(cooking_method, list):
            cooking_method = cooking_method[0] if cooking_method else ""
        return normalize_string(str(cooking_method))

    def keywords(self) -> list[str]:
        keywords = self._require("keywords", message="No keywords data in SchemaOrg")
        if isinstance(keywords, list):
            keywords = ", ".join(normalize_string(str(k)) for k in keywords)
        else:
            keywords = normalize_string(str(keywords))
        return csv_to_tags(keywords)

    def dietary_restrictions(self) -> list[str]:
        diets = self._require("suitableForDiet", message="No dietary restrictions data in SchemaOrg.")
        if not isinstance(diets, list):
            diets = [diets]

        formatted_diets = [format_diet_name(str(diet)) for diet in diets]
        return csv_to_tags(", ".join(diet for diet in formatted_diets if diet))
