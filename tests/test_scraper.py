from __future__ import annotations

import json
import unittest

from pydantic import ValidationError

from recipe_harvest.exceptions import FillPluginException
from recipe_harvest.models.recipe import IngredientGroup, Recipe
from recipe_harvest.scrapers.abstract import AbstractScraper
from recipe_harvest.settings import configure, reset_settings

URL = "https://example.com/recipes/banana-bread?ref=home"

RECIPE = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Banana Bread",
    "author": "Jane Doe",
    "recipeIngredient": ["3 ripe bananas", "1/2 cup butter", "1 cup sugar"],
    "recipeInstructions": "Mash the bananas.\n\nBake for 1 hour.",
    "prepTime": "PT10M",
    "cookTime": "PT1H",
    "recipeYield": "8",
    "inLanguage": "en",
}


def _page(recipe: dict | None = RECIPE, head: str = "", body: str = "", html_attrs: str = "") -> str:
    script = ""
    if recipe is not None:
        script = f'<script type="application/ld+json">{json.dumps(recipe)}</script>'
    return f"<html{html_attrs}><head>{head}{script}</head><body>{body}</body></html>"


class ExampleScraper(AbstractScraper):
    def host(self) -> str:
        return "example.com"


class AbstractScraperTests(unittest.TestCase):
    def test_host_is_required(self) -> None:
        with self.assertRaises(NotImplementedError):
            AbstractScraper(_page(), URL)

    def test_canonical_url(self) -> None:
        head = '<link rel="canonical" href="/recipes/banana-bread">'
        scraper = ExampleScraper(_page(head=head), URL)
        self.assertEqual(scraper.canonical_url(), "https://example.com/recipes/banana-bread")

    def test_canonical_url_defaults_to_input(self) -> None:
        self.assertEqual(ExampleScraper(_page(), URL).canonical_url(), URL)

    def test_language_prefers_non_english(self) -> None:
        head = '<meta http-equiv="Content-Language" content="de-DE, en">'
        scraper = ExampleScraper(_page(head=head, html_attrs=' lang="en"'), URL)
        self.assertEqual(scraper.language(), "de-DE")

    def test_language_from_html_tag(self) -> None:
        scraper = ExampleScraper(_page(html_attrs=' lang="fr"'), URL)
        self.assertEqual(scraper.language(), "fr")

    def test_language_falls_back_to_schema(self) -> None:
        recipe = dict(RECIPE, inLanguage="it")
        self.assertEqual(ExampleScraper(_page(recipe), URL).language(), "it")

    def test_language_missing(self) -> None:
        with self.assertRaises(FillPluginException):
            ExampleScraper(_page(None), URL).language()

    def test_instructions_list(self) -> None:
        scraper = ExampleScraper(_page(), URL)
        self.assertEqual(scraper.instructions_list(), ["Mash the bananas.", "Bake for 1 hour."])

    def test_ingredient_groups_default_to_single_group(self) -> None:
        groups = ExampleScraper(_page(), URL).ingredient_groups()
        self.assertEqual(
            groups,
            [IngredientGroup(purpose=None, ingredients=["3 ripe bananas", "1/2 cup butter", "1 cup sugar"])],
        )

    def test_ingredient_groups_fall_back_on_count_mismatch(self) -> None:
        body = (
            '<div class="wprm-recipe-ingredient-group"><h4>Bread</h4><ul>'
            '<li class="wprm-recipe-ingredient">3 ripe bananas</li></ul></div>'
        )
        groups = ExampleScraper(_page(body=body), URL).ingredient_groups()
        self.assertEqual(len(groups), 1)
        self.assertIsNone(groups[0].purpose)

    def test_links(self) -> None:
        body = '<a href="#">top</a><a href="">none</a><a href="/a" class="btn big">a</a>'
        self.assertEqual(
            ExampleScraper(_page(body=body), URL).links(), [{"href": "/a", "class": "btn big"}]
        )


class ToJsonTests(unittest.TestCase):
    def test_full_record(self) -> None:
        result = ExampleScraper(_page(), URL).to_json()

        self.assertEqual(result["host"], "example.com")
        self.assertEqual(result["canonical_url"], URL)
        self.assertEqual(result["language"], "en")
        self.assertEqual(result["title"], "Banana Bread")
        self.assertEqual(result["author"], "Jane Doe")
        self.assertEqual(result["total_time"], 70)
        self.assertEqual(result["prep_time"], 10)
        self.assertEqual(result["cook_time"], 60)
        self.assertEqual(result["yields"], "8 servings")
        self.assertEqual(
            result["ingredient_groups"],
            [{"purpose": None, "ingredients": ["3 ripe bananas", "1/2 cup butter", "1 cup sugar"]}],
        )
        self.assertNotIn("equipment", result)
        self.assertNotIn("ratings", result)

    def test_never_raises_on_garbage(self) -> None:
        result = ExampleScraper("<<<not html &&& <script>{", URL).to_json()
        self.assertEqual(result, {"host": "example.com", "canonical_url": URL})

    def test_to_recipe(self) -> None:
        recipe = ExampleScraper(_page(), URL).to_recipe()

        self.assertIsInstance(recipe, Recipe)
        self.assertEqual(recipe.title, "Banana Bread")
        self.assertEqual(recipe.ingredient_groups[0].ingredients[0], "3 ripe bananas")
        self.assertNotIn("ratings", recipe.to_dict())

    def test_to_recipe_requires_core_fields(self) -> None:
        with self.assertRaises(ValidationError):
            ExampleScraper(_page(None), URL).to_recipe()


class SettingsSnapshotTests(unittest.TestCase):
    def tearDown(self) -> None:
        reset_settings()

    def test_reconfiguring_does_not_affect_existing_scrapers(self) -> None:
        before = ExampleScraper(_page(None), URL)
        configure(suppress_exceptions=True)
        after = ExampleScraper(_page(None), URL)

        self.assertIsNone(after.title())
        with self.assertRaises(FillPluginException):
            before.title()


if __name__ == "__main__":
    unittest.main()
