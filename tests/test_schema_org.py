from __future__ import annotations

import json
import unittest

from recipe_harvest.exceptions import SchemaOrgException
from recipe_harvest.parsers.schema_org import SchemaOrg


def _page(*blocks) -> str:
    scripts = "".join(
        f'<script type="application/ld+json">{json.dumps(block)}</script>' for block in blocks
    )
    return f"<html><head>{scripts}</head><body></body></html>"


def _recipe(**fields) -> dict:
    return {"@context": "https://schema.org", "@type": "Recipe", **fields}


class SchemaOrgDiscoveryTests(unittest.TestCase):
    def test_single_recipe(self) -> None:
        schema = SchemaOrg(_page(_recipe(name="  Banana   Bread ")))
        self.assertTrue(schema.has_data)
        self.assertEqual(schema.title(), "Banana Bread")

    def test_first_recipe_wins_and_later_ones_fill_gaps(self) -> None:
        schema = SchemaOrg(
            _page(
                _recipe(name="First", recipeIngredient=["1 egg"]),
                _recipe(name="Second", recipeCuisine="Italian"),
            )
        )
        self.assertEqual(schema.title(), "First")
        self.assertEqual(schema.cuisine(), "Italian")
        self.assertEqual(schema.ingredients(), ["1 egg"])

    def test_later_recipe_fills_null_and_empty_fields(self) -> None:
        schema = SchemaOrg(
            _page(
                _recipe(name="Soup", totalTime=None, recipeCuisine=""),
                _recipe(name="Other", totalTime="PT20M", recipeCuisine="Thai"),
            )
        )
        self.assertEqual(schema.title(), "Soup")
        self.assertEqual(schema.total_time(), 20)
        self.assertEqual(schema.cuisine(), "Thai")

    def test_graph_with_references(self) -> None:
        block = {
            "@context": "https://schema.org",
            "@graph": [
                {"@type": "WebSite", "name": "Example Kitchen"},
                {"@type": "Person", "@id": "#jane", "name": "Jane Doe"},
                {
                    "@type": "Recipe",
                    "name": "Soup",
                    "author": {"@id": "#jane"},
                    "aggregateRating": {"@id": "#rating"},
                },
                {
                    "@type": "AggregateRating",
                    "@id": "#rating",
                    "ratingValue": "4.567",
                    "ratingCount": "12",
                },
            ],
        }
        schema = SchemaOrg(_page(block))

        self.assertEqual(schema.title(), "Soup")
        self.assertEqual(schema.site_name(), "Example Kitchen")
        self.assertEqual(schema.author(), "Jane Doe")
        self.assertEqual(schema.ratings(), 4.57)
        self.assertEqual(schema.ratings_count(), 12)

    def test_array_payload(self) -> None:
        schema = SchemaOrg(_page([{"@type": "WebSite", "name": "Site"}, _recipe(name="Stew")]))
        self.assertEqual(schema.title(), "Stew")
        self.assertEqual(schema.site_name(), "Site")

    def test_web_page_main_entity(self) -> None:
        block = {
            "@context": "https://schema.org",
            "@type": "WebPage",
            "mainEntity": {"@type": "Recipe", "name": "Main Dish"},
        }
        self.assertEqual(SchemaOrg(_page(block)).title(), "Main Dish")

    def test_type_match_is_case_insensitive_substring(self) -> None:
        block = {"@context": "https://schema.org", "@type": ["NewsArticle", "recipe"], "name": "Pie"}
        self.assertEqual(SchemaOrg(_page(block)).title(), "Pie")

    def test_malformed_block_is_skipped(self) -> None:
        html = (
            '<script type="application/ld+json">{not json</script>'
            f'<script type="application/ld+json">{json.dumps(_recipe(name="Tart"))}</script>'
        )
        self.assertEqual(SchemaOrg(html).title(), "Tart")

    def test_foreign_context_is_ignored(self) -> None:
        block = {"@context": "https://example.org", "@type": "Recipe", "name": "Nope"}
        self.assertFalse(SchemaOrg(_page(block)).has_data)

    def test_page_without_json_ld(self) -> None:
        schema = SchemaOrg("<html><body><p>Hello</p></body></html>")
        self.assertFalse(schema.has_data)
        with self.assertRaises(SchemaOrgException):
            schema.title()


class SchemaOrgFieldTests(unittest.TestCase):
    def _schema(self, **fields) -> SchemaOrg:
        return SchemaOrg(_page(_recipe(**fields)))

    def test_missing_fields_raise(self) -> None:
        schema = self._schema(name="Plain")
        for method in (schema.description, schema.ingredients, schema.cuisine, schema.yields):
            with self.assertRaises(SchemaOrgException):
                method()

    def test_list_title_uses_first_entry(self) -> None:
        self.assertEqual(self._schema(name=["Soup", "Soup (printable)"]).title(), "Soup")

    def test_author_string(self) -> None:
        self.assertEqual(self._schema(author="  Jane  ").author(), "Jane")
        self.assertEqual(self._schema(author=[{"name": "Ann"}, {"name": "Bob"}]).author(), "Ann")

    def test_times(self) -> None:
        schema = self._schema(totalTime="PT1H10M", prepTime="PT10M", cookTime="PT1H")
        self.assertEqual(schema.total_time(), 70)
        self.assertEqual(schema.prep_time(), 10)
        self.assertEqual(schema.cook_time(), 60)

    def test_total_time_falls_back_to_prep_plus_cook(self) -> None:
        schema = self._schema(prepTime="PT15M", cookTime="PT45M")
        self.assertEqual(schema.total_time(), 60)

    def test_quantitative_value_duration(self) -> None:
        schema = self._schema(prepTime={"@type": "QuantitativeValue", "maxValue": "PT20M"})
        self.assertEqual(schema.prep_time(), 20)

    def test_zero_durations_are_missing(self) -> None:
        schema = self._schema(totalTime="PT0M", cookTime="PT0M")
        with self.assertRaises(SchemaOrgException):
            schema.total_time()
        with self.assertRaises(SchemaOrgException):
            schema.cook_time()

    def test_yields(self) -> None:
        self.assertEqual(self._schema(recipeYield=["4", "4 servings"]).yields(), "4 servings")
        self.assertEqual(self._schema(recipeYield=12).yields(), "12 servings")

    def test_image(self) -> None:
        self.assertEqual(
            self._schema(image={"@type": "ImageObject", "url": "https://example.com/a.jpg"}).image(),
            "https://example.com/a.jpg",
        )
        self.assertEqual(
            self._schema(image=["//cdn.example.com/b.jpg"]).image(), "//cdn.example.com/b.jpg"
        )
        with self.assertRaises(SchemaOrgException):
            self._schema(image="/images/a.jpg").image()

    def test_ingredients(self) -> None:
        schema = self._schema(recipeIngredient=["3 bananas", "", ["1 cup sugar", " 2  eggs "]])
        self.assertEqual(schema.ingredients(), ["3 bananas", "1 cup sugar", "2 eggs"])
        self.assertEqual(self._schema(recipeIngredient="1 egg").ingredients(), ["1 egg"])

    def test_instructions_steps_and_sections(self) -> None:
        schema = self._schema(
            recipeInstructions=[
                {
                    "@type": "HowToSection",
                    "name": "Prep",
                    "itemListElement": [
                        {"@type": "HowToStep", "name": "Chop the onions.", "text": "Chop the onions."},
                        {"@type": "HowToStep", "name": "Cook", "text": "Fry them in oil."},
                    ],
                },
                "Serve hot.",
            ]
        )
        self.assertEqual(
            schema.instructions(), "Prep\nChop the onions.\nCook\nFry them in oil.\nServe hot."
        )

    def test_instructions_plain_string(self) -> None:
        self.assertEqual(self._schema(recipeInstructions="Mix. Bake.").instructions(), "Mix. Bake.")

    def test_ratings(self) -> None:
        schema = self._schema(aggregateRating={"ratingValue": "4,5", "reviewCount": 8})
        self.assertEqual(schema.ratings(), 4.5)
        self.assertEqual(schema.ratings_count(), 8)

    def test_zero_ratings_count_is_missing(self) -> None:
        schema = self._schema(aggregateRating={"ratingValue": 5, "ratingCount": 0})
        with self.assertRaises(SchemaOrgException):
            schema.ratings_count()

    def test_non_numeric_rating_raises(self) -> None:
        with self.assertRaises(SchemaOrgException):
            self._schema(aggregateRating={"ratingValue": "great"}).ratings()

    def test_category_and_cuisine_lists(self) -> None:
        schema = self._schema(recipeCategory=["Dessert", "Snack"], recipeCuisine=["French"])
        self.assertEqual(schema.category(), "Dessert,Snack")
        self.assertEqual(schema.cuisine(), "French")

    def test_description_and_cooking_method(self) -> None:
        schema = self._schema(description=["A  classic."], cookingMethod="Baking")
        self.assertEqual(schema.description(), "A classic.")
        self.assertEqual(schema.cooking_method(), "Baking")

    def test_keywords(self) -> None:
        self.assertEqual(self._schema(keywords="pasta, Italian, Pasta").keywords(), ["pasta", "Italian"])
        self.assertEqual(self._schema(keywords=["quick", "easy"]).keywords(), ["quick", "easy"])

    def test_dietary_restrictions(self) -> None:
        schema = self._schema(
            suitableForDiet=[
                "http://schema.org/VeganDiet",
                "https://schema.org/GlutenFreeDiet",
                "https://schema.org/VeganDiet",
            ]
        )
        self.assertEqual(schema.dietary_restrictions(), ["Vegan Diet", "Gluten Free Diet"])

    def test_nutrients(self) -> None:
        schema = self._schema(
            nutrition={
                "@type": "NutritionInformation",
                "calories": "240 kcal",
                "fatContent": "9  g",
                "sugarContent": "",
            }
        )
        self.assertEqual(schema.nutrients(), {"calories": "240 kcal", "fatContent": "9 g"})

    def test_language(self) -> None:
        self.assertEqual(self._schema(inLanguage="de").language(), "de")


if __name__ == "__main__":
    unittest.main()
