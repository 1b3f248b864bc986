from __future__ import annotations

import unittest

from bs4 import BeautifulSoup

from recipe_harvest.exceptions import ElementNotFoundInHtml
from recipe_harvest.utils.yields import format_quantity, get_yields


class GetYieldsTests(unittest.TestCase):
    def test_plain_number_is_servings(self) -> None:
        self.assertEqual(get_yields("4"), "4 servings")
        self.assertEqual(get_yields("4 servings"), "4 servings")

    def test_single_serving_uses_singular(self) -> None:
        self.assertEqual(get_yields("1"), "1 serving")

    def test_range_uses_upper_bound(self) -> None:
        self.assertEqual(get_yields("Serves 4-6"), "6 servings")
        self.assertEqual(get_yields("Serves 4 to 6"), "6 servings")

    def test_yield_units(self) -> None:
        self.assertEqual(get_yields("12 cookies"), "12 cookies")
        self.assertEqual(get_yields("Makes 1 loaf"), "1 loaf")
        self.assertEqual(get_yields("2 dozen"), "2 dozen")
        self.assertEqual(get_yields("1.5 cups"), "1.5 cups")

    def test_longest_unit_wins(self) -> None:
        self.assertEqual(get_yields("Makes 2 dozen cookies"), "2 cookies")
        self.assertEqual(get_yields("8 hamburger buns"), "8 hamburger buns")

    def test_item_words(self) -> None:
        self.assertEqual(get_yields("6 sandwiches"), "6 items")

    def test_tag_input(self) -> None:
        tag = BeautifulSoup("<p>Serves 8</p>", "html.parser").p
        self.assertEqual(get_yields(tag), "8 servings")

    def test_empty_text_raises(self) -> None:
        with self.assertRaises(ValueError):
            get_yields("")

    def test_missing_element_raises(self) -> None:
        with self.assertRaises(ElementNotFoundInHtml):
            get_yields(None)


class FormatQuantityTests(unittest.TestCase):
    def test_whole_numbers_drop_decimals(self) -> None:
        self.assertEqual(format_quantity(2.0), "2")
        self.assertEqual(format_quantity(2.5), "2.5")


if __name__ == "__main__":
    unittest.main()
