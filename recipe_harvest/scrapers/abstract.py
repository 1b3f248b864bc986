"""
Base scraper.

This module defines ``AbstractScraper``, the session object that turns one
recipe page into a recipe record. Site adapters subclass it, implement
``host()`` and override whichever field methods the site needs; every field
they leave alone is filled from the page's schema.org or OpenGraph data by
the plugins listed in the scraper's settings.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from pydantic import BaseModel

from ..const import HTML_PARSER, SCRAPER_METHODS, TO_JSON_METHODS
from ..exceptions import ElementNotFoundInHtml
from ..models.recipe import IngredientGroup, Recipe
from ..outcome import Outcome
from ..parsers.opengraph import OpenGraph
from ..parsers.schema_org import SchemaOrg
from ..settings import Settings, get_settings
from ..utils.grouping import group_ingredients

_LOGGER = logging.getLogger(__name__)

_NOT_IMPLEMENTED = "This should be implemented"
_INVALID_HREFS = ("#", "")


def _base_step(method: str) -> Callable[["AbstractScraper"], Outcome]:
    """The innermost step of a pipeline: the class's own method."""

    def step(scraper: AbstractScraper) -> Outcome:
        return Outcome.capture(functools.partial(getattr(type(scraper), method), scraper))

    step.__name__ = step.__qualname__ = method
    return step


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


class AbstractScraper:
    """Extracts a recipe from a single HTML document.

    Attributes:
        page_data: The raw HTML
        url: The URL the HTML was fetched from
        soup: The parsed document
        schema: The page's schema.org data
        opengraph: The page's OpenGraph metadata
        settings: The settings snapshot this scraper was built with
        best_image_selection: Whether ``image()`` picks the largest candidate
        static_value_warnings: Fields whose constant value was already reported
    """

    def __init__(
        self,
        html: str,
        url: str,
        best_image: bool | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Parse the page and compose the plugin pipelines.

        Args:
            html: HTML of the recipe page
            url: URL of the recipe page
            best_image: Choose the largest image; None uses the settings
            settings: Settings to use; None uses the current defaults
        """
        self.page_data = html
        self.url = url
        self.settings = settings or get_settings()
        self.best_image_selection = (
            self.settings.best_image_selection if best_image is None else best_image
        )
        self.soup = BeautifulSoup(html, HTML_PARSER)
        self.schema = SchemaOrg(self.soup)
        self.opengraph = OpenGraph(self.soup)
        self.static_value_warnings: set[str] = set()

        self._compose_pipelines()

    def _compose_pipelines(self) -> None:
        """Wrap each field method in its plugins and bind it to this instance.

        Plugins are applied from the last registered to the first, so the
        first plugin in ``settings.plugins`` sees the final result.
        """
        host = self.host()
        for method in SCRAPER_METHODS:
            pipeline = _base_step(method)
            for plugin in reversed(self.settings.plugins):
                if plugin.should_run(host, method):
                    _LOGGER.debug(
                        "Decorating: %s.%s() with %s",
                        type(self).__name__,
                        method,
                        plugin.__name__,
                    )
                    pipeline = plugin.run(pipeline)
            setattr(self, method, self._bind(method, pipeline))

    def _bind(self, method: str, pipeline: Callable[[AbstractScraper], Outcome]) -> Callable[[], Any]:
        @functools.wraps(getattr(type(self), method))
        def bound() -> Any:
            return pipeline(self).unwrap()

        return bound

    def host(self) -> str:
        """The host this scraper handles, without 'www.'."""
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def author(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def site_name(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def title(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def category(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def yields(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def description(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def ingredients(self) -> list[str]:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def instructions(self) -> str:
        """Instructions joined with newlines, one step per line."""
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def total_time(self) -> int:
        """Total time in minutes."""
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def cook_time(self) -> int:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def prep_time(self) -> int:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def ratings(self) -> float:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def ratings_count(self) -> int:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def cuisine(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def cooking_method(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def image(self) -> str:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def keywords(self) -> list[str]:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def dietary_restrictions(self) -> list[str]:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def nutrients(self) -> dict[str, str]:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def equipment(self) -> list[str]:
        raise NotImplementedError(_NOT_IMPLEMENTED)

    def canonical_url(self) -> str:
        """The page's canonical link resolved against its URL, else the URL."""
        canonical_link = self.soup.find("link", {"rel": "canonical", "href": True})
        if canonical_link and canonical_link["href"]:
            return urljoin(self.url, canonical_link["href"])
        return self.url

    def language(self) -> str:
        """Read the page language from the markup.

        Both ``<html lang>`` and the legacy content-language meta tag are
        read. HTML editors often emit 'en' by default, so when both are
        present the first other language wins.

        Raises:
            ElementNotFoundInHtml: If the page declares no language
        """
        candidate_languages = []

        html = self.soup.find("html", {"lang": True})
        if html and html["lang"].strip():
            candidate_languages.append(html["lang"].strip())

        meta_language = self.soup.find(
            "meta",
            attrs={
                "http-equiv": lambda value: value and value.lower() == "content-language",
                "content": True,
            },
        )
        if meta_language:
            language = meta_language["content"].split(",", 1)[0].strip()
            if language:
                candidate_languages.append(language)

        if len(candidate_languages) > 1:
            non_english = [lang for lang in candidate_languages if lang != "en"]
            if non_english:
                return non_english[0]
        if candidate_languages:
            return candidate_languages[0]

        raise ElementNotFoundInHtml("Could not find language.")

    def instructions_list(self) -> list[str]:
        return [
            instruction
            for instruction in self.instructions().split("\n")
            if instruction.strip()
        ]

    def ingredient_groups(self) -> list[IngredientGroup]:
        """Group the ingredients by the headings of a known recipe card plugin.

        Falls back to a single unheaded group.
        """
        ingredients = self.ingredients()
        try:
            return group_ingredients(ingredients, self.soup)
        except ValueError as e:
            _LOGGER.debug("Ingredient grouping skipped for %s: %s", self.url, e)
            return [IngredientGroup(purpose=None, ingredients=ingredients)]

    def links(self) -> list[dict[str, str]]:
        """Attributes of every link on the page with a usable href."""
        links = []
        for link in self.soup.find_all("a", href=True):
            if link["href"] in _INVALID_HREFS:
                continue
            links.append(
                {
                    key: " ".join(value) if isinstance(value, list) else value
                    for key, value in link.attrs.items()
                }
            )
        return links

    def to_json(self) -> dict[str, Any]:
        """Collect every field that can be extracted.

        Fields that raise are left out. This method never raises.
        """
        json_dict: dict[str, Any] = {}
        for method in TO_JSON_METHODS:
            try:
                value = getattr(self, method)()
            except Exception as e:
                _LOGGER.debug("Skipping %s.%s(): %s", type(self).__name__, method, e)
                continue
            json_dict[method] = _dump(value)
        return json_dict

    def to_recipe(self) -> Recipe:
        """Validate the extracted fields into a ``Recipe``.

        Raises:
            pydantic.ValidationError: If a required field could not be extracted
        """
        return Recipe.model_validate(self.to_json())
