"""
recipe-harvest.

Extracts normalized recipe records from the HTML of recipe pages, combining
the page's schema.org data, its OpenGraph metadata and site-specific
overrides.

Example:
    >>> from recipe_harvest import scrape_html
    >>> scraper = scrape_html(html, "https://www.allrecipes.com/recipe/1/")
    >>> scraper.title()
    'Banana Bread'
"""
from .exceptions import (
    ElementNotFoundInHtml,
    FieldNotProvidedByWebsiteException,
    FillPluginException,
    NoSchemaFoundInWildMode,
    OpenGraphException,
    RecipeSchemaNotFound,
    RecipeScrapersException,
    SchemaOrgException,
    StaticValueException,
    WebsiteNotImplementedError,
)
from .factory import (
    SCRAPERS,
    SchemaScraper,
    get_supported_urls,
    is_supported,
    register_scraper,
    scrape_html,
)
from .models.recipe import IngredientGroup, Recipe
from .outcome import Outcome, OutcomeKind
from .scrapers.abstract import AbstractScraper
from .settings import Settings, configure, get_settings, reset_settings

__version__ = "0.1.0"

__all__ = [
    "AbstractScraper",
    "ElementNotFoundInHtml",
    "FieldNotProvidedByWebsiteException",
    "FillPluginException",
    "IngredientGroup",
    "NoSchemaFoundInWildMode",
    "OpenGraphException",
    "Outcome",
    "OutcomeKind",
    "Recipe",
    "RecipeSchemaNotFound",
    "RecipeScrapersException",
    "SCRAPERS",
    "SchemaOrgException",
    "SchemaScraper",
    "Settings",
    "StaticValueException",
    "WebsiteNotImplementedError",
    "configure",
    "get_settings",
    "get_supported_urls",
    "is_supported",
    "register_scraper",
    "reset_settings",
    "scrape_html",
]
