"""
Exceptions raised by recipe-harvest.

The hierarchy mirrors the failure modes of the extraction engine:

- ``FillPluginException`` and its subclasses mean "this source has nothing,
  try another one"; the fill plugins react to them.
- ``StaticValueException`` means the site has a documented, constant answer
  for a field and carries that value.
- ``WebsiteNotImplementedError`` and ``NoSchemaFoundInWildMode`` are raised
  by the factory when no scraper can be built for a page.

The builtin ``NotImplementedError`` is used as-is for scraper methods that a
site adapter does not override.
"""
from __future__ import annotations

from typing import Any


class RecipeScrapersException(Exception):
    """Base class for all recipe-harvest errors."""


class FillPluginException(RecipeScrapersException):
    """A data source could not provide a value; an alternate source may."""


class ElementNotFoundInHtml(FillPluginException):
    """An expected HTML element is missing from the page."""


class SchemaOrgException(FillPluginException):
    """A field is missing from the page's schema.org data."""


class RecipeSchemaNotFound(SchemaOrgException):
    """The page carries no schema.org recipe at all."""


class OpenGraphException(FillPluginException):
    """A field is missing from the page's OpenGraph metadata."""


class WebsiteNotImplementedError(RecipeScrapersException):
    """No scraper is registered for the requested host."""


class NoSchemaFoundInWildMode(RecipeScrapersException):
    """Wild mode was requested but the page has no schema.org recipe."""


class StaticValueException(RecipeScrapersException):
    """The site always returns the same value for a field.

    Attributes:
        return_value: The value to use for the field
    """

    def __init__(self, message: str, return_value: Any = None) -> None:
        super().__init__(message)
        self.return_value = return_value


class FieldNotProvidedByWebsiteException(StaticValueException):
    """The site does not offer this field at all."""
