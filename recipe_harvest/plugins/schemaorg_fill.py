"""Fills fields from the page's schema.org data."""
from __future__ import annotations

import functools
import logging

from ..exceptions import RecipeSchemaNotFound
from ..outcome import Outcome
from .interface import PluginInterface, Step

_LOGGER = logging.getLogger(__name__)


class SchemaOrgFillPlugin(PluginInterface):
    """Delegates to ``SchemaOrg`` when a site adapter defers a field.

    Site adapters defer by raising ``NotImplementedError`` or one of the
    ``FillPluginException`` types.
    """

    run_on_hosts = ("*",)
    run_on_methods = (
        "author",
        "site_name",
        "title",
        "category",
        "total_time",
        "yields",
        "image",
        "ingredients",
        "instructions",
        "ratings",
        "language",
        "nutrients",
        "cooking_method",
        "cuisine",
        "description",
        "cook_time",
        "prep_time",
        "keywords",
        "ratings_count",
        "dietary_restrictions",
    )

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            if not outcome.wants_fallback:
                return outcome

            method = decorated.__name__
            if not scraper.schema.has_data:
                return Outcome.from_error(
                    RecipeSchemaNotFound(f"No schema.org recipe to read {method} from")
                )

            fallback = Outcome.capture(getattr(scraper.schema, method))
            if fallback.ok:
                _LOGGER.info(
                    "%s.%s() filled from schema.org data",
                    type(scraper).__name__,
                    method,
                )
            return fallback

        return wrapper
