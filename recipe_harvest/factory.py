"""
Scraper Factory.

This module picks the scraper for a page: the registered site adapter for
the URL's host, or, in wild mode, a generic scraper that reads everything
from the page's schema.org data.
"""
from __future__ import annotations

import logging

from .exceptions import NoSchemaFoundInWildMode, WebsiteNotImplementedError
from .scrapers.abstract import AbstractScraper
from .scrapers.sites import SCRAPER_REGISTRY
from .settings import Settings
from .utils.url import get_host_name

_LOGGER = logging.getLogger(__name__)


class SchemaScraper(AbstractScraper):
    """Generic scraper for hosts without an adapter.

    Every field is filled by the schema.org fill plugin.
    """

    def host(self) -> str:
        return get_host_name(self.url)

    def equipment(self) -> list[str]:
        # schema.org recipes carry no equipment
        return []


SCRAPERS: dict[str, type[AbstractScraper]] = dict(SCRAPER_REGISTRY)


def register_scraper(host: str, scraper_class: type[AbstractScraper]) -> None:
    """Register (or replace) the scraper for a host."""
    SCRAPERS[host] = scraper_class


def get_supported_urls() -> list[str]:
    return sorted(SCRAPERS)


def is_supported(url: str) -> bool:
    return get_host_name(url) in SCRAPERS


def scrape_html(
    html: str,
    url: str,
    *,
    supported_only: bool = True,
    best_image: bool | None = None,
    settings: Settings | None = None,
) -> AbstractScraper:
    """Build the scraper for a recipe page.

    Args:
        html: HTML of the recipe page
        url: URL of the recipe page
        supported_only: Only accept hosts with a registered scraper
        best_image: Choose the largest image; None uses the settings
        settings: Settings to use; None uses the current defaults

    Returns:
        A scraper for the page

    Raises:
        WebsiteNotImplementedError: If the host is not supported and
            supported_only is set
        NoSchemaFoundInWildMode: If the host is not supported and the page
            has no schema.org recipe
    """
    host_name = get_host_name(url)

    scraper_class = SCRAPERS.get(host_name)
    if scraper_class is not None:
        _LOGGER.debug("Using %s for %s", scraper_class.__name__, host_name)
        return scraper_class(html, url, best_image=best_image, settings=settings)

    if supported_only:
        raise WebsiteNotImplementedError(
            f"The website '{host_name}' isn't currently supported by recipe-harvest!"
        )

    _LOGGER.debug("No scraper registered for %s, trying schema.org data", host_name)
    scraper = SchemaScraper(html, url, best_image=best_image, settings=settings)
    if scraper.schema.has_data:
        return scraper

    raise NoSchemaFoundInWildMode(f"No Schema.org data found at URL: {url}")
