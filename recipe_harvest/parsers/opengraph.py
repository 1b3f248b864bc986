"""
OpenGraph Metadata Parser.

This module reads the social-metadata ``<meta>`` tags of a page. They are a
fallback source for the site name and the recipe image when the page's
schema.org data lacks them.
"""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from ..exceptions import OpenGraphException

_LOGGER = logging.getLogger(__name__)


class OpenGraph:
    """Reads OpenGraph properties from a parsed page."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    def _get_content(self, prop: str) -> str:
        """Return the content of an OpenGraph meta tag.

        The tag is looked up by its ``property`` attribute first; some sites
        use ``name`` instead.

        Raises:
            OpenGraphException: If the tag is missing or has no content
        """
        meta = self.soup.find("meta", {"property": prop}, content=True)
        if meta is None:
            meta = self.soup.find("meta", {"name": prop}, content=True)
        content = meta.get("content", "").strip() if meta else ""
        if not content:
            raise OpenGraphException(f"{prop} not found in OpenGraph metadata")
        _LOGGER.debug("Read %s from OpenGraph metadata", prop)
        return content

    def site_name(self) -> str:
        return self._get_content("og:site_name")

    def image(self) -> str:
        return self._get_content("og:image")
