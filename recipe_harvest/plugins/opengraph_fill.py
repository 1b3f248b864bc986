"""Fills fields from OpenGraph metadata when other sources have none."""
from __future__ import annotations

import functools
import logging

from ..outcome import Outcome
from .interface import PluginInterface, Step

_LOGGER = logging.getLogger(__name__)


class OpenGraphFillPlugin(PluginInterface):
    run_on_hosts = ("*",)
    run_on_methods = ("site_name", "image")

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            if not outcome.wants_fallback:
                return outcome

            method = decorated.__name__
            fallback = Outcome.capture(getattr(scraper.opengraph, method))
            if fallback.ok:
                _LOGGER.info(
                    "%s.%s() filled from OpenGraph metadata",
                    type(scraper).__name__,
                    method,
                )
            return fallback

        return wrapper
