"""Falls back to the page's og:image when no image was extracted."""
from __future__ import annotations

import functools
import logging

from ..outcome import Outcome
from .interface import PluginInterface, Step

_LOGGER = logging.getLogger(__name__)


class OpenGraphImageFetchPlugin(PluginInterface):
    """Substitutes ``og:image`` for a missing or empty image.

    When the page has no ``og:image`` either, the inner failure is kept; an
    empty inner value becomes the OpenGraph not-found outcome.
    """

    run_on_hosts = ("*",)
    run_on_methods = ("image",)

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            if outcome.ok and outcome.value:
                return outcome

            fallback = Outcome.capture(scraper.opengraph.image)
            if fallback.ok:
                _LOGGER.info(
                    "Using og:image for %s.%s()",
                    type(scraper).__name__,
                    decorated.__name__,
                )
                return fallback
            return fallback if outcome.ok else outcome

        return wrapper
