"""Replaces failed fields with configured defaults when suppression is on."""
from __future__ import annotations

import functools
import logging

from ..outcome import Outcome
from .interface import PluginInterface, Step

_LOGGER = logging.getLogger(__name__)


class ExceptionHandlingPlugin(PluginInterface):
    """The outermost plugin.

    With ``Settings.suppress_exceptions`` enabled, any outcome that is not a
    found value becomes the method's entry in
    ``Settings.on_exception_return_values`` (None when it has none).
    """

    run_on_hosts = ("*",)
    run_on_methods = (
        "title",
        "total_time",
        "yields",
        "image",
        "ingredients",
        "instructions",
        "ratings",
        "links",
        "language",
        "nutrients",
    )

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            settings = scraper.settings
            if outcome.ok or not settings.suppress_exceptions:
                return outcome

            _LOGGER.info(
                "ExceptionHandlingPlugin silenced exception: %s in %s.%s()",
                outcome.error,
                type(scraper).__name__,
                decorated.__name__,
            )
            return Outcome.found(
                settings.on_exception_return_values.get(decorated.__name__)
            )

        return wrapper
