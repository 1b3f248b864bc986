"""Turns declared constant values of a site into regular results."""
from __future__ import annotations

import functools
import logging

from ..const import BUG_REPORT_LINK
from ..exceptions import FieldNotProvidedByWebsiteException
from ..outcome import Outcome, OutcomeKind
from .interface import PluginInterface, Step

_LOGGER = logging.getLogger(__name__)


class StaticValueExceptionHandlingPlugin(PluginInterface):
    """Returns the value carried by a ``StaticValueException``.

    A warning is logged the first time each field of a scraper hits a
    constant, so the site adapter can be revisited if the site changes.
    """

    run_on_hosts = ("*",)
    run_on_methods = (
        "author",
        "site_name",
        "language",
        "cuisine",
        "cooking_method",
        "total_time",
        "yields",
    )

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            if outcome.kind is not OutcomeKind.DECLARED_CONSTANT:
                return outcome

            method = decorated.__name__
            if method not in scraper.static_value_warnings:
                scraper.static_value_warnings.add(method)
                if isinstance(outcome.error, FieldNotProvidedByWebsiteException):
                    _LOGGER.warning(
                        "%s doesn't seem to support the %s field. If you know this "
                        "to be untrue for some recipe, please submit a bug report at %s",
                        scraper.host(),
                        method,
                        BUG_REPORT_LINK,
                    )
                else:
                    _LOGGER.warning(
                        "%s returns a constant value from the %s field. If you "
                        "believe we can and should determine that dynamically, "
                        "please submit a bug report at %s",
                        scraper.host(),
                        method,
                        BUG_REPORT_LINK,
                    )
            return Outcome.found(outcome.value)

        return wrapper
