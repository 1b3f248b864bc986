"""Strips HTML markup from text fields."""
from __future__ import annotations

import functools

from ..outcome import Outcome
from ..utils.strings import strip_tags
from .interface import PluginInterface, Step


class HTMLTagStripperPlugin(PluginInterface):
    run_on_hosts = ("*",)
    run_on_methods = ("title", "instructions", "ingredients")

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            if not outcome.ok:
                return outcome

            value = outcome.value
            if isinstance(value, str):
                return Outcome.found(strip_tags(value))
            if isinstance(value, list):
                return Outcome.found(
                    [strip_tags(item) if isinstance(item, str) else item for item in value]
                )
            return outcome

        return wrapper
