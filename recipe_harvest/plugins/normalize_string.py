"""Collapses whitespace and stray entities in text fields."""
from __future__ import annotations

import functools

from ..outcome import Outcome
from ..utils.strings import normalize_string
from .interface import PluginInterface, Step


class NormalizeStringPlugin(PluginInterface):
    run_on_hosts = ("*",)
    run_on_methods = ("title",)

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            if outcome.ok and isinstance(outcome.value, str):
                return Outcome.found(normalize_string(outcome.value))
            return outcome

        return wrapper
