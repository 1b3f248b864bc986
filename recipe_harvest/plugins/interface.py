"""
Plugin Interface.

Plugins wrap the per-field extraction steps of a scraper to add concerns
such as normalization, exception suppression and fallback sources. A step is
a callable taking the scraper and returning an ``Outcome``; a plugin's
``run`` receives the inner step and returns the wrapping one.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..outcome import Outcome

if TYPE_CHECKING:
    from ..scrapers.abstract import AbstractScraper

Step = Callable[["AbstractScraper"], Outcome]


class PluginInterface:
    """Base class for all plugins.

    Attributes:
        run_on_hosts: Hosts the plugin applies to, or ``"*"`` for every host
        run_on_methods: Scraper methods the plugin wraps
    """

    run_on_hosts: tuple[str, ...] = ("*",)
    run_on_methods: tuple[str, ...] = ("title",)

    @classmethod
    def should_run(cls, host: str, method: str) -> bool:
        """Check if the plugin applies to the given host and method."""
        return cls._should_run_host_check(host) and cls._should_run_method_check(method)

    @classmethod
    def _should_run_host_check(cls, host: str) -> bool:
        return "*" in cls.run_on_hosts or host in cls.run_on_hosts

    @classmethod
    def _should_run_method_check(cls, method: str) -> bool:
        return method in cls.run_on_methods

    @classmethod
    def run(cls, decorated: Step) -> Step:
        """Wrap a field step.

        Args:
            decorated: The inner step; its ``__name__`` is the method name

        Returns:
            A step with the same ``__name__``
        """
        raise NotImplementedError(f"{cls.__name__} must implement run()")
