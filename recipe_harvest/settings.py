"""
Settings for recipe-harvest.

Settings are an immutable value. ``configure`` validates overrides, builds a
new value and installs it as the process-wide default; scrapers take a
snapshot when they are constructed, so reconfiguring never changes a scraper
that already exists.
"""
from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType
from typing import Any, Mapping

import voluptuous as vol

from .const import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_ON_EXCEPTION_RETURN_VALUES,
    LOG_LEVELS,
    PACKAGE_LOGGER,
    SCRAPER_METHODS,
)
from .plugins import (
    BestImagePlugin,
    ExceptionHandlingPlugin,
    HTMLTagStripperPlugin,
    NormalizeStringPlugin,
    OpenGraphFillPlugin,
    OpenGraphImageFetchPlugin,
    PluginInterface,
    SchemaOrgFillPlugin,
    StaticValueExceptionHandlingPlugin,
)

_LOGGER = logging.getLogger(__name__)

# Outermost first
DEFAULT_PLUGINS = (
    ExceptionHandlingPlugin,
    BestImagePlugin,
    StaticValueExceptionHandlingPlugin,
    HTMLTagStripperPlugin,
    NormalizeStringPlugin,
    OpenGraphImageFetchPlugin,
    OpenGraphFillPlugin,
    SchemaOrgFillPlugin,
)


def _plugin_class(value: Any) -> type[PluginInterface]:
    if isinstance(value, type) and issubclass(value, PluginInterface):
        return value
    raise vol.Invalid(f"{value!r} is not a plugin class")


SETTINGS_SCHEMA = vol.Schema(
    {
        vol.Optional("plugins"): vol.All(
            vol.Coerce(list), [_plugin_class], vol.Coerce(tuple)
        ),
        vol.Optional("best_image_selection"): bool,
        vol.Optional("suppress_exceptions"): bool,
        vol.Optional("on_exception_return_values"): {vol.In(SCRAPER_METHODS): object},
        vol.Optional("log_level"): vol.All(str, vol.Upper, vol.In(LOG_LEVELS)),
    }
)


@dataclasses.dataclass(frozen=True)
class Settings:
    """Configuration of the extraction engine.

    Attributes:
        plugins: Plugin classes, outermost first
        best_image_selection: Default for choosing the largest image candidate
        suppress_exceptions: Return configured defaults instead of raising
        on_exception_return_values: Default per method when suppressing
        log_level: Level of the package logger
    """

    plugins: tuple[type[PluginInterface], ...] = DEFAULT_PLUGINS
    best_image_selection: bool = True
    suppress_exceptions: bool = False
    on_exception_return_values: Mapping[str, Any] = dataclasses.field(
        default_factory=lambda: dict(DEFAULT_ON_EXCEPTION_RETURN_VALUES)
    )
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "plugins", tuple(self.plugins))
        object.__setattr__(
            self,
            "on_exception_return_values",
            MappingProxyType(dict(self.on_exception_return_values)),
        )


_settings = Settings()


def get_settings() -> Settings:
    """Return the current default settings."""
    return _settings


def configure(**overrides: Any) -> Settings:
    """Validate overrides and install them as the new default settings.

    ``on_exception_return_values`` is merged into the current mapping rather
    than replacing it.

    Args:
        **overrides: Any field of ``Settings``

    Returns:
        The new default settings

    Raises:
        vol.Invalid: If an override has an unknown key or a bad value
    """
    global _settings

    validated = SETTINGS_SCHEMA(overrides)
    if "on_exception_return_values" in validated:
        merged = dict(_settings.on_exception_return_values)
        merged.update(validated["on_exception_return_values"])
        validated["on_exception_return_values"] = merged

    _settings = dataclasses.replace(_settings, **validated)
    logging.getLogger(PACKAGE_LOGGER).setLevel(_settings.log_level)
    _LOGGER.debug("Settings updated: %s", sorted(validated))
    return _settings


def reset_settings() -> Settings:
    """Restore the default settings."""
    global _settings

    _settings = Settings()
    logging.getLogger(PACKAGE_LOGGER).setLevel(_settings.log_level)
    return _settings
