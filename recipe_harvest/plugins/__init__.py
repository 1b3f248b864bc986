"""Plugins composed around the field methods of every scraper."""
from .best_image import BestImagePlugin
from .exception_handling import ExceptionHandlingPlugin
from .html_tags import HTMLTagStripperPlugin
from .interface import PluginInterface
from .normalize_string import NormalizeStringPlugin
from .opengraph_fill import OpenGraphFillPlugin
from .opengraph_image import OpenGraphImageFetchPlugin
from .schemaorg_fill import SchemaOrgFillPlugin
from .static_values import StaticValueExceptionHandlingPlugin

__all__ = [
    "BestImagePlugin",
    "ExceptionHandlingPlugin",
    "HTMLTagStripperPlugin",
    "NormalizeStringPlugin",
    "OpenGraphFillPlugin",
    "OpenGraphImageFetchPlugin",
    "PluginInterface",
    "SchemaOrgFillPlugin",
    "StaticValueExceptionHandlingPlugin",
]
