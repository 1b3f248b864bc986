"""Text, time and URL helpers shared by parsers, plugins and site adapters."""
from .fractions import extract_fractional
from .grouping import group_ingredients
from .strings import csv_to_tags, format_diet_name, normalize_string, strip_tags
from .time import get_minutes
from .url import get_host_name
from .yields import get_yields

__all__ = [
    "csv_to_tags",
    "extract_fractional",
    "format_diet_name",
    "get_host_name",
    "get_minutes",
    "get_yields",
    "group_ingredients",
    "normalize_string",
    "strip_tags",
]
