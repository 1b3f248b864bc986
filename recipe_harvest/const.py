"""Constants for the recipe-harvest package."""

PACKAGE_LOGGER = "recipe_harvest"

BUG_REPORT_LINK = "https://github.com/recipe-harvest/recipe-harvest/issues"

SCHEMA_ORG_HOST = "schema.org"

# Parser used for every BeautifulSoup document
HTML_PARSER = "html.parser"

JSON_LD_SCRIPT_TYPE = "application/ld+json"

# Methods composed with plugins at scraper construction
SCRAPER_METHODS = (
    "author",
    "site_name",
    "title",
    "category",
    "yields",
    "description",
    "ingredients",
    "ingredient_groups",
    "instructions",
    "instructions_list",
    "total_time",
    "cook_time",
    "prep_time",
    "ratings",
    "ratings_count",
    "cuisine",
    "cooking_method",
    "image",
    "keywords",
    "dietary_restrictions",
    "nutrients",
    "equipment",
    "canonical_url",
    "language",
    "links",
)

# Fields of the serialized record, in output order. Method names double as
# field names.
TO_JSON_METHODS = (
    "host",
    "canonical_url",
    "language",
    "author",
    "site_name",
    "title",
    "category",
    "yields",
    "description",
    "ingredients",
    "ingredient_groups",
    "instructions",
    "instructions_list",
    "total_time",
    "cook_time",
    "prep_time",
    "ratings",
    "ratings_count",
    "cuisine",
    "cooking_method",
    "image",
    "keywords",
    "dietary_restrictions",
    "nutrients",
    "equipment",
)

# Default values returned by suppressed methods
DEFAULT_ON_EXCEPTION_RETURN_VALUES = {
    "title": None,
    "total_time": None,
    "yields": None,
    "image": None,
    "ingredients": None,
    "instructions": None,
    "instructions_list": None,
    "ratings": None,
    "links": None,
    "language": None,
    "nutrients": None,
}

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
