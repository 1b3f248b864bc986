"""Site adapters, keyed by the host they handle."""
from .allrecipes import AllRecipesScraper
from .bbcgoodfood import BBCGoodFoodScraper
from .delish import DelishScraper

SCRAPER_REGISTRY = {
    "allrecipes.com": AllRecipesScraper,
    "bbcgoodfood.com": BBCGoodFoodScraper,
    "delish.com": DelishScraper,
}

__all__ = [
    "AllRecipesScraper",
    "BBCGoodFoodScraper",
    "DelishScraper",
    "SCRAPER_REGISTRY",
]
