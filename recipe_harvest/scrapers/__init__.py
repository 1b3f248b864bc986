"""Scrapers package."""
from .abstract import AbstractScraper

__all__ = ["AbstractScraper"]
