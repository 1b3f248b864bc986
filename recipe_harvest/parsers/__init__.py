"""Parsers for the metadata embedded in recipe pages."""
from .opengraph import OpenGraph
from .schema_org import SchemaOrg

__all__ = ["OpenGraph", "SchemaOrg"]
