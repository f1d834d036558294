"""
Parsers for fetched player content.

This module contains parsers for:
- Profile pages (HTML or JSON) → PartialProfile
- Search result pages → PartialProfile of the top hit
"""

from squadrate.scrape.parsers.profile import MarkupExtractor, ProfileExtractor, parse_int
from squadrate.scrape.parsers.search import SearchResultsExtractor

__all__ = [
    "MarkupExtractor",
    "ProfileExtractor",
    "SearchResultsExtractor",
    "parse_int",
]
