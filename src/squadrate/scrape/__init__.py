"""
Remote player data module for squadrate.

This module handles the opportunistic live enhancement tier:
- Reference URL helpers (parse, validate, generate)
- Fetch strategies tried in order by FetchStrategyChain
- Extractors turning fetched HTML/JSON into profile fragments

The scraping architecture uses:
- httpx for relay, direct and first-party relay requests
- Playwright (optional) for browser-rendered pages
- BeautifulSoup for HTML parsing
- Async/await with a per-attempt timeout
"""

from squadrate.scrape.parsers import MarkupExtractor, SearchResultsExtractor
from squadrate.scrape.references import (
    build_search_url,
    generate_reference_urls,
    parse_reference,
    validate_reference,
)
from squadrate.scrape.strategies import (
    DirectFetchStrategy,
    FetchStrategy,
    FetchStrategyChain,
    ReferenceParseStrategy,
    RelayFetchStrategy,
    ServerRelayStrategy,
)

__all__ = [
    "MarkupExtractor",
    "SearchResultsExtractor",
    "build_search_url",
    "generate_reference_urls",
    "parse_reference",
    "validate_reference",
    "DirectFetchStrategy",
    "FetchStrategy",
    "FetchStrategyChain",
    "ReferenceParseStrategy",
    "RelayFetchStrategy",
    "ServerRelayStrategy",
]
