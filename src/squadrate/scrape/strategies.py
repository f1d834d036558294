"""
Remote fetch strategies for live profile enhancement.

Each strategy is one independent way of getting a profile fragment for
a FetchTarget. The chain tries them in order and stops at the first
that returns something:

1. RelayFetchStrategy: third-party relays, each with its own envelope
2. DirectFetchStrategy: plain GET with browser-like headers (usually blocked)
3. BrowserFetchStrategy: optional, see scrape/browser.py
4. ServerRelayStrategy: our own relay endpoint, if one is configured
5. ReferenceParseStrategy: no network; id and name from the URL itself

Strategies hold configuration only. The HTTP client is passed in on
every attempt, so one strategy instance can serve any number of
orchestrators.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence
from urllib.parse import quote

import httpx

from squadrate.config import RelayEndpoint, settings
from squadrate.errors import ExtractionError, FetchError
from squadrate.players.profile import FetchTarget, PartialProfile
from squadrate.scrape.parsers.profile import MarkupExtractor, ProfileExtractor
from squadrate.scrape.references import parse_reference

logger = logging.getLogger(__name__)


def browser_headers(user_agent: Optional[str] = None) -> dict[str, str]:
    return {
        "User-Agent": user_agent or settings.fetch_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }


async def fetch_text(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    timeout: float,
    **kwargs,
) -> str:
    """
    Perform one request and return the body text.

    The request is abandoned after `timeout` seconds, whatever the
    client's own default timeout is.

    Raises:
        FetchError: On timeout, connection failure or a non-2xx status
    """
    try:
        response = await asyncio.wait_for(
            client.request(method, url, timeout=timeout, **kwargs), timeout
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        raise FetchError(f"{method} {url} timed out after {timeout:.0f}s") from e
    except httpx.HTTPError as e:
        raise FetchError(f"{method} {url} failed: {e}") from e

    if not response.is_success:
        raise FetchError(f"{method} {url} returned HTTP {response.status_code}")
    return response.text


def unwrap_envelope(body: str, envelope: str) -> str:
    """
    Strip a relay's wrapper from the payload.

    Raises:
        ExtractionError: If the body does not have the expected envelope shape
    """
    if envelope == "raw":
        return body
    if envelope == "json_contents":
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ExtractionError(f"relay envelope is not JSON: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("contents"), str):
            raise ExtractionError("relay envelope has no 'contents' string")
        return data["contents"]
    raise ExtractionError(f"unknown relay envelope '{envelope}'")


class FetchStrategy(ABC):
    """One way of turning a FetchTarget into a profile fragment."""

    name: str = "strategy"

    @abstractmethod
    async def attempt(
        self,
        target: FetchTarget,
        client: httpx.AsyncClient,
    ) -> Optional[PartialProfile]:
        """
        Try to fetch and extract a fragment.

        Returns None for every expected failure (network error, parse
        failure, timeout, nothing found).
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name='{self.name}')>"


class RelayFetchStrategy(FetchStrategy):
    """
    Fetch through third-party relays, one after another.

    Each relay has its own timeout and envelope; the first relay whose
    content yields a meaningful fragment wins.
    """

    name = "relay"

    def __init__(
        self,
        endpoints: Optional[Sequence[RelayEndpoint]] = None,
        extractor: Optional[ProfileExtractor] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        self.endpoints = list(endpoints if endpoints is not None else settings.relay_endpoints)
        self.extractor = extractor or MarkupExtractor()
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self.user_agent = user_agent

    @staticmethod
    def relay_url(endpoint: RelayEndpoint, target_url: str) -> str:
        return endpoint.url_template.format(
            url=target_url,
            quoted_url=quote(target_url, safe=""),
        )

    async def attempt(self, target, client):
        for endpoint in self.endpoints:
            url = self.relay_url(endpoint, target.reference)
            logger.debug(f"Trying relay {endpoint.name} for {target.reference}")
            try:
                body = await fetch_text(
                    client, "GET", url, self.timeout,
                    headers=browser_headers(self.user_agent),
                )
                partial = self.extractor.extract(
                    unwrap_envelope(body, endpoint.envelope), search_name=target.name,
                )
            except (FetchError, ExtractionError) as e:
                logger.warning(f"Relay {endpoint.name} failed: {e}")
                continue

            if partial is not None:
                logger.info(f"Fetched {target.reference} via relay {endpoint.name}")
                return partial

        return None


class DirectFetchStrategy(FetchStrategy):
    """
    Plain GET of the reference with browser-like headers.

    The remote usually rejects this; it costs one request to find out.
    """

    name = "direct"

    def __init__(
        self,
        extractor: Optional[ProfileExtractor] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        origin: Optional[str] = None,
    ):
        self.extractor = extractor or MarkupExtractor()
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self.user_agent = user_agent
        self.origin = origin or settings.fetch_origin

    async def attempt(self, target, client):
        headers = browser_headers(self.user_agent)
        headers["Origin"] = self.origin
        headers["Referer"] = self.origin

        try:
            body = await fetch_text(client, "GET", target.reference, self.timeout, headers=headers)
        except FetchError as e:
            logger.debug(f"Direct fetch failed (expected for most hosts): {e}")
            return None

        return self.extractor.extract(body, search_name=target.name)


class ServerRelayStrategy(FetchStrategy):
    """
    Delegate to our own relay endpoint.

    The endpoint takes POST {"url": <reference>} and answers
    {"success": true, "html": "<page>"}. No endpoint configured is a
    normal "not available" outcome.
    """

    name = "server_relay"

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        extractor: Optional[ProfileExtractor] = None,
        timeout: Optional[float] = None,
    ):
        self.endpoint_url = endpoint_url if endpoint_url is not None else settings.server_relay_url
        self.extractor = extractor or MarkupExtractor()
        self.timeout = timeout if timeout is not None else settings.fetch_timeout

    async def attempt(self, target, client):
        if not self.endpoint_url:
            logger.debug("No server relay configured")
            return None

        try:
            body = await fetch_text(
                client, "POST", self.endpoint_url, self.timeout,
                json={"url": target.reference},
            )
            data = json.loads(body)
        except FetchError as e:
            logger.warning(f"Server relay unavailable: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.warning(f"Server relay returned malformed JSON: {e}")
            return None

        if not isinstance(data, dict) or not data.get("success") or not data.get("html"):
            logger.debug(f"Server relay had no page for {target.reference}")
            return None

        return self.extractor.extract(data["html"], search_name=target.name)


class ReferenceParseStrategy(FetchStrategy):
    """
    Network-free last resort: read the id, slug and version out of the reference.

    https://sofifa.com/player/239085/erling-haaland/250001/
    → external_id=239085, name='Erling Haaland', version_id=250001
    """

    name = "reference_parse"

    async def attempt(self, target, client):
        parts = parse_reference(target.reference)
        if parts is None:
            return None

        logger.debug(f"Parsed reference: id {parts.player_id}, name {parts.display_name}")
        return PartialProfile(
            name=parts.display_name,
            external_id=parts.player_id,
            version_id=parts.version_id,
            reference_url=target.reference,
            origin=self.name,
        )


class FetchStrategyChain:
    """
    Ordered strategies with early exit on the first fragment.

    A strategy that raises is treated exactly like one that returned
    None: the chain moves on.

    Usage:
        chain = FetchStrategyChain.default()
        partial, strategy_name = await chain.run(target, client)
    """

    def __init__(self, strategies: Iterable[FetchStrategy]):
        self.strategies = list(strategies)

    @classmethod
    def default(cls, extractor: Optional[ProfileExtractor] = None) -> "FetchStrategyChain":
        """The standard chain built from settings."""
        extractor = extractor or MarkupExtractor()
        strategies: list[FetchStrategy] = [
            RelayFetchStrategy(extractor=extractor),
            DirectFetchStrategy(extractor=extractor),
        ]
        if settings.fetch_browser_enabled:
            from squadrate.scrape.browser import BrowserFetchStrategy
            strategies.append(BrowserFetchStrategy(extractor=extractor))
        strategies.append(ServerRelayStrategy(extractor=extractor))
        strategies.append(ReferenceParseStrategy())
        return cls(strategies)

    async def run(
        self,
        target: FetchTarget,
        client: httpx.AsyncClient,
    ) -> tuple[Optional[PartialProfile], Optional[str]]:
        """
        Run strategies in order.

        Returns:
            Tuple of (fragment, strategy name), or (None, None) if every
            strategy came up empty
        """
        for strategy in self.strategies:
            try:
                partial = await strategy.attempt(target, client)
            except Exception as e:
                logger.warning(f"Strategy {strategy.name} raised: {e}")
                continue

            if partial is not None:
                return partial, strategy.name

        logger.warning(f"All fetch strategies failed for {target.reference}")
        return None, None

    def __len__(self) -> int:
        return len(self.strategies)
