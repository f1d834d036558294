"""
Browser-rendered fetch strategy.

Profile pages sit behind bot protection that rejects plain HTTP clients.
A real Chromium with stealth patches usually gets through, at the cost of
a few seconds per player, so this strategy is off unless
SQUADRATE_FETCH_BROWSER_ENABLED is set.

Each attempt launches and closes its own browser; the strategy keeps no
state between attempts.
"""

import asyncio
import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright
from playwright_stealth import Stealth

from squadrate.config import settings
from squadrate.scrape.parsers.profile import MarkupExtractor, ProfileExtractor
from squadrate.scrape.strategies import FetchStrategy

logger = logging.getLogger(__name__)

# Stealth configuration to avoid bot detection (Cloudflare, etc.)
_stealth = Stealth()

# A challenge page is short and references the challenge script
CHALLENGE_MARKER = "challenge-platform"
CHALLENGE_MAX_LENGTH = 5000


def looks_like_challenge(html: str) -> bool:
    return len(html) < CHALLENGE_MAX_LENGTH or CHALLENGE_MARKER in html


class BrowserFetchStrategy(FetchStrategy):
    """Load the reference in headless Chromium and extract from the rendered page."""

    name = "browser"

    def __init__(
        self,
        extractor: Optional[ProfileExtractor] = None,
        headless: Optional[bool] = None,
        timeout: Optional[float] = None,
        challenge_wait: float = 5.0,
    ):
        self.extractor = extractor or MarkupExtractor()
        self.headless = headless if headless is not None else settings.fetch_browser_headless
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self.challenge_wait = challenge_wait

    async def attempt(self, target, client):
        logger.info(f"Loading {target.reference} in browser")
        try:
            html = await self._render(target.reference)
        except (PlaywrightError, asyncio.TimeoutError) as e:
            logger.warning(f"Browser fetch failed: {e}")
            return None

        return self.extractor.extract(html, search_name=target.name)

    async def _render(self, url: str) -> str:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=self.headless)
            try:
                context = await browser.new_context(
                    user_agent=settings.fetch_user_agent,
                    viewport={"width": 1920, "height": 1080},
                    locale="en-US",
                )
                page = await context.new_page()
                await _stealth.apply_stealth_async(page)

                await page.goto(
                    url,
                    wait_until="domcontentloaded",
                    timeout=self.timeout * 1000,
                )
                html = await page.content()

                # Give a bot challenge one chance to clear itself
                if looks_like_challenge(html):
                    logger.info(f"Bot challenge on {url}, waiting {self.challenge_wait:.0f}s...")
                    await asyncio.sleep(self.challenge_wait)
                    html = await page.content()

                return html
            finally:
                await browser.close()
