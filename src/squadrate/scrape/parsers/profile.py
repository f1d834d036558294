"""
Player profile page extraction.

Turns fetched content into a PartialProfile. Content is either the
profile page HTML or a JSON object (some relays and the first-party
relay can return structured data instead of markup).

Profile page structure (relevant parts):
- .bp-overall / .bp-potential: ratings
- h1[data-title] or .player-name: display name
- .bp-positions .badge: one badge per position
- .bp-age: age in years
- .bp-club a / .bp-nationality a: club and country links

Every field is extracted independently; a missing or malformed field
just stays None.
"""

import json
import logging
import math
import re
from typing import Optional, Protocol

from bs4 import BeautifulSoup

from squadrate.players.profile import PartialProfile

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"-?\d+")

# JSON payload field names → PartialProfile fields
JSON_FIELD_MAP: dict[str, str] = {
    "overall": "overall",
    "overall_rating": "overall",
    "potential": "potential",
    "name": "name",
    "player_name": "name",
    "positions": "positions",
    "age": "age",
    "club": "club",
    "club_name": "club",
    "nationality": "nationality",
    "id": "external_id",
    "sofifa_id": "external_id",
}

_INT_FIELDS = {"overall", "potential", "age", "external_id"}


class ProfileExtractor(Protocol):
    """Anything that can turn raw fetched content into a profile fragment."""

    def extract(
        self, content: str, search_name: Optional[str] = None,
    ) -> Optional[PartialProfile]:
        ...


def parse_int(text) -> Optional[int]:
    """First integer in text ('91', ' 91 +2', 91) or None."""
    if text is None:
        return None
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    if isinstance(text, float):
        return int(text) if math.isfinite(text) else None
    m = _LEADING_INT.search(str(text))
    return int(m.group()) if m else None


def _clean_text(element) -> Optional[str]:
    if element is None:
        return None
    text = element.get_text(strip=True)
    return text or None


class MarkupExtractor:
    """
    Extracts a profile fragment from profile page HTML or JSON.

    Usage:
        extractor = MarkupExtractor()
        partial = extractor.extract(html)
        if partial:
            print(partial.overall)
    """

    origin = "profile_page"

    def extract(
        self,
        content: Optional[str],
        search_name: Optional[str] = None,
    ) -> Optional[PartialProfile]:
        """
        Extract what we can; None unless an overall rating or name was found.

        search_name fills in the name of a page that has a rating but no
        readable name. Never raises.
        """
        if not content or not content.strip():
            return None

        stripped = content.lstrip()
        if stripped.startswith("{"):
            partial = self._extract_json(stripped)
        else:
            partial = self._extract_html(content)

        if partial is None or not partial.is_meaningful():
            logger.debug("No meaningful player data found in content")
            return None

        partial.name = partial.name or search_name
        partial.origin = partial.origin or self.origin
        logger.debug(f"Extracted {partial.name or 'unknown'} (overall {partial.overall})")
        return partial

    def _extract_json(self, content: str) -> Optional[PartialProfile]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.debug("Content looked like JSON but did not parse")
            return None
        if not isinstance(data, dict):
            return None

        partial = PartialProfile()
        for key, field_name in JSON_FIELD_MAP.items():
            value = data.get(key)
            if value is None or getattr(partial, field_name) is not None:
                continue
            if field_name in _INT_FIELDS:
                value = parse_int(value)
            elif field_name == "positions":
                value = _parse_positions(value)
            else:
                value = str(value).strip() or None
            setattr(partial, field_name, value)
        return partial

    def _extract_html(self, html: str) -> PartialProfile:
        soup = BeautifulSoup(html, "lxml")
        partial = PartialProfile()

        partial.overall = parse_int(_clean_text(soup.select_one(".bp-overall")))
        partial.potential = parse_int(_clean_text(soup.select_one(".bp-potential")))

        name_el = soup.select_one("h1[data-title]") or soup.select_one(".player-name")
        partial.name = _clean_text(name_el)

        badges = [
            badge.get_text(strip=True)
            for badge in soup.select(".bp-positions .badge")
        ]
        badges = [b for b in badges if b]
        if badges:
            partial.positions = badges

        partial.age = parse_int(_clean_text(soup.select_one(".bp-age")))
        partial.club = _clean_text(soup.select_one(".bp-club a"))
        partial.nationality = _clean_text(soup.select_one(".bp-nationality a"))

        return partial


def _parse_positions(value) -> Optional[list[str]]:
    if isinstance(value, list):
        positions = [str(p).strip() for p in value if str(p).strip()]
    else:
        positions = [p.strip() for p in str(value).split(",") if p.strip()]
    return positions or None
