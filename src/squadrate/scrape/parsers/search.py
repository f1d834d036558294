"""
Search results page extraction.

The remote search page lists matching players as table rows:

<tbody>
  <tr data-row="0">
    <td class="col-name">
      <a data-tooltip="Erling Haaland" href="/player/239085/erling-haaland/250001/">E. Haaland</a>
      <span class="pos">ST</span>
    </td>
    <td class="col-ae">23</td>
    <td class="col-oa"><span>91</span></td>
    <td class="col-team"><a href="/team/10/">Manchester City</a></td>
  </tr>
</tbody>

Only the first (most relevant) row is used.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from squadrate.players.profile import PartialProfile
from squadrate.scrape.parsers.profile import parse_int
from squadrate.scrape.references import BASE_URL, extract_player_id

logger = logging.getLogger(__name__)


class SearchResultsExtractor:
    """Extracts the top search hit; meaningful only with both a name and an overall."""

    origin = "search_results"

    def extract(
        self,
        content: Optional[str],
        search_name: Optional[str] = None,
    ) -> Optional[PartialProfile]:
        """
        Top hit of a search page.

        search_name stands in for the display name when the row link has none.
        """
        if not content or not content.strip():
            return None

        soup = BeautifulSoup(content, "lxml")
        row = soup.select_one("tbody tr[data-row]")
        if row is None:
            logger.debug("No player rows found in search results")
            return None

        partial = PartialProfile(origin=self.origin)

        link = row.select_one("a[data-tooltip]")
        if link is not None:
            partial.name = link.get("data-tooltip") or link.get_text(strip=True) or None
            href = link.get("href", "")
            if href:
                partial.reference_url = href if href.startswith("http") else f"{BASE_URL}{href}"
                partial.external_id = extract_player_id(href)

        overall_el = row.select_one(".col-oa span")
        if overall_el is not None:
            partial.overall = parse_int(overall_el.get_text(strip=True))

        positions = [
            el.get_text(strip=True) for el in row.select(".col-name .pos")
            if el.get_text(strip=True)
        ]
        if positions:
            partial.positions = positions

        age_el = row.select_one(".col-ae")
        if age_el is not None:
            partial.age = parse_int(age_el.get_text(strip=True))

        club_el = row.select_one(".col-team a")
        if club_el is not None:
            partial.club = club_el.get_text(strip=True) or None

        partial.name = partial.name or search_name

        if partial.name and partial.overall is not None:
            logger.debug(f"Parsed search hit: {partial.name} ({partial.overall})")
            return partial

        return None
