"""
Remote player reference URLs.

Profile URLs follow a few structural conventions:
- Canonical:  https://sofifa.com/player/239085/
- Dataset:    https://sofifa.com/player/239085/?r=250001
- Slug:       https://sofifa.com/player/239085/erling-haaland/
- Versioned:  https://sofifa.com/player/239085/erling-haaland/250001/

The numeric id is what identifies the player; the slug and version are
informational. These helpers never touch the network.
"""

import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote_plus

BASE_URL = "https://sofifa.com"

_BASIC = re.compile(r"^https://sofifa\.com/player/(\d+)")
_CANONICAL = re.compile(r"^https://sofifa\.com/player/(\d+)/?$")
_DATASET = re.compile(r"^https://sofifa\.com/player/(\d+)/\?r=\d+$")
_SLUG = re.compile(r"^https://sofifa\.com/player/(\d+)/([a-z0-9-]+)/?$")
_VERSIONED_FULL = re.compile(r"^https://sofifa\.com/player/(\d+)/([a-z0-9-]+)/(\d+)/?$")
_VERSIONED = re.compile(r"player/(\d+)/([^/]+)/(\d+)")
_PLAYER_ID = re.compile(r"player/(\d+)")


@dataclass(frozen=True)
class ReferenceParts:
    """Structural pieces of a versioned reference URL."""
    player_id: int
    slug: str
    version_id: int

    @property
    def display_name(self) -> str:
        """'erling-haaland' → 'Erling Haaland'"""
        return " ".join(part.capitalize() for part in self.slug.split("-") if part)


@dataclass(frozen=True)
class ReferenceCheck:
    """Result of validate_reference()."""
    valid: bool
    player_id: Optional[int] = None
    kind: Optional[str] = None  # 'canonical', 'dataset', 'slug', 'versioned', 'other'
    error: Optional[str] = None
    warning: Optional[str] = None


def parse_reference(url: str) -> Optional[ReferenceParts]:
    """
    Pull id, slug and version out of a versioned reference URL.

    Returns:
        ReferenceParts, or None if the URL lacks the player/<id>/<slug>/<version> shape

    Examples:
        >>> parse_reference("https://sofifa.com/player/239085/erling-haaland/250001/")
        ReferenceParts(player_id=239085, slug='erling-haaland', version_id=250001)
    """
    if not url:
        return None
    m = _VERSIONED.search(url)
    if not m:
        return None
    return ReferenceParts(
        player_id=int(m.group(1)),
        slug=m.group(2),
        version_id=int(m.group(3)),
    )


def extract_player_id(url: str) -> Optional[int]:
    """Numeric player id from any reference or search-result href."""
    if not url:
        return None
    m = _PLAYER_ID.search(url)
    return int(m.group(1)) if m else None


def validate_reference(url) -> ReferenceCheck:
    """
    Classify a reference URL.

    Every URL with a /player/<id> prefix on the expected host is valid;
    non-standard shapes carry a warning.
    """
    if not url or not isinstance(url, str):
        return ReferenceCheck(valid=False, error="URL is required and must be a string")

    basic = _BASIC.match(url)
    if not basic:
        return ReferenceCheck(valid=False, error="Invalid reference URL format")

    player_id = int(basic.group(1))

    if _CANONICAL.match(url):
        return ReferenceCheck(valid=True, player_id=player_id, kind="canonical")
    if _DATASET.match(url):
        return ReferenceCheck(valid=True, player_id=player_id, kind="dataset")
    if _SLUG.match(url):
        return ReferenceCheck(valid=True, player_id=player_id, kind="slug")
    if _VERSIONED_FULL.match(url):
        return ReferenceCheck(valid=True, player_id=player_id, kind="versioned")

    return ReferenceCheck(
        valid=True,
        player_id=player_id,
        kind="other",
        warning="Valid but non-standard format. Consider using the canonical URL.",
    )


def generate_reference_urls(player_id: int, slug: Optional[str] = None) -> dict[str, Optional[str]]:
    """
    Build the standard URL forms for a player id.

    Raises:
        ValueError: If player_id is not a positive integer
    """
    if not isinstance(player_id, int) or isinstance(player_id, bool) or player_id <= 0:
        raise ValueError("player_id must be a positive integer")

    return {
        "canonical": f"{BASE_URL}/player/{player_id}/",
        "dataset": f"{BASE_URL}/player/{player_id}/?r=250001",
        "slug": f"{BASE_URL}/player/{player_id}/{slug}/" if slug else None,
    }


def build_search_url(name: str) -> str:
    """Remote search page URL for a player name."""
    return f"{BASE_URL}/players?keyword={quote_plus(name)}"
