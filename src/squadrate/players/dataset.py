"""
Local player rating dataset.

Combines two sources into one lookup table keyed by normalized name:
- The built-in reference table (players/reference_data.py)
- An optional on-disk JSON export, loaded lazily on first use

The on-disk export uses its own schema (snake_case names, skills grouped
by category, birth year instead of age in older exports), so every record
is translated into a CanonicalProfile through explicit mapping tables
before it is merged. On-disk entries win on name collision.
"""

import asyncio
import json
import logging
import math
from datetime import date
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence

from squadrate.config import settings
from squadrate.errors import DatasetLoadError
from squadrate.players.names import normalize_name
from squadrate.players.profile import (
    CORE_ATTRIBUTES,
    DEFAULT_RATING,
    CanonicalProfile,
    default_skills,
)
from squadrate.players.reference_data import REFERENCE_PLAYERS
from squadrate.scrape.references import validate_reference

logger = logging.getLogger(__name__)


# On-disk skill names → our skill keys. Names not listed here are ignored.
SKILL_NAME_MAP: dict[str, str] = {
    # Direct mappings
    "crossing": "crossing",
    "finishing": "finishing",
    "volleys": "volleys",
    "curve": "curve",
    "vision": "vision",
    "acceleration": "acceleration",
    "agility": "agility",
    "reactions": "reactions",
    "balance": "balance",
    "jumping": "jumping",
    "stamina": "stamina",
    "strength": "strength",
    "aggression": "aggression",
    "interceptions": "interceptions",
    "positioning": "positioning",
    "penalties": "penalties",
    "composure": "composure",
    # Name translations
    "short_passing": "shortPassing",
    "long_passing": "longPassing",
    "fk_accuracy": "fkAccuracy",
    "ball_control": "ballControl",
    "sprint_speed": "sprintSpeed",
    "shot_power": "shotPower",
    "long_shots": "longShots",
    "heading_accuracy": "headingAccuracy",
    # Closest equivalents
    "defensive_awareness": "interceptions",
    "dribbling": "ballControl",
}

# Defaults for record fields the export leaves out
RECORD_DEFAULTS = {
    "height_cm": 175,
    "weight_kg": 70,
    "preferred_foot": "Right",
    "weak_foot": 3,
    "skill_moves": 3,
    "work_rate": "Medium/Medium",
    "nationality": "Unknown",
}

REFERENCE_URL_TEMPLATE = "https://sofifa.com/player/{id}/"


def _or_default(value, default):
    # Missing, null and zero/empty all fall back
    return value if value else default


def _is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def normalize_age(raw_age, today: Optional[date] = None) -> Optional[int]:
    """
    Turn the export's age field into an age.

    Older exports store a year of birth (e.g. 1999) instead of an age.
    """
    try:
        age = int(raw_age)
    except (TypeError, ValueError, OverflowError):
        return None
    if 1900 < age < 2010:
        age = (today or date.today()).year - age
    return age


def parse_positions(raw_positions) -> list[str]:
    """'ST, CF' → ['ST', 'CF']; lists pass through; missing → ['Unknown']."""
    if isinstance(raw_positions, list):
        positions = [str(p).strip() for p in raw_positions if str(p).strip()]
    elif isinstance(raw_positions, str):
        positions = [p.strip() for p in raw_positions.split(",") if p.strip()]
    else:
        positions = []
    return positions or ["Unknown"]


def flatten_detailed_skills(detailed_skills) -> dict[str, int]:
    """
    Flatten category-grouped skills into the flat skill map.

    {"attacking": {"finishing": 94, "short_passing": 80}, ...}
    → {"finishing": 94, "shortPassing": 80, <every other skill>: 65}
    """
    skills = default_skills()
    if not isinstance(detailed_skills, dict):
        return skills

    for category in detailed_skills.values():
        if not isinstance(category, dict):
            continue
        for skill_name, value in category.items():
            mapped = SKILL_NAME_MAP.get(skill_name)
            if mapped and _is_finite_number(value):
                skills[mapped] = int(value)

    return skills


def translate_record(record: dict, today: Optional[date] = None) -> CanonicalProfile:
    """
    Translate one on-disk export record into a CanonicalProfile.

    Raises:
        ValueError: If the record has no usable name
    """
    if not isinstance(record, dict):
        raise ValueError("record is not an object")
    name = str(record.get("name") or "").strip()
    if not name:
        raise ValueError("record has no name")

    main_attributes = record.get("main_attributes")
    if not isinstance(main_attributes, dict):
        main_attributes = {}

    overall = _or_default(record.get("overall"), DEFAULT_RATING)

    external_id = None
    try:
        external_id = int(record.get("id"))
    except (TypeError, ValueError, OverflowError):
        pass

    return CanonicalProfile(
        name=name,
        overall=overall,
        potential=_or_default(record.get("potential"), overall),
        positions=parse_positions(record.get("positions")),
        age=normalize_age(record.get("age"), today),
        height_cm=_or_default(record.get("height_cm"), RECORD_DEFAULTS["height_cm"]),
        weight_kg=_or_default(record.get("weight_kg"), RECORD_DEFAULTS["weight_kg"]),
        preferred_foot=_or_default(record.get("preferred_foot"), RECORD_DEFAULTS["preferred_foot"]),
        weak_foot=_or_default(record.get("weak_foot"), RECORD_DEFAULTS["weak_foot"]),
        skill_moves=_or_default(record.get("skill_moves"), RECORD_DEFAULTS["skill_moves"]),
        work_rate=_or_default(record.get("work_rate"), RECORD_DEFAULTS["work_rate"]),
        nationality=_or_default(record.get("nationality"), RECORD_DEFAULTS["nationality"]),
        skills=flatten_detailed_skills(record.get("detailed_skills")),
        external_id=external_id,
        reference_url=REFERENCE_URL_TEMPLATE.format(id=external_id) if external_id else None,
        **{
            attribute: _or_default(main_attributes.get(attribute), DEFAULT_RATING)
            for attribute in CORE_ATTRIBUTES
        },
    )


def read_dataset_file(path: Path) -> list:
    """
    Read one candidate dataset file.

    Raises:
        DatasetLoadError: If the file is missing, unreadable, not JSON,
                          or not a JSON array
    """
    if not path.is_file():
        raise DatasetLoadError(str(path), "not found")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetLoadError(str(path), f"unreadable: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetLoadError(str(path), f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise DatasetLoadError(str(path), "does not contain a JSON array")
    return data


class LocalDatasetStore:
    """
    In-memory lookup table of player profiles keyed by normalized name.

    Usage:
        store = LocalDatasetStore()
        await store.ensure_loaded()
        profile = store.get_exact(normalize_name("Kylian Mbappe"))
    """

    def __init__(
        self,
        reference_players: Optional[dict[str, dict]] = None,
        candidate_paths: Optional[Sequence[str]] = None,
        base_dir: Optional[str] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Args:
            reference_players: Built-in table (defaults to REFERENCE_PLAYERS)
            candidate_paths: Relative on-disk dataset paths, tried in order
            base_dir: Directory the candidate paths are relative to
            today: Date provider used to convert birth years to ages
        """
        self.candidate_paths = list(
            candidate_paths if candidate_paths is not None else settings.dataset_paths
        )
        self.base_dir = Path(base_dir if base_dir is not None else settings.dataset_base_dir)
        self._today = today or date.today

        self._players: dict[str, CanonicalProfile] = {}
        if reference_players is None:
            reference_players = REFERENCE_PLAYERS
        for display_name, data in reference_players.items():
            self._players[normalize_name(display_name)] = CanonicalProfile(name=display_name, **data)

        self.load_attempted = False
        self.loaded_path: Optional[Path] = None
        self.loaded_count = 0
        self._load_lock = asyncio.Lock()

    # =========================================================================
    # Loading
    # =========================================================================

    async def ensure_loaded(self) -> bool:
        """
        Load the on-disk dataset once per store.

        Safe to call concurrently and repeatedly; only the first call reads
        from disk. A failure leaves the built-in entries in place.

        Returns:
            True if an on-disk dataset is merged in
        """
        if self.load_attempted:
            return self.loaded_path is not None

        async with self._load_lock:
            if not self.load_attempted:
                try:
                    await asyncio.to_thread(self._load_first_available)
                except Exception as e:
                    logger.error(f"Dataset load failed, using built-in players only: {e}")
                finally:
                    self.load_attempted = True

        return self.loaded_path is not None

    def _load_first_available(self) -> None:
        for relative in self.candidate_paths:
            path = self.base_dir / relative
            try:
                records = read_dataset_file(path)
            except DatasetLoadError as e:
                logger.debug(f"Dataset candidate skipped: {e}")
                continue

            self.loaded_path = path
            self.loaded_count = self._merge_records(records)
            logger.info(
                f"Loaded {self.loaded_count}/{len(records)} players from {path} "
                f"({len(self._players)} total)"
            )
            return

        logger.warning(
            f"No dataset file found in {self.base_dir} "
            f"(tried {', '.join(self.candidate_paths)}); using built-in players only"
        )

    def _merge_records(self, records: list) -> int:
        merged = 0
        today = self._today()
        for record in records:
            try:
                profile = translate_record(record, today)
            except Exception as e:
                logger.warning(f"Skipping dataset record: {e}")
                continue
            self._players[normalize_name(profile.name)] = profile
            merged += 1
        return merged

    # =========================================================================
    # Lookups
    # =========================================================================

    def get_exact(self, normalized_name: str) -> Optional[CanonicalProfile]:
        return self._players.get(normalized_name)

    def entries(self) -> Iterator[tuple[str, CanonicalProfile]]:
        """(normalized_name, profile) pairs, the substrate for fuzzy matching."""
        return iter(list(self._players.items()))

    def names(self) -> list[str]:
        """Display names of every player in the table."""
        return [profile.name for profile in self._players.values()]

    def has_player(self, name: str) -> bool:
        return normalize_name(name) in self._players

    def add_player(self, name: str, profile: CanonicalProfile) -> None:
        self._players[normalize_name(name)] = profile

    def find_by_external_id(self, external_id: int) -> Optional[CanonicalProfile]:
        for profile in self._players.values():
            if profile.external_id == external_id:
                return profile
        return None

    def players_by_club(self, club: str) -> list[CanonicalProfile]:
        """Players whose club contains the given text (case-insensitive)."""
        needle = club.lower()
        return [
            profile for profile in self._players.values()
            if profile.club and needle in profile.club.lower()
        ]

    def __len__(self) -> int:
        return len(self._players)

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def validate_references(self) -> dict[str, list]:
        """
        Check the reference URL of every player.

        Returns:
            Dict with 'valid' (name, url, id), 'invalid' (name, url, error)
            and 'missing' (names without a reference) lists
        """
        results = {"valid": [], "invalid": [], "missing": []}
        for profile in self._players.values():
            if not profile.reference_url:
                results["missing"].append(profile.name)
                continue
            check = validate_reference(profile.reference_url)
            if check.valid:
                results["valid"].append({
                    "name": profile.name,
                    "url": profile.reference_url,
                    "id": check.player_id,
                })
            else:
                results["invalid"].append({
                    "name": profile.name,
                    "url": profile.reference_url,
                    "error": check.error,
                })

        logger.info(
            f"Reference check: {len(results['valid'])} valid, "
            f"{len(results['invalid'])} invalid, {len(results['missing'])} missing"
        )
        return results

    def coverage(self) -> dict:
        total = len(self._players)
        with_reference = sum(1 for p in self._players.values() if p.reference_url)
        return {
            "total_players": total,
            "players_with_reference": with_reference,
            "reference_coverage": f"{(with_reference / total * 100) if total else 0:.1f}%",
            "loaded_path": str(self.loaded_path) if self.loaded_path else None,
        }
