"""
Data structures shared by every resolution tier.

- Query / FetchTarget: immutable inputs
- CanonicalProfile: a fully populated rating record
- PartialProfile: whatever a remote source or extractor could recover
- ResolutionResult: a profile (or explicit not-found) plus provenance

Core attributes and skills on a CanonicalProfile are never absent: they
are filled with defaults when a source does not provide them.
"""

from dataclasses import asdict, dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Optional


# Default used for any missing rating (core attribute or skill)
DEFAULT_RATING = 65

CORE_ATTRIBUTES = ("pace", "shooting", "passing", "dribbling", "defending", "physical")

# The detailed skill map always carries exactly these keys
SKILL_NAMES = (
    "crossing", "finishing", "headingAccuracy", "shortPassing", "volleys",
    "curve", "fkAccuracy", "longPassing", "ballControl", "acceleration",
    "sprintSpeed", "agility", "reactions", "balance", "shotPower",
    "jumping", "stamina", "strength", "longShots", "aggression",
    "interceptions", "positioning", "vision", "penalties", "composure",
)


class ProfileSource:
    """Provenance tags marking which tier produced a result."""

    CACHE = "cache"
    DATABASE = "database"
    DATABASE_FUZZY = "database_fuzzy"
    LIVE_ENHANCED = "live_enhanced"
    REMOTE_SEARCH = "remote_search"
    NOT_FOUND = "not_found"

    @staticmethod
    def fallback(tier: str) -> str:
        """Tag for a dataset result whose live enhancement failed."""
        return f"{tier}_fallback"


def clamp_rating(value: Any, default: int = DEFAULT_RATING) -> int:
    """Coerce a rating into the 0-99 range, falling back to default."""
    try:
        rating = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return max(0, min(99, rating))


def default_skills() -> dict[str, int]:
    return {name: DEFAULT_RATING for name in SKILL_NAMES}


@dataclass(frozen=True)
class Query:
    """
    One name to resolve.

    allow_network permits the live enhancement tier; stable_id (the
    remote player id, when the caller knows it) enables the cache tier.
    """
    name: str
    allow_network: bool = False
    stable_id: Optional[int] = None


@dataclass(frozen=True)
class FetchTarget:
    """What the fetch strategies are asked to retrieve."""
    reference: str
    external_id: Optional[int] = None
    name: Optional[str] = None


@dataclass
class CanonicalProfile:
    """Resolved rating record for one player."""

    name: str
    overall: int = DEFAULT_RATING
    potential: int = DEFAULT_RATING
    positions: list[str] = field(default_factory=lambda: ["Unknown"])

    # Physical metadata
    age: Optional[int] = None
    height_cm: int = 175
    weight_kg: int = 70
    preferred_foot: str = "Right"
    weak_foot: int = 3
    skill_moves: int = 3
    work_rate: str = "Medium/Medium"

    nationality: str = "Unknown"
    club: str = "Unknown"
    value: Optional[str] = None
    wage: Optional[str] = None
    contract: Optional[str] = None

    # Core attributes (0-99)
    pace: int = DEFAULT_RATING
    shooting: int = DEFAULT_RATING
    passing: int = DEFAULT_RATING
    dribbling: int = DEFAULT_RATING
    defending: int = DEFAULT_RATING
    physical: int = DEFAULT_RATING

    skills: dict[str, int] = field(default_factory=default_skills)

    external_id: Optional[int] = None
    reference_url: Optional[str] = None

    # Provenance
    source: str = ProfileSource.DATABASE
    resolved_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.overall = clamp_rating(self.overall)
        self.potential = clamp_rating(self.potential, default=self.overall)
        for attribute in CORE_ATTRIBUTES:
            setattr(self, attribute, clamp_rating(getattr(self, attribute)))
        # Fill every skill, keep only known keys
        self.skills = {
            skill: clamp_rating(self.skills.get(skill)) for skill in SKILL_NAMES
        }

    @property
    def core_attributes(self) -> dict[str, int]:
        return {attribute: getattr(self, attribute) for attribute in CORE_ATTRIBUTES}

    def to_dict(self) -> dict:
        data = asdict(self)
        data["resolved_at"] = self.resolved_at.isoformat() if self.resolved_at else None
        return data

    def __repr__(self) -> str:
        return f"<CanonicalProfile(name='{self.name}', overall={self.overall}, source='{self.source}')>"


@dataclass
class PartialProfile:
    """
    Best-effort profile fragment from a remote source.

    Every field is optional. Fields left as None never overwrite
    dataset values when merged.
    """

    name: Optional[str] = None
    overall: Optional[int] = None
    potential: Optional[int] = None
    positions: Optional[list[str]] = None
    age: Optional[int] = None
    club: Optional[str] = None
    nationality: Optional[str] = None
    external_id: Optional[int] = None
    reference_url: Optional[str] = None
    version_id: Optional[int] = None
    origin: Optional[str] = None  # which extractor/strategy produced this

    def is_meaningful(self) -> bool:
        """A fragment counts only if it recovered an overall rating or a name."""
        return self.overall is not None or bool(self.name)

    def merge_into(self, profile: CanonicalProfile) -> CanonicalProfile:
        """
        Return a copy of profile with every non-None field of this fragment applied.

        The fragment wins on conflict. The dataset display name is kept:
        remote pages often show a shortened name.
        """
        updates = {}
        for f in fields(self):
            if f.name in ("name", "version_id", "origin"):
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == "positions" and not value:
                continue
            updates[f.name] = value
        return replace(profile, **updates)

    def to_canonical(self, fallback_name: str = "") -> CanonicalProfile:
        """Promote a fragment to a full profile, defaulting everything it lacks."""
        overall = self.overall if self.overall is not None else DEFAULT_RATING
        profile = CanonicalProfile(
            name=self.name or fallback_name,
            overall=overall,
            potential=self.potential if self.potential is not None else overall,
        )
        return self.merge_into(profile)


@dataclass
class ResolutionResult:
    """
    Outcome of resolving one Query.

    not found is a normal value (found=False, profile=None); callers decide
    whether to synthesize a placeholder.
    """

    query: Query
    found: bool
    profile: Optional[CanonicalProfile] = None
    source: str = ProfileSource.NOT_FOUND
    matched_name: Optional[str] = None
    match_score: Optional[float] = None
    failure_reason: Optional[str] = None
    live_attempted: bool = False
    resolved_at: Optional[datetime] = None

    @classmethod
    def not_found(cls, query: Query, resolved_at: Optional[datetime] = None) -> "ResolutionResult":
        return cls(query=query, found=False, resolved_at=resolved_at)

    def to_dict(self) -> dict:
        return {
            "search_name": self.query.name,
            "found": self.found,
            "source": self.source,
            "matched_name": self.matched_name,
            "match_score": self.match_score,
            "failure_reason": self.failure_reason,
            "live_attempted": self.live_attempted,
            "resolved_at": self.resolved_at.isoformat() if self.resolved_at else None,
            "profile": self.profile.to_dict() if self.profile else None,
        }

    def __repr__(self) -> str:
        return f"<ResolutionResult('{self.query.name}', found={self.found}, source='{self.source}')>"
