"""
Roster sources: the upstream collaborator enrichment reads names from.

A roster source exposes a single operation, fetch_all_players(), and is
never written to by enrichment.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Callable, Iterable, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from squadrate.db.models import RosterPlayer
from squadrate.db.session import get_session

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterRecord:
    """A squad member as handed to enrichment."""
    id: int
    name: str
    team: Optional[str] = None
    position: Optional[str] = None
    value: Optional[int] = None
    goals: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


class RosterSource(Protocol):
    def fetch_all_players(self) -> list[RosterRecord]:
        ...


class SqlRosterSource:
    """
    Reads the roster from the players table.

    Usage:
        source = SqlRosterSource()
        records = source.fetch_all_players()
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self._session_factory = session_factory

    def fetch_all_players(self) -> list[RosterRecord]:
        with get_session(self._session_factory) as session:
            rows = session.scalars(select(RosterPlayer).order_by(RosterPlayer.id)).all()
            records = [
                RosterRecord(
                    id=row.id,
                    name=row.name,
                    team=row.team,
                    position=row.position,
                    value=row.value,
                    goals=row.goals or 0,
                )
                for row in rows
            ]

        logger.info(f"Loaded {len(records)} roster players")
        return records


class StaticRosterSource:
    """In-memory roster, for scripts and tests."""

    def __init__(self, records: Iterable[RosterRecord]):
        self.records = list(records)

    def fetch_all_players(self) -> list[RosterRecord]:
        return list(self.records)
