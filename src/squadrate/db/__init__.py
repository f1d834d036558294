"""
Database module for squadrate.

Provides the roster ORM model, session management and the roster
sources enrichment reads from.

Usage:
    from squadrate.db import SqlRosterSource

    records = SqlRosterSource().fetch_all_players()
"""

from squadrate.db.models import Base, RosterPlayer
from squadrate.db.roster import RosterRecord, RosterSource, SqlRosterSource, StaticRosterSource
from squadrate.db.session import get_engine, get_session, get_session_factory

__all__ = [
    # Base
    "Base",
    # Models
    "RosterPlayer",
    # Roster sources
    "RosterRecord",
    "RosterSource",
    "SqlRosterSource",
    "StaticRosterSource",
    # Session
    "get_engine",
    "get_session",
    "get_session_factory",
]
