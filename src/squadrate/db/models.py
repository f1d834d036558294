"""
SQLAlchemy ORM models for the roster store.

The roster belongs to the squad management side of the application;
enrichment only reads it. One table:

- players: Squad members with team, position, market value and goals
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class RosterPlayer(Base):
    """
    One squad member.

    The name is free text typed by the user, so it rarely matches the
    dataset exactly; resolution goes through name normalization and
    fuzzy matching.
    """
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    team: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    position: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    value: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    goals: Mapped[int] = mapped_column(Integer, default=0)

    def __repr__(self) -> str:
        return f"<RosterPlayer(id={self.id}, name='{self.name}', team='{self.team}')>"
