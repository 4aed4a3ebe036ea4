"""Database model for per-puzzle ranking documents."""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Ranking(SQLModel, table=True):
    """Ranking document for one puzzle, body stored as JSON text."""

    puzzle_id: str = ORMField(primary_key=True, max_length=128)
    data_json: str = "{}"
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Ranking"]
