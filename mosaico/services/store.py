"""Document-style access to ranking records.

Rankings are addressed by puzzle id and read/written as whole JSON
documents, the way a document database would expose them. The leaderboard
trigger relies only on ``get`` and ``update``; the remaining operations back
the HTTP surface.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from ..core.time import utcnow
from ..models import Ranking
from .rankings import TOP_TIMES_FIELD, ScoreEntry, dump_document, load_document, top_times_of


class RankingNotFoundError(LookupError):
    """Raised when updating a ranking that does not exist."""

    def __init__(self, puzzle_id: str) -> None:
        super().__init__(f"Ranking not found: {puzzle_id}")
        self.puzzle_id = puzzle_id


class RankingStore:
    """Get/update/delete ranking documents through a SQLModel session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, puzzle_id: str) -> Optional[Dict[str, Any]]:
        """Return the current document body, or ``None`` when missing."""

        ranking = self.session.get(Ranking, puzzle_id)
        if ranking is None:
            return None
        # Re-read from the database; another writer may have committed.
        self.session.refresh(ranking)
        return load_document(ranking.data_json)

    def exists(self, puzzle_id: str) -> bool:
        return self.session.get(Ranking, puzzle_id) is not None

    def update(self, puzzle_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``fields`` into an existing document and commit."""

        ranking = self.session.get(Ranking, puzzle_id)
        if ranking is None:
            raise RankingNotFoundError(puzzle_id)
        document = load_document(ranking.data_json)
        document.update(fields)
        self._write(ranking, document)
        return document

    def set(self, puzzle_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Create or replace a whole document."""

        ranking = self.session.get(Ranking, puzzle_id)
        if ranking is None:
            ranking = Ranking(puzzle_id=puzzle_id)
        self._write(ranking, dict(document))
        return document

    def append_time(self, puzzle_id: str, entry: ScoreEntry) -> Dict[str, Any]:
        """Append a score entry to ``topTimes``, creating the ranking if needed."""

        ranking = self.session.get(Ranking, puzzle_id)
        if ranking is None:
            ranking = Ranking(puzzle_id=puzzle_id)
            document: Dict[str, Any] = {}
        else:
            document = load_document(ranking.data_json)
        document[TOP_TIMES_FIELD] = [*top_times_of(document), entry]
        self._write(ranking, document)
        return document

    def delete(self, puzzle_id: str) -> bool:
        ranking = self.session.get(Ranking, puzzle_id)
        if ranking is None:
            return False
        self.session.delete(ranking)
        self.session.commit()
        return True

    def list_ids(self) -> List[str]:
        return list(self.session.exec(select(Ranking.puzzle_id).order_by(Ranking.puzzle_id)).all())

    def _write(self, ranking: Ranking, document: Dict[str, Any]) -> None:
        ranking.data_json = dump_document(document)
        ranking.updated_at = utcnow()
        self.session.add(ranking)
        self.session.commit()
        self.session.refresh(ranking)


__all__ = ["RankingNotFoundError", "RankingStore"]
