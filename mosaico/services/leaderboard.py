"""Leaderboard trimming trigger for puzzle rankings."""

from __future__ import annotations

import logging

from sqlmodel import Session

from ..core.config import LEADERBOARD_SIZE
from .rankings import TOP_TIMES_FIELD, top_times_of, trim_top_times
from .store import RankingStore
from .triggers import WriteEvent, triggers

logger = logging.getLogger(__name__)

RANKING_PATH = "rankings/{puzzle_id}"


def ranking_path(puzzle_id: str) -> str:
    """Document path of a puzzle's ranking."""

    return f"rankings/{puzzle_id}"


@triggers.on_write(RANKING_PATH)
def update_ranking(event: WriteEvent, session: Session) -> None:
    """Keep a ranking's ``topTimes`` sorted by time and capped to the leaderboard size.

    The ranking is re-read from the store rather than taken from the event,
    so a stale event never overwrites newer data. Deleted rankings are left
    alone, and nothing is written when the list is already trimmed.
    """

    puzzle_id = event.params["puzzle_id"]
    store = RankingStore(session)
    document = store.get(puzzle_id)
    if document is None:
        logger.debug("Ranking %s no longer exists; nothing to trim", puzzle_id)
        return

    top_times = top_times_of(document)
    trimmed = trim_top_times(top_times, LEADERBOARD_SIZE)
    if trimmed == top_times:
        logger.debug("Ranking %s already trimmed (%d entries)", puzzle_id, len(top_times))
        return

    store.update(puzzle_id, {TOP_TIMES_FIELD: trimmed})
    logger.info("Trimmed ranking %s from %d to %d entries", puzzle_id, len(top_times), len(trimmed))


__all__ = ["RANKING_PATH", "ranking_path", "update_ranking"]
