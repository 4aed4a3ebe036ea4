"""Puzzle ranking endpoints."""

from __future__ import annotations

import math
from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlmodel import Session, select

from ...core import get_session, isoformat_utc, utcnow
from ...models import Ranking
from ...services.leaderboard import ranking_path
from ...services.rankings import ranking_to_dict
from ...services.store import RankingStore
from ...services.triggers import triggers

router = APIRouter(tags=["rankings"])


MAX_PUZZLE_ID_LENGTH = 128


def _normalize_puzzle_id(puzzle_id: str) -> str:
    normalized = (puzzle_id or "").strip()
    if not normalized or "/" in normalized or len(normalized) > MAX_PUZZLE_ID_LENGTH:
        raise HTTPException(400, "Invalid puzzle id")
    return normalized


def _validate_time(value: Any) -> float | int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise HTTPException(400, "Time must be a number")
    if value < 0:
        raise HTTPException(400, "Time must be a non-negative number")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise HTTPException(400, "Time is out of range")
    return value


def _schedule_write_trigger(
    background_tasks: BackgroundTasks,
    session: Session,
    puzzle_id: str,
    before: Dict[str, Any] | None,
    after: Dict[str, Any] | None,
) -> None:
    background_tasks.add_task(
        triggers.dispatch,
        ranking_path(puzzle_id),
        session.get_bind(),
        before,
        after,
    )


@router.get("/rankings")
def list_rankings(session: Session = Depends(get_session)):
    """List every puzzle ranking."""

    rankings = session.exec(select(Ranking).order_by(Ranking.puzzle_id)).all()
    return [ranking_to_dict(ranking) for ranking in rankings]


@router.get("/rankings/{puzzle_id}")
def get_ranking(puzzle_id: str, session: Session = Depends(get_session)):
    """Get the ranking of one puzzle."""

    ranking = session.get(Ranking, _normalize_puzzle_id(puzzle_id))
    if not ranking:
        raise HTTPException(404, "Ranking not found")
    return ranking_to_dict(ranking)


@router.post("/rankings/{puzzle_id}/times", status_code=201)
def submit_time(
    puzzle_id: str,
    body: Dict[str, Any],
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
):
    """Submit a completion time; the ranking is trimmed after the response."""

    puzzle_id = _normalize_puzzle_id(puzzle_id)
    player = (str(body.get("player") or "")).strip()
    if not player:
        raise HTTPException(400, "Player required")
    time_value = _validate_time(body.get("time"))

    entry = {
        **body,
        "player": player[:40],
        "time": time_value,
    }
    entry.setdefault("submittedAt", isoformat_utc(utcnow()))

    store = RankingStore(session)
    before = store.get(puzzle_id)
    after = store.append_time(puzzle_id, entry)
    _schedule_write_trigger(background_tasks, session, puzzle_id, before, after)

    return {"ok": True, "puzzle_id": puzzle_id, "entry": entry}


@router.delete("/rankings/{puzzle_id}")
def delete_ranking(
    puzzle_id: str,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
):
    """Delete a puzzle's ranking."""

    puzzle_id = _normalize_puzzle_id(puzzle_id)
    store = RankingStore(session)
    before = store.get(puzzle_id)
    if before is None:
        raise HTTPException(404, "Ranking not found")
    store.delete(puzzle_id)
    _schedule_write_trigger(background_tasks, session, puzzle_id, before, None)
    return {"ok": True}


__all__ = ["router"]
