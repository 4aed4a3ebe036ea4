"""Helpers for ranking documents and their top-times list."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional

from ..core.time import isoformat_utc
from ..models import Ranking

TOP_TIMES_FIELD = "topTimes"
DEFAULT_LIMIT = 10

# A score entry is a JSON object with a numeric ``time``; any other keys
# (player, submittedAt, ...) are carried through untouched.
ScoreEntry = Dict[str, Any]


def trim_top_times(entries: Iterable[ScoreEntry], limit: int = DEFAULT_LIMIT) -> List[ScoreEntry]:
    """Return the ``limit`` fastest entries, sorted ascending by time.

    The sort is stable, so entries with equal times keep their input order.
    The input is left unchanged.
    """

    if limit < 0:
        raise ValueError("limit must be non-negative")
    ordered = sorted(entries, key=lambda entry: entry["time"])
    return ordered[:limit]


def load_document(raw: Optional[str]) -> Dict[str, Any]:
    """Decode a stored document body."""

    return json.loads(raw or "{}")


def dump_document(document: Dict[str, Any]) -> str:
    """Encode a document body for storage."""

    return json.dumps(document)


def top_times_of(document: Optional[Dict[str, Any]]) -> List[ScoreEntry]:
    """Extract the top-times list from a document, empty if absent."""

    if not document:
        return []
    return list(document.get(TOP_TIMES_FIELD) or [])


def ranking_to_dict(ranking: Ranking) -> Dict[str, Any]:
    """Serialise a ranking model to API-friendly dict."""

    return {
        "puzzle_id": ranking.puzzle_id,
        "top_times": top_times_of(load_document(ranking.data_json)),
        "created_at": isoformat_utc(ranking.created_at),
        "updated_at": isoformat_utc(ranking.updated_at),
    }


__all__ = [
    "DEFAULT_LIMIT",
    "ScoreEntry",
    "TOP_TIMES_FIELD",
    "dump_document",
    "load_document",
    "ranking_to_dict",
    "top_times_of",
    "trim_top_times",
]
