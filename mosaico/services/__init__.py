"""Service layer helpers."""

from .leaderboard import ranking_path, update_ranking
from .rankings import ranking_to_dict, trim_top_times
from .store import RankingNotFoundError, RankingStore
from .triggers import WriteEvent, triggers

__all__ = [
    "RankingNotFoundError",
    "RankingStore",
    "WriteEvent",
    "ranking_path",
    "ranking_to_dict",
    "trim_top_times",
    "triggers",
    "update_ranking",
]
