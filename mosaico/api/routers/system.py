"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core import APP_VERSION, LEADERBOARD_SIZE

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "version": APP_VERSION,
        "leaderboard_size": LEADERBOARD_SIZE,
    }


__all__ = ["router"]
