"""Aggregate API routers."""

from fastapi import APIRouter

from .rankings import router as rankings_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    rankings_router,
)

__all__ = ["ALL_ROUTERS"]
