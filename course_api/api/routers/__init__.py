"""Aggregate API routers."""

from fastapi import APIRouter

from .courses import router as courses_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    courses_router,
)

__all__ = ["ALL_ROUTERS"]
