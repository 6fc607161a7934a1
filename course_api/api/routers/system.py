"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["system"])

WELCOME_MESSAGE = (
    "Course Management API: Use REST API endpoints or Swagger UI to interact "
    "with the service."
)


@router.get(
    "/",
    name="Root",
    summary="API Root",
    description="Returns a welcome message for the Course Management API.",
    response_class=PlainTextResponse,
)
def root() -> str:
    return WELCOME_MESSAGE


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


__all__ = ["WELCOME_MESSAGE", "router"]
