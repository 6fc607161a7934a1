"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_error_handlers, register_request_logging, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    DOCS_ENABLED,
    HOST,
    PORT,
    configure_logging,
    init_db,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(reset=DB_RESET)
    logger.info("Course store ready")
    yield


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Course Management API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/swagger" if DOCS_ENABLED else None,
        redoc_url=None,
        openapi_url="/openapi.json" if DOCS_ENABLED else None,
    )

    if ALLOWED_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_CORS_ORIGINS,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    register_request_logging(app)
    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("course_api.app:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
