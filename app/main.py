from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.comparisons.router import router as comparisons_router
from app.core.db import close_db, init_db
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.core.settings import get_settings

setup_logging()


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Settings are read at startup, not import time, so tests can point
        # DATABASE_URL at a throwaway database before the app starts.
        settings = get_settings()
        # Raises DatabaseStartupError when the DB is missing or unreachable;
        # the server must not start serving without it.
        await init_db(app=app, database_url=settings.sqlalchemy_database_url)
        yield
        await close_db(app=app)

    app = FastAPI(
        title="Stack Overflow Answer Judge",
        description=(
            "Relays prompts to an OpenAI chat-completion model, asks it to rate three "
            "Stack Overflow answers to a question, and stores the ratings.\n\n"
            "- `result` is derived locally from the three ratings (good/mid/bad).\n"
            "- A failed database insert is logged but does not fail the request."
        ),
        lifespan=lifespan,
        openapi_tags=[
            {"name": "completions", "description": "Plain prompt relay."},
            {"name": "comparisons", "description": "Rate and store three answers to a question."},
            {"name": "results", "description": "Read back stored comparisons."},
            {"name": "monitoring", "description": "Prometheus-compatible metrics endpoint."},
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(metrics_router)
    app.include_router(comparisons_router)
    return app


app = create_app()
