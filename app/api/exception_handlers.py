from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.middleware.http_logging import get_request_id
from app.domain.exceptions import CompletionRequestError, ResultsFetchError

logger = logging.getLogger("app.errors")


def _log_extra(request: Request, *, error: str) -> dict[str, object]:
    route = request.scope.get("route")
    return {
        "request_id": get_request_id(request),
        "http_method": request.method,
        "request_path": getattr(route, "path", request.url.path),
        "status_code": 500,
        "error": error,
    }


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(CompletionRequestError)
    async def handle_completion_request_error(
        request: Request,
        exc: CompletionRequestError,
    ) -> JSONResponse:
        # The chained cause (upstream failure or malformed model output) goes to the log only.
        logger.error(
            "Failed to process request",
            exc_info=exc,
            extra=_log_extra(request, error="completion"),
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(ResultsFetchError)
    async def handle_results_fetch_error(
        request: Request,
        exc: ResultsFetchError,
    ) -> JSONResponse:
        logger.error(
            "Error fetching data",
            exc_info=exc,
            extra=_log_extra(request, error="results_fetch"),
        )
        return JSONResponse(
            status_code=500, content={"error": exc.message, "details": exc.details}
        )
