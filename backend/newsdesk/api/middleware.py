"""
HTTP middleware: request logging and crash recovery
"""
import time

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import structlog

logger = structlog.get_logger()


def register_middleware(app: FastAPI) -> None:
    """Attach the request logger / crash guard to ``app``."""

    @app.middleware("http")
    async def log_and_recover(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error while serving request",
                method=request.method,
                path=request.url.path,
            )
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal Server Error"},
            )

        logger.info(
            "Request served",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
