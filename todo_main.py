"""Main FastAPI application for the todo query API."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from api.dependencies import get_todo_repository
from api.routes import router as api_router
from core.logging_utils import configure_logging, reset_request_id, set_request_id
from core.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    provider = app.dependency_overrides.get(get_todo_repository, get_todo_repository)
    repository = provider()
    logger.info("Todo store ready with %d todos", repository.count())
    yield


app = FastAPI(
    title=settings.title,
    description="Read-only todo lookups, filtered listings and owner/category summaries",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request_token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(request_token)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with basic API info."""
    return {
        "message": settings.title,
        "endpoints": "/api/todos",
    }


app.include_router(api_router, prefix="/api")


def main() -> None:
    import uvicorn

    logger.info("Starting on 0.0.0.0:%s", settings.port)
    uvicorn.run(
        "todo_main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
