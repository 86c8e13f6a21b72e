"""FastAPI application serving the book API."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import JSONResponse

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.api.http.routers.book import router as book_router
from src.bookstore.api.http.routers.health import router as health_router
from src.bookstore.api.utils.app_startup import configure_logging
from src.bookstore.core.services import DbManageService, DbSessionService
from src.bookstore.runtime.context import get_config

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the database engine for the lifetime of the process."""
    database_service = DbSessionService()
    DbManageService(database_service.engine).create_all()
    app.state.app_dependencies = ApplicationDependencies(database_service=database_service)
    logger.info("Bookstore started ({})", get_config().app.environment)
    try:
        yield
    finally:
        database_service.dispose()
        logger.info("Bookstore stopped")


app = FastAPI(title="Bookstore", lifespan=lifespan)
app.include_router(health_router)
app.include_router(book_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Tag every log line of a request with its id and time the request."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    started = time.perf_counter()

    with logger.contextualize(request_id=request_id):
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("{} {} failed", request.method, request.url.path)
            response = JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
            )
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "{} {} -> {} in {:.1f} ms",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )

    response.headers.setdefault("X-Request-ID", request_id)
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_config().app.host, port=get_config().app.port, access_log=False)
