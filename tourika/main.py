import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from tourika.api.routers import chat, destinations, hotels, insights, reviews, transport, travel_plans
from tourika.core.config import settings
from tourika.core.errors import APIError, error_content
from tourika.core.logging import setup_logging
from tourika.domain.repositories import InMemoryTravelRepository, TravelRepository

setup_logging()
logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException):
    details = exc.details if isinstance(exc, APIError) else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.__cause__ or exc.detail)
    return JSONResponse(status_code=exc.status_code, content=error_content(str(exc.detail), details))


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    first_error = exc.errors()[0] if exc.errors() else {}
    loc = first_error.get("loc", [])
    path = ".".join(str(item) for item in loc if item != "body")
    # Field details stay in the server log; clients get a fixed message.
    logger.warning(
        "%s %s rejected: %s (%s)", request.method, request.url.path, path, first_error.get("msg")
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Invalid request body"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Internal server error"),
    )


def create_app(repository: Optional[TravelRepository] = None) -> FastAPI:
    if repository is None:
        store = InMemoryTravelRepository()
        repository = store.seed() if settings.seed_data else store

    app = FastAPI(title=settings.project_name)
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for module in (destinations, travel_plans, hotels, transport, reviews, chat, insights):
        app.include_router(module.router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("tourika.main:app", host=settings.host, port=settings.port)
