"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.rf_common.errors import AppError
from src.rf_common.request_log import RequestLogMiddleware
from src.rf_common.response import error_response
from src.rf_raffle.api.draws_router import router as draws_router
from src.rf_raffle.api.owners_router import router as owners_router
from src.rf_raffle.api.prizes_router import router as prizes_router
from src.rf_raffle.api.router import router as raffle_router
from src.rf_raffle.application.service import RaffleController

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: configure logging. Shutdown: abort any draw still animating."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("%s started (categories=%s)", settings.APP_NAME, settings.DEFAULT_CATEGORIES)
    yield
    app.state.raffle.cancel_draw()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Single owner of raffle state for this process
app.state.raffle = RaffleController.from_settings(settings)

app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, request)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(raffle_router, prefix="/api/v1")
app.include_router(prizes_router, prefix="/api/v1")
app.include_router(owners_router, prefix="/api/v1")
app.include_router(draws_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
