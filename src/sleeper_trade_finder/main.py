"""
Sleeper Trade Finder API

FastAPI application serving roster needs and ranked trade opportunities.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sleeper_trade_finder import __version__
from sleeper_trade_finder.api.dependencies import ClientManager
from sleeper_trade_finder.api.routes import leagues, trade_finder, viz
from sleeper_trade_finder.config import get_settings
from sleeper_trade_finder.exceptions import InvalidRosterError, TradeFinderError

logger = logging.getLogger(__name__)

ROUTERS = [
    (leagues.router, "/api/leagues", "Leagues"),
    (trade_finder.router, "/api/trade-finder", "Trade Finder"),
    (viz.router, "/api/viz", "Visualization"),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"🏈 Sleeper Trade Finder API v{__version__}")
    print(f"   Up to {settings.max_opportunities} trades, "
          f"{settings.per_opponent_quota} reserved per opponent")

    yield

    await ClientManager.close_client()
    print("👋 Sleeper Trade Finder API stopped")


async def trade_finder_error_handler(request: Request, exc: TradeFinderError) -> JSONResponse:
    status = 404 if isinstance(exc, InvalidRosterError) else 422
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content={"detail": exc.message})


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TradeFinderError, trade_finder_error_handler)

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "version": __version__}

    @app.get("/", tags=["Root"])
    async def root():
        """API name, version, and route prefixes."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "endpoints": {tag: prefix for _, prefix, tag in ROUTERS},
        }

    for router, prefix, tag in ROUTERS:
        app.include_router(router, prefix=prefix, tags=[tag])

    return app


app = create_app()


def run():
    """Serve the API with uvicorn (``sleeper-trades-api``)."""
    settings = get_settings()
    uvicorn.run(
        "sleeper_trade_finder.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
