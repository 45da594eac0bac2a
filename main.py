"""
Shutterstock connector service — application entry point.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config.settings import config
from connectors.registry import ConnectorRegistry
from connectors.routes import router as connectors_router

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s -> %d in %.3fs", request.method, request.url.path, response.status_code, elapsed)
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Discovering connectors…")
    registry = ConnectorRegistry()
    registry.discover()
    logger.info("Connectors ready: %s", registry.list_registered())
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        lifespan=lifespan,
        title="Shutterstock Connector",
        version="1.0.0",
        description="OAuth2 authorization-code connector for the Shutterstock API.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)

    app.include_router(connectors_router, prefix="/api/v1/connectors")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
