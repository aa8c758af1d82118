from __future__ import annotations
import logging
from typing import Dict
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import APP_TITLE, APP_VERSION, CORS_ALLOW_ORIGINS, LOG_LEVEL
from .core.logging_config import setup_logging
from .models import RESOURCES, SAMPLE_DATA
from .remote.memory import InMemoryRemoteSource
from .routers import resources as resources_router

logger = logging.getLogger(__name__)


def build_remotes(seed: bool = True) -> Dict[str, InMemoryRemoteSource]:
    return {name: InMemoryRemoteSource(res, SAMPLE_DATA.get(name, ()) if seed else ())
            for name, res in RESOURCES.items()}


def create_app(seed: bool = True) -> FastAPI:
    app = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        description="Mock REST remote for the users, tasks, products and books collections.",
        docs_url="/docs", redoc_url="/redoc", openapi_url="/openapi.json",
    )
    app.add_middleware(CORSMiddleware, allow_origins=CORS_ALLOW_ORIGINS or ["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])
    app.state.remotes = build_remotes(seed)

    @app.get("/healthz/live", tags=["health"])
    async def liveness() -> Dict[str, str]:
        return {"status":"live"}

    @app.get("/healthz/ready", tags=["health"])
    async def readiness() -> Dict[str, str]:
        return {"status":"ready"}

    app.include_router(resources_router.router)
    logger.info("Mock remote ready with resources: %s", ", ".join(app.state.remotes))
    return app


setup_logging(LOG_LEVEL)
app = create_app()
