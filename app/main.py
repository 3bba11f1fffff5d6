from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api.router import api_router
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables once per process; existing tables are kept
    init_db(engine)
    logger.info(
        "%s v%s started (env=%s, db=%s)",
        settings.service_name,
        app.version,
        settings.env,
        engine.url.render_as_string(hide_password=True),
    )
    yield
    engine.dispose()


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.get("/health")
    def health():
        # Simple liveness check + basic deploy info
        return {
            "status": "ok",
            "service": settings.service_name,
            "version": app.version,
            "env": settings.env,
        }

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
