# user_manager/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_manager.api.v1.api import api_router
from user_manager.api.v1.responses import register_exception_handlers
from user_manager.core.config import settings
from user_manager.core.logger import setup_logging
from user_manager.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_migrate:
        init_db()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started")
    yield


def create_application() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    origins = [str(origin).rstrip("/") for origin in settings.backend_cors_origins]
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/healthz", tags=["health"])
    def health_check():
        return {"status": "ok"}

    return app


app = create_application()
