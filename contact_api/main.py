from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_api.config import get_settings
from contact_api.database.session import init_db
from contact_api.errors import register_exception_handlers
from contact_api.routers import admin_router, contact_router, feedback_router, health_router
from contact_api.utils.logging import logger, setup_logging


settings = get_settings()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(contact_router)
    app.include_router(feedback_router)
    app.include_router(admin_router)

    @app.on_event("startup")
    def startup() -> None:
        setup_logging(settings.log_level)
        init_db()
        logger.info("%s started (%s)", settings.app_name, settings.environment)

    return app


app = create_app()
