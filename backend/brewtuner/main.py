import logging

from fastapi import FastAPI

from brewtuner import models  # noqa: F401
from brewtuner.api.catalog import router as catalog_router
from brewtuner.api.grind_logs import router as grind_log_router
from brewtuner.api.health import router as health_router
from brewtuner.api.profiles import router as profile_router
from brewtuner.core.config import settings
from brewtuner.core.database import Base, engine
from brewtuner.core.error_handlers import register_exception_handlers
from brewtuner.core.request_logging import RequestLoggingMiddleware


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(title=settings.app_name)
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(catalog_router, prefix=settings.api_prefix)
    app.include_router(profile_router, prefix=settings.api_prefix)
    app.include_router(grind_log_router, prefix=settings.api_prefix)
    return app


app = create_app()
