from collections.abc import Generator
from dataclasses import dataclass

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from brewtuner import models  # noqa: F401
from brewtuner.api.catalog import router as catalog_router
from brewtuner.api.grind_logs import router as grind_log_router
from brewtuner.api.health import router as health_router
from brewtuner.api.profiles import router as profile_router
from brewtuner.core.config import settings
from brewtuner.core.database import Base, get_db
from brewtuner.core.error_handlers import register_exception_handlers
from brewtuner.core.request_logging import RequestLoggingMiddleware
from brewtuner.models.catalog import Bean, BrewMethod, Grinder, Roaster
from brewtuner.services import catalog


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@dataclass
class Equipment:
    roaster: Roaster
    bean: Bean
    grinder: Grinder
    brew_method: BrewMethod


@pytest.fixture
def equipment(db: Session) -> Equipment:
    roaster = catalog.create_roaster(db, "Square Mile")
    return Equipment(
        roaster=roaster,
        bean=catalog.create_bean(db, roaster.id, "Red Brick"),
        grinder=catalog.create_grinder(db, "Niche Zero"),
        brew_method=catalog.create_brew_method(db, "Espresso"),
    )


@pytest.fixture
def client(session_factory: sessionmaker[Session]) -> Generator[TestClient, None, None]:
    app = FastAPI(title="BrewTuner API - Test")
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(catalog_router, prefix=settings.api_prefix)
    app.include_router(profile_router, prefix=settings.api_prefix)
    app.include_router(grind_log_router, prefix=settings.api_prefix)

    def override_get_db() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
