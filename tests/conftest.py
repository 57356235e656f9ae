from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.engine import Engine

from fortune_service.db import fortune, init_db, make_engine
from fortune_service.main import create_app as create_fortune_app
from fortune_ui.config import Settings

SAMPLE_FORTUNES = [
    {"id": 1, "text": "A dream you have will come true."},
    {"id": 2, "text": "Land is always on the mind of a flying bird."},
    {"id": 3, "text": "Your shoes will make you happy today."},
]


@pytest.fixture
def empty_engine() -> Iterator[Engine]:
    """In-memory SQLite engine with the fortune table and no rows."""
    engine = make_engine("sqlite://")
    init_db(engine, seed=False)
    yield engine
    engine.dispose()


@pytest.fixture
def engine(empty_engine: Engine) -> Engine:
    with empty_engine.begin() as conn:
        conn.execute(insert(fortune), SAMPLE_FORTUNES)
    return empty_engine


@pytest.fixture
def store_client(engine: Engine) -> Iterator[TestClient]:
    with TestClient(create_fortune_app(engine=engine, seed=False)) as client:
        yield client


@pytest.fixture
def ui_settings() -> Settings:
    return Settings(
        greeting="Hello from the Fortune Teller!",
        fortune_service_url="http://fortune",
        fortune_timeout=0.2,
    )
