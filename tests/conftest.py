"""Shared test fixtures for Travel Bucket."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def sqlite_session_factory():
    """Session factory over a fresh in-memory SQLite database."""
    from core.db import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def sql_repository(sqlite_session_factory):
    from core.db import SqlPlaceRepository

    return SqlPlaceRepository(sqlite_session_factory)


@pytest.fixture
def memory_repository():
    from core.db import InMemoryPlaceRepository

    return InMemoryPlaceRepository()


@pytest.fixture(params=["sql", "memory"])
def place_store(request):
    """PlaceStore over each repository implementation."""
    from core.services import PlaceStore

    repository = request.getfixturevalue(f"{request.param}_repository")
    return PlaceStore(repository)


# PostgreSQL fixtures
@pytest.fixture
def pg_database():
    """Provide a connected Database against the configured PostgreSQL."""
    from core.config import get_config
    from core.db import Base, Database

    database = Database(get_config())
    database.connect()
    Base.metadata.create_all(database.engine)
    yield database

    with database.engine.begin() as conn:
        conn.exec_driver_sql("DELETE FROM travel_places")
    database.disconnect()
