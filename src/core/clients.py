"""Lazy-initialized database and store — reused across warm Lambda invocations."""

from functools import lru_cache

from core.config import get_config
from core.db import Database, InMemoryPlaceRepository, PlaceRepository, SqlPlaceRepository
from core.errors import ErrorCode, TravelBucketError
from core.services.place_store import PlaceStore


@lru_cache(maxsize=1)
def get_database() -> Database:
    database = Database(get_config())
    database.connect()
    return database


def get_place_repository() -> PlaceRepository:
    backend = get_config().place_backend
    if backend == "memory":
        return InMemoryPlaceRepository()
    if backend == "sql":
        return SqlPlaceRepository(get_database().session_factory)
    raise TravelBucketError(f"Unknown PLACE_BACKEND: {backend}", code=ErrorCode.INTERNAL_ERROR)


@lru_cache(maxsize=1)
def get_place_store() -> PlaceStore:
    return PlaceStore(get_place_repository())
