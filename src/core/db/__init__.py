"""
Persistence layer for Travel Bucket.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.database import Database
from core.db.memory import InMemoryPlaceRepository
from core.db.repository import PlaceRepository
from core.db.schemas.base import Base
from core.db.schemas.travel_place import TravelPlaceRecord
from core.db.sql import SqlPlaceRepository

__all__ = [
    "Base",
    "Database",
    "InMemoryPlaceRepository",
    "PlaceRepository",
    "SqlPlaceRepository",
    "TravelPlaceRecord",
]
