"""
Business services for Travel Bucket.

- place_store.py: CRUD over travel places, delegating to a PlaceRepository
- migration.py: Alembic schema upgrades
"""

from core.services.place_store import PlaceStore

__all__ = ["PlaceStore"]
