"""CRUD service for travel places."""

import logging

from core.db.repository import PlaceRepository
from core.errors import ErrorCode, PlaceNotFoundError, ValidationError
from core.models.place import TravelPlace

logger = logging.getLogger(__name__)


class PlaceStore:
    """Create, list, fetch, update and delete travel places.

    Each operation is a single call on the injected repository and the store
    keeps no state of its own. Concurrent updates of one place are
    last-write-wins.
    """

    def __init__(self, repository: PlaceRepository) -> None:
        self._repository = repository

    def add_place(self, place: TravelPlace) -> TravelPlace:
        stored = self._repository.insert(place)
        logger.info("Added travel place %s", stored.id)
        return stored

    def get_all_places(self) -> list[TravelPlace]:
        return self._repository.find_all()

    def get_place_by_id(self, place_id: int) -> TravelPlace | None:
        """Return the place, or None when no record matches."""
        return self._repository.find_by_id(place_id)

    def update_place(self, place: TravelPlace) -> TravelPlace:
        """Replace an existing place in full.

        Unknown ids are rejected rather than inserted.
        """
        if place.id is None:
            raise ValidationError("Travel place id is required for update", code=ErrorCode.VALIDATION_ERROR)
        stored = self._repository.replace(place)
        if stored is None:
            raise PlaceNotFoundError(place.id)
        logger.info("Updated travel place %s", stored.id)
        return stored

    def delete_place_by_id(self, place_id: int) -> None:
        if self._repository.delete_by_id(place_id):
            logger.info("Deleted travel place %s", place_id)
        else:
            logger.debug("Delete of unknown travel place %s ignored", place_id)
