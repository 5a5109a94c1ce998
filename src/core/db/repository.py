from abc import ABC, abstractmethod

from core.models.place import TravelPlace


class PlaceRepository(ABC):
    """Persistence backend for travel places.

    Implementations own durable storage and id assignment. Every method is a
    single backend operation.
    """

    @abstractmethod
    def insert(self, place: TravelPlace) -> TravelPlace:
        """Store a new place and return it with its assigned id."""

    @abstractmethod
    def find_all(self) -> list[TravelPlace]: ...

    @abstractmethod
    def find_by_id(self, place_id: int) -> TravelPlace | None: ...

    @abstractmethod
    def replace(self, place: TravelPlace) -> TravelPlace | None:
        """Overwrite the stored place with ``place.id``; None if it does not exist."""

    @abstractmethod
    def delete_by_id(self, place_id: int) -> bool:
        """Remove the place; True if a row was deleted."""
