"""In-memory place repository for local runs and tests."""

import itertools
import threading

from core.db.repository import PlaceRepository
from core.models.place import TravelPlace


class InMemoryPlaceRepository(PlaceRepository):
    def __init__(self) -> None:
        self._places: dict[int, TravelPlace] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def insert(self, place: TravelPlace) -> TravelPlace:
        with self._lock:
            stored = place.model_copy(update={"id": next(self._ids)})
            self._places[stored.id] = stored
            return stored.model_copy()

    def find_all(self) -> list[TravelPlace]:
        with self._lock:
            return [place.model_copy() for place in self._places.values()]

    def find_by_id(self, place_id: int) -> TravelPlace | None:
        with self._lock:
            place = self._places.get(place_id)
            return place.model_copy() if place else None

    def replace(self, place: TravelPlace) -> TravelPlace | None:
        with self._lock:
            if place.id not in self._places:
                return None
            stored = place.model_copy()
            self._places[place.id] = stored
            return stored.model_copy()

    def delete_by_id(self, place_id: int) -> bool:
        with self._lock:
            return self._places.pop(place_id, None) is not None
