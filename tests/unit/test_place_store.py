"""Unit tests for PlaceStore over both repository implementations."""

from unittest.mock import MagicMock

import pytest

from core.errors import ErrorCode, PlaceNotFoundError, StorageError, ValidationError
from core.models import TravelPlace
from core.services import PlaceStore


def _by_id(places: list[TravelPlace]) -> dict[int | None, TravelPlace]:
    return {place.id: place for place in places}


def test_goa_lifecycle(place_store):
    created = place_store.add_place(TravelPlace(destination="Goa"))
    assert created.id == 1
    assert place_store.get_place_by_id(1) == TravelPlace(id=1, destination="Goa")

    updated = place_store.update_place(TravelPlace(id=1, destination="Goa Beach"))
    assert updated == TravelPlace(id=1, destination="Goa Beach")

    place_store.delete_place_by_id(1)
    assert place_store.get_place_by_id(1) is None
    assert place_store.get_all_places() == []


def test_created_place_round_trips(place_store):
    created = place_store.add_place(
        TravelPlace(destination="Kyoto", country="Kerala", notes="cherry blossom season", visited="YES")
    )
    assert created.id is not None
    assert place_store.get_place_by_id(created.id) == created


def test_create_ignores_caller_supplied_id(place_store):
    first = place_store.add_place(TravelPlace(destination="Leh"))
    second = place_store.add_place(TravelPlace(id=first.id, destination="Manali"))
    assert second.id != first.id
    assert place_store.get_place_by_id(first.id).destination == "Leh"


def test_create_assigns_distinct_ids(place_store):
    ids = {place_store.add_place(TravelPlace(destination=f"place-{n}")).id for n in range(5)}
    assert len(ids) == 5


def test_list_all_empty(place_store):
    assert place_store.get_all_places() == []


def test_list_all_contains_every_created_place(place_store):
    created = [
        place_store.add_place(TravelPlace(destination=name, country="India"))
        for name in ("Jaipur", "Hampi", "Munnar")
    ]
    assert _by_id(place_store.get_all_places()) == _by_id(created)


def test_missing_lookup_returns_none(place_store):
    assert place_store.get_place_by_id(999) is None


def test_update_is_visible(place_store):
    created = place_store.add_place(TravelPlace(destination="Ooty", visited="NO"))
    changed = created.model_copy(update={"visited": "YES", "notes": "toy train"})

    place_store.update_place(changed)

    assert place_store.get_place_by_id(created.id) == changed


def test_update_replaces_full_record(place_store):
    created = place_store.add_place(TravelPlace(destination="Coorg", country="Karnataka", notes="coffee"))
    place_store.update_place(TravelPlace(id=created.id, destination="Coorg"))

    stored = place_store.get_place_by_id(created.id)
    assert stored.country is None
    assert stored.notes is None
    assert stored.visited == "NO"


def test_update_unknown_id_is_rejected(place_store):
    with pytest.raises(PlaceNotFoundError) as exc_info:
        place_store.update_place(TravelPlace(id=77, destination="Nowhere"))
    assert exc_info.value.place_id == 77
    assert place_store.get_all_places() == []


def test_update_without_id_is_rejected(place_store):
    with pytest.raises(ValidationError) as exc_info:
        place_store.update_place(TravelPlace(destination="Nowhere"))
    assert exc_info.value.code == ErrorCode.VALIDATION_ERROR


def test_delete_is_idempotent(place_store):
    created = place_store.add_place(TravelPlace(destination="Pondicherry"))

    place_store.delete_place_by_id(created.id)
    place_store.delete_place_by_id(created.id)

    assert place_store.get_place_by_id(created.id) is None


def test_delete_unknown_id_is_noop(place_store):
    kept = place_store.add_place(TravelPlace(destination="Shillong"))
    place_store.delete_place_by_id(12345)
    assert place_store.get_all_places() == [kept]


def test_store_delegates_once_per_call():
    repository = MagicMock()
    repository.find_by_id.return_value = None
    store = PlaceStore(repository)

    assert store.get_place_by_id(3) is None

    repository.find_by_id.assert_called_once_with(3)
    assert repository.method_calls == [("find_by_id", (3,), {})]


def test_storage_error_propagates():
    repository = MagicMock()
    repository.insert.side_effect = StorageError("disk full")
    store = PlaceStore(repository)

    with pytest.raises(StorageError, match="disk full"):
        store.add_place(TravelPlace(destination="Goa"))
