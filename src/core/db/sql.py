"""SQLAlchemy-backed place repository."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.db.repository import PlaceRepository
from core.db.schemas.travel_place import TravelPlaceRecord
from core.errors import ErrorCode, StorageError
from core.models.place import TravelPlace

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("Travel place %s failed", action)
        raise StorageError(f"Travel place {action} failed: {e}", code=ErrorCode.STORAGE_FAILED) from e


class SqlPlaceRepository(PlaceRepository):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def insert(self, place: TravelPlace) -> TravelPlace:
        # The id is always assigned by the database.
        record = TravelPlaceRecord(**place.model_dump(exclude={"id"}))
        with _storage_errors("insert"), self._session_factory.begin() as session:
            session.add(record)
            session.flush()
            return TravelPlace.model_validate(record)

    def find_all(self) -> list[TravelPlace]:
        with _storage_errors("list"), self._session_factory() as session:
            records = session.scalars(select(TravelPlaceRecord)).all()
            return [TravelPlace.model_validate(record) for record in records]

    def find_by_id(self, place_id: int) -> TravelPlace | None:
        with _storage_errors("lookup"), self._session_factory() as session:
            record = session.get(TravelPlaceRecord, place_id)
            return TravelPlace.model_validate(record) if record else None

    def replace(self, place: TravelPlace) -> TravelPlace | None:
        with _storage_errors("update"), self._session_factory.begin() as session:
            record = session.get(TravelPlaceRecord, place.id)
            if record is None:
                return None
            for field, value in place.model_dump(exclude={"id"}).items():
                setattr(record, field, value)
            session.flush()
            return TravelPlace.model_validate(record)

    def delete_by_id(self, place_id: int) -> bool:
        with _storage_errors("delete"), self._session_factory.begin() as session:
            result = session.execute(delete(TravelPlaceRecord).where(TravelPlaceRecord.id == place_id))
            return result.rowcount > 0
