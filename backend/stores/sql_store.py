"""SQLAlchemy-backed record store (the remote database)."""

from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from errors import DuplicateRecordError, RecordNotFoundError, RemoteUnavailableError
from stores.base import RecordStore, T


class SqlRecordStore(RecordStore[T]):
    def __init__(self, session_factory: sessionmaker, model, schema: type[T]):
        self._session_factory = session_factory
        self.model = model
        self.schema = schema

    def _to_dto(self, model) -> T:
        return self.schema.model_validate(model)

    def create(self, record: T) -> T:
        try:
            with self._session_factory() as session:
                model = self.model(**record.model_dump())
                session.add(model)
                session.commit()
                session.refresh(model)
                return self._to_dto(model)
        except IntegrityError as e:
            raise DuplicateRecordError(f"{self.model.__tablename__}: {record.id} already exists") from e
        except SQLAlchemyError as e:
            raise RemoteUnavailableError(str(e)) from e

    def list(self, where: dict[str, Any] | None = None, limit: int | None = None) -> list[T]:
        try:
            with self._session_factory() as session:
                query = session.query(self.model).filter_by(**(where or {}))
                query = query.order_by(self.model.seq.asc())
                if limit is not None:
                    query = query.limit(limit)
                return [self._to_dto(m) for m in query.all()]
        except SQLAlchemyError as e:
            raise RemoteUnavailableError(str(e)) from e

    def update(self, record_id: str, fields: dict[str, Any]) -> T:
        return self._apply(record_id, fields)

    def increment(self, record_id: str, field: str, amount: int = 1) -> T:
        column = getattr(self.model, field)
        # Single UPDATE statement, so concurrent increments never lose a count
        return self._apply(record_id, {column: column + amount})

    def _apply(self, record_id: str, values: dict) -> T:
        try:
            with self._session_factory() as session:
                updated = (
                    session.query(self.model)
                    .filter_by(id=record_id)
                    .update(values, synchronize_session=False)
                )
                if not updated:
                    raise RecordNotFoundError(record_id)
                session.commit()
                model = session.query(self.model).filter_by(id=record_id).one()
                return self._to_dto(model)
        except SQLAlchemyError as e:
            raise RemoteUnavailableError(str(e)) from e
