from typing import Any, Dict, FrozenSet, Generic, List, Optional, Type, TypeVar
from datetime import datetime, timedelta
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from apparel_inventory.core.exceptions import NotFound, QueryFailed, ValidationError
from apparel_inventory.models.base import DeleteAck, as_utc, utc_now

RowT = TypeVar("RowT", bound=SQLModel)

# Integer primary keys are 32-bit signed in every supported backend
MAX_ROW_ID = 2**31 - 1


def store_message(error: SQLAlchemyError) -> str:
    """The driver's own message, without SQLAlchemy's statement dump."""
    return str(getattr(error, "orig", None) or error).strip()


class CatalogService(Generic[RowT]):
    """
    Uniform single-row contract shared by every collection:
    list, get, create, update one field, update a patch, delete, and the
    distinct values of an array column.

    Each write is one store round trip. Store errors are rolled back and
    re-raised as QueryFailed carrying the store's message.
    """

    model: Type[RowT]
    label: str
    nullable_fields: FrozenSet[str] = frozenset()

    def __init__(self, session: Session):
        self.session = session

    # Helpers

    def _fail(self, action: str, error: SQLAlchemyError) -> QueryFailed:
        self.session.rollback()
        message = store_message(error)
        logger.error(f"{self.label} {action} failed: {message}")
        return QueryFailed(detail=message)

    def _save(self, row: RowT, action: str) -> RowT:
        try:
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail(action, e)
        return row

    @staticmethod
    def _stamp(previous: Optional[datetime] = None) -> datetime:
        # updated_at must move strictly forward, even within one clock tick
        now = utc_now()
        if previous is not None and now <= as_utc(previous):
            now = as_utc(previous) + timedelta(microseconds=1)
        return now

    # Operations

    def list_rows(self) -> List[RowT]:
        statement = select(self.model).order_by(self.model.id.asc())
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._fail("list", e)

    def get_row(self, row_id: int) -> RowT:
        if not 0 < row_id <= MAX_ROW_ID:
            raise NotFound(detail=f"{self.label} {row_id} not found.")

        try:
            row = self.session.get(self.model, row_id)
        except SQLAlchemyError as e:
            raise self._fail("lookup", e)

        if row is None:
            raise NotFound(detail=f"{self.label} {row_id} not found.")
        return row

    def insert_row(self, values: Dict[str, Any]) -> RowT:
        now = self._stamp()
        row = self.model(**values, created_at=now, updated_at=now)
        row = self._save(row, "creation")
        logger.info(f"{self.label} {row.id} created")
        return row

    def update_fields(self, row_id: int, values: Dict[str, Any]) -> RowT:
        for key, value in values.items():
            if value is None and key not in self.nullable_fields:
                raise ValidationError(detail=f"Field '{key}' cannot be null.")

        row = self.get_row(row_id)
        for key, value in values.items():
            setattr(row, key, value)

        row.updated_at = self._stamp(row.updated_at)
        return self._save(row, "update")

    def delete_row(self, row_id: int) -> DeleteAck:
        """
        Hard delete. A missing id is a no-op success, matching the store's
        own delete-where semantics.
        """
        row = None
        try:
            if 0 < row_id <= MAX_ROW_ID:
                row = self.session.get(self.model, row_id)
            if row is not None:
                self.session.delete(row)
                self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("deletion", e)

        if row is None:
            logger.info(f"{self.label} {row_id} already absent, nothing deleted")
        else:
            logger.info(f"{self.label} {row_id} deleted")

        return DeleteAck(
            success=True,
            message=f"{self.label} {row_id} deleted successfully"
        )

    def distinct_values(self, column) -> List[str]:
        """
        Full scan of an array column, flattened into a set and sorted by code
        point (case-sensitive: 'A' < 'C' < 'b'). Recomputed on every call.
        """
        try:
            rows = self.session.exec(select(column)).all()
        except SQLAlchemyError as e:
            raise self._fail("distinct scan", e)

        values = set()
        for entry in rows:
            if isinstance(entry, list):
                values.update(v for v in entry if isinstance(v, str))
        return sorted(values)
