# app/services/visitor_store.py
"""
Document-collection store for visit records.

Exposes the only operations the gate workflows need (insert, update,
query with equality filters + one descending sort field, get) over the
`visitors` table. Timestamp fields passed as SERVER_TIMESTAMP are filled
from the store clock, so clients never supply their own times.

Every SQLAlchemy failure is rolled back and re-raised as StoreUnavailable.
"""

from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.visitor import Visitor
from app.services.errors import StoreUnavailable
from app.utils.logger import get_logger

logger = get_logger(__name__)


class _ServerTimestamp:
    def __repr__(self):
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


class VisitorStore:
    collection = Visitor

    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.utcnow):
        self.db = db
        self.clock = clock

    def _resolve(self, fields: dict) -> dict:
        now = self.clock()
        return {k: (now if v is SERVER_TIMESTAMP else v) for k, v in fields.items()}

    def _column(self, name: str):
        column = getattr(self.collection, name, None)
        if column is None:
            raise ValueError(f"Unknown field '{name}' on {self.collection.__tablename__}")
        return column

    def _fail(self, op: str, exc: SQLAlchemyError):
        self.db.rollback()
        logger.error(f"[store] {op} on {self.collection.__tablename__} failed: {exc}", exc_info=True)
        raise StoreUnavailable() from exc

    def insert(self, fields: dict) -> int:
        """Insert a document and return its store-assigned id."""
        record = self.collection(**self._resolve(fields))
        try:
            self.db.add(record)
            self.db.flush()
            record_id = record.id   # read before commit expires the instance
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("insert", e)
        return record_id

    def update(self, record_id: int, fields: dict) -> None:
        """Partial update of one document."""
        try:
            updated = (
                self.db.query(self.collection)
                .filter(self.collection.id == record_id)
                .update(self._resolve(fields), synchronize_session="fetch")
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("update", e)
        if not updated:
            logger.warning(f"[store] update matched no row for id={record_id}")

    def query(self, filters: Optional[dict] = None, order_by: Optional[str] = None,
              limit: Optional[int] = None) -> list:
        """Equality filters, optional descending sort on a single field."""
        try:
            q = self.db.query(self.collection)
            for name, value in (filters or {}).items():
                q = q.filter(self._column(name) == value)
            if order_by:
                q = q.order_by(self._column(order_by).desc(), self.collection.id.desc())
            if limit is not None:
                q = q.limit(limit)
            return q.all()
        except SQLAlchemyError as e:
            self._fail("query", e)

    def get(self, record_id: int) -> Optional[Visitor]:
        try:
            return self.db.get(self.collection, record_id)
        except SQLAlchemyError as e:
            self._fail("get", e)

    def count(self, filters: Optional[dict] = None, since: Optional[tuple] = None) -> int:
        """Count documents matching equality filters and an optional (field, lower_bound)."""
        try:
            q = self.db.query(self.collection)
            for name, value in (filters or {}).items():
                q = q.filter(self._column(name) == value)
            if since:
                name, lower = since
                q = q.filter(self._column(name) >= lower)
            return q.count()
        except SQLAlchemyError as e:
            self._fail("count", e)

