# services/record_store.py
"""
Record Store Gateway - thin pass-through over the storage tables.

Every page-level operation reaches the database through this class:
select / insert / update / delete / upsert against a named table, with
equality filters and single-column ordering only. Rows go in and come out
as plain dicts.

No batching, caching or retry. Any failure from the backend is re-raised as
RecordStoreError carrying a readable message.

Writes commit immediately, except inside `atomic()`, where they are flushed
and committed together when the block exits (or rolled back on error).
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import asc, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Payment, Reminder, Tenant, Unit, UserSettings
from services.exceptions import RecordStoreError

logger = logging.getLogger(__name__)

TABLES = {
     "units": Unit,
     "tenants": Tenant,
     "payments": Payment,
     "reminders": Reminder,
     "settings": UserSettings,
}


def _describe(exc: SQLAlchemyError) -> str:
     """Prefer the driver's own message over SQLAlchemy's wrapper text."""
     orig = getattr(exc, "orig", None)
     return str(orig) if orig is not None else str(exc)


class RecordStore:
     """Table-level gateway bound to one SQLAlchemy session."""

     def __init__(self, session: Session):
          self.session = session
          self._atomic_depth = 0

     # ------------------------------------------------------------------
     # helpers
     # ------------------------------------------------------------------

     def _model(self, table: str):
          model = TABLES.get(table)
          if model is None:
               raise RecordStoreError(f"Unknown table '{table}'")
          return model

     def _column(self, model, name: str):
          column = model.__table__.columns.get(name)
          if column is None:
               raise RecordStoreError(f"Unknown column '{name}' on table '{model.__tablename__}'")
          return getattr(model, column.key)

     def _check_fields(self, model, row: Dict[str, Any]) -> None:
          for name in row:
               self._column(model, name)

     def _fetch(self, model, record_id: int):
          record = self.session.get(model, record_id)
          if record is None:
               raise RecordStoreError(f"{model.__tablename__} row {record_id} not found")
          return record

     def _write_done(self) -> None:
          if self._atomic_depth:
               self.session.flush()
          else:
               self.session.commit()

     def _fail(self, exc: SQLAlchemyError, action: str, table: str):
          if not self._atomic_depth:
               self.session.rollback()
          message = _describe(exc)
          logger.error("Record store %s on '%s' failed: %s", action, table, message)
          raise RecordStoreError(message) from exc

     # ------------------------------------------------------------------
     # transactions
     # ------------------------------------------------------------------

     @contextmanager
     def atomic(self) -> Iterator["RecordStore"]:
          """
          Group several writes into one commit.

          Nested blocks join the outermost one. Any exception rolls back
          everything written inside the block and propagates.
          """
          self._atomic_depth += 1
          try:
               yield self
          except Exception:
               self._atomic_depth -= 1
               if not self._atomic_depth:
                    self.session.rollback()
               raise
          self._atomic_depth -= 1
          if not self._atomic_depth:
               try:
                    self.session.commit()
               except SQLAlchemyError as exc:
                    self.session.rollback()
                    raise RecordStoreError(_describe(exc)) from exc

     # ------------------------------------------------------------------
     # operations
     # ------------------------------------------------------------------

     def list(
          self,
          table: str,
          filters: Optional[Dict[str, Any]] = None,
          order_by: Optional[str] = None,
          descending: bool = False,
          limit: Optional[int] = None,
     ) -> List[dict]:
          """Select rows, optionally filtered by column equality."""
          model = self._model(table)
          stmt = select(model)
          for name, value in (filters or {}).items():
               stmt = stmt.where(self._column(model, name) == value)
          if order_by:
               column = self._column(model, order_by)
               stmt = stmt.order_by(desc(column) if descending else asc(column))
          if limit is not None:
               stmt = stmt.limit(limit)
          try:
               records = self.session.scalars(stmt).all()
          except SQLAlchemyError as exc:
               self._fail(exc, "list", table)
          return [record.to_dict() for record in records]

     def get(self, table: str, record_id: int) -> Optional[dict]:
          model = self._model(table)
          try:
               record = self.session.get(model, record_id)
          except SQLAlchemyError as exc:
               self._fail(exc, "get", table)
          return record.to_dict() if record is not None else None

     def insert(self, table: str, row: Dict[str, Any]) -> dict:
          model = self._model(table)
          self._check_fields(model, row)
          record = model(**row)
          try:
               self.session.add(record)
               self._write_done()
               self.session.refresh(record)
          except SQLAlchemyError as exc:
               self._fail(exc, "insert", table)
          return record.to_dict()

     def update(self, table: str, record_id: int, patch: Dict[str, Any]) -> dict:
          model = self._model(table)
          self._check_fields(model, patch)
          try:
               record = self._fetch(model, record_id)
               for name, value in patch.items():
                    setattr(record, name, value)
               self._write_done()
               self.session.refresh(record)
          except SQLAlchemyError as exc:
               self._fail(exc, "update", table)
          return record.to_dict()

     def delete(self, table: str, record_id: int) -> None:
          model = self._model(table)
          try:
               record = self._fetch(model, record_id)
               self.session.delete(record)
               self._write_done()
          except SQLAlchemyError as exc:
               self._fail(exc, "delete", table)

     def upsert(self, table: str, row: Dict[str, Any], conflict_key: str) -> dict:
          """Insert `row`, or update the existing row whose `conflict_key` matches."""
          model = self._model(table)
          self._check_fields(model, row)
          if conflict_key not in row:
               raise RecordStoreError(f"Upsert row is missing conflict key '{conflict_key}'")
          column = self._column(model, conflict_key)
          try:
               record = self.session.scalars(
                    select(model).where(column == row[conflict_key]).limit(1)
               ).first()
               if record is None:
                    record = model(**row)
                    self.session.add(record)
               else:
                    for name, value in row.items():
                         setattr(record, name, value)
               self._write_done()
               self.session.refresh(record)
          except SQLAlchemyError as exc:
               self._fail(exc, "upsert", table)
          return record.to_dict()
