# services/__init__.py
from .exceptions import NotFound, RecordStoreError, ValidationFailed
from .record_store import RecordStore

__all__ = [
     "RecordStore",
     "RecordStoreError",
     "ValidationFailed",
     "NotFound",
]
