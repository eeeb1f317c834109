# services/exceptions.py
"""
Errors raised by the service layer.

Routers translate these into HTTP responses; see main.py for the handlers.
"""


class ValidationFailed(ValueError):
     """A request broke a business rule and was rejected before any write."""


class NotFound(LookupError):
     """The addressed record does not exist."""


class RecordStoreError(Exception):
     """The storage backend rejected or failed a call."""

     def __init__(self, message: str):
          super().__init__(message)
          self.message = message
