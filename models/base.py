# models/base.py
from decimal import Decimal

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Rows leave the storage layer as plain dicts (see to_dict).
     """

     def to_dict(self) -> dict:
          """
          Column values keyed by column name.
          Numeric columns come back as float so callers can sum them freely.
          """
          row = {}
          for column in self.__table__.columns:
               value = getattr(self, column.key)
               if isinstance(value, Decimal):
                    value = float(value)
               row[column.key] = value
          return row


