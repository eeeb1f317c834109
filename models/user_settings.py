# models/user_settings.py
from sqlalchemy import Column, Integer, Text, JSON, DateTime, ForeignKey, func
from .base import Base


class UserSettings(Base):
     """
     Per-user settings record, one row per user (upserted on user_id).
     """
     __tablename__ = "settings"

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)

     preferences = Column(JSON, nullable=True)  # notification flags, preferred method
     payment_instructions = Column(Text, nullable=True)
     default_due_day = Column(Integer, default=1, nullable=False)

     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     def __repr__(self):
          return f"<UserSettings(user_id={self.user_id}, default_due_day={self.default_due_day})>"
