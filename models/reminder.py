# models/reminder.py
"""
Reminder model - append-only log of reminder sends.
Rows are written once by services.reminder_service.send_reminder.
"""
from sqlalchemy import Column, Integer, String, Date, Text, DateTime, func
from .base import Base


class Reminder(Base):
     __tablename__ = "reminders"

     id = Column(Integer, primary_key=True, autoincrement=True)
     date = Column(Date, nullable=False)
     recipients = Column(String(255), nullable=False)  # e.g. "All Tenants (12)"
     type = Column(String(100), nullable=False)
     status = Column(String(50), nullable=False)
     opened = Column(Integer, default=0, nullable=False)
     message = Column(Text, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<Reminder(id={self.id}, type='{self.type}', status='{self.status}')>"
