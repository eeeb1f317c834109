# models/user.py
from sqlalchemy import Column, Integer, String, DateTime, func
from .base import Base


class User(Base):
     """
     User model - manager accounts that can sign in to the dashboard.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)
     full_name = Column(String(200), nullable=True)
     # Bumped on sign-out; tokens carrying an older value are rejected
     session_version = Column(Integer, default=0, nullable=False)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}')>"
