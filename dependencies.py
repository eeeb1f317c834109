# dependencies.py
"""
Shared FastAPI dependencies: session check and request-scoped RecordStore.
"""
from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from database import get_session
from models import User
from services.auth_service import AuthError, user_for_token
from services.record_store import RecordStore


def bearer_token(request: Request) -> str:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=401, detail="Missing token")
     return auth.split(" ", 1)[1]


def verify_token(request: Request, db: Session = Depends(get_session)) -> User:
     """Resolve the Authorization: Bearer header to the signed-in user."""
     token = bearer_token(request)
     try:
          return user_for_token(db, token)
     except AuthError as exc:
          raise HTTPException(status_code=401, detail=str(exc))


def get_record_store(db: Session = Depends(get_session)) -> RecordStore:
     return RecordStore(db)
