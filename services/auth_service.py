# services/auth_service.py
"""
Auth Service - manager accounts and session tokens.

Passwords are bcrypt-hashed with passlib; sessions are HS256 JWTs from
python-jose. A token carries the user's session_version, and sign-out bumps
that version, so every token issued before sign-out stops working.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from config import JWT_ALGORITHM, JWT_EXPIRE_MINUTES, JWT_SECRET, MIN_PASSWORD_LENGTH
from models import User
from services.exceptions import ValidationFailed

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthError(Exception):
     """Credentials or token rejected."""


def validate_new_password(password: str, confirm_password: str) -> None:
     """Local checks done before any call reaches the database."""
     if len(password or "") < MIN_PASSWORD_LENGTH:
          raise ValidationFailed(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
     if password != confirm_password:
          raise ValidationFailed("Passwords do not match")


def create_token(user: User) -> str:
     expires = datetime.now(timezone.utc) + timedelta(minutes=JWT_EXPIRE_MINUTES)
     claims = {
          "id": user.id,
          "email": user.email,
          "ver": user.session_version,
          "exp": expires,
     }
     return jwt.encode(claims, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
     try:
          return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
     except JWTError as exc:
          raise AuthError("Invalid token") from exc


def sign_up(db: Session, full_name: str, email: str, password: str, confirm_password: str) -> User:
     validate_new_password(password, confirm_password)
     email = email.strip().lower()
     if db.query(User).filter(User.email == email).first():
          raise ValidationFailed("An account with this email already exists")

     user = User(full_name=full_name, email=email, password=pwd_context.hash(password))
     db.add(user)
     db.commit()
     db.refresh(user)
     return user


def sign_in(db: Session, email: str, password: str) -> User:
     user = db.query(User).filter(User.email == email.strip().lower()).first()
     if not user or not pwd_context.verify(password, user.password):
          raise AuthError("Invalid login credentials")
     return user


def user_for_token(db: Session, token: str) -> User:
     """Resolve a bearer token to its user, or raise AuthError."""
     payload = decode_token(token)
     user: Optional[User] = db.query(User).filter(User.id == payload.get("id")).first()
     if user is None:
          raise AuthError("User no longer exists")
     if payload.get("ver") != user.session_version:
          raise AuthError("Session has been signed out")
     return user


def sign_out(db: Session, user: User) -> None:
     user.session_version = (user.session_version or 0) + 1
     db.commit()


def change_password(
     db: Session,
     user: User,
     current_password: str,
     new_password: str,
     confirm_password: str,
) -> None:
     validate_new_password(new_password, confirm_password)
     if not pwd_context.verify(current_password, user.password):
          raise AuthError("Incorrect current password")
     user.password = pwd_context.hash(new_password)
     db.commit()
