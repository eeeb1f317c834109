# routers/auth.py
"""
Auth API routes: sign-up, sign-in, session lookup, sign-out and password change.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from models import User
from schemas.auth import (
     ChangePasswordRequest,
     SessionResponse,
     SignInRequest,
     SignUpRequest,
     UserResponse,
)
from services import auth_service
from services.auth_service import AuthError

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def sign_up(body: SignUpRequest, db: Session = Depends(get_session)):
     return auth_service.sign_up(db, body.full_name, body.email, body.password, body.confirm_password)


@router.post("/signin", response_model=SessionResponse)
def sign_in(body: SignInRequest, db: Session = Depends(get_session)):
     try:
          user = auth_service.sign_in(db, body.email, body.password)
     except AuthError as exc:
          raise HTTPException(status_code=401, detail=str(exc))
     return {"token": auth_service.create_token(user), "user": user}


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(verify_token)):
     return user


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(user: User = Depends(verify_token), db: Session = Depends(get_session)):
     auth_service.sign_out(db, user)


@router.post("/change-password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
     body: ChangePasswordRequest,
     user: User = Depends(verify_token),
     db: Session = Depends(get_session),
):
     try:
          auth_service.change_password(
               db, user, body.current_password, body.new_password, body.confirm_password
          )
     except AuthError as exc:
          raise HTTPException(status_code=400, detail=str(exc))
