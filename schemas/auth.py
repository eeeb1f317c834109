# schemas/auth.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
     full_name: str = Field(..., min_length=1, max_length=200)
     email: str = Field(..., min_length=3, max_length=255)
     password: str
     confirm_password: str


class SignInRequest(BaseModel):
     email: str
     password: str


class ChangePasswordRequest(BaseModel):
     current_password: str
     new_password: str
     confirm_password: str


class UserResponse(BaseModel):
     model_config = ConfigDict(from_attributes=True)

     id: int
     email: str
     full_name: Optional[str] = None


class SessionResponse(BaseModel):
     token: str
     user: UserResponse
