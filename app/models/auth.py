"""Auth request / response models"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SignUpStatus(str, Enum):
    """Outcome of a sign-up call"""
    SIGNED_IN = "signed_in"
    CONFIRMATION_REQUIRED = "confirmation_required"


class SignUpRequest(BaseModel):
    email: str
    password: str
    password_confirm: str


class SignUpResponse(BaseModel):
    status: SignUpStatus
    user_id: Optional[str] = None
    message: str


class SignInRequest(BaseModel):
    email: str
    password: str


class SignInResponse(BaseModel):
    user_id: str
    access_token: str
    refresh_token: Optional[str] = None
