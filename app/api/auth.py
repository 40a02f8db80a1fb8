import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_auth_service
from app.models.auth import SignInRequest, SignInResponse, SignUpRequest, SignUpResponse
from app.services.auth_service import AuthError, AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _error_response(e: AuthError) -> JSONResponse:
    return JSONResponse(status_code=e.status_code, content={"error": e.message, "reason": e.reason.value})


@router.post("/signup", response_model=SignUpResponse)
async def sign_up(request: SignUpRequest, service: AuthService = Depends(get_auth_service)):
    """Email/password sign-up; status tells whether email confirmation is pending"""
    try:
        return await service.sign_up(request.email, request.password, request.password_confirm)
    except AuthError as e:
        return _error_response(e)


@router.post("/signin", response_model=SignInResponse)
async def sign_in(request: SignInRequest, service: AuthService = Depends(get_auth_service)):
    """Email/password sign-in; returns the session tokens and the user ID"""
    try:
        return await service.sign_in(request.email, request.password)
    except AuthError as e:
        return _error_response(e)
