"""Email / password auth against Supabase with fixed user-facing messages"""
import logging
from enum import Enum
from typing import Callable

from supabase import Client  # type: ignore

from app.infra.supabase.client import create_auth_client
from app.models.auth import SignInResponse, SignUpResponse, SignUpStatus

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthErrorReason(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_NOT_CONFIRMED = "email_not_confirmed"
    RATE_LIMITED = "rate_limited"
    ALREADY_REGISTERED = "already_registered"
    INVALID_EMAIL = "invalid_email"
    WEAK_PASSWORD = "weak_password"
    PASSWORD_MISMATCH = "password_mismatch"
    PASSWORD_TOO_SHORT = "password_too_short"
    SIGN_IN_FAILED = "sign_in_failed"
    SIGN_UP_FAILED = "sign_up_failed"


AUTH_ERROR_MESSAGES = {
    # unconfirmed email shares the invalid-credentials message
    AuthErrorReason.INVALID_CREDENTIALS: "이메일 또는 비밀번호가 올바르지 않습니다.",
    AuthErrorReason.EMAIL_NOT_CONFIRMED: "이메일 또는 비밀번호가 올바르지 않습니다.",
    AuthErrorReason.RATE_LIMITED: "너무 많은 로그인 시도가 있었습니다. 잠시 후 다시 시도해주세요.",
    AuthErrorReason.ALREADY_REGISTERED: "이미 가입된 이메일 주소입니다.",
    AuthErrorReason.INVALID_EMAIL: "유효하지 않은 이메일 주소입니다.",
    AuthErrorReason.WEAK_PASSWORD: "비밀번호가 요구사항을 충족하지 않습니다.",
    AuthErrorReason.PASSWORD_MISMATCH: "비밀번호가 일치하지 않습니다.",
    AuthErrorReason.PASSWORD_TOO_SHORT: "비밀번호는 최소 6자 이상이어야 합니다.",
    AuthErrorReason.SIGN_IN_FAILED: "로그인 중 오류가 발생했습니다. 다시 시도해주세요.",
    AuthErrorReason.SIGN_UP_FAILED: "회원가입 중 오류가 발생했습니다. 다시 시도해주세요.",
}

AUTH_ERROR_STATUS = {
    AuthErrorReason.INVALID_CREDENTIALS: 401,
    AuthErrorReason.EMAIL_NOT_CONFIRMED: 401,
    AuthErrorReason.RATE_LIMITED: 429,
    AuthErrorReason.ALREADY_REGISTERED: 409,
    AuthErrorReason.SIGN_IN_FAILED: 500,
    AuthErrorReason.SIGN_UP_FAILED: 500,
}

CONFIRMATION_MESSAGE = "회원가입이 완료되었습니다! 이메일을 확인하여 계정을 활성화해주세요."
SIGNED_UP_MESSAGE = "회원가입이 완료되었습니다!"


class AuthError(Exception):
    """Auth failure mapped to a fixed message"""

    def __init__(self, reason: AuthErrorReason):
        self.reason = reason
        self.message = AUTH_ERROR_MESSAGES[reason]
        self.status_code = AUTH_ERROR_STATUS.get(reason, 400)
        super().__init__(self.message)


def classify_sign_in_error(error: Exception) -> AuthErrorReason:
    message = str(error).lower()
    if "invalid login credentials" in message or "invalid credentials" in message:
        return AuthErrorReason.INVALID_CREDENTIALS
    if "email not confirmed" in message:
        return AuthErrorReason.EMAIL_NOT_CONFIRMED
    if "too many requests" in message or "rate limit" in message:
        return AuthErrorReason.RATE_LIMITED
    return AuthErrorReason.SIGN_IN_FAILED


def classify_sign_up_error(error: Exception) -> AuthErrorReason:
    message = str(error).lower()
    if "user already registered" in message or "already been registered" in message:
        return AuthErrorReason.ALREADY_REGISTERED
    if "invalid email" in message or ("email address" in message and "invalid" in message):
        return AuthErrorReason.INVALID_EMAIL
    if "too many requests" in message or "rate limit" in message:
        return AuthErrorReason.RATE_LIMITED
    if "password" in message:
        return AuthErrorReason.WEAK_PASSWORD
    return AuthErrorReason.SIGN_UP_FAILED


class AuthService:
    """Sign-up / sign-in; every call runs on a fresh client so sessions are never shared"""

    def __init__(self, client_factory: Callable[[], Client] = create_auth_client):
        self._client_factory = client_factory

    async def sign_up(self, email: str, password: str, password_confirm: str) -> SignUpResponse:
        if password != password_confirm:
            raise AuthError(AuthErrorReason.PASSWORD_MISMATCH)
        if len(password) < MIN_PASSWORD_LENGTH:
            raise AuthError(AuthErrorReason.PASSWORD_TOO_SHORT)

        try:
            response = self._client_factory().auth.sign_up({"email": email, "password": password})
        except Exception as e:
            reason = classify_sign_up_error(e)
            logger.warning(f"Sign-up failed for {email}: {e} ({reason.value})")
            raise AuthError(reason) from e

        user = response.user
        if user is None:
            logger.error(f"Sign-up for {email} returned no user")
            raise AuthError(AuthErrorReason.SIGN_UP_FAILED)

        # Supabase answers an existing address with an identity-less user
        if user.identities is not None and len(user.identities) == 0:
            raise AuthError(AuthErrorReason.ALREADY_REGISTERED)

        if getattr(user, "confirmation_sent_at", None) or response.session is None:
            logger.info(f"User {user.id} signed up, confirmation pending")
            return SignUpResponse(
                status=SignUpStatus.CONFIRMATION_REQUIRED,
                user_id=user.id,
                message=CONFIRMATION_MESSAGE,
            )

        logger.info(f"User {user.id} signed up and signed in")
        return SignUpResponse(status=SignUpStatus.SIGNED_IN, user_id=user.id, message=SIGNED_UP_MESSAGE)

    async def sign_in(self, email: str, password: str) -> SignInResponse:
        try:
            response = self._client_factory().auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            reason = classify_sign_in_error(e)
            logger.warning(f"Sign-in failed for {email}: {e} ({reason.value})")
            raise AuthError(reason) from e

        session = response.session
        user = response.user
        if session is None or user is None:
            raise AuthError(AuthErrorReason.SIGN_IN_FAILED)

        logger.info(f"User {user.id} signed in")
        return SignInResponse(
            user_id=user.id,
            access_token=session.access_token,
            refresh_token=session.refresh_token,
        )
