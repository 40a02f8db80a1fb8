"""
Supabase JWT authentication

Verifies access tokens issued by Supabase Auth. Asymmetric tokens (ES256 /
RS256) are checked against the project's JWKS; legacy HS256 tokens are
checked against SUPABASE_JWT_SECRET when it is configured.
"""
import os
import time
import logging
from typing import Optional, Tuple
from fastapi import HTTPException, Header
from jose import jwt, jwk
import httpx

logger = logging.getLogger(__name__)

_jwks_cache: Optional[dict] = None
_jwks_cache_time: float = 0
JWKS_CACHE_DURATION = 60 * 60  # 1 hour

JWT_AUDIENCE = "authenticated"
ASYMMETRIC_ALGORITHMS = ["ES256", "RS256"]


def get_supabase_url() -> str:
    url = os.getenv("SUPABASE_URL")
    if not url:
        raise ValueError("SUPABASE_URL must be set")
    return url.rstrip("/")


def get_jwks_url() -> str:
    return f"{get_supabase_url()}/auth/v1/.well-known/jwks.json"


def get_jwt_issuer() -> str:
    return f"{get_supabase_url()}/auth/v1"


def reset_jwks_cache() -> None:
    global _jwks_cache, _jwks_cache_time
    _jwks_cache = None
    _jwks_cache_time = 0


async def _fetch_jwks() -> dict:
    async with httpx.AsyncClient() as client:
        response = await client.get(get_jwks_url(), timeout=10.0)
        response.raise_for_status()
        return response.json()


async def get_jwks() -> dict:
    """Supabase signing keys, cached for an hour; a stale copy is served when a refresh fails"""
    global _jwks_cache, _jwks_cache_time

    if _jwks_cache and time.time() - _jwks_cache_time < JWKS_CACHE_DURATION:
        return _jwks_cache

    try:
        jwks = await _fetch_jwks()
    except Exception as e:
        if _jwks_cache:
            logger.warning(f"JWKS refresh failed, keeping cached keys: {e}")
            return _jwks_cache
        logger.error(f"Failed to fetch JWKS: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch authentication keys")

    _jwks_cache, _jwks_cache_time = jwks, time.time()
    logger.info(f"Cached {len(jwks.get('keys', []))} signing key(s) from Supabase")
    return jwks


async def _resolve_key(header: dict) -> Tuple[object, list]:
    """Verification key and allowed algorithms for a token header"""
    alg = header.get("alg", "ES256")

    if alg == "HS256":
        secret = os.getenv("SUPABASE_JWT_SECRET")
        if not secret:
            raise HTTPException(status_code=401, detail="HS256 tokens are not accepted")
        return secret, ["HS256"]

    kid = header.get("kid")
    if not kid:
        raise HTTPException(status_code=401, detail="Token missing key ID (kid)")

    jwks = await get_jwks()
    key_data = next((k for k in jwks.get("keys", []) if k.get("kid") == kid), None)
    if not key_data:
        raise HTTPException(status_code=401, detail=f"Key with ID '{kid}' not found in JWKS")

    return jwk.construct(key_data), ASYMMETRIC_ALGORITHMS


async def verify_token(token: str) -> dict:
    """
    Verify a Supabase access token and return its payload.
    Raises HTTPException(401) on any verification failure.
    """
    try:
        header = jwt.get_unverified_header(token)
        key, algorithms = await _resolve_key(header)

        return jwt.decode(
            token,
            key,
            algorithms=algorithms,
            audience=JWT_AUDIENCE,
            issuer=get_jwt_issuer(),
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token has expired")
    except jwt.JWTClaimsError as e:
        raise HTTPException(status_code=401, detail=f"Token validation failed: {str(e)}")
    except jwt.JWTError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Token verification error: {e}", exc_info=True)
        raise HTTPException(status_code=401, detail="Token verification failed")


def parse_bearer(authorization: Optional[str]) -> str:
    """Token from a "Bearer <token>" header"""
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header missing")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format. Expected 'Bearer <token>'"
        )
    return token.strip()


async def get_current_user_id(
    authorization: Optional[str] = Header(None)
) -> str:
    """
    FastAPI dependency: verify the bearer token and return the user ID ('sub')
    """
    payload = await verify_token(parse_bearer(authorization))

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token: no user ID")
    return user_id
