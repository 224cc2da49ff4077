# =============================================================================
# app/auth/tokens.py - Session Tokens
# =============================================================================
# The session cookie holds an HS256 JWT signed with SECRET_KEY. The token
# carries the vendor profile, so authenticated requests never re-read
# users.json.
#
# Usage:
#   token = create_session_token(user)
#   auth_user = decode_session_token(token)
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from app.auth.models import AuthUser, TokenPayload
from app.config import settings
from app.exceptions import InvalidSessionError
from core.models.user import User

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_session_token(user: User, now: datetime | None = None) -> str:
    """
    Sign a session token for a vendor.

    Args:
        user: Authenticated vendor
        now: Issue time (defaults to the current UTC time)

    Returns:
        Encoded JWT
    """
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)

    claims = {
        "sub": user.id,
        "email": user.email,
        "name": user.name,
        "vendor_type": user.vendor_type.value,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_session_token(token: str) -> AuthUser:
    """
    Verify a session token and extract the vendor.

    Raises:
        InvalidSessionError: If the token is expired, tampered with or
            missing claims
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.warning("Session token has expired")
        raise InvalidSessionError("Session has expired")
    except JWTError as e:
        logger.warning(f"Session token validation failed: {e}")
        raise InvalidSessionError("Malformed or tampered session")

    try:
        claims = TokenPayload.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Session token missing claims: {e.error_count()} errors")
        raise InvalidSessionError("Session is missing user details")

    return AuthUser(
        id=claims.sub,
        email=claims.email,
        name=claims.name,
        vendor_type=claims.vendor_type,
    )
