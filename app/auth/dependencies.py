# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# The session lives in an httpOnly cookie set by POST /api/auth/login.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging

from fastapi import Request

from app.auth.models import AuthUser
from app.auth.tokens import decode_session_token
from app.config import settings
from app.exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)


async def get_current_user(request: Request) -> AuthUser:
    """
    Extract and validate the vendor from the session cookie.

    This dependency:
    1. Reads the session cookie
    2. Verifies the JWT signature and expiry
    3. Returns an AuthUser with the vendor's profile

    Returns:
        AuthUser: The authenticated vendor

    Raises:
        NotAuthenticatedError: 401 if there is no session cookie
        InvalidSessionError: 401 if the cookie is invalid or expired
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise NotAuthenticatedError()

    user = decode_session_token(token)
    logger.debug(f"Authenticated user: {user.id}")
    return user

