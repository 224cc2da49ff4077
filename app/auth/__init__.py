# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides cookie sessions signed as JWTs (python-jose).
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, LoginRequest
from app.auth.tokens import create_session_token, decode_session_token

__all__ = [
    "get_current_user",
    "AuthUser",
    "LoginRequest",
    "create_session_token",
    "decode_session_token",
]
