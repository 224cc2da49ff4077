# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for the mock vendor login.
#
# Endpoints:
#   POST /api/auth/login   - Check credentials, set the session cookie
#   POST /api/auth/logout  - Clear the session cookie
#   GET  /api/auth/me      - Current vendor
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Response

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, LoginRequest
from app.auth.tokens import create_session_token
from app.config import settings
from app.exceptions import InvalidCredentialsError, LoginValidationError
from core.models.user import User
from core.services.auth_service import AuthService
from core.validation import validate_login_form

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=User, response_model_by_alias=True)
async def login(body: LoginRequest, response: Response) -> User:
    """
    Log a vendor in.

    Returns:
        User: The vendor's profile (never the password)

    Raises:
        400: If email or password is missing or malformed
        401: If the credentials don't match an account
    """
    if not body.email or not body.password:
        raise LoginValidationError("Email and password are required")

    errors = validate_login_form(body.email, body.password)
    if errors:
        raise LoginValidationError(next(iter(errors.values())), errors)

    user = AuthService.authenticate_user(body.email, body.password)
    if user is None:
        raise InvalidCredentialsError()

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user),
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )
    return user


@router.post("/logout")
async def logout(response: Response) -> dict:
    """
    Log out by clearing the session cookie.

    Works with or without an active session.
    """
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=User, response_model_by_alias=True)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> User:
    """
    Get the current authenticated vendor.

    Raises:
        401: If not authenticated or the session is invalid
    """
    return User(
        id=user.id,
        email=user.email,
        vendor_type=user.vendor_type,
        name=user.name,
    )
