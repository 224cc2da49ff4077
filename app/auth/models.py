# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, ConfigDict

from core.models.user import VendorType


class AuthUser(BaseModel):
    """
    Authenticated vendor extracted from the session cookie.

    This is the user info carried by the token itself,
    without reading users.json.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: str
    vendor_type: VendorType


class LoginRequest(BaseModel):
    """
    Body of POST /api/auth/login.

    Both fields are optional at the schema level so that missing values
    produce the login form's own error message.
    """
    email: Optional[str] = None
    password: Optional[str] = None


class TokenPayload(BaseModel):
    """
    Decoded session token payload.

    Standard JWT claims plus the vendor profile.
    """
    sub: str  # User ID
    email: str
    name: str
    vendor_type: VendorType
    exp: int  # Expiration timestamp
    iat: Optional[int] = None  # Issued at timestamp
