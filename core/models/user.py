# =============================================================================
# core/models/user.py - Vendor (User) Schemas
# =============================================================================
# A user is a wedding vendor account. Accounts live in users.json and are
# mock data: the stored password is compared as-is and never returned.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VendorType(str, Enum):
    """
    Kinds of wedding vendor the app supports.

    The vendor type picks the AI prompt and the fallback contract template.
    """
    PHOTOGRAPHER = "photographer"
    CATERER = "caterer"
    FLORIST = "florist"


class User(BaseModel):
    """
    Public view of a vendor account.

    Example:
        {
            "id": "user_photographer_001",
            "email": "photographer@example.com",
            "vendorType": "photographer",
            "name": "Lumière Wedding Photography"
        }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Unique identifier for the user")
    email: str = Field(..., description="Email address used to log in")
    vendor_type: VendorType = Field(..., description="Type of wedding vendor")
    name: str = Field(..., description="Business display name")


class StoredUser(User):
    """Row of users.json, including the mock password."""

    password: str = Field(..., repr=False)

    def to_public(self) -> User:
        """Drop the password."""
        return User.model_validate(self.model_dump(exclude={"password"}))
