# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: Vendor accounts
# - contract.py: Contracts, signatures and the status lifecycle
# - ai.py: AI assist request/response
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# User Models - Vendor accounts
# -----------------------------------------------------------------------------
from .user import (
    StoredUser,
    User,
    VendorType,
)

# -----------------------------------------------------------------------------
# Contract Models - Contracts and signatures
# -----------------------------------------------------------------------------
from .contract import (
    ALLOWED_TRANSITIONS,
    Contract,
    ContractCreatedResponse,
    ContractCreateRequest,
    ContractList,
    ContractStatus,
    ContractUpdateRequest,
    Signature,
    SignatureType,
    SignRequest,
)

# -----------------------------------------------------------------------------
# AI Models - Contract drafting
# -----------------------------------------------------------------------------
from .ai import (
    AIContentRequest,
    AIContentResponse,
    AIStatusResponse,
    ContractDetails,
)

__all__ = [
    # User
    "StoredUser",
    "User",
    "VendorType",
    # Contract
    "ALLOWED_TRANSITIONS",
    "Contract",
    "ContractCreatedResponse",
    "ContractCreateRequest",
    "ContractList",
    "ContractStatus",
    "ContractUpdateRequest",
    "Signature",
    "SignatureType",
    "SignRequest",
    # AI
    "AIContentRequest",
    "AIContentResponse",
    "AIStatusResponse",
    "ContractDetails",
]
