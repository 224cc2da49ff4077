# =============================================================================
# core/models/contract.py - Contract & Signature Schemas
# =============================================================================
# These models define the API contract for contract operations:
# - ContractStatus: Lifecycle states and the allowed transitions
# - Signature: Drawn (image) or typed (text) signature
# - Contract: A stored contract (contracts.json row / API response)
# - ContractCreateRequest / ContractUpdateRequest: Incoming form data
# - SignRequest: Incoming signature
#
# Field names are snake_case in Python and camelCase on the wire and on
# disk (clientName, eventDate, ...), matching the web client.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContractStatus(str, Enum):
    """
    Possible states for a contract.

    - draft: Being written, can be edited, signed or deleted
    - signed: Final, can only be deleted (no edits)
    - deleted: Soft-deleted, invisible everywhere

    Flow: draft -> signed -> deleted, or draft -> deleted
    """
    DRAFT = "draft"
    SIGNED = "signed"
    DELETED = "deleted"

    def can_transition_to(self, target: "ContractStatus") -> bool:
        """Check whether the lifecycle allows moving to target."""
        return target in ALLOWED_TRANSITIONS[self]


ALLOWED_TRANSITIONS: dict[ContractStatus, frozenset[ContractStatus]] = {
    ContractStatus.DRAFT: frozenset({ContractStatus.SIGNED, ContractStatus.DELETED}),
    ContractStatus.SIGNED: frozenset({ContractStatus.DELETED}),
    ContractStatus.DELETED: frozenset(),
}


class SignatureType(str, Enum):
    """How the client signed."""
    DRAWN = "drawn"
    TYPED = "typed"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Signature(_CamelModel):
    """
    Digital signature attached to a signed contract.

    Example:
        {"type": "typed", "data": "Emma Wilson", "timestamp": "2025-03-01T10:00:00.000Z"}
    """

    type: SignatureType = Field(..., description="drawn (image) or typed (text)")
    data: str = Field(..., description="PNG data URL for drawn, text for typed")
    timestamp: str = Field(..., description="ISO timestamp when the signature was captured")

    @property
    def type_label(self) -> str:
        return "Digital Drawing" if self.type == SignatureType.DRAWN else "Typed Signature"


class Contract(_CamelModel):
    """
    Schema for a stored contract.

    Returned by:
    - GET /api/contracts (list)
    - GET /api/contracts/{id}

    Example:
        {
            "id": "contract_1718000000000_ab12cd34",
            "vendorId": "user_photographer_001",
            "clientName": "Emma Wilson",
            "eventDate": "2026-06-14",
            "eventVenue": "Rosewood Manor",
            "servicePackage": "Full day coverage, 2 photographers",
            "amount": 4500.0,
            "content": "<h1>WEDDING PHOTOGRAPHY CONTRACT</h1>...",
            "status": "draft",
            "createdAt": "2025-03-01T10:00:00.000Z",
            "updatedAt": "2025-03-01T10:00:00.000Z"
        }
    """

    id: str = Field(..., description="Unique contract identifier")
    vendor_id: str = Field(..., description="ID of the vendor who owns this contract")
    client_name: str = Field(..., description="Name of the client")
    event_date: str = Field(..., description="Date of the wedding event (ISO date)")
    event_venue: str = Field(..., description="Venue of the event")
    service_package: str = Field(..., description="Service package description")
    amount: float = Field(..., description="Contract amount in dollars")
    content: str = Field(..., description="Rich text (HTML) body of the contract")
    status: ContractStatus = Field(default=ContractStatus.DRAFT)
    signature: Signature | None = Field(default=None)
    created_at: str = Field(..., description="ISO timestamp of creation")
    updated_at: str = Field(..., description="ISO timestamp of last update")

    @property
    def is_signed(self) -> bool:
        return self.status == ContractStatus.SIGNED

    @property
    def is_deleted(self) -> bool:
        return self.status == ContractStatus.DELETED

    def to_storage(self) -> dict[str, Any]:
        """Serialize to the camelCase row written to contracts.json."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ContractList(BaseModel):
    """Response for GET /api/contracts."""
    contracts: list[Contract] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


# =============================================================================
# Request Models
# =============================================================================
# Every field is optional; core.validation reports the per-field messages.

class ContractCreateRequest(_CamelModel):
    """Form data for POST /api/contracts."""

    client_name: str | None = None
    event_date: str | None = None
    event_venue: str | None = None
    service_package: str | None = None
    amount: float | str | None = None
    content: str | None = None


class ContractUpdateRequest(ContractCreateRequest):
    """
    Form data for PUT /api/contracts/{id}.

    Only fields present in the request body are validated and applied.
    """

    def provided_fields(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by snake_case name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class SignRequest(BaseModel):
    """Body of POST /api/contracts/{id}/sign."""
    type: str | None = None
    data: str | None = None


class ContractCreatedResponse(BaseModel):
    id: str
