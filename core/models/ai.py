# =============================================================================
# core/models/ai.py - AI Assist Schemas
# =============================================================================
# Request/response models for contract drafting:
# - AIContentRequest: Contract details the generated text must use verbatim
# - AIContentResponse: Generated (or template) contract text
# - AIStatusResponse: Whether a model is configured
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .user import VendorType


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AIContentRequest(_CamelModel):
    """
    Contract details for AI generation.

    Fields are optional and loosely typed at the schema level so that
    validate_ai_request() can list every problem in one response.

    Example:
        {
            "vendorType": "photographer",
            "clientName": "Emma Wilson",
            "eventDate": "2026-06-14",
            "eventVenue": "Rosewood Manor",
            "servicePackage": "Full day coverage",
            "amount": 4500,
            "vendorName": "Lumière Wedding Photography"
        }
    """

    vendor_type: str | None = None
    client_name: str | None = None
    event_date: str | None = None
    event_venue: str | None = None
    service_package: str | None = None
    amount: float | str | None = None
    vendor_name: str | None = None


class ContractDetails(_CamelModel):
    """A validated AIContentRequest: every field present."""

    vendor_type: VendorType
    client_name: str
    event_date: str
    event_venue: str
    service_package: str
    amount: float = Field(..., gt=0)
    vendor_name: str


class AIContentResponse(_CamelModel):
    """Result of POST /api/ai-assist."""

    success: bool
    content: str | None = None
    error: str | None = None
    is_fallback: bool = False


class AIStatusResponse(_CamelModel):
    """Result of GET /api/ai-assist."""

    status: str
    has_api_key: bool
    model: str
