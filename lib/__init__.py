# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - json_store.py: Flat JSON file store (users.json, contracts.json)
# - seed_data.py: Demo vendor accounts for an empty data directory
# - signatures.py: Drawn/typed signature decoding and normalisation
# - html_text.py: Rich text (HTML) to plain paragraphs
# - formatting.py: en-US currency/date/timestamp formatting
# - utils.py: Shared utilities (error base class, IDs, timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.json_store import CONTRACTS, USERS, JsonStore, StoreError
from lib.signatures import (
    SignatureError,
    format_signature_for_display,
    normalize_drawn_signature,
    normalize_typed_signature,
)
from lib.utils import ApplicationError, generate_id, utc_now_iso

__all__ = [
    # Store
    "JsonStore",
    "StoreError",
    "USERS",
    "CONTRACTS",
    # Signatures
    "SignatureError",
    "format_signature_for_display",
    "normalize_drawn_signature",
    "normalize_typed_signature",
    # Utils
    "ApplicationError",
    "generate_id",
    "utc_now_iso",
]
