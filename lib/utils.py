# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import secrets
import time
from datetime import datetime, timezone
from typing import Any


# =============================================================================
# ID / Timestamp Utilities
# =============================================================================

def generate_id(prefix: str) -> str:
    """
    Generate a prefixed, roughly time-ordered identifier.

    Args:
        prefix: Entity prefix, e.g. "contract"

    Returns:
        ID like "contract_1718000000000_k3j9x2ab"

    Example:
        contract_id = generate_id("contract")
    """
    millis = int(time.time() * 1000)
    return f"{prefix}_{millis}_{secrets.token_hex(4)}"


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string with a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO timestamp, accepting the trailing "Z" form.

    Raises:
        ValueError: If the string is not ISO 8601
    """
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for library-level errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
