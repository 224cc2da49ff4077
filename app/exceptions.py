# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ContractsAPIException(Exception):
    """
    Base exception for the contracts API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CONTRACTS_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Auth Exceptions
# =============================================================================

class NotAuthenticatedError(ContractsAPIException):
    """Raised when a request carries no session cookie."""

    def __init__(self):
        super().__init__(
            message="Not authenticated",
            code="NOT_AUTHENTICATED",
            status_code=401,
            suggestion="Log in with POST /api/auth/login first",
        )


class InvalidSessionError(ContractsAPIException):
    """Raised when the session cookie is tampered with or expired."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            message="Invalid session",
            code="INVALID_SESSION",
            status_code=401,
            suggestion="Log in again to get a fresh session",
            details={"reason": reason} if reason else None,
        )


class InvalidCredentialsError(ContractsAPIException):
    """Raised when email/password do not match a known vendor."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
            status_code=401,
        )


class LoginValidationError(ContractsAPIException):
    """Raised when the login form itself is malformed."""

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(
            message=message,
            code="LOGIN_VALIDATION_FAILED",
            status_code=400,
            details=errors,
        )


# =============================================================================
# Contract Exceptions
# =============================================================================

class ContractNotFoundError(ContractsAPIException):
    """Raised when a contract ID doesn't exist (or was deleted)."""

    def __init__(self, contract_id: str):
        super().__init__(
            message="Contract not found",
            code="CONTRACT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the contract ID is correct and the contract hasn't been deleted",
            details={"contract_id": contract_id},
        )


class ContractAccessDeniedError(ContractsAPIException):
    """Raised when a vendor touches another vendor's contract."""

    def __init__(self, contract_id: str):
        super().__init__(
            message="Access denied",
            code="CONTRACT_ACCESS_DENIED",
            status_code=403,
            details={"contract_id": contract_id},
        )


class ContractSignedError(ContractsAPIException):
    """Raised when trying to edit a signed contract."""

    def __init__(self, contract_id: str):
        super().__init__(
            message="Cannot edit signed contracts",
            code="CONTRACT_SIGNED",
            status_code=400,
            suggestion="Signed contracts are final. Create a new contract instead",
            details={"contract_id": contract_id},
        )


class ContractAlreadySignedError(ContractsAPIException):
    """Raised when trying to sign a contract twice."""

    def __init__(self, contract_id: str):
        super().__init__(
            message="Contract is already signed",
            code="CONTRACT_ALREADY_SIGNED",
            status_code=400,
            details={"contract_id": contract_id},
        )


class ContractValidationError(ContractsAPIException):
    """Raised when contract fields fail validation."""

    def __init__(self, errors: dict[str, str]):
        super().__init__(
            message="Validation failed",
            code="VALIDATION_FAILED",
            status_code=400,
            suggestion="Fix the fields listed in details and resubmit",
            details=errors,
        )


class InvalidSignatureError(ContractsAPIException):
    """Raised when submitted signature data is unusable."""

    def __init__(self, message: str = "Invalid signature data"):
        super().__init__(
            message=message,
            code="INVALID_SIGNATURE",
            status_code=400,
            suggestion="Send {type: 'drawn', data: 'data:image/png;base64,...'} or {type: 'typed', data: 'Full Name'}",
        )


class PdfExportError(ContractsAPIException):
    """Raised when PDF rendering fails."""

    def __init__(self, contract_id: str, error: str):
        super().__init__(
            message="Failed to generate PDF. Please try again.",
            code="PDF_EXPORT_FAILED",
            status_code=500,
            details={"contract_id": contract_id, "error": error},
        )


# =============================================================================
# AI Assist Exceptions
# =============================================================================

class AIRequestValidationError(ContractsAPIException):
    """Raised when the AI assist request is missing contract details."""

    def __init__(self, errors: list[str]):
        super().__init__(
            message=f"Validation failed: {', '.join(errors)}",
            code="AI_VALIDATION_FAILED",
            status_code=400,
            details={"errors": errors},
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageError(ContractsAPIException):
    """Raised when the JSON data files cannot be read or written."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Storage operation failed: {error}",
            code="STORAGE_ERROR",
            status_code=500,
            suggestion="Check that DATA_DIR exists and is writable",
            details={"error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def contracts_exception_handler(
    request: Request,
    exc: ContractsAPIException
) -> JSONResponse:
    """
    Convert ContractsAPIException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body/query validation errors.

    Malformed bodies are client errors; they map to 400 like the
    field-level validation failures.
    """
    errors = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        errors[".".join(loc) or "body"] = err.get("msg", "Invalid value")

    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation failed",
            "code": "VALIDATION_FAILED",
            "details": errors,
        }
    )
