# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .auth_service import AuthService
from .contract_service import ContractService
from .pdf_service import PdfService

__all__ = [
    "AuthService",
    "ContractService",
    "PdfService",
]
