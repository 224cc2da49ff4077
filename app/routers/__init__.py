# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - contracts.py: Contract CRUD, signing and PDF export
# - ai_assist.py: AI contract drafting
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import ai_assist
from . import contracts
from . import health

__all__ = [
    "ai_assist",
    "contracts",
    "health",
]
