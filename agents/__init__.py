# =============================================================================
# agents/ - AI Contract Drafting
# =============================================================================
# This package drafts wedding vendor contracts:
# - contract_writer.py: Calls the hosted model, falls back to templates
# - fallback_templates.py: Vendor template contracts used without a model
#
# Prompts:
# - prompts/contract_writer_system.py: System prompt and vendor briefs
# =============================================================================

from agents.contract_writer import (
    ContractGenerationError,
    ContractWriterAgent,
    DraftResult,
    generate_contract_content,
)
from agents.fallback_templates import generate_fallback_content, get_template

__all__ = [
    # Agent
    "ContractWriterAgent",
    "ContractGenerationError",
    "DraftResult",
    "generate_contract_content",
    # Templates
    "generate_fallback_content",
    "get_template",
]
