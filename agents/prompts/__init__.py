# =============================================================================
# agents/prompts/ - System Prompts for AI Agents
# =============================================================================
# This package contains system prompts for each agent:
# - contract_writer_system.py: Contract writer prompt and vendor briefs
# =============================================================================

from agents.prompts.contract_writer_system import (
    CONTRACT_WRITER_SYSTEM_PROMPT,
    VENDOR_PROMPTS,
    build_contract_writer_prompt,
    build_user_message,
    get_vendor_prompt,
)

__all__ = [
    "CONTRACT_WRITER_SYSTEM_PROMPT",
    "VENDOR_PROMPTS",
    "build_contract_writer_prompt",
    "build_user_message",
    "get_vendor_prompt",
]
