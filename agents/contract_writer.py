# =============================================================================
# agents/contract_writer.py - AI Contract Writer
# =============================================================================
# This module drafts contract text with a hosted model.
#
# The writer's job:
# 1. Build a vendor-specific system prompt with the exact contract details
# 2. Call an OpenAI-compatible chat completions API (OpenRouter by default)
# 3. Return the generated text, or fall back to a template contract when
#    the model is not configured or the call fails
#
# Usage:
#   from agents.contract_writer import ContractWriterAgent
#   agent = ContractWriterAgent()
#   result = agent.draft(details)
#   result.content, result.is_fallback
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from openai import OpenAI

from app.config import settings
from agents.fallback_templates import generate_fallback_content
from agents.prompts.contract_writer_system import build_contract_writer_prompt, build_user_message
from core.models.ai import AIContentResponse, ContractDetails
from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class ContractGenerationError(ApplicationError):
    """
    Error while generating contract text with the hosted model.

    Always caught inside draft(); callers only see it through generate().
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "GENERATION_ERROR")
        super().__init__(message, **kwargs)


@dataclass
class DraftResult:
    """Generated contract text and where it came from."""
    content: str
    is_fallback: bool


# =============================================================================
# Contract Writer Agent
# =============================================================================

class ContractWriterAgent:
    """
    Drafts wedding vendor contracts.

    Example:
        agent = ContractWriterAgent()
        result = agent.draft(details)
        if result.is_fallback:
            print("Model unavailable, used template")

    Attributes:
        model: Model ID sent to the API
        temperature: Generation temperature
        max_tokens: Completion token limit
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        client: Any | None = None,
    ):
        """
        Initialize the writer.

        Args:
            api_key: API key (default: settings.OPENROUTER_API_KEY)
            model: Model ID (default: settings.AI_MODEL)
            temperature: Generation temperature (default: settings.AI_TEMPERATURE)
            max_tokens: Completion limit (default: settings.AI_MAX_TOKENS)
            client: Pre-built OpenAI-compatible client (tests)
        """
        self.api_key = api_key if api_key is not None else settings.OPENROUTER_API_KEY
        self.model = model or settings.AI_MODEL
        self.temperature = temperature if temperature is not None else settings.AI_TEMPERATURE
        self.max_tokens = max_tokens or settings.AI_MAX_TOKENS
        self.client = client

        if self.client is None and self.api_key:
            self.client = OpenAI(
                api_key=self.api_key,
                base_url=settings.AI_BASE_URL,
                timeout=settings.AI_TIMEOUT_SECONDS,
                default_headers={
                    "HTTP-Referer": settings.APP_URL,
                    "X-Title": settings.APP_TITLE,
                },
            )

        logger.info(
            f"ContractWriterAgent initialized with model={self.model}, "
            f"temp={self.temperature}, configured={self.is_configured}"
        )

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    # -------------------------------------------------------------------------
    # Main Entry Points
    # -------------------------------------------------------------------------

    def draft(self, details: ContractDetails) -> DraftResult:
        """
        Draft a contract, falling back to the template on any model failure.

        Args:
            details: Validated contract details

        Returns:
            DraftResult with the text and whether it is template content
        """
        try:
            content = self.generate(details)
            return DraftResult(content=content, is_fallback=False)
        except ContractGenerationError as e:
            logger.warning(f"Contract generation failed, using fallback: {e}")
            return DraftResult(content=generate_fallback_content(details), is_fallback=True)

    def generate(self, details: ContractDetails) -> str:
        """
        Generate contract text with the hosted model.

        Raises:
            ContractGenerationError: If no key is configured, the API call
                fails or the response has no text
        """
        if not self.is_configured:
            raise ContractGenerationError(
                message="OpenRouter API key not configured",
                code="NOT_CONFIGURED",
                suggestion="Set OPENROUTER_API_KEY in your .env file",
            )

        messages = [
            {"role": "system", "content": build_contract_writer_prompt(details)},
            {"role": "user", "content": build_user_message(details)},
        ]

        logger.info(f"Generating {details.vendor_type.value} contract for '{details.client_name[:40]}'")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                messages=messages,
            )
        except Exception as e:
            raise ContractGenerationError(
                message=f"Chat completion call failed: {e}",
                code="API_ERROR",
                suggestion="Check OPENROUTER_API_KEY and network connection",
                details={"model": self.model},
            )

        content = self._extract_content(response)
        logger.debug(f"Generated {len(content)} characters")
        return content

    # -------------------------------------------------------------------------
    # Response Parsing
    # -------------------------------------------------------------------------

    def _extract_content(self, response: Any) -> str:
        """
        Pull the message text out of a chat completion.

        Raises:
            ContractGenerationError: If the response has no usable text
        """
        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = (getattr(message, "content", None) or "").strip()

        if not content:
            raise ContractGenerationError(
                message="Invalid response format from model",
                code="EMPTY_RESPONSE",
                details={"model": self.model},
            )
        return content


# =============================================================================
# Convenience Function
# =============================================================================

def generate_contract_content(
    details: ContractDetails,
    agent: ContractWriterAgent | None = None,
) -> AIContentResponse:
    """
    Draft contract text for the AI assist endpoint.

    Args:
        details: Validated contract details
        agent: Writer to use (default: a new ContractWriterAgent)

    Returns:
        AIContentResponse; is_fallback is set when template content was used
    """
    agent = agent or ContractWriterAgent()
    result = agent.draft(details)
    return AIContentResponse(success=True, content=result.content, is_fallback=result.is_fallback)
