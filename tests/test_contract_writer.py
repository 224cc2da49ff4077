# =============================================================================
# tests/test_contract_writer.py - Contract Writer Tests
# =============================================================================
# This module contains tests for:
# - Prompt building (vendor briefs, exact details)
# - Fallback template contracts
# - ContractWriterAgent logic (with mocked OpenAI)
# - Fallback on missing key, API errors and empty responses
#
# Tests use mocked OpenAI responses to avoid API costs.
# =============================================================================

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from agents.contract_writer import (
    ContractGenerationError,
    ContractWriterAgent,
    generate_contract_content,
)
from agents.fallback_templates import GENERIC_TEMPLATE, generate_fallback_content, get_template
from agents.prompts.contract_writer_system import build_contract_writer_prompt, build_user_message
from core.models.ai import ContractDetails
from core.models.user import VendorType


@pytest.fixture
def details():
    return ContractDetails(
        vendor_type=VendorType.PHOTOGRAPHER,
        client_name="Emma Wilson",
        event_date="2025-06-14",
        event_venue="Rosewood Manor",
        service_package="Full day coverage",
        amount=4500,
        vendor_name="Lumière Wedding Photography",
    )


def _completion(content: str | None) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


# =============================================================================
# Prompt Tests
# =============================================================================

class TestPrompts:
    """Test system prompt construction."""

    def test_prompt_contains_exact_details(self, details):
        prompt = build_contract_writer_prompt(details)

        assert "Vendor Business Name: Lumière Wedding Photography" in prompt
        assert "Client Name: Emma Wilson" in prompt
        assert "Event Date: Saturday, June 14, 2025" in prompt
        assert "Total Amount: $4,500.00" in prompt
        assert "Do NOT include signature lines" in prompt

    @pytest.mark.parametrize("vendor_type,phrase", [
        (VendorType.PHOTOGRAPHER, "photographer"),
        (VendorType.CATERER, "caterer"),
        (VendorType.FLORIST, "florist"),
    ])
    def test_vendor_brief_selected(self, details, vendor_type, phrase):
        prompt = build_contract_writer_prompt(details.model_copy(update={"vendor_type": vendor_type}))
        assert f"professional wedding/event {phrase}" in prompt

    def test_user_message_names_vendor_type(self, details):
        assert "professional photographer contract" in build_user_message(details)


# =============================================================================
# Fallback Template Tests
# =============================================================================

class TestFallbackTemplates:
    """Test template contracts."""

    def test_photography_template(self, details):
        text = generate_fallback_content(details, today=date(2025, 3, 1))

        assert text.startswith("WEDDING PHOTOGRAPHY CONTRACT")
        assert "made and entered into on 3/1/2025" in text
        assert "Lumière Wedding Photography (\"Photographer\")" in text
        assert "on Saturday, June 14, 2025 at Rosewood Manor" in text
        assert "The total fee for the photography services is $4,500.00" in text
        assert "($2,250.00)" in text
        assert "remaining balance of $2,250.00 is due 30 days prior" in text
        assert "{" not in text

    @pytest.mark.parametrize("vendor_type,title,days", [
        (VendorType.CATERER, "WEDDING CATERING CONTRACT", 14),
        (VendorType.FLORIST, "WEDDING FLORAL CONTRACT", 14),
    ])
    def test_other_vendor_templates(self, details, vendor_type, title, days):
        text = generate_fallback_content(details.model_copy(update={"vendor_type": vendor_type}))

        assert text.startswith(title)
        assert f"is due {days} days prior to the Event date" in text

    def test_odd_amount_split(self, details):
        text = generate_fallback_content(details.model_copy(update={"amount": 1000.01}))
        assert "($500.00)" in text or "($500.01)" in text
        assert "$1,000.01" in text

    def test_unknown_vendor_uses_generic(self):
        assert get_template(None) is GENERIC_TEMPLATE
        assert GENERIC_TEMPLATE.balance_due_days == 30


# =============================================================================
# Agent Tests
# =============================================================================

class TestContractWriterAgent:
    """Test ContractWriterAgent with mocked OpenAI."""

    def test_generate_calls_chat_completions(self, details):
        client = MagicMock()
        client.chat.completions.create.return_value = _completion("  CONTRACT TEXT  ")
        agent = ContractWriterAgent(api_key="test-key", client=client)

        assert agent.generate(details) == "CONTRACT TEXT"

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "anthropic/claude-3-haiku"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 3000
        assert [m["role"] for m in kwargs["messages"]] == ["system", "user"]
        assert "Emma Wilson" in kwargs["messages"][0]["content"]

    def test_draft_returns_model_text(self, details):
        client = MagicMock()
        client.chat.completions.create.return_value = _completion("AI CONTRACT")

        result = ContractWriterAgent(client=client).draft(details)

        assert result.content == "AI CONTRACT"
        assert result.is_fallback is False

    def test_not_configured(self, details):
        agent = ContractWriterAgent(api_key="")
        assert not agent.is_configured

        with pytest.raises(ContractGenerationError) as exc_info:
            agent.generate(details)
        assert exc_info.value.code == "NOT_CONFIGURED"
        assert "OPENROUTER_API_KEY" in exc_info.value.suggestion

    def test_api_error_falls_back(self, details):
        client = MagicMock()
        client.chat.completions.create.side_effect = RuntimeError("502 Bad Gateway")

        result = ContractWriterAgent(client=client).draft(details)

        assert result.is_fallback is True
        assert result.content.startswith("WEDDING PHOTOGRAPHY CONTRACT")

    @pytest.mark.parametrize("response", [_completion(None), _completion("   "), MagicMock(choices=[])])
    def test_empty_response_falls_back(self, details, response):
        client = MagicMock()
        client.chat.completions.create.return_value = response

        with pytest.raises(ContractGenerationError, match="Invalid response format"):
            ContractWriterAgent(client=client).generate(details)
        assert ContractWriterAgent(client=client).draft(details).is_fallback

    def test_client_built_from_settings(self):
        with patch("agents.contract_writer.OpenAI") as mock_openai:
            agent = ContractWriterAgent(api_key="sk-or-test")

        assert agent.is_configured
        kwargs = mock_openai.call_args.kwargs
        assert kwargs["api_key"] == "sk-or-test"
        assert kwargs["base_url"] == "https://openrouter.ai/api/v1"
        assert kwargs["default_headers"]["X-Title"] == "Wedding Vendor Contract Builder"


class TestGenerateContractContent:
    """Test the endpoint-level helper."""

    def test_without_key_serves_template(self, details):
        response = generate_contract_content(details)

        assert response.success is True
        assert response.is_fallback is True
        assert response.content.startswith("WEDDING PHOTOGRAPHY CONTRACT")

    def test_with_agent(self, details):
        client = MagicMock()
        client.chat.completions.create.return_value = _completion("AI CONTRACT")

        response = generate_contract_content(details, agent=ContractWriterAgent(client=client))

        assert response.content == "AI CONTRACT"
        assert response.is_fallback is False
