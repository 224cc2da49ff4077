# =============================================================================
# app/routers/ai_assist.py - AI Contract Drafting Endpoints
# =============================================================================
# POST drafts contract text from the form details; GET reports whether a
# hosted model is configured. Without a model, drafts come from templates.
# =============================================================================

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from agents.contract_writer import generate_contract_content
from app.auth import AuthUser, get_current_user
from app.config import settings
from app.exceptions import AIRequestValidationError
from core.models.ai import AIContentRequest, AIContentResponse, AIStatusResponse, ContractDetails
from core.validation import parse_amount, validate_ai_request

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AIContentResponse, response_model_exclude_none=True)
async def generate_content(
    request: AIContentRequest,
    user: AuthUser = Depends(get_current_user),
):
    """
    Draft contract text for the given details.

    Returns:
        {"success": true, "content": "...", "isFallback": false}

    Raises:
        400: If any contract detail is missing or invalid
    """
    errors = validate_ai_request(request)
    if errors:
        raise AIRequestValidationError(errors)

    details = ContractDetails.model_validate(
        {**request.model_dump(), "amount": parse_amount(request.amount)}
    )
    logger.info(f"AI assist requested by {user.id} for a {details.vendor_type.value} contract")

    # The OpenAI client is synchronous
    return await run_in_threadpool(generate_contract_content, details)


@router.get("", response_model=AIStatusResponse)
async def ai_status(user: AuthUser = Depends(get_current_user)):
    """
    Report whether AI generation is available.
    """
    return AIStatusResponse(
        status="AI Assist API is running",
        has_api_key=settings.has_ai_key,
        model=settings.AI_MODEL,
    )
