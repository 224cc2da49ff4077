# =============================================================================
# app/routers/contracts.py - Contract Endpoints
# =============================================================================
# CRUD, signing and PDF export for wedding vendor contracts.
# All endpoints require authentication; vendors only see their own contracts.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.auth import AuthUser, get_current_user
from core.models.contract import (
    Contract,
    ContractCreatedResponse,
    ContractCreateRequest,
    ContractList,
    ContractStatus,
    ContractUpdateRequest,
    SignRequest,
)
from core.services.contract_service import ContractService
from core.services.pdf_service import PdfService

logger = logging.getLogger(__name__)

router = APIRouter()

ContractId = Annotated[str, Path(description="Contract ID, e.g. contract_1718000000000_ab12cd34")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=ContractList)
async def list_contracts(
    user: AuthUser = Depends(get_current_user),
    status_filter: Annotated[
        ContractStatus | None,
        Query(alias="status", description="Filter by status (draft or signed)"),
    ] = None,
    q: Annotated[
        str | None,
        Query(max_length=200, description="Search client name, venue and package"),
    ] = None,
):
    """
    List the vendor's contracts, newest first.

    Deleted contracts are never returned.
    """
    contracts = ContractService.list_contracts(user.id, status=status_filter, search=q)
    return ContractList(contracts=contracts, total=len(contracts))


@router.post("", response_model=ContractCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(
    request: ContractCreateRequest,
    user: AuthUser = Depends(get_current_user),
):
    """
    Create a draft contract.

    Every field is required; failures come back as
    400 with per-field messages in details.
    """
    contract = ContractService.create_contract(user.id, request)
    return ContractCreatedResponse(id=contract.id)


@router.get("/{contract_id}", response_model=Contract)
async def get_contract(
    contract_id: ContractId,
    user: AuthUser = Depends(get_current_user),
):
    """
    Get a contract.

    Returns 404 if it doesn't exist or was deleted, 403 if another vendor
    owns it.
    """
    return ContractService.get_contract(contract_id, user.id)


@router.put("/{contract_id}", response_model=Contract)
async def update_contract(
    contract_id: ContractId,
    request: ContractUpdateRequest,
    user: AuthUser = Depends(get_current_user),
):
    """
    Update a draft contract.

    Only the fields in the body are validated and changed.
    Signed contracts can't be edited.
    """
    return ContractService.update_contract(contract_id, user.id, request)


@router.delete("/{contract_id}")
async def delete_contract(
    contract_id: ContractId,
    user: AuthUser = Depends(get_current_user),
):
    """
    Delete a contract (draft or signed).

    The row is kept with status "deleted" and disappears from the API.
    """
    ContractService.delete_contract(contract_id, user.id)
    return {"success": True, "message": "Contract deleted successfully"}


@router.post("/{contract_id}/sign", response_model=Contract)
async def sign_contract(
    contract_id: ContractId,
    request: SignRequest,
    user: AuthUser = Depends(get_current_user),
):
    """
    Sign a draft contract.

    Body:
        {"type": "drawn", "data": "data:image/png;base64,..."} or
        {"type": "typed", "data": "Emma Wilson"}
    """
    return ContractService.sign_contract(contract_id, user.id, request)


@router.get(
    "/{contract_id}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def export_contract_pdf(
    contract_id: ContractId,
    user: AuthUser = Depends(get_current_user),
):
    """
    Download the contract as a PDF.
    """
    contract = ContractService.get_contract(contract_id, user.id)
    pdf_bytes = PdfService.render_contract(contract)
    filename = PdfService.filename_for(contract)

    logger.info(f"Exported PDF for contract: {contract_id} ({len(pdf_bytes)} bytes)")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
