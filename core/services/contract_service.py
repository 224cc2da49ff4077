# =============================================================================
# core/services/contract_service.py - Contract Business Logic
# =============================================================================
# Handles contract CRUD and the status lifecycle:
#
#   draft --sign--> signed --delete--> deleted
#     \____________delete____________/
#
# - Only drafts can be edited or signed
# - Deletion is a soft delete; deleted contracts behave as if they never
#   existed (404 everywhere, excluded from listings)
# - Every contract belongs to one vendor; other vendors get 403
#
# All read-modify-write cycles run inside a store transaction so the
# status check and the write see the same data.
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from pydantic import ValidationError

from app.config import settings
from app.exceptions import (
    ContractAccessDeniedError,
    ContractAlreadySignedError,
    ContractNotFoundError,
    ContractSignedError,
    ContractValidationError,
    InvalidSignatureError,
    StorageError,
)
from core.models.contract import (
    Contract,
    ContractCreateRequest,
    ContractStatus,
    ContractUpdateRequest,
    Signature,
    SignatureType,
    SignRequest,
)
from core.validation import FIELD_NAMES, parse_amount, validate_contract_data, validate_new_contract
from lib.json_store import CONTRACTS, JsonStore, StoreError
from lib.signatures import SignatureError, normalize_drawn_signature, normalize_typed_signature
from lib.utils import generate_id, utc_now_iso

logger = logging.getLogger(__name__)


class ContractService:
    """
    Service for contract management operations.

    Provides a clean interface between API routes and the JSON store.
    """

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @staticmethod
    def list_contracts(
        vendor_id: str,
        status: ContractStatus | None = None,
        search: str | None = None,
    ) -> list[Contract]:
        """
        List a vendor's contracts, newest first.

        Args:
            vendor_id: Owner of the contracts
            status: Optional filter (draft or signed)
            search: Case-insensitive match on client name, venue or package

        Returns:
            Non-deleted contracts matching the filters
        """
        rows = ContractService._read_rows()
        query = (search or "").strip().lower()

        contracts = []
        for row in rows:
            if row.get("vendorId") != vendor_id:
                continue
            contract = ContractService._parse_row(row)
            if contract is None or contract.is_deleted:
                continue
            if status and contract.status != status:
                continue
            if query and not ContractService._matches(contract, query):
                continue
            contracts.append(contract)

        contracts.sort(key=lambda c: c.created_at, reverse=True)
        return contracts

    @staticmethod
    def get_contract(contract_id: str, vendor_id: str) -> Contract:
        """
        Get a contract by ID.

        Raises:
            ContractNotFoundError: If the contract doesn't exist or was deleted
            ContractAccessDeniedError: If another vendor owns it
        """
        rows = ContractService._read_rows()
        _, contract = ContractService._find_owned(rows, contract_id, vendor_id)
        return contract

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    @staticmethod
    def create_contract(vendor_id: str, request: ContractCreateRequest) -> Contract:
        """
        Create a new draft contract.

        Raises:
            ContractValidationError: If any field is invalid
        """
        fields = request.model_dump(include=set(FIELD_NAMES))
        validation = validate_new_contract(fields)
        if not validation.is_valid:
            raise ContractValidationError(validation.errors)

        now = utc_now_iso()
        contract = Contract(
            id=generate_id("contract"),
            vendor_id=vendor_id,
            client_name=fields["client_name"].strip(),
            event_date=fields["event_date"].strip(),
            event_venue=fields["event_venue"].strip(),
            service_package=fields["service_package"].strip(),
            amount=parse_amount(fields["amount"]),
            content=fields["content"],
            status=ContractStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )

        with ContractService._transaction() as rows:
            rows.append(contract.to_storage())

        logger.info(f"Created contract: {contract.id} for vendor: {vendor_id}")
        return contract

    @staticmethod
    def update_contract(
        contract_id: str,
        vendor_id: str,
        request: ContractUpdateRequest,
    ) -> Contract:
        """
        Apply a partial update to a draft contract.

        Only fields present in the request are validated and written.

        Raises:
            ContractNotFoundError / ContractAccessDeniedError: See get_contract
            ContractSignedError: If the contract is signed
            ContractValidationError: If a supplied field is invalid
        """
        with ContractService._transaction() as rows:
            index, contract = ContractService._find_owned(rows, contract_id, vendor_id)

            if contract.status != ContractStatus.DRAFT:
                raise ContractSignedError(contract_id)

            updates = request.provided_fields()
            validation = validate_contract_data(updates)
            if not validation.is_valid:
                raise ContractValidationError(validation.errors)

            if not updates:
                return contract  # Nothing to update

            if "amount" in updates:
                updates["amount"] = parse_amount(updates["amount"])
            for name in ("client_name", "event_date", "event_venue", "service_package"):
                if name in updates:
                    updates[name] = updates[name].strip()

            updated = contract.model_copy(update={**updates, "updated_at": utc_now_iso()})
            rows[index] = updated.to_storage()

        logger.info(f"Updated contract: {contract_id} fields: {sorted(updates)}")
        return updated

    @staticmethod
    def sign_contract(contract_id: str, vendor_id: str, request: SignRequest) -> Contract:
        """
        Attach a signature and move the contract to signed.

        Drawn signatures are normalised to a compact PNG data URL;
        typed signatures are trimmed.

        Raises:
            ContractNotFoundError / ContractAccessDeniedError: See get_contract
            ContractAlreadySignedError: If the contract is already signed
            InvalidSignatureError: If the signature data is unusable
        """
        with ContractService._transaction() as rows:
            index, contract = ContractService._find_owned(rows, contract_id, vendor_id)

            if not contract.status.can_transition_to(ContractStatus.SIGNED):
                raise ContractAlreadySignedError(contract_id)

            signature = ContractService._build_signature(request)
            now = utc_now_iso()
            signed = contract.model_copy(update={
                "status": ContractStatus.SIGNED,
                "signature": signature,
                "updated_at": now,
            })
            rows[index] = signed.to_storage()

        logger.info(f"Signed contract: {contract_id} ({signature.type.value} signature)")
        return signed

    @staticmethod
    def delete_contract(contract_id: str, vendor_id: str) -> Contract:
        """
        Soft delete a contract (draft or signed).

        Raises:
            ContractNotFoundError / ContractAccessDeniedError: See get_contract
        """
        with ContractService._transaction() as rows:
            index, contract = ContractService._find_owned(rows, contract_id, vendor_id)

            deleted = contract.model_copy(update={
                "status": ContractStatus.DELETED,
                "updated_at": utc_now_iso(),
            })
            rows[index] = deleted.to_storage()

        logger.info(f"Deleted contract: {contract_id} (was {contract.status.value})")
        return deleted

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _build_signature(request: SignRequest) -> Signature:
        if not request.type or not request.data:
            raise InvalidSignatureError("Invalid signature data")

        try:
            signature_type = SignatureType(request.type)
        except ValueError:
            raise InvalidSignatureError("Invalid signature type")

        try:
            if signature_type == SignatureType.DRAWN:
                data = normalize_drawn_signature(
                    request.data,
                    max_width=settings.SIGNATURE_MAX_WIDTH,
                    max_bytes=settings.max_signature_size_bytes,
                )
            else:
                data = normalize_typed_signature(request.data)
        except SignatureError as e:
            logger.warning(f"Rejected {signature_type.value} signature: {e.message}")
            raise InvalidSignatureError(e.message)

        return Signature(type=signature_type, data=data, timestamp=utc_now_iso())

    @staticmethod
    def _find_owned(
        rows: list[dict[str, Any]],
        contract_id: str,
        vendor_id: str,
    ) -> tuple[int, Contract]:
        for index, row in enumerate(rows):
            if row.get("id") != contract_id:
                continue
            contract = ContractService._parse_row(row)
            if contract is None or contract.is_deleted:
                break
            if contract.vendor_id != vendor_id:
                logger.warning(f"Vendor {vendor_id} denied access to contract {contract_id}")
                raise ContractAccessDeniedError(contract_id)
            return index, contract

        raise ContractNotFoundError(contract_id)

    @staticmethod
    def _parse_row(row: dict[str, Any]) -> Contract | None:
        try:
            return Contract.model_validate(row)
        except ValidationError as e:
            logger.warning(f"Skipping malformed contract row {row.get('id')!r}: {e.error_count()} errors")
            return None

    @staticmethod
    def _matches(contract: Contract, query: str) -> bool:
        haystacks = (contract.client_name, contract.event_venue, contract.service_package)
        return any(query in text.lower() for text in haystacks)

    @staticmethod
    def _read_rows() -> list[dict[str, Any]]:
        try:
            return JsonStore.get_store().read(CONTRACTS)
        except StoreError as e:
            logger.error(f"Failed to read contracts: {e}")
            raise StorageError(e.message)

    @staticmethod
    @contextmanager
    def _transaction() -> Iterator[list[dict[str, Any]]]:
        try:
            with JsonStore.get_store().transaction(CONTRACTS) as rows:
                yield rows
        except StoreError as e:
            logger.error(f"Failed to update contracts: {e}")
            raise StorageError(e.message)
