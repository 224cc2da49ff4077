# =============================================================================
# tests/test_contract_service.py - Contract Lifecycle Tests
# =============================================================================
# Tests for core/services/contract_service.py:
# - Create / list / get with ownership checks
# - Partial updates on drafts only
# - draft -> signed -> deleted state machine
# - Signature normalisation on sign
#
# The autouse `store` fixture gives every test an empty contracts.json.
# =============================================================================

import pytest

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
    ContractCreateRequest,
    ContractStatus,
    ContractUpdateRequest,
    SignatureType,
    SignRequest,
)
from core.services.contract_service import ContractService
from lib.json_store import CONTRACTS

VENDOR = "user_photographer_001"
OTHER_VENDOR = "user_caterer_001"


@pytest.fixture
def create_request():
    return ContractCreateRequest(
        client_name="  Emma Wilson ",
        event_date="2099-06-14",
        event_venue="Rosewood Manor",
        service_package="Full day coverage",
        amount="4500",
        content="<p>Terms</p>",
    )


@pytest.fixture
def draft(create_request):
    return ContractService.create_contract(VENDOR, create_request)


# =============================================================================
# Create / Read
# =============================================================================

class TestCreateContract:
    """Tests for create_contract."""

    def test_creates_draft(self, draft):
        assert draft.status == ContractStatus.DRAFT
        assert draft.vendor_id == VENDOR
        assert draft.id.startswith("contract_")
        assert draft.created_at == draft.updated_at
        assert draft.signature is None

    def test_normalises_fields(self, draft):
        assert draft.client_name == "Emma Wilson"
        assert draft.amount == 4500.0

    def test_persists_camel_case_row(self, draft, store):
        rows = store.read(CONTRACTS)
        assert len(rows) == 1
        assert rows[0]["clientName"] == "Emma Wilson"
        assert rows[0]["vendorId"] == VENDOR
        assert "signature" not in rows[0]

    def test_invalid_form_raises_with_field_errors(self):
        with pytest.raises(ContractValidationError) as exc_info:
            ContractService.create_contract(VENDOR, ContractCreateRequest(client_name="Emma"))

        errors = exc_info.value.details
        assert "clientName" not in errors
        assert errors["amount"] == "Please enter a valid amount"
        assert errors["content"] == "Contract content is required"

    def test_invalid_form_writes_nothing(self, store):
        with pytest.raises(ContractValidationError):
            ContractService.create_contract(VENDOR, ContractCreateRequest())
        assert store.read(CONTRACTS) == []


class TestListAndGet:
    """Tests for list_contracts and get_contract."""

    def test_list_only_own_contracts(self, draft, create_request):
        ContractService.create_contract(OTHER_VENDOR, create_request)

        contracts = ContractService.list_contracts(VENDOR)
        assert [c.id for c in contracts] == [draft.id]

    def test_list_newest_first(self, store):
        store.write(CONTRACTS, [
            _row("contract_old", created_at="2025-01-01T00:00:00.000Z"),
            _row("contract_new", created_at="2025-02-01T00:00:00.000Z"),
        ])

        ids = [c.id for c in ContractService.list_contracts(VENDOR)]
        assert ids == ["contract_new", "contract_old"]

    def test_list_status_filter_and_search(self, store):
        store.write(CONTRACTS, [
            _row("c1", client_name="Emma Wilson"),
            _row("c2", client_name="Liam Chen", status="signed"),
            _row("c3", client_name="Ava Stone", event_venue="Wilson Hall"),
            _row("c4", client_name="Gone", status="deleted"),
        ])

        signed = ContractService.list_contracts(VENDOR, status=ContractStatus.SIGNED)
        assert [c.id for c in signed] == ["c2"]

        found = {c.id for c in ContractService.list_contracts(VENDOR, search="WILSON")}
        assert found == {"c1", "c3"}

    def test_list_skips_deleted_and_malformed_rows(self, store):
        store.write(CONTRACTS, [
            _row("c1"),
            _row("c2", status="deleted"),
            {"id": "broken", "vendorId": VENDOR},
        ])

        assert [c.id for c in ContractService.list_contracts(VENDOR)] == ["c1"]

    def test_get_other_vendors_contract(self, draft):
        with pytest.raises(ContractAccessDeniedError):
            ContractService.get_contract(draft.id, OTHER_VENDOR)

    def test_get_unknown_contract(self):
        with pytest.raises(ContractNotFoundError):
            ContractService.get_contract("contract_missing", VENDOR)

    def test_corrupt_store_raises_storage_error(self, store):
        store.path_for(CONTRACTS).write_text("garbage")
        with pytest.raises(StorageError):
            ContractService.list_contracts(VENDOR)


# =============================================================================
# Update
# =============================================================================

class TestUpdateContract:
    """Tests for update_contract."""

    def test_partial_update(self, draft):
        updated = ContractService.update_contract(
            draft.id, VENDOR, ContractUpdateRequest(event_venue=" The Barn ", amount=5000)
        )

        assert updated.event_venue == "The Barn"
        assert updated.amount == 5000.0
        assert updated.client_name == draft.client_name
        assert updated.updated_at >= draft.updated_at

        stored = ContractService.get_contract(draft.id, VENDOR)
        assert stored.event_venue == "The Barn"

    def test_only_provided_fields_are_validated(self, draft):
        # content is not sent, so its absence is not an error
        updated = ContractService.update_contract(
            draft.id, VENDOR, ContractUpdateRequest(client_name="Emma W.")
        )
        assert updated.content == draft.content

    def test_invalid_update(self, draft):
        with pytest.raises(ContractValidationError) as exc_info:
            ContractService.update_contract(draft.id, VENDOR, ContractUpdateRequest(amount=0))
        assert exc_info.value.details == {"amount": "Amount must be greater than 0"}

    def test_empty_update_is_a_no_op(self, draft):
        unchanged = ContractService.update_contract(draft.id, VENDOR, ContractUpdateRequest())
        assert unchanged.model_dump() == draft.model_dump()

    def test_signed_contract_cannot_be_edited(self, draft):
        ContractService.sign_contract(draft.id, VENDOR, SignRequest(type="typed", data="Emma Wilson"))

        with pytest.raises(ContractSignedError) as exc_info:
            ContractService.update_contract(draft.id, VENDOR, ContractUpdateRequest(event_venue="X"))
        assert exc_info.value.message == "Cannot edit signed contracts"

    def test_other_vendor_cannot_update(self, draft):
        with pytest.raises(ContractAccessDeniedError):
            ContractService.update_contract(draft.id, OTHER_VENDOR, ContractUpdateRequest(event_venue="X"))


# =============================================================================
# Sign
# =============================================================================

class TestSignContract:
    """Tests for sign_contract."""

    def test_typed_signature(self, draft):
        signed = ContractService.sign_contract(
            draft.id, VENDOR, SignRequest(type="typed", data="  Emma   Wilson ")
        )

        assert signed.status == ContractStatus.SIGNED
        assert signed.signature.type == SignatureType.TYPED
        assert signed.signature.data == "Emma Wilson"
        assert signed.signature.timestamp.endswith("Z")

    def test_drawn_signature_is_normalised(self, draft, signature_factory):
        data_url = signature_factory(width=1200, height=300)
        signed = ContractService.sign_contract(draft.id, VENDOR, SignRequest(type="drawn", data=data_url))

        assert signed.signature.type == SignatureType.DRAWN
        assert signed.signature.data.startswith("data:image/png;base64,")
        assert signed.signature.data != data_url

    def test_signing_twice(self, draft):
        ContractService.sign_contract(draft.id, VENDOR, SignRequest(type="typed", data="Emma"))

        with pytest.raises(ContractAlreadySignedError) as exc_info:
            ContractService.sign_contract(draft.id, VENDOR, SignRequest(type="typed", data="Emma"))
        assert exc_info.value.message == "Contract is already signed"

    @pytest.mark.parametrize("request_body,message", [
        ({}, "Invalid signature data"),
        ({"type": "typed"}, "Invalid signature data"),
        ({"type": "stamp", "data": "x"}, "Invalid signature type"),
        ({"type": "typed", "data": "   "}, "Signature is empty"),
        ({"type": "drawn", "data": "not a data url"}, "Drawn signature must be an image data URL"),
    ])
    def test_rejected_signatures(self, draft, request_body, message):
        with pytest.raises(InvalidSignatureError) as exc_info:
            ContractService.sign_contract(draft.id, VENDOR, SignRequest(**request_body))
        assert exc_info.value.message == message

        # Still a draft
        assert ContractService.get_contract(draft.id, VENDOR).status == ContractStatus.DRAFT

    def test_blank_canvas_rejected(self, draft, blank_signature):
        with pytest.raises(InvalidSignatureError, match="Signature is empty"):
            ContractService.sign_contract(draft.id, VENDOR, SignRequest(type="drawn", data=blank_signature))


# =============================================================================
# Delete
# =============================================================================

class TestDeleteContract:
    """Tests for delete_contract (soft delete)."""

    def test_delete_draft(self, draft, store):
        deleted = ContractService.delete_contract(draft.id, VENDOR)

        assert deleted.status == ContractStatus.DELETED
        assert store.read(CONTRACTS)[0]["status"] == "deleted"

    def test_delete_signed(self, draft):
        ContractService.sign_contract(draft.id, VENDOR, SignRequest(type="typed", data="Emma"))
        assert ContractService.delete_contract(draft.id, VENDOR).status == ContractStatus.DELETED

    def test_deleted_contract_is_gone_everywhere(self, draft):
        ContractService.delete_contract(draft.id, VENDOR)

        assert ContractService.list_contracts(VENDOR) == []
        with pytest.raises(ContractNotFoundError):
            ContractService.get_contract(draft.id, VENDOR)
        with pytest.raises(ContractNotFoundError):
            ContractService.update_contract(draft.id, VENDOR, ContractUpdateRequest(event_venue="X"))
        with pytest.raises(ContractNotFoundError):
            ContractService.sign_contract(draft.id, VENDOR, SignRequest(type="typed", data="Emma"))
        with pytest.raises(ContractNotFoundError):
            ContractService.delete_contract(draft.id, VENDOR)

    def test_other_vendor_cannot_delete(self, draft):
        with pytest.raises(ContractAccessDeniedError):
            ContractService.delete_contract(draft.id, OTHER_VENDOR)


# =============================================================================
# Helpers
# =============================================================================

def _row(contract_id: str, **overrides) -> dict:
    row = {
        "id": contract_id,
        "vendorId": VENDOR,
        "clientName": "Emma Wilson",
        "eventDate": "2099-06-14",
        "eventVenue": "Rosewood Manor",
        "servicePackage": "Full day",
        "amount": 4500,
        "content": "<p>Terms</p>",
        "status": "draft",
        "createdAt": "2025-01-15T10:00:00.000Z",
        "updatedAt": "2025-01-15T10:00:00.000Z",
    }
    for name, value in overrides.items():
        camel = "".join(part if i == 0 else part.capitalize() for i, part in enumerate(name.split("_")))
        row[camel] = value
    return row
