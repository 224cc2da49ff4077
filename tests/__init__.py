# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Wedding Vendor Contracts API:
# - test_models.py / test_validation.py: Schemas and form validation
# - test_json_store.py / test_signatures.py / test_formatting.py: lib/
# - test_contract_service.py / test_pdf_service.py: core services
# - test_contract_writer.py: AI drafting with mocked OpenAI
# - test_api_*.py: Endpoint tests through the FastAPI TestClient
#
# Run tests with: pytest
# =============================================================================
