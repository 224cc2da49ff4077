# =============================================================================
# lib/seed_data.py - Demo Accounts
# =============================================================================
# Mock vendor accounts written to users.json the first time the store
# starts against an empty data directory. Passwords are plaintext: this is
# a demo login, not a credential store.
# =============================================================================

DEFAULT_USERS = [
    {
        "id": "user_photographer_001",
        "email": "photographer@example.com",
        "password": "password123",
        "vendorType": "photographer",
        "name": "Lumière Wedding Photography",
    },
    {
        "id": "user_caterer_001",
        "email": "caterer@example.com",
        "password": "password123",
        "vendorType": "caterer",
        "name": "Golden Fork Catering",
    },
    {
        "id": "user_florist_001",
        "email": "florist@example.com",
        "password": "password123",
        "vendorType": "florist",
        "name": "Petal & Stem Florals",
    },
]

DEFAULT_COLLECTIONS = {
    "users": DEFAULT_USERS,
    "contracts": [],
}
