# =============================================================================
# core/services/auth_service.py - Vendor Account Lookup
# =============================================================================
# Mock authentication against users.json. There is no registration or
# password hashing: the accounts are demo fixtures.
# =============================================================================

import hmac
import logging

from pydantic import ValidationError

from app.exceptions import StorageError
from core.models.user import StoredUser, User
from lib.json_store import USERS, JsonStore, StoreError

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for looking up and authenticating vendor accounts.
    """

    @staticmethod
    def list_users() -> list[StoredUser]:
        """
        Load every account from users.json.

        Rows that don't match the user schema are skipped with a warning.

        Raises:
            StorageError: If users.json cannot be read
        """
        try:
            rows = JsonStore.get_store().read(USERS)
        except StoreError as e:
            logger.error(f"Failed to load users: {e}")
            raise StorageError(e.message)

        users = []
        for row in rows:
            try:
                users.append(StoredUser.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping malformed user row {row.get('id')!r}: {e.error_count()} errors")
        return users

    @staticmethod
    def authenticate_user(email: str, password: str) -> User | None:
        """
        Check an email/password pair.

        Email matching ignores case and surrounding whitespace.

        Returns:
            The user without password, or None if the credentials don't match
        """
        email = email.strip().lower()
        for user in AuthService.list_users():
            if user.email.lower() != email:
                continue
            if hmac.compare_digest(user.password.encode("utf-8"), password.encode("utf-8")):
                logger.info(f"Authenticated user: {user.id}")
                return user.to_public()
            break

        logger.info(f"Failed login attempt for {email}")
        return None

    @staticmethod
    def get_user(user_id: str) -> User | None:
        """Find a user by ID, without password."""
        for user in AuthService.list_users():
            if user.id == user_id:
                return user.to_public()
        return None
