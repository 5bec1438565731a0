"""
Authentication utilities for Django Ninja.
"""

from typing import TYPE_CHECKING

import bcrypt
from django.http import HttpRequest
from ninja.security import APIKeyHeader

if TYPE_CHECKING:
    from apps.keys.repositories import ApiKeyRecord
    from apps.keys.services import ApiKeyService


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash."""
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class ApiKeyAuth(APIKeyHeader):
    """Authenticate requests with an active, unexpired key in X-Api-Key."""

    param_name = "X-Api-Key"

    def __init__(self, service: "ApiKeyService"):
        self.service = service
        super().__init__()

    def authenticate(self, request: HttpRequest, key: str | None) -> "ApiKeyRecord | None":
        if not key:
            return None
        return self.service.validate_api_key(key)


def get_current_user_id(request: HttpRequest):
    """Get the id of the user owning the authenticating API key."""
    return request.auth.user_id
