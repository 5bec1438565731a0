"""
API key issuance and validation.

Invariants:
    - create/update perform exactly one store write on success, lookups none
    - store errors propagate unchanged, nothing is retried
    - quota counts active and inactive keys alike

The quota check and the insert are separate round trips, so two concurrent
requests for the same user can both pass the check.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable
from uuid import UUID

from django.conf import settings

from apps.users.repositories import UserStore
from core.errors import InvalidCredentialsError, NotFoundError, QuotaExceededError
from utils.auth import verify_password
from .repositories import ApiKeyRecord, ApiKeyStore
from .tokens import generate_api_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiKeySettings:
    api_key_limit: int
    expiration_minutes: int

    @classmethod
    def from_settings(cls) -> "ApiKeySettings":
        return cls(
            api_key_limit=settings.API_KEY_LIMIT,
            expiration_minutes=settings.API_KEY_EXPIRATION_MINUTES,
        )


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApiKeyService:
    def __init__(
        self,
        users: UserStore,
        api_keys: ApiKeyStore,
        key_settings: ApiKeySettings,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.users = users
        self.api_keys = api_keys
        self.key_settings = key_settings
        self.clock = clock

    def _authenticate_user(self, username: str, password: str):
        user = self.users.get(username)
        if user is None:
            raise NotFoundError(f"User with Username: '{username}' does not exists!")

        if not verify_password(password, user.password):
            logger.warning(f"[ApiKeys] Wrong password for user {user.username}")
            raise InvalidCredentialsError(f"Wrong password for user: '{user.username}'")

        return user

    def create_api_key(self, username: str, password: str) -> ApiKeyRecord:
        """Issue a new key for the user, subject to the per-user limit."""
        user = self._authenticate_user(username, password)

        existing = self.api_keys.get_by_user(user.id)
        if len(existing) >= self.key_settings.api_key_limit:
            logger.info(f"[ApiKeys] Limit of {self.key_settings.api_key_limit} reached for user {user.id}")
            raise QuotaExceededError("Api key limit is reached")

        now = self.clock()
        api_key = ApiKeyRecord(
            id=uuid.uuid4(),
            key=generate_api_key(),
            user_id=user.id,
            is_active=True,
            created_at=now,
            expires_at=now + timedelta(minutes=self.key_settings.expiration_minutes),
        )
        self.api_keys.save(api_key)

        logger.info(f"[ApiKeys] Issued key {api_key.id} for user {user.id}")
        return api_key

    def get_all_api_keys(self, username: str, password: str) -> list[ApiKeyRecord]:
        user = self._authenticate_user(username, password)
        return list(self.api_keys.get_by_user(user.id))

    def update_api_key_state(self, key_id: UUID, new_state: bool) -> ApiKeyRecord:
        api_key = self.api_keys.get_by_id(key_id)
        if api_key is None:
            raise NotFoundError(f"Api key with Id: '{key_id}' does not exists")

        self.api_keys.set_active(key_id, new_state)
        api_key.is_active = new_state

        logger.info(f"[ApiKeys] Key {key_id} is_active={new_state}")
        return api_key

    def validate_api_key(self, key: str) -> ApiKeyRecord | None:
        """Return the key record if the token is active and unexpired."""
        api_key = self.api_keys.get_by_key(key)
        if api_key is None or not api_key.is_active:
            return None
        if api_key.expires_at <= self.clock():
            return None
        return api_key
