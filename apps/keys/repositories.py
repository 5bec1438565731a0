"""
API key store.

Records cross the store boundary as plain dataclasses holding the clear
token; hashing and encryption happen only here.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from .models import ApiKey
from .tokens import decrypt_api_key, encrypt_api_key, hash_api_key


@dataclass
class ApiKeyRecord:
    id: UUID
    key: str
    user_id: UUID
    is_active: bool
    created_at: datetime
    expires_at: datetime


class ApiKeyStore(Protocol):
    """Contract for API key persistence."""

    def save(self, api_key: ApiKeyRecord) -> None: ...
    def get_by_user(self, user_id: UUID) -> list[ApiKeyRecord]: ...
    def get_by_id(self, key_id: UUID) -> ApiKeyRecord | None: ...
    def get_by_key(self, key: str) -> ApiKeyRecord | None: ...
    def set_active(self, key_id: UUID, is_active: bool) -> None: ...


class ApiKeyRepository:
    def __init__(self, pepper: str, encryption_key: str):
        self.pepper = pepper
        self.encryption_key = encryption_key

    def _to_record(self, row: ApiKey) -> ApiKeyRecord:
        return ApiKeyRecord(
            id=row.id,
            key=decrypt_api_key(row.encrypted_key, self.encryption_key),
            user_id=row.user_id,
            is_active=row.is_active,
            created_at=row.created_at,
            expires_at=row.expires_at,
        )

    def save(self, api_key: ApiKeyRecord) -> None:
        ApiKey.objects.create(
            id=api_key.id,
            user_id=api_key.user_id,
            key_hash=hash_api_key(api_key.key, self.pepper),
            encrypted_key=encrypt_api_key(api_key.key, self.encryption_key),
            is_active=api_key.is_active,
            created_at=api_key.created_at,
            expires_at=api_key.expires_at,
        )

    def get_by_user(self, user_id: UUID) -> list[ApiKeyRecord]:
        rows = ApiKey.objects.filter(user_id=user_id).order_by("-created_at")
        return [self._to_record(row) for row in rows]

    def get_by_id(self, key_id: UUID) -> ApiKeyRecord | None:
        row = ApiKey.objects.filter(id=key_id).first()
        return self._to_record(row) if row else None

    def get_by_key(self, key: str) -> ApiKeyRecord | None:
        row = ApiKey.objects.filter(key_hash=hash_api_key(key, self.pepper)).first()
        return self._to_record(row) if row else None

    def set_active(self, key_id: UUID, is_active: bool) -> None:
        ApiKey.objects.filter(id=key_id).update(is_active=is_active)
