"""
API Key model.
"""

import uuid
from django.db import models
from apps.users.models import User


class ApiKey(models.Model):
    """Issued API key; the token itself is only stored encrypted."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="api_keys", db_column="userId")
    key_hash = models.CharField(max_length=64, unique=True, db_column="keyHash")
    encrypted_key = models.TextField(db_column="encryptedKey")
    is_active = models.BooleanField(default=True, db_column="isActive")
    created_at = models.DateTimeField(db_column="createdAt")
    expires_at = models.DateTimeField(db_column="expiresAt")

    class Meta:
        db_table = "api_keys"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.id} ({self.user_id})"
