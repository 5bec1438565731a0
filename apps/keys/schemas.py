"""
API Key schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict


class ApiKeyOut(Schema):
    """Issued key - camelCase for frontend compatibility."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    apiKey: str = Field(validation_alias="key")
    userId: UUID = Field(validation_alias="user_id")
    isActive: bool = Field(validation_alias="is_active")
    dateCreated: datetime = Field(validation_alias="created_at")
    expirationDate: datetime = Field(validation_alias="expires_at")


class ApiKeyCreateIn(Schema):
    username: str
    password: str


class ApiKeyStateIn(Schema):
    isActive: bool
