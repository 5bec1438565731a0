"""
Todo schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict

from .models import Difficulty


class TodoOut(Schema):
    """Todo item - camelCase for frontend compatibility."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    description: str
    difficulty: str
    isDone: bool = Field(validation_alias="is_done")
    dateCreated: datetime = Field(validation_alias="created_at")


class TodoCreateIn(Schema):
    title: str
    description: str = ""
    difficulty: Difficulty = Difficulty.EASY


class TodoUpdateIn(Schema):
    title: str
    description: str = ""
