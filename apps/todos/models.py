"""
Todo item model.
"""

import uuid
from django.db import models
from apps.users.models import User


class Difficulty(models.TextChoices):
    EASY = "easy", "Easy"
    MEDIUM = "medium", "Medium"
    HARD = "hard", "Hard"


class Todo(models.Model):
    """Todo item owned by a user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="todos", db_column="userId")
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    difficulty = models.CharField(max_length=10, choices=Difficulty.choices, default=Difficulty.EASY)
    is_done = models.BooleanField(default=False, db_column="isDone")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")

    class Meta:
        db_table = "todos"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title
