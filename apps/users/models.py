"""
User model - owners of API keys and todos.
"""

import uuid
from django.db import models

from utils.auth import hash_password


class UserManager(models.Manager):
    def create_user(self, username: str, password: str, **extra_fields):
        if not username:
            raise ValueError("Username is required")
        user = self.model(username=username, password=hash_password(password), **extra_fields)
        user.save(using=self._db)
        return user


class User(models.Model):
    """Account record; usernames are unique and case-sensitive."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")

    objects = UserManager()

    class Meta:
        db_table = "users"

    def __str__(self) -> str:
        return self.username
