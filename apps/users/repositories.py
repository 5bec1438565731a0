"""
User store backed by the Django ORM.
"""

from typing import Protocol

from .models import User


class UserStore(Protocol):
    """Read-only lookup of users by username."""

    def get(self, username: str) -> User | None: ...


class UserRepository:
    def get(self, username: str) -> User | None:
        return User.objects.filter(username=username).first()
