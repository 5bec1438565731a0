"""
Application context - stores and services wired once at startup.

Routers receive the context explicitly instead of reaching for module-level
singletons.
"""

from dataclasses import dataclass

from django.conf import settings

from apps.keys.repositories import ApiKeyRepository, ApiKeyStore
from apps.keys.services import ApiKeyService, ApiKeySettings
from apps.todos.repositories import TodoRepository, TodoStore
from apps.users.repositories import UserRepository, UserStore


@dataclass(frozen=True)
class AppContext:
    users: UserStore
    api_keys: ApiKeyStore
    todos: TodoStore
    api_key_service: ApiKeyService


def build_context() -> AppContext:
    users = UserRepository()
    api_keys = ApiKeyRepository(
        pepper=settings.API_KEY_PEPPER,
        encryption_key=settings.API_KEY_ENCRYPTION_KEY,
    )
    return AppContext(
        users=users,
        api_keys=api_keys,
        todos=TodoRepository(),
        api_key_service=ApiKeyService(users, api_keys, ApiKeySettings.from_settings()),
    )
