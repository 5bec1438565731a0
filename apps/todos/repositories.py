"""
Todo store backed by the Django ORM.
"""

from typing import Protocol
from uuid import UUID

from .models import Todo


class TodoStore(Protocol):
    """Contract for todo persistence, always scoped to an owner."""

    def get_all(self, user_id: UUID) -> list[Todo]: ...
    def get(self, todo_id: UUID, user_id: UUID) -> Todo | None: ...
    def save(self, todo: Todo) -> None: ...
    def delete(self, todo_id: UUID, user_id: UUID) -> None: ...


class TodoRepository:
    def get_all(self, user_id: UUID) -> list[Todo]:
        return list(Todo.objects.filter(user_id=user_id))

    def get(self, todo_id: UUID, user_id: UUID) -> Todo | None:
        return Todo.objects.filter(id=todo_id, user_id=user_id).first()

    def save(self, todo: Todo) -> None:
        todo.save()

    def delete(self, todo_id: UUID, user_id: UUID) -> None:
        Todo.objects.filter(id=todo_id, user_id=user_id).delete()
