"""
Todos endpoints.

Every route requires an X-Api-Key header; todos are scoped to the key owner.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from core.context import AppContext
from core.errors import NotFoundError
from utils.auth import ApiKeyAuth, get_current_user_id
from .models import Todo
from .schemas import TodoOut, TodoCreateIn, TodoUpdateIn


def build_router(context: AppContext) -> Router:
    router = Router(auth=ApiKeyAuth(context.api_key_service))
    todos = context.todos

    def require_title(title: str) -> None:
        if not title.strip():
            raise HttpError(400, "Title is required")

    def get_owned(request: HttpRequest, todo_id: UUID) -> Todo:
        todo = todos.get(todo_id, get_current_user_id(request))
        if todo is None:
            raise NotFoundError(f"Todo item with id: '{todo_id}' does not exist")
        return todo

    @router.get("", response=list[TodoOut])
    def list_todos(request: HttpRequest):
        """List the caller's todos, newest first."""
        return todos.get_all(get_current_user_id(request))

    @router.get("/{todo_id}", response=TodoOut)
    def get_todo(request: HttpRequest, todo_id: UUID):
        return get_owned(request, todo_id)

    @router.post("", response={201: TodoOut})
    def create_todo(request: HttpRequest, data: TodoCreateIn):
        """Create a todo; new items start not done."""
        require_title(data.title)

        todo = Todo(
            user_id=get_current_user_id(request),
            title=data.title,
            description=data.description,
            difficulty=data.difficulty,
            is_done=False,
        )
        todos.save(todo)
        return 201, todo

    @router.put("/{todo_id}", response=TodoOut)
    def update_todo(request: HttpRequest, todo_id: UUID, data: TodoUpdateIn):
        require_title(data.title)
        todo = get_owned(request, todo_id)
        todo.title = data.title
        todo.description = data.description
        todos.save(todo)
        return todo

    @router.patch("/{todo_id}/toggleStatus", response=TodoOut)
    def toggle_status(request: HttpRequest, todo_id: UUID):
        """Flip the done flag."""
        todo = get_owned(request, todo_id)
        todo.is_done = not todo.is_done
        todos.save(todo)
        return todo

    @router.delete("/{todo_id}", response={204: None})
    def delete_todo(request: HttpRequest, todo_id: UUID):
        get_owned(request, todo_id)
        todos.delete(todo_id, get_current_user_id(request))
        return 204, None

    return router
