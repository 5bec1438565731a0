"""
Tests for Todos endpoints.
"""

import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.keys.models import ApiKey
from apps.todos.models import Difficulty, Todo
from apps.todos.repositories import TodoRepository


@pytest.mark.django_db
class TestTodosAuth:
    """X-Api-Key authentication on the todos router."""

    def test_missing_key(self, api_client):
        response = api_client.get("/todos")
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_unknown_key(self, api_client):
        response = api_client.get("/todos", headers={"HTTP_X_API_KEY": "sk_unknown"})
        assert response.status_code == 401

    def test_deactivated_key(self, api_client, alice, api_key_headers):
        ApiKey.objects.filter(user=alice).update(is_active=False)

        response = api_client.get("/todos", headers=api_key_headers)
        assert response.status_code == 401

    def test_expired_key(self, api_client, alice, api_key_headers):
        ApiKey.objects.filter(user=alice).update(expires_at=timezone.now() - timedelta(minutes=1))

        response = api_client.get("/todos", headers=api_key_headers)
        assert response.status_code == 401

    def test_valid_key(self, api_client, api_key_headers):
        response = api_client.get("/todos", headers=api_key_headers)
        assert response.status_code == 200


@pytest.mark.django_db
class TestTodosAPI:
    """Todos CRUD test cases."""

    def test_list_todos_empty(self, api_client, api_key_headers):
        response = api_client.get("/todos", headers=api_key_headers)
        data = response.json()
        assert data["success"] is True
        assert data["data"] == []

    def test_create_todo(self, api_client, alice, api_key_headers):
        response = api_client.post(
            "/todos",
            json={"title": "Write tests", "description": "For the todos API", "difficulty": "hard"},
            headers=api_key_headers,
        )
        assert response.status_code == 201
        todo = response.json()["data"]
        assert todo["title"] == "Write tests"
        assert todo["description"] == "For the todos API"
        assert todo["difficulty"] == "hard"
        assert todo["isDone"] is False
        assert "dateCreated" in todo
        assert Todo.objects.get(id=todo["id"]).user_id == alice.id

    def test_create_todo_blank_title(self, api_client, api_key_headers):
        response = api_client.post("/todos", json={"title": "   "}, headers=api_key_headers)
        assert response.status_code == 400
        assert response.json()["error"] == "Title is required"

    def test_create_todo_invalid_difficulty(self, api_client, api_key_headers):
        response = api_client.post(
            "/todos",
            json={"title": "Task", "difficulty": "impossible"},
            headers=api_key_headers,
        )
        assert response.status_code == 422

    def test_list_todos(self, api_client, alice, bob, api_key_headers):
        """Test listing returns only the caller's todos."""
        Todo.objects.create(user=alice, title="Mine")
        Todo.objects.create(user=bob, title="Not mine")

        response = api_client.get("/todos", headers=api_key_headers)
        todos = response.json()["data"]
        assert [t["title"] for t in todos] == ["Mine"]

    def test_get_todo(self, api_client, alice, api_key_headers):
        todo = Todo.objects.create(user=alice, title="Read", difficulty=Difficulty.MEDIUM)

        response = api_client.get(f"/todos/{todo.id}", headers=api_key_headers)
        assert response.status_code == 200
        assert response.json()["data"]["difficulty"] == "medium"

    def test_get_missing_todo(self, api_client, api_key_headers):
        todo_id = uuid.uuid4()
        response = api_client.get(f"/todos/{todo_id}", headers=api_key_headers)
        assert response.status_code == 404
        assert response.json()["error"] == f"Todo item with id: '{todo_id}' does not exist"

    def test_other_users_todo_is_not_found(self, api_client, bob, api_key_headers):
        todo = Todo.objects.create(user=bob, title="Private")

        response = api_client.get(f"/todos/{todo.id}", headers=api_key_headers)
        assert response.status_code == 404

    def test_update_todo(self, api_client, alice, api_key_headers):
        todo = Todo.objects.create(user=alice, title="Old", description="old")

        response = api_client.put(
            f"/todos/{todo.id}",
            json={"title": "New", "description": "new"},
            headers=api_key_headers,
        )
        assert response.status_code == 200
        todo.refresh_from_db()
        assert todo.title == "New"
        assert todo.description == "new"

    def test_update_todo_blank_title(self, api_client, alice, api_key_headers):
        todo = Todo.objects.create(user=alice, title="Keep me")

        response = api_client.put(f"/todos/{todo.id}", json={"title": ""}, headers=api_key_headers)
        assert response.status_code == 400
        assert response.json()["error"] == "Title is required"
        todo.refresh_from_db()
        assert todo.title == "Keep me"

    def test_update_missing_todo(self, api_client, api_key_headers):
        response = api_client.put(
            f"/todos/{uuid.uuid4()}",
            json={"title": "New"},
            headers=api_key_headers,
        )
        assert response.status_code == 404

    def test_toggle_status(self, api_client, alice, api_key_headers):
        todo = Todo.objects.create(user=alice, title="Flip")

        first = api_client.patch(f"/todos/{todo.id}/toggleStatus", headers=api_key_headers)
        assert first.json()["data"]["isDone"] is True

        second = api_client.patch(f"/todos/{todo.id}/toggleStatus", headers=api_key_headers)
        assert second.json()["data"]["isDone"] is False

    def test_toggle_missing_todo(self, api_client, api_key_headers):
        response = api_client.patch(f"/todos/{uuid.uuid4()}/toggleStatus", headers=api_key_headers)
        assert response.status_code == 404

    def test_delete_todo(self, api_client, alice, api_key_headers):
        todo = Todo.objects.create(user=alice, title="Done with this")

        response = api_client.delete(f"/todos/{todo.id}", headers=api_key_headers)
        assert response.status_code == 204
        assert not Todo.objects.filter(id=todo.id).exists()

    def test_delete_other_users_todo(self, api_client, bob, api_key_headers):
        todo = Todo.objects.create(user=bob, title="Keep")

        response = api_client.delete(f"/todos/{todo.id}", headers=api_key_headers)
        assert response.status_code == 404
        assert Todo.objects.filter(id=todo.id).exists()


@pytest.mark.django_db
class TestTodoRepository:
    def test_delete_is_scoped_to_owner(self, alice, bob):
        todo = Todo.objects.create(user=bob, title="Bob's")
        repository = TodoRepository()

        repository.delete(todo.id, alice.id)
        assert Todo.objects.filter(id=todo.id).exists()

        repository.delete(todo.id, bob.id)
        assert not Todo.objects.filter(id=todo.id).exists()
