"""
Pytest configuration and fixtures.
"""

import json
import pytest
from django.test import Client

from apps.users.models import User
from core.api import context


class APIClient:
    """Wrapper around Django test client for API testing."""

    def __init__(self):
        self.client = Client()

    def _make_request(self, method, path, data=None, headers=None):
        """Make HTTP request."""
        kwargs = {"content_type": "application/json"}

        if headers:
            kwargs.update(headers)

        if data is not None:
            kwargs["data"] = json.dumps(data)

        # Prepend /api/ if not present
        if not path.startswith("/api/"):
            path = f"/api{path}"

        response = getattr(self.client, method.lower())(path, **kwargs)
        return APIResponse(response)

    def get(self, path, headers=None, **kwargs):
        return self._make_request("GET", path, headers=headers)

    def post(self, path, json=None, headers=None, **kwargs):
        return self._make_request("POST", path, data=json, headers=headers)

    def put(self, path, json=None, headers=None, **kwargs):
        return self._make_request("PUT", path, data=json, headers=headers)

    def patch(self, path, json=None, headers=None, **kwargs):
        return self._make_request("PATCH", path, data=json, headers=headers)

    def delete(self, path, headers=None, **kwargs):
        return self._make_request("DELETE", path, headers=headers)


class APIResponse:
    """Wrapper around Django response for easier testing."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.content = response.content

    def json(self):
        return json.loads(self._response.content)


@pytest.fixture
def api_client():
    """API test client."""
    return APIClient()


@pytest.fixture
def alice(db):
    """User with a known password."""
    return User.objects.create_user(username="alice", password="secret")


@pytest.fixture
def bob(db):
    return User.objects.create_user(username="bob", password="hunter2")


def issue_key(user, password):
    """Issue a key through the service wired into the API."""
    return context.api_key_service.create_api_key(user.username, password)


@pytest.fixture
def api_key_headers(alice):
    """X-Api-Key headers for alice."""
    api_key = issue_key(alice, "secret")
    return {"HTTP_X_API_KEY": api_key.key}


@pytest.fixture
def bob_key_headers(bob):
    api_key = issue_key(bob, "hunter2")
    return {"HTTP_X_API_KEY": api_key.key}
