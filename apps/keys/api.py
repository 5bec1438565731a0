"""
API Keys endpoints.

Credentials travel in the request itself (body or query string); there is no
session or bearer auth on this router.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja import Router

from core.context import AppContext
from .schemas import ApiKeyOut, ApiKeyCreateIn, ApiKeyStateIn


def build_router(context: AppContext) -> Router:
    router = Router()
    service = context.api_key_service

    @router.post("", response={201: ApiKeyOut})
    def create_key(request: HttpRequest, data: ApiKeyCreateIn):
        """Issue a new API key for the user."""
        return 201, service.create_api_key(data.username, data.password)

    @router.get("", response=list[ApiKeyOut])
    def get_keys(request: HttpRequest, username: str, password: str):
        """List every key owned by the user, newest first."""
        return service.get_all_api_keys(username, password)

    @router.put("/{key_id}/isActive", response=ApiKeyOut)
    def update_key_state(request: HttpRequest, key_id: UUID, data: ApiKeyStateIn):
        """Activate or deactivate a key."""
        return service.update_api_key_state(key_id, data.isActive)

    return router
