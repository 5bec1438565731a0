"""
Django Ninja API configuration.
"""

import logging
from typing import Any
from ninja import NinjaAPI
from ninja.renderers import JSONRenderer
from ninja.errors import ValidationError, HttpError, AuthenticationError
from django.http import HttpRequest, HttpResponse
from pydantic import ValidationError as PydanticValidationError

from .context import build_context
from .errors import ApiError

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


class SuccessWrapperRenderer(JSONRenderer):
    """Wrap all responses in {success: true, data: ...} format for frontend compatibility."""

    def render(self, request: HttpRequest, data: Any, *, response_status: int) -> Any:
        # Error responses already carry success: false
        if isinstance(data, dict) and "success" in data:
            return super().render(request, data, response_status=response_status)

        if 200 <= response_status < 300:
            wrapped = {"success": True, "data": data}
        else:
            wrapped = {"success": False, "error": data}

        return super().render(request, wrapped, response_status=response_status)


api = NinjaAPI(
    title="TodoKeys API",
    version=API_VERSION,
    description="Todos and API key management",
    renderer=SuccessWrapperRenderer(),
)


@api.exception_handler(ApiError)
def api_error_handler(request: HttpRequest, exc: ApiError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.message},
        status=exc.http_status,
    )


@api.exception_handler(AuthenticationError)
def authentication_error_handler(request: HttpRequest, exc: AuthenticationError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": "Invalid or missing API key"},
        status=401,
    )


@api.exception_handler(ValidationError)
def validation_errors(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.errors},
        status=422,
    )


@api.exception_handler(PydanticValidationError)
def pydantic_validation_errors(request: HttpRequest, exc: PydanticValidationError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.errors()},
        status=422,
    )


@api.exception_handler(HttpError)
def http_error_handler(request: HttpRequest, exc: HttpError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": str(exc)},
        status=exc.status_code,
    )


@api.exception_handler(Exception)
def generic_error_handler(request: HttpRequest, exc: Exception) -> HttpResponse:
    logger.exception(f"[API] Unhandled error on {request.method} {request.path}")
    return api.create_response(
        request,
        {"success": False, "error": str(exc)},
        status=500,
    )


@api.get("/health")
def health_check(request: HttpRequest) -> dict:
    return {"status": "ok", "version": API_VERSION}


context = build_context()

from apps.keys.api import build_router as build_keys_router
from apps.todos.api import build_router as build_todos_router

api.add_router("/apiKeys", build_keys_router(context), tags=["API Keys"])
api.add_router("/todos", build_todos_router(context), tags=["Todos"])
