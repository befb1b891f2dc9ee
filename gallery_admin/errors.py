"""Structured error helpers for API responses and ordered list failures."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse


def build_error_payload(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    def __init__(self, status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = build_error_payload(code, message, details)


class OrderingError(Exception):
    """Base class for ordered list failures."""

    status_code = 500
    code = "ordering_error"


class NotInList(OrderingError):
    """The item has no position, so the operation has nothing to act on."""

    status_code = 409
    code = "not_in_list"


class ScopeResolutionFailure(OrderingError):
    """The list scope could not be evaluated for an item."""

    status_code = 500
    code = "scope_resolution_failure"


class StorageFailure(OrderingError):
    """The backing store rejected a step; the whole operation was rolled back."""

    status_code = 503
    code = "storage_failure"


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


async def ordering_error_handler(_: Request, exc: OrderingError) -> JSONResponse:
    payload = build_error_payload(exc.code, str(exc) or exc.__class__.__name__)
    return JSONResponse(status_code=exc.status_code, content=payload)


def raise_app_error(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> None:
    """Raise an AppError with a standardized error shape."""
    raise AppError(status_code, code, message, details)
