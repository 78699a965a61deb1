"""Utilities for building stateless endpoints."""

import asyncio
from typing import Any, Callable, Mapping

from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse

from .models import ErrorResponse


async def run_blocking(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Run a blocking function in a thread pool to avoid blocking the event loop.
    """

    return await asyncio.to_thread(func, *args, **kwargs)


def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    """Serialize ``content`` as an ``application/json`` response."""
    return JSONResponse(content=content, status_code=status_code)


def error_response(message: str, status_code: int) -> JSONResponse:
    """
    Shortcut for the ``{"error": message}`` envelope used by every JSON error path.
    """

    body = ErrorResponse(error=message).model_dump()
    return json_response(body, status_code=status_code)


def method_not_allowed(headers: Mapping[str, str] | None = None) -> Response:
    """Plain-text 405. Unlike the other error paths this is not JSON."""
    return PlainTextResponse("Method Not Allowed", status_code=405, headers=headers)


__all__ = ["run_blocking", "json_response", "error_response", "method_not_allowed"]
