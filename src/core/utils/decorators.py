"""
Error handling shared by the API Gateway Lambda handlers.

``error_response`` turns an image service error into its HTTP response.
``api_gateway_handler`` wraps a handler so that nothing it raises escapes
as an unformatted Lambda failure.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any, NamedTuple

from aws_lambda_powertools import Logger

from core.models.errors import (
    FormatError,
    ImageServiceError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    ValidationError,
)
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]

FORMAT_ERROR_MESSAGE = "The stored image could not be decoded."
STORAGE_ERROR_MESSAGE = "Unable to access image storage. Please try again later."
UNEXPECTED_ERROR_MESSAGE = "We're experiencing technical difficulties. Please try again in a few moments."

FRIENDLY_PREFIXES = ("Invalid", "Missing", "Required", "Must", "Image")


class ErrorRule(NamedTuple):
    """How an unhandled built-in exception is reported."""

    exc_types: tuple[type[BaseException], ...]
    status: HTTPStatus
    message: str | None
    log_message: str
    server_side: bool


# First match wins; subclasses must come before their bases (TimeoutError
# and PermissionError are OSErrors).
BUILTIN_ERROR_RULES: tuple[ErrorRule, ...] = (
    ErrorRule(
        (ValueError, KeyError, TypeError, AttributeError),
        HTTPStatus.BAD_REQUEST,
        None,
        "Validation error in handler",
        False,
    ),
    ErrorRule(
        (PermissionError,),
        HTTPStatus.FORBIDDEN,
        "You don't have permission to perform this action.",
        "Permission denied in handler",
        False,
    ),
    ErrorRule(
        (TimeoutError,),
        HTTPStatus.GATEWAY_TIMEOUT,
        "The request took too long to process. Please try again.",
        "Request timeout",
        True,
    ),
    ErrorRule(
        (ConnectionError, OSError),
        HTTPStatus.SERVICE_UNAVAILABLE,
        "Unable to connect to required services. Please try again later.",
        "Connection error",
        True,
    ),
)


def _friendly_message(exc: Exception) -> str:
    """Keep messages written for the client, replace everything else."""
    text = str(exc)

    if text and text.startswith(FRIENDLY_PREFIXES):
        return text

    if isinstance(exc, (UnicodeDecodeError, UnicodeEncodeError)):
        return "The request contains invalid characters or encoding."

    if isinstance(exc, ValueError):
        return "The provided data is invalid. Please check your input and try again."

    if isinstance(exc, (KeyError, AttributeError)):
        return "A required field is missing. Please ensure all required fields are provided."

    if isinstance(exc, TypeError):
        return "The data format is incorrect. Please check the request format."

    return "We encountered an issue processing your request. Please try again."


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    server_side: bool,
) -> None:
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if server_side:
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def error_response(
    exc: ImageServiceError,
    *,
    request_id: str | None = None,
    cors_origin: str | None = None,
) -> JsonDict:
    """Translate an image service error into its client-visible response.

    Client errors keep their message. Format and storage failures get a
    generic one; their cause is only logged.
    """
    if isinstance(exc, ValidationError):
        return ResponseBuilder.validation_error(
            message=exc.message,
            details=exc.details,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    if isinstance(exc, UnauthorizedError):
        return ResponseBuilder.unauthorized(exc.message, request_id=request_id, cors_origin=cors_origin)

    if isinstance(exc, NotFoundError):
        return ResponseBuilder.not_found(exc.message, request_id=request_id, cors_origin=cors_origin)

    if isinstance(exc, FormatError):
        return ResponseBuilder.unprocessable(
            FORMAT_ERROR_MESSAGE,
            error=exc.error_code,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    message = STORAGE_ERROR_MESSAGE if isinstance(exc, StorageError) else UNEXPECTED_ERROR_MESSAGE
    return ResponseBuilder.internal_error(message, request_id=request_id, cors_origin=cors_origin)


def _builtin_error_response(
    exc: Exception,
    *,
    handler_name: str,
    request_id: str | None,
    cors_origin: str | None,
) -> JsonDict:
    for rule in BUILTIN_ERROR_RULES:
        if isinstance(exc, rule.exc_types):
            _log_error(
                rule.log_message,
                handler_name=handler_name,
                request_id=request_id,
                exc=exc,
                server_side=rule.server_side,
            )
            return ResponseBuilder.error(
                status=rule.status,
                message=rule.message or _friendly_message(exc),
                request_id=request_id,
                cors_origin=cors_origin,
            )

    _log_error(
        "Unexpected error in handler",
        handler_name=handler_name,
        request_id=request_id,
        exc=exc,
        server_side=True,
    )
    return ResponseBuilder.internal_error(
        UNEXPECTED_ERROR_MESSAGE,
        request_id=request_id,
        cors_origin=cors_origin,
    )


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    - OPTIONS requests get a CORS preflight response without calling the handler
    - Image service errors escaping the handler go through ``error_response``
    - Built-in exceptions map to 4xx/5xx via ``BUILTIN_ERROR_RULES``

    Example:
        @api_gateway_handler
        def handler(event, context):
            return ResponseBuilder.ok({"id": "..."})
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.preflight(cors_origin=cors_origin)

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        except ImageServiceError as exc:
            _log_error(
                "Image service error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                server_side=isinstance(exc, StorageError),
            )
            return error_response(exc, request_id=request_id, cors_origin=cors_origin)

        except Exception as exc:
            return _builtin_error_response(
                exc,
                handler_name=func.__name__,
                request_id=request_id,
                cors_origin=cors_origin,
            )

    return wrapper
