"""
API Gateway proxy responses for the image store handlers.

JSON responses carry CORS headers and, when known, the Lambda request id.
Error bodies share one shape::

    {"error": "<CODE>", "message": "...", "timestamp": "...", "details": {...}}

Binary responses are Base64-encoded so API Gateway can return raw bytes.
"""

from __future__ import annotations

import base64
import json
from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
    EXPOSE_HEADERS,
)
from core.utils.time import utc_now_iso

JsonDict = dict[str, Any]
ErrorDetails = JsonDict | list[Any] | None


def cors_headers(origin: str | None = None) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin or CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }


class ResponseBuilder:
    """Builds API Gateway-compatible HTTP responses."""

    @classmethod
    def _json(
        cls,
        status: HTTPStatus,
        payload: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        body = dict(payload)
        if request_id:
            body["request_id"] = request_id

        return {
            "statusCode": status.value,
            "headers": {"Content-Type": DEFAULT_CONTENT_TYPE, **cors_headers(cors_origin)},
            "body": json.dumps(body),
        }

    @classmethod
    def ok(
        cls,
        body: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls._json(HTTPStatus.OK, body, request_id=request_id, cors_origin=cors_origin)

    @classmethod
    def preflight(cls, *, cors_origin: str | None = None) -> JsonDict:
        """Empty 204 answer to a CORS preflight request."""
        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": {"Content-Type": DEFAULT_CONTENT_TYPE, **cors_headers(cors_origin)},
            "body": "",
        }

    @classmethod
    def error(
        cls,
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: ErrorDetails = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """Error response; ``error`` defaults to the status name, e.g. ``NOT_FOUND``."""
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return cls._json(status, payload, request_id=request_id, cors_origin=cors_origin)

    @classmethod
    def bad_request(
        cls,
        message: str,
        *,
        details: JsonDict | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.error(
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            details=details,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def validation_error(
        cls,
        *,
        message: str,
        details: ErrorDetails = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """422 with the ``VALIDATION_FAILED`` code."""
        return cls.error(
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            error=ERROR_CODE_VALIDATION_FAILED,
            message=message,
            details=details,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def unprocessable(
        cls,
        message: str,
        *,
        error: str | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.error(
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            error=error,
            message=message,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def unauthorized(
        cls,
        message: str = "Unauthorized",
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.error(
            status=HTTPStatus.UNAUTHORIZED,
            message=message,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def not_found(
        cls,
        message: str = "Resource not found",
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.error(
            status=HTTPStatus.NOT_FOUND,
            message=message,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def internal_error(
        cls,
        message: str = "Internal server error",
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def binary_response(
        cls,
        content: bytes,
        *,
        content_type: str,
        headers: dict[str, str] | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """Raw bytes for API Gateway binary media types.

        CORS allow headers are only added when an origin is given.
        """
        response_headers: dict[str, str] = {
            "Content-Type": content_type,
            "Content-Length": str(len(content)),
            "Access-Control-Expose-Headers": EXPOSE_HEADERS,
        }
        if cors_origin:
            response_headers.update(cors_headers(cors_origin))
        if headers:
            response_headers.update(headers)

        return {
            "statusCode": HTTPStatus.OK.value,
            "headers": response_headers,
            "body": base64.b64encode(content).decode("ascii"),
            "isBase64Encoded": True,
        }
