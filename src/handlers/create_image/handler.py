"""
Lambda handler responsible for image creation.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import StorageError, UnauthorizedError, ValidationError
from core.security.token import token_validator
from core.utils.constants import AUTHORIZATION_HEADER
from core.utils.decorators import api_gateway_handler, error_response
from core.utils.request import get_header
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import CreateImageRequest, CreateImageResponse
from .service import CreateService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle image creation requests.

    The caller must present a bearer token; it is validated before the body
    is looked at, so rejected callers never reach the store.

    Expected API Gateway event structure:
    {
        "headers": {"Authorization": "Bearer ..."},
        "body": "{\"image\": \"data:image/png;base64,...\"}"
    }

    Args:
        event: API Gateway Lambda proxy event containing the image payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response containing the new image id
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received image create request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    try:
        session = token_validator.validate(get_header(event, AUTHORIZATION_HEADER))
    except UnauthorizedError as exc:
        logger.warning("Unauthorized image create request", extra={"reason": exc.message})
        return ResponseBuilder.unauthorized(exc.message, request_id=request_id)

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request(message="Invalid JSON body", request_id=request_id)

    try:
        request = validate_request(CreateImageRequest, body)
    except PydanticValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": sanitize_validation_errors(exc.errors())},
        )
        return ResponseBuilder.validation_error(
            message="Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
            request_id=request_id,
        )

    try:
        image_id = CreateService().create(request.image)

    except ValidationError as exc:
        logger.warning("Image rejected", extra={"user_id": session.user_id})
        return error_response(exc, request_id=request_id)

    except StorageError as exc:
        logger.exception(
            "Storage error during image create",
            extra={"user_id": session.user_id},
        )
        return error_response(exc, request_id=request_id)

    metrics.add_metric(name="ImageCreated", unit=MetricUnit.Count, value=1)

    response = CreateImageResponse(id=image_id)
    return ResponseBuilder.ok(response.model_dump())
