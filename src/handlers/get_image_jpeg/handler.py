"""
Lambda handler responsible for returning an image as raw JPEG bytes.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.models.errors import FormatError, NotFoundError, StorageError
from core.utils.constants import CORS_ORIGIN, JPEG_CONTENT_TYPE
from core.utils.decorators import api_gateway_handler, error_response
from core.utils.request import extract_size_hint, get_path_param
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request
from handlers.get_image.models import GetImageRequest
from handlers.get_image.service import GetService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle binary image requests.

    Decodes the Base64 tail of the stored data URI and returns it as a
    binary API Gateway response labelled ``image/jpeg``, whatever subtype
    the data URI declares.

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible binary response dictionary.
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received image jpeg request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    params = {
        "image_id": get_path_param(event, "image_id"),
        "size": extract_size_hint(event),
    }

    try:
        request = validate_request(GetImageRequest, params)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": sanitize_validation_errors(exc.errors())},
        )
        return ResponseBuilder.validation_error(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
            request_id=request_id,
        )

    try:
        content = GetService().find_jpeg_by_id(request.image_id, request.size)

    except NotFoundError as exc:
        logger.warning("Image not found", extra={"image_id": request.image_id})
        metrics.add_metric(name="ImageNotFound", unit=MetricUnit.Count, value=1)
        return error_response(exc, request_id=request_id)

    except FormatError as exc:
        logger.warning(
            "Stored image is not decodable",
            extra={"image_id": request.image_id, "error_code": exc.error_code},
        )
        return error_response(exc, request_id=request_id)

    except StorageError as exc:
        logger.exception("Get image jpeg failed", extra={"image_id": request.image_id})
        return error_response(exc, request_id=request_id)

    return ResponseBuilder.binary_response(
        content,
        content_type=JPEG_CONTENT_TYPE,
        cors_origin=CORS_ORIGIN,
    )
