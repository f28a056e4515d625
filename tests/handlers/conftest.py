import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import patch

import pytest

from core.models.errors import UnauthorizedError
from core.models.image import Session
from core.security.token import token_validator


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture(autouse=True)
def clear_token_cache():
    token_validator.clear_cache()
    yield
    token_validator.clear_cache()


@pytest.fixture
def session() -> Session:
    return Session(
        token="Bearer valid-token",
        id="user_1",
        name="Test User",
        login="test",
        permissions=["user"],
    )


@pytest.fixture
def authorized(session):
    """Make the security service accept any token."""
    with patch.object(token_validator, "validate", return_value=session) as mock_validate:
        yield mock_validate


@pytest.fixture
def unauthorized():
    """Make the security service reject every token."""
    with patch.object(
        token_validator,
        "validate",
        side_effect=UnauthorizedError(message="Invalid or expired token"),
    ) as mock_validate:
        yield mock_validate


@pytest.fixture
def create_image_event(sample_data_uri) -> dict[str, Any]:
    return {
        "httpMethod": "POST",
        "path": "/v1/image",
        "body": json.dumps({"image": sample_data_uri}),
        "headers": {
            "Content-Type": "application/json",
            "Authorization": "Bearer valid-token",
        },
    }


@pytest.fixture
def get_image_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/v1/image/img_abc123",
        "pathParameters": {"image_id": "img_abc123"},
        "queryStringParameters": None,
        "headers": {},
    }


@pytest.fixture
def get_image_jpeg_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/v1/image/img_abc123/jpeg",
        "pathParameters": {"image_id": "img_abc123"},
        "queryStringParameters": None,
        "headers": {},
    }
