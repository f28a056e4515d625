"""
E2E fixtures: resolve the deployed REST API in LocalStack and clean the
image table between tests. Every test is skipped when LocalStack is not
reachable.
"""

import logging
import os

import boto3
import pytest
from botocore.exceptions import BotoCoreError, ClientError

from e2e_api_client import E2EAPIClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

ENDPOINT_BASE_URL = os.getenv("E2E_ENDPOINT_URL", "http://localhost:4566")
API_NAME_FRAGMENT = "image-store"
STAGE = os.getenv("E2E_STAGE", "local")
DYNAMODB_TABLE_NAME = os.getenv("E2E_IMAGE_TABLE_NAME", "image-store-images")
AUTH_TOKEN = os.getenv("E2E_AUTH_TOKEN")

# ============================================================================
# API Details Fixture
# ============================================================================


@pytest.fixture(scope="session")
def api_details():
    """Get API Gateway details from LocalStack"""
    try:
        apigateway = boto3.client("apigateway", endpoint_url=ENDPOINT_BASE_URL)

        apis = apigateway.get_rest_apis()
        api = next(api for api in apis["items"] if API_NAME_FRAGMENT in api["name"])
    except (BotoCoreError, ClientError, StopIteration) as e:
        logger.warning("Could not get API details from LocalStack: %s", e)
        pytest.skip(f"Could not get API details from LocalStack: {e}")

    api_id = api["id"]
    endpoint = f"{ENDPOINT_BASE_URL}/restapis/{api_id}/{STAGE}/_user_request_"

    return {"api_id": api_id, "endpoint": endpoint, "stage": STAGE}


@pytest.fixture(scope="session")
def api_headers():
    """Default HTTP headers for API requests"""
    return {"Content-Type": "application/json"}


@pytest.fixture
def api_client(api_details, api_headers):
    """HTTP client wrapper for E2E API testing"""
    return E2EAPIClient(api_details["endpoint"], api_headers)


@pytest.fixture
def auth_headers():
    """Authorization header accepted by the security service."""
    if not AUTH_TOKEN:
        pytest.skip("E2E_AUTH_TOKEN is not set")

    return {"Authorization": f"Bearer {AUTH_TOKEN}"}


@pytest.fixture(scope="function", autouse=True)
def cleanup_storage_after_each_test(api_details):
    """Clean DynamoDB to prevent test data leakage."""
    yield
    _cleanup_dynamodb()


def _cleanup_dynamodb():
    """Delete all items from the image table."""
    logger.info("Cleaning DynamoDB table: %s", DYNAMODB_TABLE_NAME)

    dynamodb = boto3.resource("dynamodb", endpoint_url=ENDPOINT_BASE_URL)
    table = dynamodb.Table(DYNAMODB_TABLE_NAME)

    try:
        deleted = 0
        start_key = None

        while True:
            scan_kwargs = {
                "ProjectionExpression": "image_id",
            }
            if start_key:
                scan_kwargs["ExclusiveStartKey"] = start_key

            response = table.scan(**scan_kwargs)
            items = response.get("Items", [])

            for item in items:
                table.delete_item(Key={"image_id": item["image_id"]})
                deleted += 1

            start_key = response.get("LastEvaluatedKey")
            if not start_key:
                break

        logger.info("Deleted %d items from DynamoDB table", deleted)

    except ClientError as err:
        logger.error(
            "Failed to cleanup DynamoDB table: %s",
            DYNAMODB_TABLE_NAME,
            exc_info=err,
        )


# ============================================================================
# Sample Image Data
# ============================================================================

SAMPLE_JPEG_BASE64 = "/9j/4AAQSkZJRgABAQEAYABgAAD/2wBDAAgGBgcGBQgHBwcJCQgKDBQNDAsLDBkSEw8UHRofHh0aHBwgJC4nICIsIxwcKDcpLDAxNDQ0Hyc5PTgyPC4zNDL/2wBDAQkJCQwLDBgNDRgyIRwhMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjIyMjL/wAARCAABAAEDASIAAhEBAxEB/8QAFQABAQAAAAAAAAAAAAAAAAAAAAv/xAAUEAEAAAAAAAAAAAAAAAAAAAAA/8VAFQEBAQAAAAAAAAAAAAAAAAAAAAX/xAAUEQEAAAAAAAAAAAAAAAAAAAAA/9oADAMBAAIRAxEAPwCwAA8A/9k="


@pytest.fixture
def sample_jpeg_base64() -> str:
    return SAMPLE_JPEG_BASE64


@pytest.fixture
def create_valid_payload() -> dict:
    return {"image": f"data:image/jpeg;base64,{SAMPLE_JPEG_BASE64}"}
