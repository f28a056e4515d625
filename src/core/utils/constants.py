"""Global constants used throughout the application.

This module centralizes the error codes, data-URI conventions, HTTP header
names and environment variable names shared by the handlers and the
infrastructure layer.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_UNAUTHORIZED = "UNAUTHORIZED"
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_INVALID_IMAGE_FORMAT = "INVALID_IMAGE_FORMAT"

# Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_IMAGE_SAVE_FAILED = "IMAGE_SAVE_FAILED"
ERROR_CODE_IMAGE_FETCH_FAILED = "IMAGE_FETCH_FAILED"
ERROR_CODE_IMAGE_INVALID_STATE = "IMAGE_INVALID_STATE"

# ============================================================================
# Image Payload Conventions
# ============================================================================

DATA_URI_IMAGE_MARKER: Final[str] = "data:image/"
DATA_URI_SEPARATOR: Final[str] = ","

# Binary retrieval is always labelled as JPEG, whatever subtype was stored.
JPEG_CONTENT_TYPE: Final[str] = "image/jpeg"

# ============================================================================
# Request Headers / Parameters
# ============================================================================

AUTHORIZATION_HEADER = "Authorization"
SIZE_HEADER = "Size"
SIZE_QUERY_PARAM = "Size"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,Size"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_IMAGE_TABLE_NAME = "IMAGE_TABLE_NAME"
ENV_IMAGE_STORE_BACKEND = "IMAGE_STORE_BACKEND"
ENV_AUTH_SERVICE_URL = "AUTH_SERVICE_URL"
ENV_AUTH_TIMEOUT_SECONDS = "AUTH_TIMEOUT_SECONDS"
ENV_AUTH_CACHE_TTL_SECONDS = "AUTH_CACHE_TTL_SECONDS"

# ============================================================================
# Defaults
# ============================================================================

STORE_BACKEND_DYNAMODB = "dynamodb"
STORE_BACKEND_MEMORY = "memory"
DEFAULT_STORE_BACKEND = STORE_BACKEND_DYNAMODB

DEFAULT_AUTH_SERVICE_URL = "http://localhost:3000"
AUTH_CURRENT_USER_PATH = "/v1/users/current"
DEFAULT_AUTH_TIMEOUT_SECONDS = 5.0
DEFAULT_AUTH_CACHE_TTL_SECONDS = 300.0
AUTH_CACHE_MAXSIZE = 1024
