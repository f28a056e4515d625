"""Bearer token validation against the external security service.

The security service owns users and tokens; this module only asks it who
the caller is. Resolved sessions are cached per token for a short time so
repeated uploads do not hit the security service on every request.
"""

import os
import time
from collections.abc import Callable
from threading import Lock

import requests
from aws_lambda_powertools import Logger
from cachetools import TTLCache
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import UnauthorizedError
from core.models.image import Session
from core.utils.constants import (
    AUTH_CACHE_MAXSIZE,
    AUTH_CURRENT_USER_PATH,
    AUTHORIZATION_HEADER,
    DEFAULT_AUTH_CACHE_TTL_SECONDS,
    DEFAULT_AUTH_SERVICE_URL,
    DEFAULT_AUTH_TIMEOUT_SECONDS,
    ENV_AUTH_CACHE_TTL_SECONDS,
    ENV_AUTH_SERVICE_URL,
    ENV_AUTH_TIMEOUT_SECONDS,
)

logger = Logger(UTC=True)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default

    try:
        return float(raw)
    except ValueError:
        logger.warning(
            "Ignoring non-numeric environment value",
            extra={"variable": name, "value": raw},
        )
        return default


class TokenValidator:
    """Resolves an ``Authorization`` header to a :class:`Session`.

    Sessions are kept in a bounded TTL cache: entries expire after
    ``cache_ttl`` seconds and the least recently used one is dropped once
    ``cache_maxsize`` tokens are held.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        cache_ttl: float | None = None,
        cache_maxsize: int = AUTH_CACHE_MAXSIZE,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._cache_ttl = cache_ttl
        self._cache = TTLCache(
            maxsize=cache_maxsize,
            ttl=self.cache_ttl,
            timer=timer,
        )
        self._lock = Lock()

    @property
    def base_url(self) -> str:
        url = self._base_url or os.getenv(ENV_AUTH_SERVICE_URL) or DEFAULT_AUTH_SERVICE_URL
        return url.rstrip("/")

    @property
    def timeout(self) -> float:
        if self._timeout is not None:
            return self._timeout
        return _env_float(ENV_AUTH_TIMEOUT_SECONDS, DEFAULT_AUTH_TIMEOUT_SECONDS)

    @property
    def cache_ttl(self) -> float:
        if self._cache_ttl is not None:
            return self._cache_ttl
        return _env_float(ENV_AUTH_CACHE_TTL_SECONDS, DEFAULT_AUTH_CACHE_TTL_SECONDS)

    @property
    def cached_sessions(self) -> int:
        """Number of live cached sessions."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def validate(self, auth_header: str | None) -> Session:
        """Return the session for an ``Authorization`` header value.

        Raises:
            UnauthorizedError: If the header is missing or the security
                service does not accept the token
        """
        if not auth_header or not auth_header.strip():
            raise UnauthorizedError(message="Missing authorization header")

        token = auth_header.strip()

        with self._lock:
            cached = self._cache.get(token)
        if cached is not None:
            return cached

        session = self._fetch_session(token)

        with self._lock:
            self._cache[token] = session

        return session

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def _fetch_session(self, token: str) -> Session:
        url = f"{self.base_url}{AUTH_CURRENT_USER_PATH}"
        logger.debug("Validating token with security service", extra={"url": url})

        try:
            response = requests.get(
                url,
                headers={AUTHORIZATION_HEADER: token},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error(
                "Security service unreachable",
                extra={"url": url, "error": str(exc)},
            )
            raise UnauthorizedError(message="Unable to validate credentials") from exc

        if response.status_code != requests.codes.ok:
            logger.warning(
                "Token rejected by security service",
                extra={"status_code": response.status_code},
            )
            raise UnauthorizedError(message="Invalid or expired token")

        try:
            body = response.json()
            session = Session.model_validate({**body, "token": token})
        except (ValueError, TypeError, PydanticValidationError) as exc:
            logger.error("Malformed session returned by security service")
            raise UnauthorizedError(message="Unable to validate credentials") from exc

        logger.info("Token validated", extra={"user_id": session.user_id})
        return session


token_validator = TokenValidator()
