"""MDJotter REST API client with token-based session management.

This module provides a lightweight async HTTP client for the MDJotter
note-taking service.  It handles:

- Login via ``POST users/{username}/login``
- Injection of the session token (``X-token`` header) into every request
- JSON encoding of request bodies and decoding of response bodies
- Mapping of transport failures and non-2xx statuses to typed errors

Usage::

    async with MDJotterClient("alice", "secret") as client:
        roots = await client.containers.get_root_containers()
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, SecretStr

from mdjotter.config import Settings, get_settings

if TYPE_CHECKING:
    from mdjotter.containers import ContainerService
    from mdjotter.notes import NoteService

logger = logging.getLogger(__name__)

DEFAULT_HOSTNAME = "localhost"
DEFAULT_PORT = 3000
DEFAULT_TIMEOUT = 30.0

TOKEN_HEADER = "X-token"


class MDJotterError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MDJotterError):
    """Raised when required connection or credential fields are missing."""


class AuthenticationError(MDJotterError):
    """Raised when login fails.

    Attributes:
        status_code: HTTP status of the login response, if one was received.
        message: A human-readable description of the failure.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class TransportError(MDJotterError):
    """Raised when the HTTP call fails before any response is received."""


class LoginTransportError(AuthenticationError, TransportError):
    """Raised when the login call itself cannot reach the service."""


class APIError(MDJotterError):
    """Raised when the service answers with a status outside ``[200, 300)``.

    Attributes:
        status_code: The HTTP status code.
        body: The raw response text, kept for diagnostics.
    """

    def __init__(self, status_code: int, body: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned response of {status_code}")


class ClientOptions(BaseModel):
    """Immutable connection settings for one client instance."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr
    hostname: str = DEFAULT_HOSTNAME
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT

    @property
    def endpoint(self) -> str:
        return f"http://{self.hostname}:{self.port}"


class Session:
    """Mutable authentication state owned by a single client."""

    def __init__(self) -> None:
        self.token: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)


class MDJotterClient:
    """Async client for the MDJotter REST API.

    The client keeps one session token, obtained by :meth:`login`, and
    sends it with every subsequent call.  No call is blocked before
    login; the service's rejection surfaces as :class:`APIError`.

    Args:
        username: Account name; also scopes every resource path.
        password: Account password, sent once at login.
        hostname: Service host.  ``None`` selects ``localhost``.
        port: Service port.  ``None`` selects ``3000``.
        timeout: Timeout in seconds handed to the ``httpx`` transport.

    Raises:
        ConfigurationError: If *username* or *password* is missing.
    """

    def __init__(
        self,
        username: str | None,
        password: str | None,
        hostname: str | None = None,
        port: int | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not username:
            raise ConfigurationError("username is required")
        if not password:
            raise ConfigurationError("password is required")

        self.options = ClientOptions(
            username=username,
            password=password,
            hostname=DEFAULT_HOSTNAME if hostname is None else hostname,
            port=DEFAULT_PORT if port is None else port,
            timeout=timeout,
        )
        self._session = Session()
        self._client: httpx.AsyncClient = httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> MDJotterClient:
        """Build a client from environment-driven :class:`Settings`."""
        if settings is None:
            settings = get_settings()

        return cls(
            username=settings.MDJOTTER_USERNAME,
            password=settings.MDJOTTER_PASSWORD.get_secret_value(),
            hostname=settings.MDJOTTER_HOSTNAME,
            port=settings.MDJOTTER_PORT,
            timeout=settings.MDJOTTER_TIMEOUT,
        )

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------

    @property
    def endpoint(self) -> str:
        return self.options.endpoint

    @property
    def token(self) -> str:
        return self._session.token

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    # ------------------------------------------------------------------
    # Resource services
    # ------------------------------------------------------------------

    @cached_property
    def containers(self) -> ContainerService:
        from mdjotter.containers import ContainerService

        return ContainerService(self)

    @cached_property
    def notes(self) -> NoteService:
        from mdjotter.notes import NoteService

        return NoteService(self)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def login(self) -> MDJotterClient:
        """Log in and store the returned session token.

        Sends ``POST users/{username}/login`` with ``{"password": ...}``.

        Returns:
            The client itself, so calls can be chained.

        Raises:
            AuthenticationError: If the service answers with a non-2xx
                status or the response carries no token.
            LoginTransportError: If the service cannot be reached.  It is
                both an AuthenticationError and a TransportError.
        """
        try:
            data = await self.user_request(
                "login",
                "POST",
                {"password": self.options.password.get_secret_value()},
            )
        except TransportError as exc:
            logger.warning("MDJotter login for user=%s could not reach the service", self.options.username)
            raise LoginTransportError(f"Login request failed: {exc}") from exc
        except APIError as exc:
            logger.warning(
                "MDJotter login failed for user=%s (status=%d)",
                self.options.username,
                exc.status_code,
            )
            raise AuthenticationError(
                f"Login rejected with status {exc.status_code}",
                status_code=exc.status_code,
            ) from exc

        token = data.get("token") if isinstance(data, dict) else None
        if not token or not isinstance(token, str):
            logger.warning("MDJotter login response for user=%s has no token", self.options.username)
            raise AuthenticationError("Login response did not contain a token")

        self._session.token = token
        logger.info("MDJotter login successful (token=%s...)", token[:8])
        return self

    # ------------------------------------------------------------------
    # API requests
    # ------------------------------------------------------------------

    async def request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """Send one call to ``{endpoint}/{path}`` carrying the session token.

        Bodies that are not already strings are JSON-encoded; pydantic
        models are dumped by alias with only the fields that were set.

        Returns:
            The decoded JSON payload, or the raw response text when the
            payload is not valid JSON.

        Raises:
            TransportError: If the HTTP call itself fails.
            APIError: If the status is outside ``[200, 300)``.  The body
                is not parsed in that case.
        """
        headers = {
            "Content-Type": "application/json",
            TOKEN_HEADER: self._session.token,
        }
        content = _encode_body(body)
        url = f"{self.options.endpoint}/{path}"

        logger.debug("MDJotter %s %s", method, path)
        try:
            response = await self._client.request(method, url, headers=headers, content=content)
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.warning("MDJotter %s %s returned %d", method, path, response.status_code)
            raise APIError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError:
            return response.text

    async def user_request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """Like :meth:`request`, scoped under ``users/{username}/``."""
        username = quote(self.options.username, safe="")
        return await self.request(f"users/{username}/{path}", method, body)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Dispose the underlying ``httpx.AsyncClient``."""
        await self._client.aclose()
        logger.info("MDJotter client closed")

    async def __aenter__(self) -> MDJotterClient:
        """Enter the async context: log in and return self.

        The transport is closed if login fails.
        """
        try:
            return await self.login()
        except BaseException:
            await self.close()
            raise

    async def __aexit__(self, *args: object) -> None:
        await self.close()


def _encode_body(body: Any) -> str | None:
    if body is None or isinstance(body, str):
        return body
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_unset=True)
    return json.dumps(body)
