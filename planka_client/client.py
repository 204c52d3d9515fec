"""
Planka API Client implementation.
"""

import logging
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


class PlankaAPIError(Exception):
    """Exception raised for Planka API errors."""

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.code:
            parts.append(f"(code: {self.code})")
        if self.status_code:
            parts.append(f"[HTTP {self.status_code}]")
        return " ".join(parts)


def _is_retryable(exception: BaseException) -> bool:
    """Check if exception is retryable (network errors, 5xx server errors)."""
    if isinstance(exception, PlankaAPIError):
        if exception.code == "REQUEST_ERROR":
            return True
        return bool(exception.status_code and exception.status_code >= 500)
    return False


def _log_retry(retry_state) -> None:
    """Log retry attempts."""
    logger.warning(
        f"Retrying request (attempt {retry_state.attempt_number}) after error: {retry_state.outcome.exception()}"
    )


class PlankaClient:
    """
    Python client for the Planka REST API.

    Example:
        >>> client = PlankaClient(
        ...     base_url="http://localhost:3000",
        ...     email="agent@example.com",
        ...     password="secret",
        ... )
        >>> card = client.get_card("1234567890")
        >>> print(card["item"]["name"])
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        email: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the Planka API client.

        Either a token or an email/password pair must be supplied. With
        credentials only, the client logs in on the first request.

        Args:
            base_url: The base URL of the Planka instance (e.g., "http://localhost:3000")
            token: An existing access token (optional)
            email: Email or username used to obtain an access token (optional)
            password: Password used to obtain an access token (optional)
            timeout: Request timeout in seconds (default: 30.0)
            transport: Custom httpx transport (optional, mainly for testing)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.email = email
        self.password = password
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "PlankaClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _authenticate(self) -> str:
        """
        Exchange email/password for an access token.

        Returns:
            The access token

        Raises:
            PlankaAPIError: If credentials are missing or rejected
        """
        if not self.email or not self.password:
            raise PlankaAPIError(
                "No access token and no email/password configured",
                code="AUTH_REQUIRED",
            )

        logger.debug(f"Requesting access token for {self.email}")
        data = self._send(
            "POST",
            "/api/access-tokens",
            {"emailOrUsername": self.email, "password": self.password},
            authenticated=False,
        )
        token = data.get("item") if isinstance(data, dict) else None
        if not token:
            raise PlankaAPIError("Login response did not contain an access token", code="AUTH_FAILED")

        self.token = token
        return token

    def _send(
        self,
        method: str,
        path: str,
        body: Any = None,
        authenticated: bool = True,
    ) -> Any:
        """
        Send a single API request without retrying.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: API path (e.g., "/api/cards/123")
            body: JSON body for POST/PATCH requests
            authenticated: Attach the bearer token (default: True)

        Returns:
            The decoded JSON body, or None for an empty body

        Raises:
            PlankaAPIError: If the request fails or the API returns an error
        """
        headers = {}
        if authenticated:
            token = self.token or self._authenticate()
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._client.request(method, path, json=body, headers=headers)
        except httpx.RequestError as e:
            raise PlankaAPIError(f"Request failed: {e}", code="REQUEST_ERROR") from e

        # Handle error responses
        if response.status_code >= 400:
            try:
                error_data = response.json()
            except ValueError as e:
                raise PlankaAPIError(
                    message=response.text or "Unknown error",
                    status_code=response.status_code,
                ) from e
            if not isinstance(error_data, dict):
                error_data = {}
            raise PlankaAPIError(
                message=error_data.get("message") or response.reason_phrase or "Unknown error",
                code=error_data.get("code"),
                status_code=response.status_code,
            )

        if not response.content:
            return None

        # Parse successful response
        try:
            return response.json()
        except ValueError as e:
            raise PlankaAPIError(
                message="Invalid JSON response",
                code="INVALID_RESPONSE",
                status_code=response.status_code,
            ) from e

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=4),
        retry=retry_if_exception(_is_retryable),
        before_sleep=_log_retry,
        reraise=True,
    )
    def _send_with_retry(self, method: str, path: str, body: Any = None) -> Any:
        return self._send(method, path, body)

    def request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """
        Make an API request.

        Idempotent methods (GET, PATCH, DELETE) are retried with exponential
        backoff on network errors and 5xx responses. POST is sent once so a
        transient failure never creates an entity twice. 4xx responses are
        never retried.

        Args:
            path: API path (e.g., "/api/cards/123/comments")
            method: HTTP method (default: GET)
            body: JSON body for POST/PATCH requests (optional)

        Returns:
            The decoded JSON response

        Raises:
            PlankaAPIError: If the API returns an error (after retries exhausted)
        """
        method = method.upper()
        if method == "POST":
            return self._send(method, path, body)
        return self._send_with_retry(method, path, body)

    # =========================================================================
    # Card Methods
    # =========================================================================

    def get_card(self, card_id: str) -> dict[str, Any]:
        """
        Get card details with its task lists, tasks and other included data.

        Args:
            card_id: The id of the card

        Returns:
            Response with the card under 'item' and related entities under 'included'

        Example:
            >>> card = client.get_card("1234567890")
            >>> for task_list in card["included"]["taskLists"]:
            ...     print(task_list["name"])
        """
        return self.request(f"/api/cards/{card_id}")
