"""
Base API client.

Wraps a lazily created ``httpx.Client`` with default headers, per-request
auth, duration measurement and JSON decoding. Subclasses add endpoint
methods on top of ``get``/``post``/``put``/``patch``/``delete``.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from storefront_qa.api.types import ApiAuth, ApiResponse, HttpMethod
from storefront_qa.environment import get_environment_config
from storefront_qa.errors import ApiStatusError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class BaseApiClient:
    """
    HTTP client for REST APIs under test.

    Unset arguments come from the active ``EnvironmentConfig``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        default_headers: dict[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Prefix for every request path
            default_headers: Headers sent with every request
            timeout: Default request timeout in seconds
            transport: Custom httpx transport (e.g. ``httpx.MockTransport`` in tests)
        """
        if base_url is None or timeout is None:
            config = get_environment_config()
            base_url = base_url if base_url is not None else config.api_base_url
            timeout = timeout if timeout is not None else config.api_timeout
        self._base_url = base_url.rstrip("/")
        self.default_headers = dict(default_headers or DEFAULT_HEADERS)
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> BaseApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json: Any = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
        fail_on_status_code: bool = True,
        auth: ApiAuth | None = None,
    ) -> ApiResponse:
        """
        Send a request relative to the base URL.

        Args:
            method: HTTP method
            url: Path appended to the base URL
            headers: Extra headers, merged over the defaults
            json: JSON body
            params: Query string parameters
            timeout: Override the default timeout (seconds)
            fail_on_status_code: Raise ``ApiStatusError`` for 4xx/5xx responses
            auth: Bearer token or basic-auth credentials

        Returns:
            ApiResponse with status, decoded body, headers and duration (ms)
        """
        merged_headers = {**self.default_headers, **(headers or {})}
        basic_auth: tuple[str, str] | None = None
        if auth:
            if auth.bearer:
                merged_headers["Authorization"] = f"Bearer {auth.bearer}"
            elif auth.username and auth.password:
                basic_auth = (auth.username, auth.password)

        full_url = f"{self._base_url}{url}"
        client = self._get_client()

        started = time.perf_counter()
        response = client.request(
            method,
            full_url,
            headers=merged_headers,
            json=json,
            params=params,
            timeout=timeout if timeout is not None else self.timeout,
            auth=basic_auth,
        )
        duration = (time.perf_counter() - started) * 1000

        result = ApiResponse(
            status=response.status_code,
            body=_decode_body(response),
            headers=dict(response.headers),
            duration=duration,
        )
        logger.debug("%s %s -> %d (%.0f ms)", method, full_url, result.status, duration)

        if fail_on_status_code and response.status_code >= 400:
            raise ApiStatusError(method, full_url, result)
        return result

    def get(self, url: str, **options: Any) -> ApiResponse:
        return self.request("GET", url, **options)

    def post(self, url: str, body: Any = None, **options: Any) -> ApiResponse:
        return self.request("POST", url, json=body, **options)

    def put(self, url: str, body: Any = None, **options: Any) -> ApiResponse:
        return self.request("PUT", url, json=body, **options)

    def patch(self, url: str, body: Any = None, **options: Any) -> ApiResponse:
        return self.request("PATCH", url, json=body, **options)

    def delete(self, url: str, **options: Any) -> ApiResponse:
        return self.request("DELETE", url, **options)

    def set_headers(self, headers: dict[str, str]) -> None:
        """Merge ``headers`` into the defaults."""
        self.default_headers = {**self.default_headers, **headers}

    def set_auth_token(self, token: str) -> None:
        """Send ``Authorization: Bearer <token>`` with every request."""
        self.set_headers({"Authorization": f"Bearer {token}"})

    def remove_auth(self) -> None:
        self.default_headers.pop("Authorization", None)


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except ValueError:
            logger.warning("Response claimed JSON but could not be decoded")
    return response.text
