"""
Error types for storefront-qa helpers.

Soft-assertion errors live in ``storefront_qa.soft_assert.errors`` and
derive from ``AssertionError`` so pytest reports them as test failures.
Everything here is a fail-fast error raised where the problem is found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storefront_qa.api.types import ApiResponse
    from storefront_qa.schemas.validator import SchemaIssue


class StorefrontQAError(Exception):
    """Base exception for all storefront-qa errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
            return f"{self.message} ({details})"
        return self.message


class ConfigurationError(StorefrontQAError):
    """
    Raised when the test environment cannot be configured.

    Examples:
    - An unknown STOREFRONT_ENV or --env value
    - An unsupported STOREFRONT_BROWSER
    """

    pass


class UnknownMockError(StorefrontQAError):
    """Raised when applying a mock that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Mock "{name}" not found')


class SchemaValidationError(StorefrontQAError, AssertionError):
    """
    Raised by ``assert_schema`` when data does not match a JSON schema.

    Attributes:
        issues: Every schema violation found, in validator order
        data: The instance that was validated
    """

    def __init__(self, message: str, issues: list[SchemaIssue], data: Any):
        self.issues = issues
        self.data = data
        super().__init__(message)


class ApiStatusError(StorefrontQAError):
    """
    Raised when an API call returns an error status and the caller
    asked the client to fail on status codes.
    """

    def __init__(self, method: str, url: str, response: ApiResponse):
        self.method = method
        self.url = url
        self.response = response
        super().__init__(
            f"{method} {url} failed with status {response.status}",
            context={"body": response.body},
        )

    @property
    def status(self) -> int:
        """HTTP status of the failed response."""
        return self.response.status
