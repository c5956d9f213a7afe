"""
REST API client and Playwright network mocking.

Usage:
    from storefront_qa.api import ApiClient

    with ApiClient() as client:
        response = client.get_user(1)
        assert response.status == 200
"""

from __future__ import annotations

from storefront_qa.api.base_client import DEFAULT_HEADERS, BaseApiClient
from storefront_qa.api.client import ApiClient
from storefront_qa.api.mock_manager import (
    InterceptedRequest,
    InterceptLog,
    MockConfig,
    MockManager,
    mock_api,
    mock_empty,
    mock_error,
    mock_network_failure,
    mock_success,
)
from storefront_qa.api.types import (
    Address,
    Album,
    ApiAuth,
    ApiResponse,
    Comment,
    Company,
    ErrorResponse,
    Geo,
    Photo,
    Post,
    Todo,
    User,
)

__all__ = [
    # Clients
    "ApiClient",
    "BaseApiClient",
    "DEFAULT_HEADERS",
    "ApiAuth",
    "ApiResponse",
    # Models
    "Address",
    "Album",
    "Comment",
    "Company",
    "ErrorResponse",
    "Geo",
    "Photo",
    "Post",
    "Todo",
    "User",
    # Mocking
    "InterceptLog",
    "InterceptedRequest",
    "MockConfig",
    "MockManager",
    "mock_api",
    "mock_empty",
    "mock_error",
    "mock_network_failure",
    "mock_success",
]
