"""
storefront-qa - end-to-end and API test automation for the Sweet Shop storefront.

Playwright page objects, an httpx API client for JSONPlaceholder,
Faker data builders, JSON-schema checks and a soft-assertion plugin for
pytest.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from storefront_qa.environment import EnvironmentConfig, TargetEnv, get_environment_config
from storefront_qa.errors import (
    ApiStatusError,
    ConfigurationError,
    SchemaValidationError,
    StorefrontQAError,
    UnknownMockError,
)


def _get_version() -> str:
    """Installed distribution version."""
    try:
        return _metadata_version("storefront-qa")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "EnvironmentConfig",
    "TargetEnv",
    "get_environment_config",
    "ApiStatusError",
    "ConfigurationError",
    "SchemaValidationError",
    "StorefrontQAError",
    "UnknownMockError",
]
