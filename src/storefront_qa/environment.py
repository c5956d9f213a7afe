"""
Environment configuration for storefront-qa test runs.

This module provides a standard way to select the environment a test run
targets and to resolve the URLs, timeouts and reporting paths that go
with it.

The STOREFRONT_ENV environment variable selects one of:
    - default: base configuration (long page-load timeout, reports/)
    - dev (default when unset): public endpoints, API mocking enabled
    - staging: STAGING_API_BASE_URL / STAGING_UI_BASE_URL overrides, no mocking
    - prod: PROD_API_BASE_URL / PROD_UI_BASE_URL overrides, no mocking

A .env file in the working directory is read before resolving; values
already set in the environment take precedence over it.

Usage:
    from storefront_qa.environment import get_environment_config

    config = get_environment_config()  # uses STOREFRONT_ENV
    client = ApiClient(base_url=config.api_base_url)

    if config.enable_mocking:
        mock_success(page, "GET", "**/api/users", users)
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from storefront_qa.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable name
STOREFRONT_ENV_VAR = "STOREFRONT_ENV"

# Read from the working directory; variables already set always win
DOTENV_FILE = ".env"

DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_UI_BASE_URL = "https://sweetshop.netlify.app"


class TargetEnv(StrEnum):
    """Target environment values."""

    DEFAULT = "default"
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


_DEFAULT_ENV = TargetEnv.DEV

_ALIASES: dict[str, TargetEnv] = {
    "": TargetEnv.DEV,
    "dev": TargetEnv.DEV,
    "development": TargetEnv.DEV,
    "staging": TargetEnv.STAGING,
    "stage": TargetEnv.STAGING,
    "prod": TargetEnv.PROD,
    "production": TargetEnv.PROD,
    "default": TargetEnv.DEFAULT,
    "base": TargetEnv.DEFAULT,
}


class EnvironmentConfig(BaseModel):
    """Resolved settings for one target environment.

    Timeouts ending in ``_timeout`` are milliseconds (Playwright units),
    except ``api_timeout`` which is seconds (httpx units).
    """

    model_config = ConfigDict(frozen=True)

    env: TargetEnv
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = Field(default=10.0, gt=0)
    ui_base_url: str = DEFAULT_UI_BASE_URL
    enable_mocking: bool = False
    default_command_timeout: int = Field(default=5000, gt=0)
    page_load_timeout: int = Field(default=30000, gt=0)
    request_timeout: int = Field(default=10000, gt=0)
    response_timeout: int = Field(default=30000, gt=0)
    viewport_width: int = Field(default=1920, gt=0)
    viewport_height: int = Field(default=1080, gt=0)
    video: bool = True
    reports_dir: Path = Path("reports")

    @property
    def screenshots_dir(self) -> Path:
        """Directory for failure screenshots."""
        return self.reports_dir / "screenshots"

    @property
    def videos_dir(self) -> Path:
        """Directory for recorded browser videos."""
        return self.reports_dir / "videos"

    @property
    def logs_dir(self) -> Path:
        """Directory for JSONL run logs."""
        return self.reports_dir / "logs"


def get_test_env() -> TargetEnv:
    """Get the current target environment from STOREFRONT_ENV.

    Returns:
        TargetEnv: The selected environment. Defaults to dev if
        STOREFRONT_ENV is not set or holds an unknown value.

    Examples:
        >>> import os
        >>> os.environ["STOREFRONT_ENV"] = "production"
        >>> get_test_env()
        <TargetEnv.PROD: 'prod'>
    """
    env_value = os.environ.get(STOREFRONT_ENV_VAR, "").lower().strip()

    env = _ALIASES.get(env_value)
    if env is None:
        logger.warning(
            "Unknown STOREFRONT_ENV value '%s'. "
            "Valid values: default, dev, staging, prod. Defaulting to dev.",
            env_value,
        )
        return _DEFAULT_ENV
    return env


def load_env_file(path: str | Path = DOTENV_FILE) -> bool:
    """Load KEY=VALUE pairs from a dotenv file into ``os.environ``.

    Variables already present in the environment are left untouched.
    Returns True if the file was found and holds at least one variable.
    """
    loaded = load_dotenv(dotenv_path=path, override=False)
    if loaded:
        logger.debug("Loaded environment overrides from %s", path)
    return loaded


def _override(var_name: str, fallback: str) -> str:
    """Read a URL override, ignoring empty values."""
    return os.environ.get(var_name) or fallback


def get_environment_config(env: TargetEnv | str | None = None) -> EnvironmentConfig:
    """Resolve the configuration for an environment.

    A ``.env`` file in the working directory is loaded first, so it can
    set STOREFRONT_ENV and the URL overrides.

    Args:
        env: Environment to resolve. None reads STOREFRONT_ENV.

    Returns:
        EnvironmentConfig with URLs, timeouts and report paths.

    Raises:
        ConfigurationError: If ``env`` is a string that names no environment.
    """
    load_env_file()
    if env is None:
        env = get_test_env()
    elif not isinstance(env, TargetEnv):
        resolved = _ALIASES.get(env.lower().strip())
        if resolved is None:
            raise ConfigurationError(
                f"Unknown environment '{env}'. Valid values: default, dev, staging, prod"
            )
        env = resolved

    if env == TargetEnv.DEFAULT:
        return EnvironmentConfig(
            env=env,
            page_load_timeout=60000,
            request_timeout=5000,
            reports_dir=Path("reports"),
        )

    if env == TargetEnv.DEV:
        return EnvironmentConfig(
            env=env,
            enable_mocking=True,
            reports_dir=Path("reports/dev"),
        )

    if env == TargetEnv.STAGING:
        return EnvironmentConfig(
            env=env,
            api_base_url=_override("STAGING_API_BASE_URL", DEFAULT_API_BASE_URL),
            ui_base_url=_override("STAGING_UI_BASE_URL", DEFAULT_UI_BASE_URL),
            reports_dir=Path("reports/staging"),
        )

    # Production never uses mocks
    return EnvironmentConfig(
        env=TargetEnv.PROD,
        api_base_url=_override("PROD_API_BASE_URL", DEFAULT_API_BASE_URL),
        api_timeout=15.0,
        ui_base_url=_override("PROD_UI_BASE_URL", DEFAULT_UI_BASE_URL),
        request_timeout=15000,
        reports_dir=Path("reports/prod"),
    )


def is_mocking_enabled() -> bool:
    """Check if the current environment allows API mocking."""
    return get_environment_config().enable_mocking
