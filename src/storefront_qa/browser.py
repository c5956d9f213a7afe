"""Bounded Playwright browser factory for storefront tests.

Caps the number of browsers launched at once so parallel workers and
ad-hoc scripts do not exhaust memory, and opens pages pre-configured
from the active ``EnvironmentConfig`` (base URL, viewport, video).

Usage::

    from storefront_qa.browser import get_browser_gate

    with get_browser_gate().sync_page(config) as page:
        page.goto("/")

Configuration via environment variables:

- ``STOREFRONT_MAX_BROWSERS``: max concurrent browsers (default: 2)
- ``STOREFRONT_BROWSER_HEADLESS``: ``1``/``true`` or ``0``/``false`` (default: ``1``)
- ``STOREFRONT_BROWSER``: ``chromium``, ``firefox`` or ``webkit`` (default: ``chromium``)
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from storefront_qa.errors import ConfigurationError

if TYPE_CHECKING:
    from storefront_qa.environment import EnvironmentConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_BROWSERS = 2
DEFAULT_HEADLESS = True
DEFAULT_BROWSER = "chromium"
BROWSER_TYPES = ("chromium", "firefox", "webkit")


def context_options(config: EnvironmentConfig) -> dict[str, Any]:
    """``browser.new_context`` keyword arguments for an environment."""
    options: dict[str, Any] = {
        "base_url": config.ui_base_url,
        "viewport": {"width": config.viewport_width, "height": config.viewport_height},
    }
    if config.video:
        options["record_video_dir"] = str(config.videos_dir)
    return options


class BrowserGate:
    """Semaphore-gated Playwright browser factory.

    Each browser or page context manager acquires a slot before launching
    and releases it after the browser is closed. Callers beyond the limit
    block until a slot frees up.
    """

    def __init__(
        self,
        max_concurrent: int | None = None,
        headless: bool | None = None,
        browser_type: str | None = None,
    ) -> None:
        raw = (
            max_concurrent
            if max_concurrent is not None
            else int(os.environ.get("STOREFRONT_MAX_BROWSERS", str(DEFAULT_MAX_BROWSERS)))
        )
        self._max: int = max(1, raw)
        self._headless: bool = (
            headless
            if headless is not None
            else os.environ.get("STOREFRONT_BROWSER_HEADLESS", "1").lower() not in ("0", "false")
        )
        self._browser_type = (
            browser_type or os.environ.get("STOREFRONT_BROWSER", DEFAULT_BROWSER)
        ).lower()
        if self._browser_type not in BROWSER_TYPES:
            raise ConfigurationError(
                f"Unknown browser '{self._browser_type}'",
                context={"valid": ", ".join(BROWSER_TYPES)},
            )
        self._semaphore = threading.Semaphore(self._max)
        self._active_count: int = 0
        self._lock = threading.Lock()

    @property
    def max_concurrent(self) -> int:
        return self._max

    @property
    def active_count(self) -> int:
        """Number of browsers currently running."""
        return self._active_count

    @property
    def headless(self) -> bool:
        return self._headless

    @property
    def browser_type(self) -> str:
        return self._browser_type

    def _inc(self) -> None:
        with self._lock:
            self._active_count += 1
        logger.debug("Browser slot acquired (%d/%d active)", self._active_count, self._max)

    def _dec(self) -> None:
        with self._lock:
            self._active_count -= 1
        logger.debug("Browser slot released (%d/%d active)", self._active_count, self._max)

    @contextmanager
    def sync_browser(self, **launch_kwargs: Any) -> Iterator[Any]:
        """Acquire a slot, launch a browser, yield it, then close and release.

        Keyword arguments are forwarded to ``launch()``; ``headless``
        defaults to the gate's setting.
        """
        self._semaphore.acquire()
        self._inc()
        try:
            from playwright.sync_api import sync_playwright

            with sync_playwright() as p:
                headless = launch_kwargs.pop("headless", self._headless)
                launcher = getattr(p, self._browser_type)
                browser = launcher.launch(headless=headless, **launch_kwargs)
                try:
                    yield browser
                finally:
                    browser.close()
        finally:
            self._dec()
            self._semaphore.release()

    @contextmanager
    def sync_page(self, config: EnvironmentConfig, **launch_kwargs: Any) -> Iterator[Any]:
        """Yield a page in a fresh context configured for ``config``.

        The context is closed before the browser so recorded videos are
        flushed to ``config.videos_dir``.
        """
        with self.sync_browser(**launch_kwargs) as browser:
            context = browser.new_context(**context_options(config))
            context.set_default_timeout(config.default_command_timeout)
            context.set_default_navigation_timeout(config.page_load_timeout)
            try:
                yield context.new_page()
            finally:
                context.close()


# ── Module-level singleton ──────────────────────────────────────────

_gate: BrowserGate | None = None
_gate_lock = threading.Lock()


def get_browser_gate() -> BrowserGate:
    """Get or create the global BrowserGate singleton."""
    global _gate
    if _gate is None:
        with _gate_lock:
            if _gate is None:
                _gate = BrowserGate()
    return _gate


def configure_browser_gate(
    max_concurrent: int | None = None,
    headless: bool | None = None,
    browser_type: str | None = None,
) -> BrowserGate:
    """Reconfigure the global gate.  Returns the new instance."""
    global _gate
    with _gate_lock:
        _gate = BrowserGate(
            max_concurrent=max_concurrent, headless=headless, browser_type=browser_type
        )
    return _gate
