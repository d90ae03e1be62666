"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per session
    - Isolated context per test (cookies, storage)
    - Default action timeout and test-id attribute applied to every context
    - Settings sourced from ConfigLoader (ui.* keys)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Playwright,
)

from testsuites.ui_testing.framework.config_loader import ConfigLoader


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages the browser instance and per-test contexts.

    Usage:
        manager = BrowserManager(base_url="https://www.saucedemo.com")
        await manager.start()
        context = await manager.new_context()
        page = await context.new_page()
        ...
        await manager.close()
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        base_url: Optional[str] = None,
        timeout: int = 10000,
        test_id_attribute: str = "data-test",
        viewport: Optional[Dict[str, int]] = None,
    ):
        """
        Args:
            headless: Run browser in headless mode
            browser_type: 'chromium', 'firefox' or 'webkit'
            base_url: Base URL applied to every new context
            timeout: Default timeout (ms) for every Playwright action
            test_id_attribute: Attribute used by `get_by_test_id`
            viewport: Context viewport, e.g. {"width": 1280, "height": 720}
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser_type}'. Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        self.headless = headless
        self.browser_type = browser_type
        self.base_url = base_url
        self.timeout = timeout
        self.test_id_attribute = test_id_attribute
        self.viewport = viewport

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None, base_url: Optional[str] = None) -> "BrowserManager":
        """Build a manager from the `ui.*` configuration section."""
        config = config or ConfigLoader()
        return cls(
            headless=config.get("ui.headless", True),
            browser_type=config.get("ui.browser", "chromium"),
            base_url=base_url,
            timeout=config.get("ui.timeout", 10000),
            test_id_attribute=config.get("ui.test_id_attribute", "data-test"),
            viewport={
                "width": config.get("ui.viewport_width", 1280),
                "height": config.get("ui.viewport_height", 720),
            },
        )

    async def start(self) -> None:
        """Start Playwright and launch the browser."""
        self._playwright = await async_playwright().start()
        self._playwright.selectors.set_test_id_attribute(self.test_id_attribute)

        browser_launcher = getattr(self._playwright, self.browser_type)
        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, timeout={self.timeout}ms)"
        )

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create a new isolated browser context.

        Args:
            **options: Overrides for the default context options
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = dict(self.DEFAULT_CONTEXT_OPTIONS)
        if self.viewport:
            context_options["viewport"] = self.viewport
        if self.base_url:
            context_options["base_url"] = self.base_url
        context_options.update(options)

        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.timeout)
        self._contexts.append(context)
        return context

    async def close_context(self, context: BrowserContext) -> None:
        """Close a context created by this manager."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
