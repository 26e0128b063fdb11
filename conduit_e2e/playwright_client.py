"""
Direct Playwright client for the conduit UI suite.

Usage:
    async with PlaywrightClient.from_config(config) as client:
        await client.page.goto("/")
        await client.page.get_by_role("link", name="Sign in").click()
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from conduit_e2e.config import SuiteConfig

logger = logging.getLogger(__name__)


class PlaywrightClient:
    """
    Launches a browser in-process with one context and one default page.

    The context is bound to ``base_url`` so pages can navigate with relative
    paths, and is seeded from ``storage_state_path`` when that file exists.
    """

    def __init__(
        self,
        browser_type: str = "chromium",
        headless: bool = True,
        timeout: int = 30000,
        storage_state_path: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """
        Args:
            browser_type: Browser to use (chromium, firefox, webkit)
            headless: Run in headless mode
            timeout: Default timeout in milliseconds
            storage_state_path: Saved cookies/origins to start the context with
            base_url: Base URL for relative navigation
        """
        self.browser_type = browser_type
        self.headless = headless
        self.timeout = timeout
        self.storage_state_path = storage_state_path
        self.base_url = base_url

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    @classmethod
    def from_config(cls, config: SuiteConfig) -> "PlaywrightClient":
        return cls(
            browser_type=config.browser_type,
            headless=config.playwright_headless,
            timeout=config.timeout_ms,
            storage_state_path=config.auth_state_path,
            base_url=config.ui_base_url,
        )

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def connect(self):
        """Launch the browser and open the default context and page."""
        self._playwright = await async_playwright().start()

        if self.browser_type == "firefox":
            self._browser = await self._playwright.firefox.launch(headless=self.headless)
        elif self.browser_type == "webkit":
            self._browser = await self._playwright.webkit.launch(headless=self.headless)
        else:
            self._browser = await self._playwright.chromium.launch(headless=self.headless)

        storage_state_path = self.storage_state_path
        if storage_state_path and not os.path.exists(storage_state_path):
            logger.warning("storage_state_path does not exist, ignoring: %s", storage_state_path)
            storage_state_path = None

        self._context = await self.new_context(storage_state=storage_state_path)
        self._page = await self._context.new_page()

    async def new_context(self, **kwargs) -> BrowserContext:
        """
        Create a new browser context bound to the base URL.

        Args:
            **kwargs: Context options (viewport, storage_state, ...)
        """
        if not self._browser:
            raise RuntimeError("Client not connected. Use 'async with' or call connect()")

        if self.base_url:
            kwargs.setdefault("base_url", self.base_url)
        context = await self._browser.new_context(**kwargs)
        context.set_default_timeout(self.timeout)
        return context

    async def close(self):
        """Close all connections and cleanup resources."""
        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def context(self) -> BrowserContext:
        if not self._context:
            raise RuntimeError("Client not connected")
        return self._context

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Client not connected or page not created")
        return self._page
