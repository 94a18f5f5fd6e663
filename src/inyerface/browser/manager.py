"""Browser manager for Playwright automation.

One chromium process serves a whole test session; every scenario runs in its
own browser context so cookies, storage and the game timer start fresh.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from playwright.async_api import async_playwright

from inyerface.browser.config import get_headless_mode, get_slow_mo_ms

if TYPE_CHECKING:
    from playwright.async_api import Browser, Page, Playwright

logger = logging.getLogger(__name__)


class BrowserManager:
    """Owns the Playwright driver and the shared browser.

    The browser is launched lazily on first use and relaunched if it was
    disconnected. Launch and shutdown are serialized by an asyncio.Lock.

    Attributes:
        _playwright: Playwright driver, started on first use
        _browser: Shared Browser instance
        _lock: Async lock guarding browser startup and shutdown
    """

    def __init__(self) -> None:
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._lock = asyncio.Lock()

    async def get_browser(self) -> Browser:
        """Get the shared browser, launching chromium if necessary.

        Returns:
            Connected Playwright Browser
        """
        async with self._lock:
            if self._browser is not None and self._browser.is_connected():
                return self._browser

            if self._playwright is None:
                self._playwright = await async_playwright().start()

            headless = get_headless_mode()
            logger.info("Launching chromium (headless=%s)", headless)
            self._browser = await self._playwright.chromium.launch(
                headless=headless,
                slow_mo=get_slow_mo_ms(),
            )
            return self._browser

    @asynccontextmanager
    async def scenario_page(self, **context_options: Any) -> AsyncIterator[Page]:
        """Open a page in a new browser context, closing the context on exit.

        Args:
            **context_options: Options for Browser.new_context (viewport, locale, ...)

        Yields:
            Page of a context that shares nothing with earlier scenarios
        """
        browser = await self.get_browser()
        context = await browser.new_context(**context_options)
        logger.debug("Opened scenario browser context")
        try:
            yield await context.new_page()
        finally:
            await context.close()
            logger.debug("Closed scenario browser context")

    async def close(self) -> None:
        """Close the browser and stop the driver.

        Errors raised by an already-dead browser are logged and ignored so
        that session teardown never masks a test outcome.
        """
        async with self._lock:
            browser, self._browser = self._browser, None
            playwright, self._playwright = self._playwright, None

            if browser is not None:
                try:
                    await browser.close()
                except Exception as e:  # noqa: BLE001
                    logger.debug("Ignoring error while closing browser: %s", e)
            if playwright is not None:
                try:
                    await playwright.stop()
                except Exception as e:  # noqa: BLE001
                    logger.debug("Ignoring error while stopping playwright: %s", e)
