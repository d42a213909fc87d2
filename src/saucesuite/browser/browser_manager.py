"""Per-test browser session lifecycle.

This module provides the BrowserContextManager, which opens a fresh
browser context and page in the browser a PlaywrightManager launched, and
hands them out as a ready-to-use BrowserSession with guaranteed cleanup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser, BrowserContext, Page

from saucesuite.browser.playwright_integration import PlaywrightManager
from saucesuite.browser.session import BrowserSession
from saucesuite.config.settings import SuiteConfig
from saucesuite.visual.regression import create_visual_regression

logger = logging.getLogger(__name__)


class BrowserContextManager:
    """Hand out isolated browser sessions.

    Each session gets its own browser context, so cookies, local storage and
    the store's cart never leak between sessions.
    """

    def __init__(self, playwright_manager: PlaywrightManager, config: SuiteConfig):
        self.playwright_manager = playwright_manager
        self.config = config

    async def _new_context(self, browser: Browser) -> BrowserContext:
        try:
            return await browser.new_context(**self.config.viewport.context_options())
        except Exception as e:
            logger.error(f"Failed to create browser context: {e}")
            raise RuntimeError(f"Context creation failed: {e}") from e

    async def _new_page(self, context: BrowserContext) -> Page:
        try:
            page = await context.new_page()
        except Exception as e:
            logger.error(f"Failed to create page: {e}")
            raise RuntimeError(f"Page creation failed: {e}") from e
        page.set_default_timeout(self.config.timeout_ms)
        return page

    @asynccontextmanager
    async def open_session(self) -> AsyncIterator[BrowserSession]:
        """Create a session and close its context afterwards.

        Yields:
            BrowserSession bound to a fresh page

        Raises:
            RuntimeError: If the context or page cannot be created

        Example:
            async with browser_manager.open_session() as session:
                await LoginPage(session).navigate()
            # Context automatically cleaned up
        """
        config = self.config
        browser = await self.playwright_manager.start()
        context = await self._new_context(browser)
        try:
            page = await self._new_page(context)
            yield BrowserSession(
                page=page,
                base_url=config.base_url,
                visual=create_visual_regression(config),
                timeout_ms=config.timeout_ms,
                retry_navigation=config.navigation_retry,
            )
        finally:
            try:
                await context.close()
                logger.debug("Closed browser context")
            except Exception as e:
                logger.error(f"Error closing context: {e}")
