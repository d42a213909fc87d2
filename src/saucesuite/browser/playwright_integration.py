"""Playwright driver and browser for a single test.

PlaywrightManager starts the Playwright driver, launches the one browser a
test runs in, and shuts both down again. Contexts and pages are opened per
session by ``BrowserContextManager``; closing the browser takes any context
still open with it.
"""

import logging
from typing import Any, List, Optional

from playwright.async_api import async_playwright, Browser, Playwright

from saucesuite.config.settings import SuiteConfig
from saucesuite.models.browser_models import BrowserType

logger = logging.getLogger(__name__)


class PlaywrightManager:
    """Run one Playwright driver and one browser.

    Use as an async context manager; the browser is launched on entry and
    the driver is stopped on exit, even when the test body fails.
    """

    def __init__(
        self,
        browser_type: BrowserType = BrowserType.CHROMIUM,
        headless: bool = True,
        **launch_options: Any,
    ):
        self.browser_type = browser_type
        self.headless = headless
        self.launch_options = launch_options
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None

    @classmethod
    def from_config(cls, config: SuiteConfig) -> "PlaywrightManager":
        """Build a manager for the engine and launch flags in ``config``."""
        return cls(config.browser, headless=config.headless, slow_mo=config.slow_mo)

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    async def start(self) -> Browser:
        """Start the driver and launch the browser.

        Calling it again while the browser is up returns the same browser.

        Returns:
            The launched browser

        Raises:
            RuntimeError: If the driver does not start or the browser does not
                launch. A driver started before a failed launch is stopped.
        """
        if self.browser is not None:
            return self.browser

        engine = self.browser_type.value
        try:
            self.playwright = await async_playwright().start()
        except Exception as e:
            logger.error(f"Playwright driver did not start: {e}")
            raise RuntimeError(f"Playwright initialization failed: {e}") from e

        try:
            launcher = getattr(self.playwright, engine)
            self.browser = await launcher.launch(headless=self.headless, **self.launch_options)
        except Exception as e:
            logger.error(f"Could not launch {engine}: {e}")
            await self._stop_driver_quietly()
            raise RuntimeError(f"Browser launch failed: {e}") from e

        logger.info(f"Launched {engine} (headless={self.headless})")
        return self.browser

    async def _stop_driver_quietly(self) -> None:
        try:
            await self.playwright.stop()
        except Exception as e:
            logger.warning(f"Playwright driver did not stop after failed launch: {e}")
        self.playwright = None

    async def stop(self) -> None:
        """Close the browser, then stop the driver.

        Both steps run even if the first one fails.

        Raises:
            RuntimeError: Naming every step that failed
        """
        failures: List[str] = []

        if self.browser is not None:
            try:
                await self.browser.close()
            except Exception as e:
                failures.append(f"browser close: {e}")
            self.browser = None

        if self.playwright is not None:
            try:
                await self.playwright.stop()
            except Exception as e:
                failures.append(f"driver stop: {e}")
            self.playwright = None

        if failures:
            summary = "; ".join(failures)
            logger.warning(f"Playwright shutdown incomplete: {summary}")
            raise RuntimeError(f"Cleanup errors: {summary}")

        logger.info("Playwright stopped")
