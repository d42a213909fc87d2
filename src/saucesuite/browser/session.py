"""Browser session wrapper shared by all page objects.

``BrowserSession`` owns one Playwright page and the base address of the
store. Apart from the single navigation retry, every method is a direct
pass-through to the driver: unresolved selectors and timeouts propagate as
Playwright errors and fail the calling test.
"""

import logging
from typing import Any, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from saucesuite.models.browser_models import ScreenshotOptions
from saucesuite.visual.regression import VisualRegression

logger = logging.getLogger(__name__)

DEFAULT_NAVIGATION_TIMEOUT = 30000


class BrowserSession:
    """One browser tab bound to the store under test.

    Attributes:
        page: Playwright page instance
        base_url: Store address without trailing slash
        timeout_ms: Navigation timeout in milliseconds
        retry_navigation: Whether a failed navigation is retried once
        visual: Visual-regression engine used for screenshots
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        visual: VisualRegression,
        timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT,
        retry_navigation: bool = True,
    ):
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.visual = visual
        self.timeout_ms = timeout_ms
        self.retry_navigation = retry_navigation

    @property
    def url(self) -> str:
        """Address of the currently loaded document."""
        return self.page.url

    def build_url(self, path: str = "") -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def navigate(self, path: str = "") -> None:
        """Navigate to a path under the base address.

        Waits for ``domcontentloaded``. If the driver reports an error (WebKit
        in particular fails intermittently with internal errors on this
        site), the navigation is retried once waiting for ``networkidle``.

        Args:
            path: Path relative to the base address

        Raises:
            playwright.async_api.Error: If the retry fails too
        """
        url = self.build_url(path)
        try:
            await self.page.goto(url, timeout=self.timeout_ms, wait_until="domcontentloaded")
            logger.debug(f"Navigated to {url}")
        except PlaywrightError as e:
            if not self.retry_navigation:
                raise
            logger.warning(f"Navigation to {url} failed ({e}); retrying with networkidle")
            await self.page.goto(url, timeout=self.timeout_ms, wait_until="networkidle")
            logger.debug(f"Navigated to {url} on retry")

    async def wait_for_navigation(self) -> None:
        """Block until network activity settles."""
        await self.page.wait_for_load_state("networkidle")

    async def is_visible(self, selector: str) -> bool:
        return await self.page.is_visible(selector)

    async def get_text(self, selector: str) -> str:
        return await self.page.inner_text(selector)

    async def click(self, selector: str) -> None:
        await self.page.click(selector)
        logger.debug(f"Clicked element: {selector}")

    async def fill(self, selector: str, value: str) -> None:
        await self.page.fill(selector, value)
        logger.debug(f"Filled {selector}")

    async def select_option(self, selector: str, value: str) -> None:
        await self.page.select_option(selector, value)
        logger.debug(f"Selected {value} in {selector}")

    async def wait_for_selector(self, selector: str, state: str = "visible") -> None:
        await self.page.wait_for_selector(selector, state=state)

    def locator(self, selector: str, **options: Any) -> Locator:
        """Create a lazily resolved locator on the page."""
        return self.page.locator(selector, **options)

    async def take_screenshot(self, name: str, full_page: bool = False) -> str:
        """Capture the current page.

        Args:
            name: Screenshot name
            full_page: Whether to capture the full scrollable page

        Returns:
            Path of the stored screenshot
        """
        return await self.visual.capture(
            name, self.page, ScreenshotOptions(full_page=full_page)
        )

    async def take_element_screenshot(
        self, selector: str, name: str, options: Optional[ScreenshotOptions] = None
    ) -> str:
        """Capture a single element.

        Args:
            selector: Selector for the element
            name: Screenshot name
            options: Extra screenshot options; ``selector`` is overridden

        Returns:
            Path of the stored screenshot
        """
        options = (options or ScreenshotOptions()).model_copy(update={"selector": selector})
        return await self.visual.capture(name, self.page, options)
