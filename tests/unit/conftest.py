"""Mocks of the Playwright objects the suite drives."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Locator, Page

from saucesuite.browser.session import BrowserSession
from saucesuite.visual.regression import VisualRegression

BASE_URL = "https://www.saucedemo.com"


@pytest.fixture
def mock_page():
    """Create a mock Page instance."""
    page = AsyncMock(spec=Page)
    page.url = f"{BASE_URL}/inventory.html"
    page.goto = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.is_visible = AsyncMock(return_value=True)
    page.inner_text = AsyncMock(return_value="")
    page.click = AsyncMock()
    page.fill = AsyncMock()
    page.select_option = AsyncMock()
    page.screenshot = AsyncMock(return_value=b"screenshot_data")
    page.set_default_timeout = MagicMock()
    page.locator = MagicMock()
    page.close = AsyncMock()
    return page


@pytest.fixture
def make_locator():
    """Build mock Locator instances with canned results."""

    def _make(texts=None, count=0, text=""):
        locator = MagicMock(spec=Locator)
        locator.all_inner_texts = AsyncMock(return_value=list(texts or []))
        locator.count = AsyncMock(return_value=count)
        locator.inner_text = AsyncMock(return_value=text)
        locator.input_value = AsyncMock(return_value=text)
        locator.all = AsyncMock(return_value=[])
        locator.click = AsyncMock()
        locator.screenshot = AsyncMock(return_value=b"screenshot_data")
        return locator

    return _make


@pytest.fixture
def mock_visual():
    """Create a mock visual-regression engine."""
    visual = MagicMock(spec=VisualRegression)
    visual.capture = AsyncMock(side_effect=lambda name, target, options=None: f"shots/{name}.png")
    return visual


@pytest.fixture
def session(mock_page, mock_visual):
    """Create a BrowserSession over the mock page."""
    return BrowserSession(page=mock_page, base_url=f"{BASE_URL}/", visual=mock_visual)
