"""Playwright fixtures for live scenarios against the store.

Every test gets its own Playwright instance, browser context and page, so
scenarios never share cookies or cart state.

Usage:
    @pytest.mark.e2e
    @pytest.mark.asyncio
    async def test_cart_badge(logged_in, inventory_page):
        await inventory_page.add_item_to_cart("Sauce Labs Backpack")
        assert await inventory_page.get_cart_count() == 1
"""

from typing import AsyncIterator, List

import pytest
import pytest_asyncio

from saucesuite.browser.browser_manager import BrowserContextManager
from saucesuite.browser.playwright_integration import PlaywrightManager
from saucesuite.browser.session import BrowserSession
from saucesuite.config.settings import SuiteConfig, get_config
from saucesuite.models.shop_models import STANDARD_USER
from saucesuite.pages import CartPage, CheckoutPage, InventoryPage, LoginPage

CART_ITEMS = ["Sauce Labs Backpack", "Sauce Labs Bike Light"]


@pytest.fixture
def suite_config() -> SuiteConfig:
    return get_config()


@pytest_asyncio.fixture
async def session(suite_config) -> AsyncIterator[BrowserSession]:
    """Open an isolated browser session for one test."""
    async with PlaywrightManager.from_config(suite_config) as manager:
        browser_manager = BrowserContextManager(manager, suite_config)
        async with browser_manager.open_session() as session:
            yield session


@pytest.fixture
def login_page(session) -> LoginPage:
    return LoginPage(session)


@pytest.fixture
def inventory_page(session) -> InventoryPage:
    return InventoryPage(session)


@pytest.fixture
def cart_page(session) -> CartPage:
    return CartPage(session)


@pytest.fixture
def checkout_page(session) -> CheckoutPage:
    return CheckoutPage(session)


@pytest_asyncio.fixture
async def logged_in(login_page) -> None:
    """Log in as the standard user; the inventory screen is shown afterwards."""
    await login_page.navigate()
    await login_page.login_as(STANDARD_USER)


@pytest_asyncio.fixture
async def cart_with_items(logged_in, inventory_page) -> List[str]:
    """Log in and put two items in the cart."""
    for item_name in CART_ITEMS:
        await inventory_page.add_item_to_cart(item_name)
    return list(CART_ITEMS)
