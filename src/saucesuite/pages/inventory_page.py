"""Page object for the inventory (product list) screen."""

import logging
from typing import List, Union

from saucesuite.models.shop_models import SortOption
from saucesuite.pages.base_page import ProductListPage
from saucesuite.utils.parsing import parse_count, parse_currencies

logger = logging.getLogger(__name__)


class InventoryPage(ProductListPage):
    """Product list shown after login."""

    PATH = "inventory.html"

    INVENTORY_CONTAINER = "#inventory_container"
    ADD_TO_CART_BUTTON = 'button[id^="add-to-cart"]'
    REMOVE_BUTTON = 'button[id^="remove"]'
    SHOPPING_CART_BADGE = ".shopping_cart_badge"
    SHOPPING_CART_LINK = ".shopping_cart_link"
    SORT_DROPDOWN = ".product_sort_container"
    BURGER_MENU = "#react-burger-menu-btn"
    LOGOUT_LINK = "#logout_sidebar_link"

    async def is_loaded(self) -> bool:
        return await self.session.is_visible(self.INVENTORY_CONTAINER)

    async def get_item_count(self) -> int:
        return await self.session.locator(self.ITEM_CARD).count()

    async def get_item_names(self) -> List[str]:
        """Return the item names in display order."""
        return await self.session.locator(self.ITEM_NAME).all_inner_texts()

    async def get_item_prices(self) -> List[str]:
        """Return the item prices as rendered, e.g. ``"$29.99"``."""
        return await self.session.locator(self.ITEM_PRICE).all_inner_texts()

    async def get_item_price_values(self) -> List[float]:
        return parse_currencies(await self.get_item_prices())

    async def add_item_to_cart(self, item_name: str) -> None:
        await self.item_card(item_name).locator(self.ADD_TO_CART_BUTTON).click()
        logger.debug(f"Added to cart: {item_name}")

    async def remove_item_from_cart(self, item_name: str) -> None:
        await self.item_card(item_name).locator(self.REMOVE_BUTTON).click()
        logger.debug(f"Removed from cart: {item_name}")

    async def get_cart_count(self) -> int:
        """Read the cart badge.

        The store hides the badge while the cart is empty, so a missing badge
        reads as 0.
        """
        if await self.session.is_visible(self.SHOPPING_CART_BADGE):
            return parse_count(await self.session.get_text(self.SHOPPING_CART_BADGE))
        return 0

    async def go_to_cart(self) -> None:
        await self.session.click(self.SHOPPING_CART_LINK)
        await self.session.wait_for_navigation()

    async def sort_items(self, sort_option: Union[SortOption, str]) -> None:
        """Pick an entry of the native sort control.

        Args:
            sort_option: One of ``az``, ``za``, ``lohi``, ``hilo``

        Raises:
            ValueError: If the option is not a known sort value
        """
        option = SortOption(sort_option)
        await self.session.select_option(self.SORT_DROPDOWN, option.value)

    async def get_sort_option(self) -> SortOption:
        value = await self.session.locator(self.SORT_DROPDOWN).input_value()
        return SortOption(value)

    async def logout(self) -> None:
        await self.session.click(self.BURGER_MENU)
        await self.session.wait_for_selector(self.LOGOUT_LINK, state="visible")
        await self.session.click(self.LOGOUT_LINK)
        await self.session.wait_for_navigation()

    async def take_inventory_screenshot(self, name: str = "inventory-page") -> str:
        return await self.capture(name)
