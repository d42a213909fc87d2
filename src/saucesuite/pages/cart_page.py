"""Page object for the cart screen."""

import logging
from typing import List

from saucesuite.models.shop_models import LineItem
from saucesuite.pages.base_page import ProductListPage
from saucesuite.utils.parsing import parse_currencies, parse_currency

logger = logging.getLogger(__name__)


class CartPage(ProductListPage):
    """Cart contents with checkout and continue-shopping actions."""

    PATH = "cart.html"

    ITEM_CARD = ".cart_item"

    CART_LIST = ".cart_list"
    REMOVE_BUTTON = 'button[id^="remove"]'
    CONTINUE_SHOPPING_BUTTON = "#continue-shopping"
    CHECKOUT_BUTTON = "#checkout"

    async def is_loaded(self) -> bool:
        return await self.session.is_visible(self.CART_LIST)

    async def get_item_count(self) -> int:
        return await self.session.locator(self.ITEM_CARD).count()

    async def get_item_names(self) -> List[str]:
        return await self.session.locator(self.ITEM_NAME).all_inner_texts()

    async def get_item_prices(self) -> List[str]:
        return await self.session.locator(self.ITEM_PRICE).all_inner_texts()

    async def get_line_items(self) -> List[LineItem]:
        """Read every cart row as a (name, price) pair, row by row."""
        items = []
        for row in await self.session.locator(self.ITEM_CARD).all():
            name = await row.locator(self.ITEM_NAME).inner_text()
            price = await row.locator(self.ITEM_PRICE).inner_text()
            items.append(LineItem(name=name.strip(), price=parse_currency(price)))
        return items

    async def remove_item(self, item_name: str) -> None:
        await self.item_card(item_name).locator(self.REMOVE_BUTTON).click()
        logger.debug(f"Removed from cart: {item_name}")

    async def continue_shopping(self) -> None:
        await self.session.click(self.CONTINUE_SHOPPING_BUTTON)
        await self.session.wait_for_navigation()

    async def checkout(self) -> None:
        await self.session.click(self.CHECKOUT_BUTTON)
        await self.session.wait_for_navigation()

    async def calculate_total(self) -> float:
        """Sum the rendered item prices."""
        return float(sum(parse_currencies(await self.get_item_prices())))

    async def take_cart_screenshot(self, name: str = "cart-page") -> str:
        return await self.capture(name)
