"""Base classes for all page objects."""

import re

from playwright.async_api import Locator

from saucesuite.browser.session import BrowserSession


class BasePage:
    """Bind a screen's locators to a browser session.

    Subclasses declare their selectors as class constants and set ``PATH``
    to the screen's address relative to the store root. Page objects hold no
    state besides the session; everything they return is read from the
    rendered page at call time.
    """

    PATH = ""

    def __init__(self, session: BrowserSession):
        self.session = session

    async def navigate(self) -> None:
        """Load this screen directly."""
        await self.session.navigate(self.PATH)

    async def capture(self, name: str) -> str:
        """Capture the whole screen under the given name."""
        return await self.session.take_screenshot(name)


class ProductListPage(BasePage):
    """A screen listing products as cards with per-item buttons."""

    # Product cards: one root element holding the name label and the buttons
    ITEM_CARD = ".inventory_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"

    def item_card(self, item_name: str) -> Locator:
        """Locate the first product card whose name label is exactly ``item_name``.

        Buttons are then resolved inside the card, so the lookup does not
        depend on how deeply the label is nested.
        """
        name_label = self.session.locator(
            self.ITEM_NAME, has_text=re.compile(rf"^\s*{re.escape(item_name)}\s*$")
        )
        return self.session.locator(self.ITEM_CARD).filter(has=name_label).first
