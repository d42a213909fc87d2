"""Page object for the three checkout screens.

Checkout runs as information form -> overview -> complete. One page object
covers all three because the store moves between them by form submission
rather than by separate entry points; each screen has its own loaded-state
predicate.
"""

from typing import List

from saucesuite.models.shop_models import CheckoutSummary
from saucesuite.pages.base_page import BasePage
from saucesuite.utils.parsing import parse_currency


class CheckoutPage(BasePage):
    """Checkout information, overview and completion screens."""

    PATH = "checkout-step-one.html"

    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"

    # Step one: information form
    CHECKOUT_FORM = ".checkout_info"
    FIRST_NAME_INPUT = "#first-name"
    LAST_NAME_INPUT = "#last-name"
    POSTAL_CODE_INPUT = "#postal-code"
    CONTINUE_BUTTON = "#continue"
    CANCEL_BUTTON = "#cancel"
    ERROR_MESSAGE = ".error-message-container"

    # Step two: overview
    CHECKOUT_SUMMARY = ".checkout_summary_container"
    SUBTOTAL_LABEL = ".summary_subtotal_label"
    TAX_LABEL = ".summary_tax_label"
    TOTAL_LABEL = ".summary_total_label"
    FINISH_BUTTON = "#finish"

    # Complete
    CHECKOUT_COMPLETE = ".checkout_complete_container"
    COMPLETE_HEADER = ".complete-header"
    BACK_HOME_BUTTON = "#back-to-products"

    async def is_checkout_info_loaded(self) -> bool:
        return await self.session.is_visible(self.CHECKOUT_FORM)

    async def is_checkout_overview_loaded(self) -> bool:
        return await self.session.is_visible(self.CHECKOUT_SUMMARY)

    async def is_checkout_complete_loaded(self) -> bool:
        return await self.session.is_visible(self.CHECKOUT_COMPLETE)

    async def fill_checkout_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        """Fill the information form without submitting it.

        Args:
            first_name: The first name
            last_name: The last name
            postal_code: The postal code
        """
        await self.session.fill(self.FIRST_NAME_INPUT, first_name)
        await self.session.fill(self.LAST_NAME_INPUT, last_name)
        await self.session.fill(self.POSTAL_CODE_INPUT, postal_code)

    async def continue_to_overview(self) -> None:
        await self.session.click(self.CONTINUE_BUTTON)
        await self.session.wait_for_navigation()

    async def cancel_checkout(self) -> None:
        """Leave the information form and return to the cart."""
        await self.session.click(self.CANCEL_BUTTON)
        await self.session.wait_for_navigation()

    async def get_error_message(self) -> str:
        return await self.session.get_text(self.ERROR_MESSAGE)

    async def is_error_displayed(self) -> bool:
        return await self.session.is_visible(self.ERROR_MESSAGE)

    async def get_item_names(self) -> List[str]:
        return await self.session.locator(self.ITEM_NAME).all_inner_texts()

    async def get_item_prices(self) -> List[str]:
        return await self.session.locator(self.ITEM_PRICE).all_inner_texts()

    async def get_subtotal(self) -> float:
        return parse_currency(await self.session.get_text(self.SUBTOTAL_LABEL))

    async def get_tax(self) -> float:
        return parse_currency(await self.session.get_text(self.TAX_LABEL))

    async def get_total(self) -> float:
        return parse_currency(await self.session.get_text(self.TOTAL_LABEL))

    async def get_summary(self) -> CheckoutSummary:
        """Scrape subtotal, tax and total from their own summary lines.

        The values are read independently; nothing here checks that they add
        up.
        """
        return CheckoutSummary(
            subtotal=await self.get_subtotal(),
            tax=await self.get_tax(),
            total=await self.get_total(),
        )

    async def finish_checkout(self) -> None:
        await self.session.click(self.FINISH_BUTTON)
        await self.session.wait_for_navigation()

    async def get_completion_message(self) -> str:
        return await self.session.get_text(self.COMPLETE_HEADER)

    async def back_to_products(self) -> None:
        await self.session.click(self.BACK_HOME_BUTTON)
        await self.session.wait_for_navigation()

    async def take_checkout_info_screenshot(self, name: str = "checkout-info-page") -> str:
        return await self.capture(name)

    async def take_checkout_overview_screenshot(self, name: str = "checkout-overview-page") -> str:
        return await self.capture(name)

    async def take_checkout_complete_screenshot(self, name: str = "checkout-complete-page") -> str:
        return await self.capture(name)
