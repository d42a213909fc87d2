"""Tests for CheckoutPage."""

import pytest
from unittest.mock import AsyncMock, MagicMock, call

from saucesuite.models.shop_models import CheckoutSummary
from saucesuite.pages.checkout_page import CheckoutPage

SUMMARY_LABELS = {
    ".summary_subtotal_label": "Item total: $39.98",
    ".summary_tax_label": "Tax: $3.20",
    ".summary_total_label": "Total: $43.18",
}


@pytest.fixture
def checkout_page(session):
    return CheckoutPage(session)


class TestCheckoutInformation:
    """Tests for the information form step."""

    @pytest.mark.asyncio
    async def test_navigate(self, checkout_page, mock_page):
        await checkout_page.navigate()

        assert mock_page.goto.await_args.args[0] == (
            "https://www.saucedemo.com/checkout-step-one.html"
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "predicate, selector",
        [
            ("is_checkout_info_loaded", ".checkout_info"),
            ("is_checkout_overview_loaded", ".checkout_summary_container"),
            ("is_checkout_complete_loaded", ".checkout_complete_container"),
            ("is_error_displayed", ".error-message-container"),
        ],
    )
    async def test_loaded_predicates(self, checkout_page, mock_page, predicate, selector):
        assert await getattr(checkout_page, predicate)() is True
        mock_page.is_visible.assert_awaited_once_with(selector)

    @pytest.mark.asyncio
    async def test_fill_checkout_info(self, checkout_page, mock_page):
        await checkout_page.fill_checkout_info("John", "Doe", "12345")

        assert mock_page.fill.await_args_list == [
            call("#first-name", "John"),
            call("#last-name", "Doe"),
            call("#postal-code", "12345"),
        ]
        mock_page.click.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_continue_to_overview(self, checkout_page, mock_page):
        await checkout_page.continue_to_overview()

        mock_page.click.assert_awaited_once_with("#continue")
        mock_page.wait_for_load_state.assert_awaited_once_with("networkidle")

    @pytest.mark.asyncio
    async def test_cancel_checkout(self, checkout_page, mock_page):
        await checkout_page.cancel_checkout()

        mock_page.click.assert_awaited_once_with("#cancel")
        mock_page.wait_for_load_state.assert_awaited_once_with("networkidle")

    @pytest.mark.asyncio
    async def test_error_message(self, checkout_page, mock_page):
        mock_page.inner_text = AsyncMock(return_value="Error: First Name is required")

        assert await checkout_page.get_error_message() == "Error: First Name is required"
        mock_page.inner_text.assert_awaited_once_with(".error-message-container")


class TestCheckoutOverview:
    """Tests for the overview step."""

    @pytest.mark.asyncio
    async def test_item_names_and_prices(self, checkout_page, mock_page, make_locator):
        names = make_locator(texts=["Sauce Labs Backpack"])
        prices = make_locator(texts=["$29.99"])
        mock_page.locator = MagicMock(
            side_effect=lambda selector: {
                ".inventory_item_name": names,
                ".inventory_item_price": prices,
            }[selector]
        )

        assert await checkout_page.get_item_names() == ["Sauce Labs Backpack"]
        assert await checkout_page.get_item_prices() == ["$29.99"]

    @pytest.mark.asyncio
    async def test_summary_values(self, checkout_page, mock_page):
        mock_page.inner_text = AsyncMock(side_effect=lambda selector: SUMMARY_LABELS[selector])

        assert await checkout_page.get_subtotal() == pytest.approx(39.98)
        assert await checkout_page.get_tax() == pytest.approx(3.20)
        assert await checkout_page.get_total() == pytest.approx(43.18)

    @pytest.mark.asyncio
    async def test_get_summary(self, checkout_page, mock_page):
        mock_page.inner_text = AsyncMock(side_effect=lambda selector: SUMMARY_LABELS[selector])

        summary = await checkout_page.get_summary()

        assert summary == CheckoutSummary(subtotal=39.98, tax=3.20, total=43.18)
        assert mock_page.inner_text.await_count == 3

    @pytest.mark.asyncio
    async def test_unparseable_label_reads_zero(self, checkout_page, mock_page):
        mock_page.inner_text = AsyncMock(return_value="Total:")

        assert await checkout_page.get_total() == 0.0

    @pytest.mark.asyncio
    async def test_finish_checkout(self, checkout_page, mock_page):
        await checkout_page.finish_checkout()

        mock_page.click.assert_awaited_once_with("#finish")
        mock_page.wait_for_load_state.assert_awaited_once_with("networkidle")


class TestCheckoutComplete:
    """Tests for the completion step."""

    @pytest.mark.asyncio
    async def test_completion_message(self, checkout_page, mock_page):
        mock_page.inner_text = AsyncMock(return_value="Thank you for your order!")

        assert await checkout_page.get_completion_message() == "Thank you for your order!"
        mock_page.inner_text.assert_awaited_once_with(".complete-header")

    @pytest.mark.asyncio
    async def test_back_to_products(self, checkout_page, mock_page):
        await checkout_page.back_to_products()

        mock_page.click.assert_awaited_once_with("#back-to-products")
        mock_page.wait_for_load_state.assert_awaited_once_with("networkidle")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, default_name",
        [
            ("take_checkout_info_screenshot", "checkout-info-page"),
            ("take_checkout_overview_screenshot", "checkout-overview-page"),
            ("take_checkout_complete_screenshot", "checkout-complete-page"),
        ],
    )
    async def test_screenshot_default_names(self, checkout_page, mock_visual, method, default_name):
        path = await getattr(checkout_page, method)()

        assert path == f"shots/{default_name}.png"
