"""Page objects for the Swag Labs store screens."""

from saucesuite.pages.base_page import BasePage, ProductListPage
from saucesuite.pages.login_page import LoginPage
from saucesuite.pages.inventory_page import InventoryPage
from saucesuite.pages.cart_page import CartPage
from saucesuite.pages.checkout_page import CheckoutPage

__all__ = [
    "BasePage",
    "ProductListPage",
    "LoginPage",
    "InventoryPage",
    "CartPage",
    "CheckoutPage",
]
