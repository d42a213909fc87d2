"""Value types read from, or typed into, the store screens."""

from enum import Enum

from pydantic import BaseModel, Field


class SortOption(str, Enum):
    """Values of the inventory sort control."""

    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"


class Credentials(BaseModel):
    """A username/password pair for the login form."""

    username: str = Field(description="Login name")
    password: str = Field(description="Login password")


class LineItem(BaseModel):
    """One rendered cart or overview row."""

    name: str = Field(description="Item name label")
    price: float = Field(description="Item price in dollars")


class CheckoutSummary(BaseModel):
    """Totals scraped from the checkout overview."""

    subtotal: float = Field(description="Item total before tax")
    tax: float = Field(description="Tax amount")
    total: float = Field(description="Order total")


DEFAULT_PASSWORD = "secret_sauce"

STANDARD_USER = Credentials(username="standard_user", password=DEFAULT_PASSWORD)
LOCKED_OUT_USER = Credentials(username="locked_out_user", password=DEFAULT_PASSWORD)
PERFORMANCE_GLITCH_USER = Credentials(
    username="performance_glitch_user", password=DEFAULT_PASSWORD
)
INVALID_USER = Credentials(username="invalid_user", password="invalid_password")
