"""Data models for the suite."""

from saucesuite.models.browser_models import (
    BrowserType,
    ScreenshotOptions,
    Viewport,
    VisualFramework,
    VisualRegressionOptions,
)
from saucesuite.models.shop_models import (
    DEFAULT_PASSWORD,
    INVALID_USER,
    LOCKED_OUT_USER,
    PERFORMANCE_GLITCH_USER,
    STANDARD_USER,
    CheckoutSummary,
    Credentials,
    LineItem,
    SortOption,
)

__all__ = [
    "BrowserType",
    "ScreenshotOptions",
    "Viewport",
    "VisualFramework",
    "VisualRegressionOptions",
    "DEFAULT_PASSWORD",
    "INVALID_USER",
    "LOCKED_OUT_USER",
    "PERFORMANCE_GLITCH_USER",
    "STANDARD_USER",
    "CheckoutSummary",
    "Credentials",
    "LineItem",
    "SortOption",
]
