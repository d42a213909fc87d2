"""Visual-regression capture adapter and plugins."""

from saucesuite.visual.base import (
    PluginNotRegisteredError,
    VisualPlugin,
    VisualRegressionError,
)
from saucesuite.visual.playwright_plugin import PlaywrightPlugin
from saucesuite.visual.regression import VisualRegression, create_visual_regression

__all__ = [
    "PluginNotRegisteredError",
    "VisualPlugin",
    "VisualRegressionError",
    "PlaywrightPlugin",
    "VisualRegression",
    "create_visual_regression",
]
