"""Base abstract class for visual-capture plugins.

This module defines the interface every screenshot plugin must follow so the
visual-regression adapter can stay independent of the automation framework
that produced the capture target.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from saucesuite.models.browser_models import (
    ScreenshotOptions,
    VisualFramework,
    VisualRegressionOptions,
)


class VisualRegressionError(Exception):
    """Raised on visual-capture failures."""

    pass


class PluginNotRegisteredError(VisualRegressionError):
    """Raised when no plugin is registered for the configured framework."""

    pass


class VisualPlugin(ABC):
    """Abstract base class for screenshot capture plugins.

    A plugin turns a logical capture name plus a framework-specific target
    (a Playwright page, a Selenium driver, ...) into a stored image file.
    """

    #: Plugin identifier used in log messages
    name: str = "plugin"

    #: Framework whose targets this plugin can capture
    framework: VisualFramework

    @abstractmethod
    def init(self, options: VisualRegressionOptions) -> None:
        """Receive the engine options when the plugin is registered.

        Args:
            options: Visual-regression configuration
        """
        pass

    @abstractmethod
    async def capture(
        self,
        name: str,
        target: Any,
        options: Optional[ScreenshotOptions] = None,
    ) -> str:
        """Capture a screenshot.

        Args:
            name: Logical screenshot name (file name without extension)
            target: Framework-specific capture target
            options: Screenshot options

        Returns:
            Path of the stored screenshot

        Raises:
            VisualRegressionError: If the plugin was not initialized
        """
        pass
