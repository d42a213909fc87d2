"""Visual-regression capture adapter.

``VisualRegression`` is the seam between the page objects and whatever
engine stores and compares screenshots. It only routes a capture request to
the plugin registered for the configured framework; baselining policy and
image comparison belong to the external engine.

Example:
    >>> visual = VisualRegression.init(
    ...     VisualRegressionOptions(framework="playwright", baseline_dir="shots")
    ... ).use(PlaywrightPlugin())
    >>> path = await visual.capture("login-page", page)
"""

import logging
from typing import Any, Dict, Optional

from saucesuite.config.settings import SuiteConfig
from saucesuite.models.browser_models import (
    ScreenshotOptions,
    VisualFramework,
    VisualRegressionOptions,
)
from saucesuite.visual.base import (
    PluginNotRegisteredError,
    VisualPlugin,
    VisualRegressionError,
)
from saucesuite.visual.playwright_plugin import PlaywrightPlugin

logger = logging.getLogger(__name__)


class VisualRegression:
    """Route named captures to the plugin for the configured framework.

    Attributes:
        options: Engine configuration shared with every registered plugin
        plugins: Registered plugins keyed by framework
    """

    def __init__(self, options: VisualRegressionOptions):
        self.options = options
        self.plugins: Dict[VisualFramework, VisualPlugin] = {}

    @classmethod
    def init(cls, options: VisualRegressionOptions) -> "VisualRegression":
        """Create an engine instance for the given options."""
        logger.info(
            f"Visual regression initialized (framework={options.framework.value}, "
            f"baseline_dir={options.baseline_dir})"
        )
        return cls(options)

    def use(self, plugin: VisualPlugin) -> "VisualRegression":
        """Register a plugin.

        A later plugin for the same framework replaces the earlier one.

        Args:
            plugin: Plugin to register

        Returns:
            This instance, for chaining
        """
        plugin.init(self.options)
        self.plugins[plugin.framework] = plugin
        logger.debug(f"Registered visual plugin {plugin.name} for {plugin.framework.value}")
        return self

    async def capture(
        self,
        name: str,
        target: Any,
        options: Optional[ScreenshotOptions] = None,
    ) -> str:
        """Capture a screenshot through the active plugin.

        Args:
            name: Logical screenshot name
            target: Framework-specific target (a Playwright page here)
            options: Screenshot options

        Returns:
            Path to the captured screenshot

        Raises:
            VisualRegressionError: If the name is empty
            PluginNotRegisteredError: If no plugin handles the configured framework
        """
        if not name or not name.strip():
            raise VisualRegressionError("Screenshot name must not be empty")

        plugin = self.plugins.get(self.options.framework)
        if plugin is None:
            raise PluginNotRegisteredError(
                f"No visual plugin registered for framework '{self.options.framework.value}'"
            )

        path = await plugin.capture(name, target, options)
        logger.info(f"Screenshot saved: {path}")
        return path


def create_visual_regression(config: SuiteConfig) -> VisualRegression:
    """Build the default Playwright-backed engine for a suite configuration."""
    options = VisualRegressionOptions(
        framework=VisualFramework.PLAYWRIGHT,
        baseline_dir=config.baseline_dir,
    )
    return VisualRegression.init(options).use(PlaywrightPlugin())
