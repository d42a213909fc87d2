"""Playwright screenshot plugin for the visual-regression adapter."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from playwright.async_api import Page

from saucesuite.models.browser_models import (
    ScreenshotOptions,
    VisualFramework,
    VisualRegressionOptions,
)
from saucesuite.visual.base import VisualPlugin, VisualRegressionError

logger = logging.getLogger(__name__)


class PlaywrightPlugin(VisualPlugin):
    """Store Playwright page or element screenshots under the baseline directory.

    Page captures honour ``full_page``; element captures (``selector`` set)
    screenshot the first matching element only, because Playwright locators
    have no full-page mode.
    """

    name = "playwright-plugin"
    framework = VisualFramework.PLAYWRIGHT

    def __init__(self):
        self.baseline_dir: Optional[Path] = None

    def init(self, options: VisualRegressionOptions) -> None:
        self.baseline_dir = Path(options.baseline_dir)
        logger.debug(f"{self.name} writing to {self.baseline_dir}")

    def screenshot_path(self, name: str) -> Path:
        """Resolve the destination file for a capture name."""
        if self.baseline_dir is None:
            raise VisualRegressionError(f"{self.name} used before init()")
        return self.baseline_dir / f"{name}.png"

    async def capture(
        self,
        name: str,
        target: Page,
        options: Optional[ScreenshotOptions] = None,
    ) -> str:
        options = options or ScreenshotOptions()
        screenshot_options: Dict[str, Any] = options.extra_options()
        if "path" in screenshot_options:
            raise VisualRegressionError(
                f"Screenshot '{name}' sets 'path'; the file location comes from the capture name"
            )

        path = self.screenshot_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        screenshot_options["path"] = str(path)

        if options.selector:
            logger.info(f"Capturing element screenshot: {name} ({options.selector})")
            await target.locator(options.selector).first.screenshot(**screenshot_options)
        else:
            logger.info(f"Capturing screenshot: {name} (full_page={options.full_page})")
            await target.screenshot(full_page=options.full_page, **screenshot_options)

        return str(path)
