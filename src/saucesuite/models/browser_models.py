"""Browser and visual-capture data models.

This module defines the Pydantic models shared by the browser lifecycle
helpers and the visual-regression adapter: browser engines, viewport
configuration, and the options understood by the screenshot plugins.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BrowserType(str, Enum):
    """Supported browser engines."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


class Viewport(BaseModel):
    """Browser viewport configuration."""

    width: int = Field(default=1280, description="Viewport width")
    height: int = Field(default=720, description="Viewport height")
    device_scale_factor: float = Field(default=1.0, description="Device pixel ratio")
    is_mobile: bool = Field(default=False, description="Mobile viewport")
    has_touch: bool = Field(default=False, description="Touch support")

    def context_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``Browser.new_context``."""
        return {
            "viewport": {"width": self.width, "height": self.height},
            "device_scale_factor": self.device_scale_factor,
            "is_mobile": self.is_mobile,
            "has_touch": self.has_touch,
        }


class VisualFramework(str, Enum):
    """Automation frameworks a visual-regression plugin can target."""

    PLAYWRIGHT = "playwright"
    CYPRESS = "cypress"
    PUPPETEER = "puppeteer"
    SELENIUM = "selenium"


class VisualRegressionOptions(BaseModel):
    """Configuration handed to the visual-regression engine.

    Only ``framework`` and ``baseline_dir`` are used by the capture plugins;
    the remaining fields belong to the external comparison engine and are
    carried through untouched.
    """

    framework: VisualFramework = Field(description="Framework the captures come from")
    baseline_dir: Path = Field(description="Directory for baseline screenshots")
    compare_dir: Optional[Path] = Field(default=None, description="Directory for comparison captures")
    report_dir: Optional[Path] = Field(default=None, description="Directory for diff reports")
    diff_threshold: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, description="Acceptable difference ratio"
    )
    update_baselines: bool = Field(default=False, description="Overwrite baselines on capture")


class ScreenshotOptions(BaseModel):
    """Per-capture options.

    Unknown keys are kept and forwarded to the screenshot primitive, so
    Playwright options such as ``animations`` or ``omit_background`` pass
    straight through.
    """

    model_config = ConfigDict(extra="allow")

    full_page: bool = Field(default=False, description="Capture the full scrollable page")
    selector: Optional[str] = Field(default=None, description="Scope the capture to one element")

    def extra_options(self) -> Dict[str, Any]:
        """Return the forwarded keyword options."""
        return dict(self.model_extra or {})
