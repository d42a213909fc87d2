"""Suite configuration with environment variable loading."""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field
from dotenv import load_dotenv

from saucesuite.models.browser_models import BrowserType, Viewport

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_browser(name: str, default: str) -> BrowserType:
    raw = os.getenv(name, default)
    try:
        return BrowserType(raw.strip().lower())
    except ValueError as e:
        choices = ", ".join(engine.value for engine in BrowserType)
        raise ValueError(f"{name} must be one of {choices}, got {raw!r}") from e


class SuiteConfig(BaseModel):
    """Configuration for the browser test suite."""

    # Target application
    base_url: str = Field(
        default_factory=lambda: os.getenv("SAUCE_BASE_URL", "https://www.saucedemo.com"),
        description="Base address of the store under test",
    )

    # Browser Configuration
    browser: BrowserType = Field(
        default_factory=lambda: _env_browser("SAUCE_BROWSER", "chromium"),
        description="Browser engine to launch",
    )
    headless: bool = Field(
        default_factory=lambda: _env_flag("SAUCE_HEADLESS", "true"),
        description="Run the browser without a window",
    )
    slow_mo: int = Field(
        default_factory=lambda: _env_int("SAUCE_SLOW_MO", "0"),
        description="Delay between driver operations (ms)",
    )
    viewport: Viewport = Field(
        default_factory=lambda: Viewport(
            width=_env_int("SAUCE_VIEWPORT_WIDTH", "1280"),
            height=_env_int("SAUCE_VIEWPORT_HEIGHT", "720"),
        ),
        description="Viewport for new browser contexts",
    )

    # Navigation
    timeout_ms: int = Field(
        default_factory=lambda: _env_int("SAUCE_TIMEOUT_MS", "30000"),
        description="Navigation timeout (ms)",
    )
    navigation_retry: bool = Field(
        default_factory=lambda: _env_flag("SAUCE_NAVIGATION_RETRY", "true"),
        description="Retry a failed navigation once with a networkidle wait",
    )

    # Visual regression
    baseline_dir: Path = Field(
        default_factory=lambda: Path(
            os.getenv("SAUCE_BASELINE_DIR", ".testivai/visual-regression/baseline")
        ),
        description="Directory where baseline screenshots are written",
    )

    # Test run
    log_level: str = Field(
        default_factory=lambda: os.getenv("SAUCE_LOG_LEVEL", "INFO").upper(),
        description="Log level for the saucesuite loggers",
    )
    run_e2e: bool = Field(
        default_factory=lambda: _env_flag("SAUCE_RUN_E2E", "false"),
        description="Run live scenarios against the store",
    )


def get_config() -> SuiteConfig:
    """Build a configuration snapshot from the current environment."""
    return SuiteConfig()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for a test run.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("saucesuite").setLevel(log_level)
