"""Browser automation layer built on Playwright.

This package provides:
- Playwright start-up, browser launch and shutdown
- Isolated per-test browser sessions
- The session wrapper every page object drives
"""

from saucesuite.browser.playwright_integration import PlaywrightManager
from saucesuite.browser.browser_manager import BrowserContextManager
from saucesuite.browser.session import BrowserSession

__all__ = [
    "PlaywrightManager",
    "BrowserContextManager",
    "BrowserSession",
]
