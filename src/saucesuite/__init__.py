"""Page-object E2E suite for the Swag Labs demo store.

Packages:
- config: environment-driven suite configuration and logging setup
- models: browser, visual-capture and store value types
- browser: Playwright lifecycle and the BrowserSession wrapper
- visual: visual-regression capture adapter and plugins
- pages: one page object per store screen
"""

__version__ = "0.1.0"
