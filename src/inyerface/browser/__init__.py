"""Browser module for inyerface.

Provides the Playwright browser lifecycle used by the end-to-end suite.
"""

from inyerface.browser.config import get_headless_mode
from inyerface.browser.manager import BrowserManager

__all__ = ["BrowserManager", "get_headless_mode"]
