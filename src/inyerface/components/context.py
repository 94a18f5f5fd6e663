"""Explicit context for component operations.

Every component operation receives a `UIContext` instead of reaching for a
global test controller. The context owns the page, the logger that records
component actions, and the default wait timeout.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from inyerface.components.query import ElementQuery, PlaywrightElementQuery
from inyerface.config import DEFAULT_TIMEOUT_MS
from inyerface.utils.logging import get_logger

if TYPE_CHECKING:
    from playwright.async_api import Locator, Page

    from inyerface.components.descriptor import ComponentDescriptor


@dataclass
class UIContext:
    """Page, logger and defaults shared by the operations of one test.

    Attributes:
        page: Playwright page the components live on
        logger: Logger receiving component action messages
        default_timeout_ms: Timeout used when an operation is not given one
        query_factory: Builds the element query for a locator
    """

    page: Page
    logger: logging.Logger = field(default_factory=lambda: get_logger("actions"))
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    query_factory: Callable[[Locator], ElementQuery] = PlaywrightElementQuery

    def locate(self, component: ComponentDescriptor) -> Locator:
        """Build a locator for every element matching the component."""
        locator = self.page.locator(component.selector)
        if component.text is not None:
            locator = locator.filter(has_text=component.text)
        return locator

    def query(self, component: ComponentDescriptor) -> ElementQuery:
        return self.query_factory(self.locate(component))

    def query_selector(self, selector: str) -> ElementQuery:
        return self.query_factory(self.page.locator(selector))

    def timeout(self, timeout_ms: float | None) -> float:
        """Resolve an optional timeout against the context default."""
        return self.default_timeout_ms if timeout_ms is None else timeout_ms
