"""Pytest configuration and shared fixtures for inyerface tests.

This module provides an in-memory stand-in for the Playwright page so that
component and page-object operations can be tested without a browser.
"""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from inyerface.components.context import UIContext

# Short default timeout so negative checks finish quickly
TEST_TIMEOUT_MS = 100

LOCATOR_ACTIONS = (
    "click",
    "hover",
    "fill",
    "press",
    "press_sequentially",
    "scroll_into_view_if_needed",
    "count",
)


# ============================================================================
# Fake Element State
# ============================================================================


class FakeElementQuery:
    """ElementQuery answering from in-memory element state.

    Attributes:
        present: Whether any matching element exists
        visible: Whether the first match is visible
        element_count: Number of matching elements
        attrs: Attributes of the first match
        styles: Computed styles of the first match
        text: Text content of the first match
        texts: Text contents of every match
        value: Input value of the first match
    """

    def __init__(self) -> None:
        self.present = True
        self.visible = True
        self.element_count = 1
        self.attrs: dict[str, str] = {}
        self.styles: dict[str, str] = {}
        self.text = ""
        self.texts: list[str] = []
        self.value = ""

    async def exists(self) -> bool:
        return self.present

    async def is_visible(self) -> bool:
        return self.visible

    async def count(self) -> int:
        return self.element_count if self.present else 0

    async def attributes(self) -> dict[str, str]:
        return dict(self.attrs)

    async def style_property(self, name: str) -> str:
        return self.styles.get(name, "")

    async def text_content(self) -> str:
        return self.text

    async def all_text_contents(self) -> list[str]:
        return list(self.texts)

    async def input_value(self) -> str:
        return self.value


class FakeBrowser:
    """Page double whose locators are MagicMocks keyed by selector.

    Nested locators are keyed as "<parent> >> <child>". Text filters, `.first`
    and `.nth()` return the same locator so that action calls can be asserted
    on the locator obtained with `locator(selector)`.
    """

    def __init__(self) -> None:
        self.page = MagicMock()
        self.page.locator.side_effect = self.locator
        self.page.goto = AsyncMock()
        self.locators: dict[str, MagicMock] = {}
        self.queries: dict[str, FakeElementQuery] = {}

    def locator(self, selector: str) -> MagicMock:
        if selector not in self.locators:
            loc = MagicMock(name=selector)
            loc.selector = selector
            loc.first = loc
            loc.filter.return_value = loc
            loc.nth.return_value = loc
            loc.locator.side_effect = lambda child, parent=selector: self.locator(f"{parent} >> {child}")
            for action in LOCATOR_ACTIONS:
                setattr(loc, action, AsyncMock())
            self.locators[selector] = loc
        return self.locators[selector]

    def query(self, selector: str) -> FakeElementQuery:
        return self.queries.setdefault(selector, FakeElementQuery())

    def query_factory(self, locator: MagicMock) -> FakeElementQuery:
        return self.query(locator.selector)


# ============================================================================
# Context Fixtures
# ============================================================================


@pytest.fixture
def fake_browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def ui_context(fake_browser: FakeBrowser) -> UIContext:
    """Create a UIContext backed by the fake browser.

    Returns:
        UIContext with a short default timeout and the "inyerface.test" logger.
    """
    return UIContext(
        page=fake_browser.page,
        logger=logging.getLogger("inyerface.test"),
        default_timeout_ms=TEST_TIMEOUT_MS,
        query_factory=fake_browser.query_factory,
    )
