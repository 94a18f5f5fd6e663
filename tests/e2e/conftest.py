"""E2E test fixtures for inyerface.

Provides a real browser page on the live game and the page objects bound to it.
Skipped unless INYERFACE_E2E is set.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from inyerface.browser.manager import BrowserManager
from inyerface.components.context import UIContext
from inyerface.config import (
    DEFAULT_TIMEOUT_ENV_VAR,
    SCENARIO_DATA_ENV_VAR,
    get_default_timeout_ms,
    get_log_level,
    is_e2e_enabled,
    load_scenario_data,
)
from inyerface.models import ScenarioData
from inyerface.pages import GamePage, StartPage
from inyerface.utils.logging import setup_logging

TEST_DATA_PATH = Path(__file__).parent / "test_data.json"


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip e2e tests unless explicitly enabled."""
    if is_e2e_enabled():
        return
    skip_e2e = pytest.mark.skip(reason="set INYERFACE_E2E=1 to run tests against the live site")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def scenario_data() -> ScenarioData:
    """Scenario data from INYERFACE_SCENARIO_DATA, or the bundled test_data.json."""
    if os.environ.get(SCENARIO_DATA_ENV_VAR):
        return load_scenario_data()
    return load_scenario_data(TEST_DATA_PATH)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager]:
    """Browser shared by every scenario of the session."""
    setup_logging(get_log_level())
    manager = BrowserManager()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def ui_context(
    browser_manager: BrowserManager, scenario_data: ScenarioData
) -> AsyncGenerator[UIContext]:
    """UIContext on a page of a new browser context.

    The default timeout is INYERFACE_DEFAULT_TIMEOUT_MS when set, otherwise
    the scenario timeout. Each scenario gets its own context, so the cookies
    modal and the timer start fresh.
    """
    if os.environ.get(DEFAULT_TIMEOUT_ENV_VAR):
        timeout_ms = get_default_timeout_ms()
    else:
        timeout_ms = scenario_data.timeout
    async with browser_manager.scenario_page() as page:
        yield UIContext(page=page, default_timeout_ms=timeout_ms)


@pytest_asyncio.fixture(loop_scope="session")
async def game_page(ui_context: UIContext) -> GamePage:
    """Open the site, start the game and return the game page object."""
    start_page = StartPage(ui_context)
    await start_page.open()
    await start_page.start_game()

    game = GamePage(ui_context)
    assert await game.login_form.is_displayed()
    return game
