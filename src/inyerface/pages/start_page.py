"""Start page of the game."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components import base
from inyerface.components.descriptor import button, page
from inyerface.config import get_base_url

if TYPE_CHECKING:
    from inyerface.components.context import UIContext


class StartPage:
    """Landing page with the link that starts the game."""

    def __init__(self, ctx: UIContext) -> None:
        self.ctx = ctx
        self.root = page(".start", "Start page")
        self.start_link_button = button(".start__link", "Start link", self.root)

    async def open(self, url: str | None = None) -> None:
        """Navigate to the game URL (default: INYERFACE_BASE_URL)."""
        target = url or get_base_url()
        self.ctx.logger.info("Opening %s", target)
        await self.ctx.page.goto(target)

    async def is_displayed(self, timeout_ms: float | None = None) -> bool:
        return await base.is_component_existing(self.ctx, self.root, timeout_ms)

    async def start_game(self) -> None:
        await base.click(self.ctx, self.start_link_button)
