"""Cookies consent modal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components import base
from inyerface.components.descriptor import button, form

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor


class CookiesForm:
    def __init__(self, ctx: UIContext, parent: ComponentDescriptor) -> None:
        self.ctx = ctx
        self.root = form(".cookies", "Cookies modal", parent)
        self.agree_button = button(".cookies .button--transparent", "Agree button", self.root)

    async def wait_for_cookies_modal(self, timeout_ms: float | None = None) -> None:
        """Wait for the modal to appear.

        Raises:
            ComponentError: If the modal does not appear before the timeout
        """
        await base.wait_until_component_is_existing(self.ctx, self.root, timeout_ms)

    async def accept_cookies(self) -> None:
        await base.click(self.ctx, self.agree_button)

    async def is_cookies_form_existing(self, timeout_ms: float | None = None) -> bool:
        return await base.is_component_existing(self.ctx, self.root, timeout_ms)

    async def wait_until_closed(self, timeout_ms: float | None = None) -> None:
        await base.wait_until_component_is_absent(self.ctx, self.root, timeout_ms)
