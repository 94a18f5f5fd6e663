"""Help form docked at the bottom of the game page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components import base
from inyerface.components.descriptor import button, form
from inyerface.utils.generators import convert_timeout

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor


class HelpForm:
    def __init__(self, ctx: UIContext, parent: ComponentDescriptor) -> None:
        self.ctx = ctx
        self.root = form(".help-form", "Help form", parent)
        self.hide_button = button(".help-form__send-to-bottom-button", "Hide help button", self.root)

    async def is_help_form_existing(self, timeout_ms: float | None = None) -> bool:
        return await base.is_component_existing(self.ctx, self.root, timeout_ms)

    async def get_attributes(self) -> dict[str, str]:
        return await base.get_component_attributes(self.ctx, self.root)

    async def is_hidden(self, hidden_class: str) -> bool:
        """Return True if the form's class list currently contains hidden_class."""
        attributes = await self.get_attributes()
        return hidden_class in attributes.get("class", "")

    async def get_hide_duration_ms(self, duration_style: str = "transition-duration") -> int:
        """Return how long the hide animation takes, in milliseconds."""
        value = await base.get_style_property(self.ctx, self.root, duration_style)
        return convert_timeout(value)

    async def hide_help_form(self) -> None:
        await base.click(self.ctx, self.hide_button)
