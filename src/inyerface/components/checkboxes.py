"""Checkbox component operations.

A checkbox descriptor matches a list of boxes; each box is followed by the
element holding its label text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components.base import log_component_action, wait_until_component_is_existing

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor

NEXT_SIBLING_SELECTOR = "xpath=following-sibling::*[1]"


async def get_option_values(ctx: UIContext, component: ComponentDescriptor) -> list[str]:
    """Return the label text next to every matching box."""
    await wait_until_component_is_existing(ctx, component)
    labels = ctx.locate(component).locator(NEXT_SIBLING_SELECTOR)
    return await ctx.query_factory(labels).all_text_contents()


async def select_by_index(ctx: UIContext, component: ComponentDescriptor, index: int) -> None:
    """Toggle the box at the 0-based index."""
    await wait_until_component_is_existing(ctx, component)
    log_component_action(ctx, component, "select", f"#{index}")
    await ctx.locate(component).nth(index).click()
