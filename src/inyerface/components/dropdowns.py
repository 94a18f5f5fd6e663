"""Dropdown component operations.

The game's dropdowns render their options as `.dropdown__list-item`
elements inside the dropdown container.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components.base import (
    click,
    get_component_attributes,
    log_component_action,
    wait_until_component_is_existing,
)

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor

DROPDOWN_ITEM_SELECTOR = ".dropdown__list-item"
OPEN_CLASS = "open"


async def open_dropdown(ctx: UIContext, component: ComponentDescriptor) -> None:
    """Open the dropdown unless it is already open.

    A dropdown counts as open when its class list contains "open" and its
    aria-expanded attribute, if present, is "true".
    """
    attributes = await get_component_attributes(ctx, component)

    if OPEN_CLASS not in attributes.get("class", ""):
        await click(ctx, component)
        return

    expanded = attributes.get("aria-expanded")
    if expanded is not None and expanded != "true":
        await click(ctx, component)


async def select_by_index(ctx: UIContext, component: ComponentDescriptor, index: int) -> None:
    """Click the option at the 0-based index."""
    await wait_until_component_is_existing(ctx, component)
    log_component_action(ctx, component, "select", f"#{index}")
    await ctx.locate(component).locator(DROPDOWN_ITEM_SELECTOR).nth(index).click()


async def get_option_values(ctx: UIContext, component: ComponentDescriptor) -> list[str]:
    """Return the text of every option in document order."""
    await wait_until_component_is_existing(ctx, component)
    options = ctx.locate(component).locator(DROPDOWN_ITEM_SELECTOR)
    return await ctx.query_factory(options).all_text_contents()
