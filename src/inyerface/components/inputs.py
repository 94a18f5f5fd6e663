"""Input component operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components.base import (
    log_component_action,
    wait_until_component_is_existing,
    wait_until_element_is_enabled,
)

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor

SELECT_ALL_SHORTCUT = "Control+a"


async def get_value(ctx: UIContext, component: ComponentDescriptor) -> str:
    """Return the current value of the input."""
    await wait_until_component_is_existing(ctx, component)
    return await ctx.query(component).input_value()


async def clear(ctx: UIContext, component: ComponentDescriptor) -> None:
    """Select everything in the input and delete it with the keyboard."""
    locator = ctx.locate(component).first
    log_component_action(ctx, component, "clear")
    await locator.click()
    await locator.press(SELECT_ALL_SHORTCUT)
    await locator.press("Delete")


async def send_keys(
    ctx: UIContext,
    component: ComponentDescriptor,
    text: str,
    replace: bool = True,
    clean: bool = False,
) -> None:
    """Type text into the input.

    Does nothing when the input already holds `text`. Number inputs are
    filled in one step because typing into them character by character is
    rejected by some browsers.

    Args:
        ctx: Operation context
        component: Input to type into
        text: Text to enter
        replace: Overwrite the current contents (default: True)
        clean: Clear the input with the keyboard before typing
    """
    await wait_until_component_is_existing(ctx, component)
    await wait_until_element_is_enabled(ctx, component)

    if await get_value(ctx, component) == text:
        return
    if clean:
        await clear(ctx, component)

    attributes = await ctx.query(component).attributes()
    locator = ctx.locate(component).first
    log_component_action(ctx, component, "type", text)

    if attributes.get("type") == "number":
        await locator.fill(text)
        return
    if replace:
        await locator.fill("")
    await locator.press_sequentially(text)
