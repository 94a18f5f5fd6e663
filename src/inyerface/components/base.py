"""Operations shared by every component kind.

Each operation takes the explicit `UIContext` and the component descriptor.
Checks that tolerate UI asynchrony are built on `inyerface.waiter`:
boolean checks (`is_*`) return False on timeout, and `wait_until_*` checks
raise `ComponentError` naming the component, its kind and its containment
chain.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any

from inyerface.models import ComponentError, ComponentKind
from inyerface.waiter import DEFAULT_ASSERT_TIMEOUT_MS, DEFAULT_INTERVAL_MS, retry_until_success, wait_for_condition

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor
    from inyerface.components.query import ElementQuery

DISABLED_ATTRIBUTE = "disabled"
DISABLED_CLASS = "disabled"
ARIA_DISABLED_ATTRIBUTE = "aria-disabled"


# =============================================================================
# Naming and errors
# =============================================================================


def make_component_chain(component: ComponentDescriptor) -> str:
    """Format the containment chain from the root down to component.

    Example:
        "Game page (Page) / Login form (Label)"
    """

    def to_name(item: ComponentDescriptor) -> str:
        return f"{item.name} ({item.kind.value})"

    names = [to_name(item) for item in component.ancestors()]
    names.append(to_name(component))
    return " / ".join(names)


def component_error(component: ComponentDescriptor, message: str) -> ComponentError:
    """Build the failure raised when component is not in the expected state.

    Pages are reported without a containment chain.
    """
    kind = component.kind.value.lower()
    location = "" if component.kind == ComponentKind.PAGE else f' at "{make_component_chain(component)}"'
    return ComponentError(f'The "{component.name}" {kind} {message}{location}', component)


def describe_action(component: ComponentDescriptor, action: str, value: str | None = None) -> str:
    """Format a component action for the action log."""
    message = f'{action} "{component.name}" {component.kind.value}'
    if value is not None:
        message += f" with value: {value}"
    return message


def log_component_action(
    ctx: UIContext,
    component: ComponentDescriptor,
    action: str,
    value: str | None = None,
) -> None:
    ctx.logger.info(describe_action(component, action, value))


# =============================================================================
# Existence
# =============================================================================


async def _is_query_existing(query: ElementQuery, timeout_ms: float) -> bool:
    if await query.exists():
        return True
    return await wait_for_condition(query.exists, timeout_ms)


async def is_selector_existing(ctx: UIContext, selector: str, timeout_ms: float | None = None) -> bool:
    """Return True if at least one element matches selector before the timeout."""
    return await _is_query_existing(ctx.query_selector(selector), ctx.timeout(timeout_ms))


async def is_component_existing(
    ctx: UIContext,
    component: ComponentDescriptor,
    timeout_ms: float | None = None,
) -> bool:
    """Return True if the component exists before the timeout."""
    return await _is_query_existing(ctx.query(component), ctx.timeout(timeout_ms))


async def is_existing_now(ctx: UIContext, component: ComponentDescriptor) -> bool:
    """Return True if the component exists right now, without waiting."""
    return await ctx.query(component).exists()


async def wait_until_selector_is_existing(
    ctx: UIContext,
    component: ComponentDescriptor,
    selector: str,
    timeout_ms: float | None = None,
) -> None:
    """Wait for selector to match, reporting the failure against component.

    Raises:
        ComponentError: If nothing matches selector before the timeout
    """
    if not await is_selector_existing(ctx, selector, timeout_ms):
        raise component_error(component, "does not exist")


async def wait_until_component_is_existing(
    ctx: UIContext,
    component: ComponentDescriptor,
    timeout_ms: float | None = None,
) -> None:
    """Wait for the component to exist.

    Raises:
        ComponentError: If the component does not exist before the timeout
    """
    if not await is_component_existing(ctx, component, timeout_ms):
        raise component_error(component, "does not exist")


async def wait_until_component_is_absent(
    ctx: UIContext,
    component: ComponentDescriptor,
    timeout_ms: float | None = None,
) -> None:
    """Wait for every element matching the component to disappear.

    Raises:
        ComponentError: If the component is still present after the timeout
    """
    query = ctx.query(component)

    async def is_absent() -> bool:
        return not await query.exists()

    if not await wait_for_condition(is_absent, ctx.timeout(timeout_ms)):
        raise component_error(component, "is not absent")


# =============================================================================
# Enablement and visibility
# =============================================================================


def attributes_indicate_enabled(attributes: Mapping[str, str]) -> bool:
    """Apply the enabled rule to an element's attributes.

    Enabled means no disabled attribute, no "disabled" in the class list,
    and aria-disabled, when present, equal to "false".
    """
    if DISABLED_ATTRIBUTE in attributes:
        return False
    if DISABLED_CLASS in attributes.get("class", ""):
        return False
    if ARIA_DISABLED_ATTRIBUTE in attributes:
        return attributes[ARIA_DISABLED_ATTRIBUTE] == "false"
    return True


def attributes_indicate_disabled(attributes: Mapping[str, str]) -> bool:
    """Apply the disabled rule to an element's attributes.

    Disabled means any of: a disabled attribute, "disabled" in the class
    list, or aria-disabled equal to "true".
    """
    return (
        DISABLED_ATTRIBUTE in attributes
        or DISABLED_CLASS in attributes.get("class", "")
        or attributes.get(ARIA_DISABLED_ATTRIBUTE) == "true"
    )


async def is_enabled(ctx: UIContext, component: ComponentDescriptor) -> bool:
    """Return True if the component is currently enabled.

    Raises:
        ComponentError: If the component does not exist
    """
    attributes = await get_component_attributes(ctx, component)
    return attributes_indicate_enabled(attributes)


async def is_disabled(ctx: UIContext, component: ComponentDescriptor) -> bool:
    """Return True if the component is currently disabled.

    Raises:
        ComponentError: If the component does not exist
    """
    attributes = await get_component_attributes(ctx, component)
    return attributes_indicate_disabled(attributes)


async def is_enabled_within_timeout(
    ctx: UIContext,
    component: ComponentDescriptor,
    timeout_ms: float | None = None,
) -> bool:
    return await wait_for_condition(lambda: is_enabled(ctx, component), ctx.timeout(timeout_ms))


async def is_disabled_within_timeout(
    ctx: UIContext,
    component: ComponentDescriptor,
    timeout_ms: float | None = None,
) -> bool:
    return await wait_for_condition(lambda: is_disabled(ctx, component), ctx.timeout(timeout_ms))


async def wait_until_element_is_enabled(
    ctx: UIContext,
    component: ComponentDescriptor,
    timeout_ms: float | None = None,
) -> None:
    """Wait for the component to become enabled.

    Raises:
        ComponentError: If the component is still not enabled after the timeout
    """
    if not await is_enabled_within_timeout(ctx, component, timeout_ms):
        raise component_error(component, "is disabled")


async def wait_until_element_is_disabled(
    ctx: UIContext,
    component: ComponentDescriptor,
    timeout_ms: float | None = None,
) -> None:
    """Wait for the component to become disabled.

    Raises:
        ComponentError: If the component is still not disabled after the timeout
    """
    if not await is_disabled_within_timeout(ctx, component, timeout_ms):
        raise component_error(component, "is enabled")


async def assert_component_is_visible(ctx: UIContext, component: ComponentDescriptor) -> None:
    """Raise ComponentError unless the component is visible right now."""
    if not await ctx.query(component).is_visible():
        raise component_error(component, "is not visible")


async def wait_component_for_assert(
    check: Callable[[], Awaitable[object]],
    timeout_ms: float = DEFAULT_ASSERT_TIMEOUT_MS,
    interval_ms: float = DEFAULT_INTERVAL_MS,
) -> None:
    """Retry an assertion until it passes; re-raise its last failure on timeout."""
    await retry_until_success(check, timeout_ms, interval_ms)


# =============================================================================
# Actions
# =============================================================================


async def _prepare_for_action(
    ctx: UIContext,
    component: ComponentDescriptor,
    check_visibility: bool,
) -> None:
    await wait_until_component_is_existing(ctx, component)
    await wait_until_element_is_enabled(ctx, component)
    if check_visibility:
        await assert_component_is_visible(ctx, component)


async def click(
    ctx: UIContext,
    component: ComponentDescriptor,
    check_visibility: bool = True,
    **options: Any,
) -> None:
    """Click the first matching element once it exists and is enabled.

    Args:
        ctx: Operation context
        component: Component to click
        check_visibility: Fail with ComponentError if the element is not visible
        **options: Playwright click options (position, modifiers, ...)
    """
    await _prepare_for_action(ctx, component, check_visibility)
    log_component_action(ctx, component, "click")
    await ctx.locate(component).first.click(**options)


async def right_click(ctx: UIContext, component: ComponentDescriptor, **options: Any) -> None:
    await _prepare_for_action(ctx, component, check_visibility=False)
    log_component_action(ctx, component, "right click")
    await ctx.locate(component).first.click(button="right", **options)


async def hover(
    ctx: UIContext,
    component: ComponentDescriptor,
    check_visibility: bool = True,
    **options: Any,
) -> None:
    await _prepare_for_action(ctx, component, check_visibility)
    log_component_action(ctx, component, "hover")
    await ctx.locate(component).first.hover(**options)


async def click_all(ctx: UIContext, component: ComponentDescriptor) -> None:
    """Click every element matching the component, in document order."""
    await wait_until_component_is_existing(ctx, component)
    locator = ctx.locate(component)
    count = await locator.count()
    for index in range(count):
        log_component_action(ctx, component, "click", f"#{index}")
        await locator.nth(index).click()


async def click_element_with_text(ctx: UIContext, component: ComponentDescriptor, text: str) -> None:
    await wait_until_component_is_existing(ctx, component)
    log_component_action(ctx, component, "click", f"with text: {text}")
    await ctx.locate(component).filter(has_text=text).first.click()


async def scroll_to(ctx: UIContext, component: ComponentDescriptor) -> None:
    await wait_until_component_is_existing(ctx, component)
    log_component_action(ctx, component, "scroll to")
    await ctx.locate(component).first.scroll_into_view_if_needed()


# =============================================================================
# Reads
# =============================================================================


async def get_text_content(ctx: UIContext, component: ComponentDescriptor) -> str:
    """Return the text content of the first matching element and its descendants."""
    await wait_until_component_is_existing(ctx, component)
    return await ctx.query(component).text_content()


async def get_text_from_all(ctx: UIContext, component: ComponentDescriptor) -> list[str]:
    """Return the non-empty text contents of every matching element."""
    await wait_until_component_is_existing(ctx, component)
    texts = await ctx.query(component).all_text_contents()
    return [text for text in texts if text != ""]


async def get_component_count(ctx: UIContext, component: ComponentDescriptor) -> int:
    return await ctx.query(component).count()


async def get_component_attributes(ctx: UIContext, component: ComponentDescriptor) -> dict[str, str]:
    """Return the attributes of the first matching element.

    Raises:
        ComponentError: If the component does not exist
    """
    await wait_until_component_is_existing(ctx, component)
    return await ctx.query(component).attributes()


async def get_style_property(ctx: UIContext, component: ComponentDescriptor, property_name: str) -> str:
    """Return the computed value of a CSS property of the first matching element."""
    return await ctx.query(component).style_property(property_name)


async def get_color(ctx: UIContext, component: ComponentDescriptor, property_name: str = "color") -> str:
    return await get_style_property(ctx, component, property_name)


async def get_background_color(
    ctx: UIContext,
    component: ComponentDescriptor,
    property_name: str = "background-color",
) -> str:
    return await get_style_property(ctx, component, property_name)
