"""Element query capability.

`ElementQuery` is the point-in-time view of a component that the waiters
poll. Queries never retry on their own; retrying is the waiter's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from playwright.async_api import Locator

# Reads go through evaluate_all, which runs against the current matches and
# never waits for an element to appear. Each script reads the first match and
# falls back to an empty value when nothing matches.

# Every attribute of the first match as a name -> value mapping
_ATTRIBUTES_JS = """
(els) => {
    const result = {};
    if (els.length === 0) {
        return result;
    }
    for (const attr of els[0].attributes) {
        result[attr.name] = attr.value;
    }
    return result;
}
"""

_STYLE_PROPERTY_JS = """
(els, name) => els.length === 0 ? "" : window.getComputedStyle(els[0]).getPropertyValue(name)
"""

_TEXT_CONTENT_JS = '(els) => els.length === 0 ? "" : (els[0].textContent ?? "")'

_INPUT_VALUE_JS = '(els) => els.length === 0 ? "" : (els[0].value ?? "")'


class ElementQuery(Protocol):
    """Point-in-time queries against the elements matching one selector."""

    async def exists(self) -> bool: ...

    async def is_visible(self) -> bool: ...

    async def count(self) -> int: ...

    async def attributes(self) -> dict[str, str]: ...

    async def style_property(self, name: str) -> str: ...

    async def text_content(self) -> str: ...

    async def all_text_contents(self) -> list[str]: ...

    async def input_value(self) -> str: ...


class PlaywrightElementQuery:
    """ElementQuery backed by a Playwright locator.

    Single-element reads use the first match, like a TestCafe selector
    snapshot does, and return an empty value when nothing matches.

    Attributes:
        locator: Locator matching zero or more elements
    """

    def __init__(self, locator: Locator) -> None:
        self.locator = locator

    async def exists(self) -> bool:
        return await self.locator.count() > 0

    async def is_visible(self) -> bool:
        # Locator.is_visible does not wait; a missing element is not visible
        return await self.locator.first.is_visible()

    async def count(self) -> int:
        return await self.locator.count()

    async def attributes(self) -> dict[str, str]:
        result = await self.locator.evaluate_all(_ATTRIBUTES_JS)
        return {str(key): str(value) for key, value in result.items()}

    async def style_property(self, name: str) -> str:
        return str(await self.locator.evaluate_all(_STYLE_PROPERTY_JS, name))

    async def text_content(self) -> str:
        return str(await self.locator.evaluate_all(_TEXT_CONTENT_JS))

    async def all_text_contents(self) -> list[str]:
        return await self.locator.all_text_contents()

    async def input_value(self) -> str:
        return str(await self.locator.evaluate_all(_INPUT_VALUE_JS))
