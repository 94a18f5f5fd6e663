"""Game page composing the cards, modals and timer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components import base
from inyerface.components.descriptor import label, page
from inyerface.pages.avatar_and_interests_form import AvatarAndInterestsForm
from inyerface.pages.cookies_form import CookiesForm
from inyerface.pages.help_form import HelpForm
from inyerface.pages.login_form import LoginForm
from inyerface.waiter import wait_for_condition

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor


class GamePage:
    """The game screen.

    Attributes:
        ctx: Operation context shared with every form
        root: Page descriptor, root of every containment chain on this page
        login_form: First card
        avatar_and_interests_form: Second card
        help_form: Help form docked at the bottom
        cookies_form: Cookies consent modal
        timer_label: Elapsed game time
    """

    def __init__(self, ctx: UIContext, selector: str = ".game", name: str = "Game page") -> None:
        self.ctx = ctx
        self.root = page(selector, name)

        self.login_form = LoginForm(ctx, self.root)
        self.avatar_and_interests_form = AvatarAndInterestsForm(ctx, self.root)
        self.help_form = HelpForm(ctx, self.root)
        self.cookies_form = CookiesForm(ctx, self.root)
        self.timer_label = label(".timer", "Timer", self.root)

    async def is_component_existing(
        self,
        component: ComponentDescriptor,
        timeout_ms: float | None = None,
    ) -> bool:
        return await base.is_component_existing(self.ctx, component, timeout_ms)

    async def get_time(self) -> str:
        return await base.get_text_content(self.ctx, self.timer_label)

    async def get_style(self, component: ComponentDescriptor, style: str) -> str:
        return await base.get_style_property(self.ctx, component, style)

    async def get_attributes(self, component: ComponentDescriptor) -> dict[str, str]:
        return await base.get_component_attributes(self.ctx, component)

    async def is_correct_style(
        self,
        component: ComponentDescriptor,
        style: str,
        expected: str,
        timeout_ms: float | None = None,
    ) -> bool:
        """Wait for a computed style to reach expected.

        Returns:
            True if the style matched before the timeout, False otherwise
        """

        async def matches() -> bool:
            return await base.get_style_property(self.ctx, component, style) == expected

        return await wait_for_condition(matches, self.ctx.timeout(timeout_ms))

    async def assert_style(
        self,
        component: ComponentDescriptor,
        style: str,
        expected: str,
        timeout_ms: float | None = None,
    ) -> None:
        """Retry until a computed style equals expected.

        Raises:
            AssertionError: Describing the last observed value, on timeout
        """

        async def check() -> None:
            actual = await base.get_style_property(self.ctx, component, style)
            if actual != expected:
                raise AssertionError(
                    f'Expected {style} of "{component.name}" to be {expected!r}, got {actual!r}'
                )

        await base.wait_component_for_assert(check, self.ctx.timeout(timeout_ms))
