"""First game card: password, email, domain and terms."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components import base, dropdowns, inputs
from inyerface.components.descriptor import button, checkbox, dropdown, form, label, text_input
from inyerface.utils.generators import get_random_int_inclusive
from inyerface.utils.logging import get_logger

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor

logger = get_logger("pages.login_form")


class LoginForm:
    """The login card shown right after the game starts.

    Attributes:
        ctx: Operation context
        root: Form descriptor, contained in the game page
    """

    def __init__(self, ctx: UIContext, parent: ComponentDescriptor) -> None:
        self.ctx = ctx
        self.root = form(".login-form", "Login form", parent)

        self.container_label = label(".login-form__container", "Login form container", self.root)
        self.password_field_input = text_input(
            '.login-form__field-row input[placeholder="Choose Password"]', "Password field", self.root
        )
        self.email_field_input = text_input(
            '.login-form__field-row input[placeholder="Your email"]', "Email field", self.root
        )
        self.domain_field_input = text_input(
            '.login-form__field-row input[placeholder="Domain"]', "Domain field", self.root
        )
        self.tld_dropdown = dropdown(".login-form__field-row .dropdown__field", "TLD dropdown", self.root)
        self.tld_options_dropdown = dropdown(".dropdown__list", "TLD options list", self.root)
        self.accept_conditions_checkbox = checkbox(".checkbox", "Accept conditions checkbox", self.root)
        self.next_button = button(
            ".button-container__secondary .button--secondary", "Next button", self.root, text="Next"
        )

    async def is_displayed(self, timeout_ms: float | None = None) -> bool:
        return await base.is_component_existing(self.ctx, self.container_label, timeout_ms)

    async def _replace_text(self, field: ComponentDescriptor, text: str) -> None:
        await inputs.clear(self.ctx, field)
        await inputs.send_keys(self.ctx, field, text)

    async def enter_password(self, password: str) -> None:
        await self._replace_text(self.password_field_input, password)

    async def enter_email(self, email: str) -> None:
        await self._replace_text(self.email_field_input, email)

    async def enter_domain(self, domain: str) -> None:
        await self._replace_text(self.domain_field_input, domain)

    async def select_random_tld_option(self) -> str:
        """Pick a random top-level domain, never the placeholder at index 0.

        Returns:
            Text of the selected option
        """
        await dropdowns.open_dropdown(self.ctx, self.tld_dropdown)
        options = await dropdowns.get_option_values(self.ctx, self.tld_options_dropdown)
        index = get_random_int_inclusive(1, len(options) - 1)
        logger.debug("Selecting TLD option %d of %d: %s", index, len(options), options[index])
        await dropdowns.select_by_index(self.ctx, self.tld_options_dropdown, index)
        return options[index]

    async def accept_conditions(self) -> None:
        await base.click(self.ctx, self.accept_conditions_checkbox)

    async def go_to_next_step(self) -> None:
        await base.click(self.ctx, self.next_button)
