"""Second game card: avatar upload and interests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inyerface.components import base, checkboxes
from inyerface.components.descriptor import button, checkbox, form, label
from inyerface.utils.generators import find_index_by_text, get_random_ints_in_range
from inyerface.utils.logging import get_logger

if TYPE_CHECKING:
    from inyerface.components.context import UIContext
    from inyerface.components.descriptor import ComponentDescriptor

logger = get_logger("pages.avatar_and_interests_form")


class AvatarAndInterestsForm:
    """The avatar and interests card.

    The last interest in the list is "Unselect all"; one of the others is
    "Select all" and must never be picked as a random interest.
    """

    def __init__(self, ctx: UIContext, parent: ComponentDescriptor) -> None:
        self.ctx = ctx
        self.root = form(".avatar-and-interests", "Avatar and interests", parent)

        self.interest_checkbox = checkbox(
            ".avatar-and-interests__interests-list .checkbox", "Interest checkbox", self.root
        )
        self.next_button = button(".button--white", "Blue next button", self.root, text="Next")

    def validation_error_label(self, error: str) -> ComponentDescriptor:
        """Descriptor of the validation message containing error."""
        return label(".avatar-and-interests__error", f"Error {error} label", self.root, text=error)

    async def is_displayed(self, timeout_ms: float | None = None) -> bool:
        return await base.is_component_existing(self.ctx, self.root, timeout_ms)

    async def select_interests(self, amount: int) -> list[str]:
        """Unselect everything, then select amount random interests.

        Returns:
            Texts of the selected interests
        """
        options = await checkboxes.get_option_values(self.ctx, self.interest_checkbox)
        unselect_all_index = len(options) - 1
        select_all_index = find_index_by_text(options)
        chosen = get_random_ints_in_range(amount, unselect_all_index, select_all_index)

        await checkboxes.select_by_index(self.ctx, self.interest_checkbox, unselect_all_index)
        for index in chosen:
            await checkboxes.select_by_index(self.ctx, self.interest_checkbox, index)

        selected = [options[index] for index in chosen]
        logger.debug("Selected interests: %s", ", ".join(selected))
        return selected

    async def click_next_button(self) -> None:
        await base.click(self.ctx, self.next_button)

    async def is_error_existing(self, error: str, timeout_ms: float | None = None) -> bool:
        return await base.is_component_existing(self.ctx, self.validation_error_label(error), timeout_ms)
