"""Data models and error types for inyerface.

This module defines the component kinds, the structured component failure,
and the scenario test data used by the end-to-end flow.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from inyerface.components.descriptor import ComponentDescriptor


class ComponentKind(str, Enum):
    """Role of a UI component, used in failure messages and action logs."""

    PAGE = "Page"
    FORM = "Form"
    BUTTON = "Button"
    INPUT = "Input"
    DROPDOWN = "Dropdown"
    CHECKBOX = "CheckBox"
    LABEL = "Label"


class ComponentError(AssertionError):
    """A component did not reach the expected state.

    Subclasses AssertionError so that test runners report it as a failed
    check rather than an error in the test itself.

    Attributes:
        message: Human-readable failure message
        component: Descriptor of the component that failed the check
    """

    def __init__(self, message: str, component: ComponentDescriptor) -> None:
        """Initialize the error.

        Args:
            message: Failure message including name, kind and containment chain
            component: The component the check was made against
        """
        self.message = message
        self.component = component
        super().__init__(message)


class ScenarioData(BaseModel):
    """Test data for the registration and form scenarios.

    Field names are snake_case; the camelCase keys of a testData.json file
    are accepted as aliases.

    Attributes:
        password_length: Length of generated passwords
        email_length: Length of the generated email local part
        domain_length: Length of the generated email domain
        interests_amount: Number of interests to select on the second card
        upload_error_text: Validation message shown when no avatar is uploaded
        interests_error_text: Validation message shown for a wrong interest count
        color_style: CSS property holding the validation message color
        green_color_rgb: Computed value of a satisfied validation message color
        hidden_attribute: Class token added to the help form when hidden
        hide_duration_style: CSS property holding the help form hide duration
        height_style: CSS property checked after hiding the help form
        height_value_after_hide: Expected height once the help form is hidden
        timer_start_value: Text shown by the timer when the game starts
        timeout: Default wait timeout in milliseconds
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    password_length: int = 10
    email_length: int = 8
    domain_length: int = 6
    interests_amount: int = 3
    upload_error_text: str = "Please upload a picture"
    interests_error_text: str = "Please choose 3 interests."
    color_style: str = "color"
    green_color_rgb: str = Field(default="rgb(0, 128, 0)", alias="greenColorRGB")
    hidden_attribute: str = "is-hidden"
    hide_duration_style: str = "transition-duration"
    height_style: str = "height"
    height_value_after_hide: str = "0px"
    timer_start_value: str = "00:00:00"
    timeout: int = 10000
