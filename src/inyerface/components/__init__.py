"""UI components for inyerface.

Components are immutable descriptors; operations are module functions that
take an explicit `UIContext`.

Modules:
    descriptor: ComponentDescriptor and per-kind factories
    query: ElementQuery capability and its Playwright implementation
    context: UIContext passed to every operation
    base: Operations shared by every kind (existence, enablement, actions)
    inputs: Input operations
    dropdowns: Dropdown operations
    checkboxes: Checkbox operations
"""

from inyerface.components.context import UIContext
from inyerface.components.descriptor import (
    ComponentDescriptor,
    button,
    checkbox,
    dropdown,
    form,
    label,
    page,
    text_input,
)
from inyerface.components.query import ElementQuery, PlaywrightElementQuery

__all__ = [
    "button",
    "checkbox",
    "ComponentDescriptor",
    "dropdown",
    "ElementQuery",
    "form",
    "label",
    "page",
    "PlaywrightElementQuery",
    "text_input",
    "UIContext",
]
