"""Immutable UI component descriptors.

A descriptor says where a component lives (selector, optional text filter)
and how to name it in logs and failure messages. Descriptors form a
containment tree through a weak reference to the parent, which is used only
to format the containment chain. Locating never walks the parent chain:
selectors are absolute.
"""

from __future__ import annotations

import weakref
from dataclasses import InitVar, dataclass, field

from inyerface.models import ComponentKind


@dataclass(frozen=True, eq=False)
class ComponentDescriptor:
    """Where a UI component is and what to call it.

    Attributes:
        selector: Playwright selector (CSS by default)
        name: Human-readable description used in logs and errors
        kind: Role of the component
        text: Optional text the matched element must contain
    """

    selector: str
    name: str
    kind: ComponentKind
    parent: InitVar[ComponentDescriptor | None] = None
    text: str | None = None
    _parent_ref: weakref.ReferenceType[ComponentDescriptor] | None = field(
        init=False, default=None, repr=False
    )

    def __post_init__(self, parent: ComponentDescriptor | None) -> None:
        if not self.selector or not self.name or not self.kind:
            raise ValueError(
                "Component requires selector, name and kind; got "
                f"selector={self.selector!r}, name={self.name!r}, kind={self.kind!r}"
            )
        object.__setattr__(self, "kind", ComponentKind(self.kind))
        if self.kind != ComponentKind.PAGE and parent is None:
            raise ValueError(f'Component "{self.name}" of kind {self.kind.value} requires a parent')
        if parent is not None:
            object.__setattr__(self, "_parent_ref", weakref.ref(parent))

    @property
    def parent_component(self) -> ComponentDescriptor | None:
        """The containing component, or None for pages and collected parents."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def ancestors(self) -> list[ComponentDescriptor]:
        """Return the containing components ordered from the root down."""
        chain: list[ComponentDescriptor] = []
        current = self.parent_component
        while current is not None:
            chain.append(current)
            current = current.parent_component
        chain.reverse()
        return chain

    def child(self, selector: str, name: str, kind: ComponentKind, text: str | None = None) -> ComponentDescriptor:
        """Create a descriptor contained in this one."""
        return ComponentDescriptor(selector, name, kind, parent=self, text=text)


def page(selector: str, name: str) -> ComponentDescriptor:
    """Create a root page descriptor."""
    return ComponentDescriptor(selector, name, ComponentKind.PAGE)


def form(selector: str, name: str, parent: ComponentDescriptor) -> ComponentDescriptor:
    return ComponentDescriptor(selector, name, ComponentKind.FORM, parent=parent)


def button(
    selector: str,
    name: str,
    parent: ComponentDescriptor,
    text: str | None = None,
) -> ComponentDescriptor:
    return ComponentDescriptor(selector, name, ComponentKind.BUTTON, parent=parent, text=text)


def label(
    selector: str,
    name: str,
    parent: ComponentDescriptor,
    text: str | None = None,
) -> ComponentDescriptor:
    return ComponentDescriptor(selector, name, ComponentKind.LABEL, parent=parent, text=text)


def text_input(selector: str, name: str, parent: ComponentDescriptor) -> ComponentDescriptor:
    return ComponentDescriptor(selector, name, ComponentKind.INPUT, parent=parent)


def dropdown(selector: str, name: str, parent: ComponentDescriptor) -> ComponentDescriptor:
    return ComponentDescriptor(selector, name, ComponentKind.DROPDOWN, parent=parent)


def checkbox(selector: str, name: str, parent: ComponentDescriptor) -> ComponentDescriptor:
    return ComponentDescriptor(selector, name, ComponentKind.CHECKBOX, parent=parent)
