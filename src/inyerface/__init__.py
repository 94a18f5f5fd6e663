"""inyerface: page objects and polling waiters for the User Inyerface game.

The waiter primitives live in `inyerface.waiter`; component descriptors and
operations in `inyerface.components`; page objects in `inyerface.pages`.
"""

from inyerface.models import ComponentError, ComponentKind, ScenarioData
from inyerface.waiter import retry_until_success, wait_for_condition

__version__ = "0.1.0"

__all__ = [
    "ComponentError",
    "ComponentKind",
    "retry_until_success",
    "ScenarioData",
    "wait_for_condition",
]
