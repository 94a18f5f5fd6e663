"""Utility modules for inyerface."""

from inyerface.utils.generators import (
    convert_timeout,
    email_generator,
    find_index_by_text,
    get_random_int_inclusive,
    get_random_ints_in_range,
    password_generator,
    string_contains_value,
    text_generator,
)
from inyerface.utils.logging import get_logger, setup_logging

__all__ = [
    "convert_timeout",
    "email_generator",
    "find_index_by_text",
    "get_logger",
    "get_random_int_inclusive",
    "get_random_ints_in_range",
    "password_generator",
    "setup_logging",
    "string_contains_value",
    "text_generator",
]
