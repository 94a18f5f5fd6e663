"""Random test data generators and small string helpers.

Used by the registration scenario to fill the login card with values that
satisfy the game's (deliberately awkward) validation rules.
"""

from __future__ import annotations

import math
import random
import re

LOWERCASE_LATIN = "abcdefghijklmnopqrstuvwxyz"
CAPITAL_LATIN = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CYRILLIC = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"
DIGITS = "1234567890"

SELECT_ALL_TEXT = "Select all"

# Mandatory leading characters of a generated password
_PASSWORD_PREFIX_LENGTH = 3

_TIMEOUT_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)\s*(ms|s)\s*$")


def text_generator(length: int) -> str:
    """Generate a random lowercase Latin string.

    Args:
        length: Number of characters. Zero or negative gives an empty string.

    Returns:
        Random string of the requested length
    """
    return "".join(random.choice(LOWERCASE_LATIN) for _ in range(max(length, 0)))


def password_generator(length: int) -> str:
    """Generate a password accepted by the login card.

    The password starts with one Cyrillic letter, one digit and one capital
    Latin letter, followed by lowercase Latin letters.

    Args:
        length: Total password length, at least 3

    Returns:
        Generated password

    Raises:
        ValueError: If length is shorter than the mandatory prefix
    """
    if length < _PASSWORD_PREFIX_LENGTH:
        raise ValueError(f"Password length must be at least {_PASSWORD_PREFIX_LENGTH}, got {length}")

    prefix = random.choice(LOWERCASE_CYRILLIC) + random.choice(DIGITS) + random.choice(CAPITAL_LATIN)
    return prefix + text_generator(length - _PASSWORD_PREFIX_LENGTH)


def email_generator(length: int, password: str) -> str:
    """Generate an email local part that shares a character with the password.

    The login card requires the password to contain at least one character
    of the email, so the local part starts with the password's last
    character.

    Args:
        length: Length of the local part, at least 1
        password: Previously generated password (non-empty)

    Returns:
        Generated local part

    Raises:
        ValueError: If length is below 1 or password is empty
    """
    if length < 1:
        raise ValueError(f"Email length must be at least 1, got {length}")
    if not password:
        raise ValueError("Password must not be empty")
    return password[-1] + text_generator(length - 1)


def get_random_int_inclusive(minimum: float, maximum: float) -> int:
    """Return a random integer N such that ceil(minimum) <= N <= floor(maximum)."""
    low = math.ceil(minimum)
    high = math.floor(maximum)
    if low > high:
        raise ValueError(f"Empty range: [{minimum}, {maximum}]")
    return random.randint(low, high)


def get_random_ints_in_range(amount: int, maximum: int, exclude_index: int) -> list[int]:
    """Pick distinct random indexes in [0, maximum), skipping exclude_index.

    Args:
        amount: Number of indexes to pick
        maximum: Exclusive upper bound
        exclude_index: Index that must never be picked (e.g. "Select all"),
            or -1 when nothing is excluded

    Returns:
        List of distinct indexes in random order

    Raises:
        ValueError: If fewer than amount candidates are available
    """
    candidates = [index for index in range(maximum) if index != exclude_index]
    if amount > len(candidates):
        raise ValueError(f"Cannot pick {amount} distinct indexes from {len(candidates)} candidates")
    return random.sample(candidates, amount)


def find_index_by_text(options: list[str], text: str = SELECT_ALL_TEXT) -> int:
    """Return the index of text in options, or -1 if it is absent."""
    try:
        return options.index(text)
    except ValueError:
        return -1


def string_contains_value(text: str | None, value: str) -> bool:
    """Check whether value occurs in text. A missing text contains nothing."""
    if text is None:
        return False
    return value in text


def convert_timeout(value: str) -> int:
    """Convert a CSS time value to whole milliseconds.

    Examples:
        >>> convert_timeout("2s")
        2000
        >>> convert_timeout("0.5s")
        500
        >>> convert_timeout("300ms")
        300

    Args:
        value: CSS time string such as the computed transition-duration

    Returns:
        Duration in milliseconds

    Raises:
        ValueError: If value is not a seconds or milliseconds time string
    """
    match = _TIMEOUT_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Unsupported time value: {value!r}")

    amount, unit = match.groups()
    if unit == "s":
        return round(float(amount) * 1000)
    return round(float(amount))
