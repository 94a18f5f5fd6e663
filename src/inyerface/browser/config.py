"""Browser configuration utilities.

Provides configuration functions for browser automation.
"""

import os

# Environment variable name for headless mode configuration
HEADLESS_ENV_VAR = "INYERFACE_TEST_HEADLESS"

# Environment variable name for slowing down every Playwright operation
SLOW_MO_ENV_VAR = "INYERFACE_SLOW_MO_MS"


def get_headless_mode() -> bool:
    """Get headless mode from INYERFACE_TEST_HEADLESS environment variable.

    Default: True (headless mode for CI/CD stability)
    Set INYERFACE_TEST_HEADLESS=false to show browser window for debugging.

    Returns:
        True if headless mode is enabled (default)
    """
    return os.environ.get(HEADLESS_ENV_VAR, "true").lower() != "false"


def get_slow_mo_ms() -> float:
    """Get the Playwright slow-mo delay from INYERFACE_SLOW_MO_MS.

    Returns:
        Delay in milliseconds, 0 when unset

    Raises:
        ValueError: If the variable is not a non-negative number
    """
    raw = os.environ.get(SLOW_MO_ENV_VAR, "0")
    value = float(raw)
    if value < 0:
        raise ValueError(f"{SLOW_MO_ENV_VAR} must be non-negative, got {raw}")
    return value
