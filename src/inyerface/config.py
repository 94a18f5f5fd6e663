"""Suite configuration.

Settings come from environment variables; scenario test data comes from an
optional JSON file validated by `ScenarioData`.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from inyerface.models import ScenarioData

BASE_URL_ENV_VAR = "INYERFACE_BASE_URL"
DEFAULT_TIMEOUT_ENV_VAR = "INYERFACE_DEFAULT_TIMEOUT_MS"
SCENARIO_DATA_ENV_VAR = "INYERFACE_SCENARIO_DATA"
LOG_LEVEL_ENV_VAR = "INYERFACE_LOG_LEVEL"
E2E_ENV_VAR = "INYERFACE_E2E"

DEFAULT_BASE_URL = "https://userinyerface.com/"
DEFAULT_TIMEOUT_MS = 10000


def get_base_url() -> str:
    """Get the game URL (default: https://userinyerface.com/)."""
    return os.environ.get(BASE_URL_ENV_VAR, DEFAULT_BASE_URL)


def get_default_timeout_ms() -> int:
    """Get the default wait timeout used by component checks.

    Returns:
        Timeout in milliseconds (default: 10000)

    Raises:
        ValueError: If the variable is not a non-negative integer
    """
    raw = os.environ.get(DEFAULT_TIMEOUT_ENV_VAR)
    if raw is None:
        return DEFAULT_TIMEOUT_MS
    value = int(raw)
    if value < 0:
        raise ValueError(f"{DEFAULT_TIMEOUT_ENV_VAR} must be non-negative, got {raw}")
    return value


def get_log_level() -> int:
    """Get the logging level from INYERFACE_LOG_LEVEL (default: INFO).

    Unknown level names fall back to INFO.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def is_e2e_enabled() -> bool:
    """Check whether live end-to-end tests were requested (INYERFACE_E2E=1)."""
    return os.environ.get(E2E_ENV_VAR, "").lower() in ("1", "true", "yes")


def load_scenario_data(path: str | Path | None = None) -> ScenarioData:
    """Load scenario test data.

    Resolution order:
        1. Explicit path argument
        2. INYERFACE_SCENARIO_DATA environment variable
        3. ScenarioData defaults

    Args:
        path: Optional path to a JSON file

    Returns:
        Validated scenario data

    Raises:
        FileNotFoundError: If the resolved file does not exist
        pydantic.ValidationError: If the file content is invalid
    """
    resolved = path if path is not None else os.environ.get(SCENARIO_DATA_ENV_VAR)
    if resolved is None:
        return ScenarioData()

    data_path = Path(resolved)
    with data_path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return ScenarioData.model_validate(payload)
