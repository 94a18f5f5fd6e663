"""Secure logging configuration for inyerface.

Provides logging setup with password masking. Generated passwords are typed
into the registration form and would otherwise appear in action logs.
"""

import logging
import re


class SecretMaskingFilter(logging.Filter):
    """Logging filter that masks password values.

    Values following a password-like key are replaced with [MASKED].
    """

    SECRET_PATTERNS = [
        # password=VALUE, password: VALUE
        re.compile(r"((?:password|passwd|pwd)\s*[=:]\s*)([^\s;,}\"']+)", re.IGNORECASE),
        # {"password": "value"}
        re.compile(r'(["\']?(?:password|passwd|pwd)["\']?\s*[=:]\s*["\'])([^"\']+)(["\'])', re.IGNORECASE),
        # '"Password field" Input with value: VALUE'
        re.compile(r'(password field"? \w+ with value:\s*)(\S+)', re.IGNORECASE),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter and mask password values in log records.

        Args:
            record: Log record to process

        Returns:
            Always True (record is always passed through, just modified)
        """
        if record.msg:
            record.msg = self._mask_secrets(str(record.msg))
        if record.args:
            new_args: list[object] = []
            for arg in record.args:
                if isinstance(arg, str):
                    new_args.append(self._mask_secrets(arg))
                else:
                    new_args.append(arg)
            record.args = tuple(new_args)
        return True

    def _mask_secrets(self, text: str) -> str:
        """Mask all password values in text.

        Args:
            text: Text potentially containing password values

        Returns:
            Text with password values replaced by [MASKED]
        """
        result = text
        for pattern in self.SECRET_PATTERNS:

            def mask_match(m: re.Match[str]) -> str:
                suffix = m.group(3) if len(m.groups()) > 2 else ""
                return m.group(1) + "[MASKED]" + suffix

            result = pattern.sub(mask_match, result)
        return result


def setup_logging(level: int = logging.INFO, name: str | None = None) -> logging.Logger:
    """Set up logging with password masking.

    Args:
        level: Logging level (default: INFO)
        name: Logger name (default: "inyerface")

    Returns:
        Configured logger instance
    """
    logger_name = name or "inyerface"
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    handler.addFilter(SecretMaskingFilter())

    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the inyerface namespace.

    Args:
        name: Logger name suffix (e.g., "pages" for "inyerface.pages")

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"inyerface.{name}")
    return logging.getLogger("inyerface")
