"""Logging filters that scrub boarder contact details."""

from __future__ import annotations

import logging
import re

_SENSITIVE_PATTERN = re.compile(
    r"([\w.+-]+@[\w-]+(?:\.[\w-]+)+|(?<![\w-])\+?\d(?:[\s-]?\d){9,14}(?![\w-]))"
)
_REDACTED = "**REDACTED**"


def redact(value: str) -> str:
    """Replace e-mail addresses and phone numbers in ``value``."""
    return _SENSITIVE_PATTERN.sub(_REDACTED, value)


class SensitiveFilter(logging.Filter):
    """Replace contact details in log messages with a redaction marker."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(
                redact(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        return True


__all__ = ["SensitiveFilter", "redact"]
