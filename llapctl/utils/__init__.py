"""Utility functions and helpers for the llapctl application."""
from typing import Any

from ..config import Config
from .sizes import parse_int, parse_suffixed

__all__ = ['parse_int', 'parse_suffixed', 'redact_sensitive_data']


def redact_sensitive_data(data: Any) -> Any:
    """Recursively redact sensitive data from dictionaries and lists.

    Args:
        data: Input data that might contain sensitive information

    Returns:
        Data with sensitive values redacted
    """
    if isinstance(data, dict):
        return {
            k: "[REDACTED]" if any(
                redact_key.lower() in str(k).lower()
                for redact_key in Config.REDACT_KEYS
            ) else redact_sensitive_data(v)
            for k, v in data.items()
        }
    elif isinstance(data, (list, tuple)):
        return [redact_sensitive_data(item) for item in data]
    return data
