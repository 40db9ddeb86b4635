"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    extraction = config_dict.get("extraction", {})
    if isinstance(extraction, dict):
        window_size = extraction.get("window_size", 10)
        if isinstance(window_size, int) and 0 < window_size < 5:
            warning_messages.append(
                f"Small window_size ({window_size}) cannot hold a full street, city, state and ZIP"
            )
        elif isinstance(window_size, int) and window_size > 50:
            warning_messages.append(
                f"Large window_size ({window_size}) slows matching and widens false positives"
            )

        max_workers = extraction.get("max_workers")
        if isinstance(max_workers, int) and max_workers > 256:
            warning_messages.append(
                f"Large max_workers ({max_workers}) may exhaust thread resources"
            )

    # Tables named as relative paths resolve against the working directory
    tables = config_dict.get("reference_tables", {})
    if isinstance(tables, dict):
        for key in ("states_path", "street_suffixes_path"):
            value = tables.get(key)
            if isinstance(value, str) and value and not value.startswith("/"):
                warning_messages.append(
                    f"reference_tables.{key} is relative and depends on the working directory: {value}"
                )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
