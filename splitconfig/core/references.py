"""Reference marker format used in the main config file.

A top-level value of the form ``@{<relative-path>}`` stands for a subtree that
lives in its own JSON file, located relative to the main file's directory.
"""

from __future__ import annotations

from typing import Any

MARKER_PREFIX = "@{"
MARKER_SUFFIX = "}"


def make_marker(relative_path: str) -> str:
    """Build the marker string pointing at `relative_path`."""
    return f"{MARKER_PREFIX}{relative_path}{MARKER_SUFFIX}"


def is_marker(value: Any) -> bool:
    """Return True if `value` is a marker string with a non-empty target."""
    return (
        isinstance(value, str)
        and value.startswith(MARKER_PREFIX)
        and value.endswith(MARKER_SUFFIX)
        and len(value) > len(MARKER_PREFIX) + len(MARKER_SUFFIX)
    )


def marker_target(value: str) -> str:
    """Return the relative path enclosed by a marker string."""
    if not is_marker(value):
        raise ValueError(f"Not a reference marker: {value!r}")
    return value[len(MARKER_PREFIX) : -len(MARKER_SUFFIX)]
