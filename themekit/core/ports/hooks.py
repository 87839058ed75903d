"""
Filter port.

Components that expose an extension point of their own (icon groups, font
tables, the content filter) accept any object implementing FiltersPort.
"""

from __future__ import annotations

from typing import Any, Protocol


class FiltersPort(Protocol):
    """Port for running a value through a named filter."""

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Pass value through every callback registered for name."""
        ...
