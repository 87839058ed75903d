"""
Head component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class StyleQueuePort(Protocol):
    """Port for the host's stylesheet queue."""

    def dequeue(self, handle: str) -> None:
        """Remove a stylesheet from the queue."""
        ...
