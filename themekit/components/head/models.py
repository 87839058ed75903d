"""
Head component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from themekit.core.entities import PageContext


@dataclass
class StyleQueue:
    """In-memory stylesheet queue (handles in enqueue order)."""

    handles: list[str] = field(default_factory=list)

    def enqueue(self, handle: str) -> None:
        if handle not in self.handles:
            self.handles.append(handle)

    def dequeue(self, handle: str) -> None:
        if handle in self.handles:
            self.handles.remove(handle)

    def is_enqueued(self, handle: str) -> bool:
        return handle in self.handles


@dataclass(frozen=True)
class HeadInput:
    """Input for building <head> additions for the current page."""

    context: PageContext


@dataclass(frozen=True)
class HeadOutput:
    """Markup to print in <head> ("" when nothing applies)."""

    html: str
    success: bool = True


@dataclass(frozen=True)
class CommentFormInput:
    defaults: dict[str, Any]
    rows: int = 5


@dataclass(frozen=True)
class CommentFormOutput:
    defaults: dict[str, Any]
    success: bool = True
