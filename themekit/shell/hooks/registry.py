"""
HookRegistry - named filter and action extension points.

Key behaviors:
- Filters transform a value; each callback receives the previous result
- Actions run callbacks for side effects; return values are ignored
- Callbacks run by ascending priority, then registration order
- Callbacks receive at most `accepted_args` positional arguments
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


@dataclass(frozen=True)
class HookCallback:
    """A registered callback."""

    callback: Callable[..., Any]
    priority: int
    accepted_args: int
    sequence: int

    def invoke(self, *args: Any) -> Any:
        return self.callback(*args[: self.accepted_args])


@dataclass
class HookRegistry:
    """In-process registry of filters and actions."""

    _hooks: dict[str, list[HookCallback]] = field(default_factory=dict)
    _counter: itertools.count = field(default_factory=itertools.count)

    def add_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        """Register a callback against a named hook."""
        if accepted_args < 0:
            raise ValueError(f"accepted_args must be >= 0, got {accepted_args}")

        entry = HookCallback(
            callback=callback,
            priority=priority,
            accepted_args=accepted_args,
            sequence=next(self._counter),
        )
        callbacks = self._hooks.setdefault(name, [])
        callbacks.append(entry)
        callbacks.sort(key=lambda c: (c.priority, c.sequence))
        logger.debug("Registered %s on '%s' (priority %d)", _name_of(callback), name, priority)

    # Actions share storage with filters
    add_action = add_filter

    def remove_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> bool:
        """Remove a callback. Returns True if something was removed."""
        callbacks = self._hooks.get(name, [])
        kept = [c for c in callbacks if not (c.callback == callback and c.priority == priority)]
        removed = len(kept) != len(callbacks)
        if kept:
            self._hooks[name] = kept
        else:
            self._hooks.pop(name, None)
        return removed

    remove_action = remove_filter

    def has_filter(self, name: str, callback: Callable[..., Any] | None = None) -> bool:
        """Whether the hook has any callback (or the given callback)."""
        callbacks = self._hooks.get(name, [])
        if callback is None:
            return bool(callbacks)
        return any(c.callback == callback for c in callbacks)

    has_action = has_filter

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Run value through every callback registered for name."""
        for entry in list(self._hooks.get(name, [])):
            value = entry.invoke(value, *args)
        return value

    def do_action(self, name: str, *args: Any) -> None:
        """Run every callback registered for name."""
        for entry in list(self._hooks.get(name, [])):
            entry.invoke(*args)

    def callbacks(self, name: str) -> list[HookCallback]:
        """Registered callbacks for a hook, in run order."""
        return list(self._hooks.get(name, []))


def _name_of(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
