"""
Fonts component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class FontRulesPort(Protocol):
    """Port for font table overrides (see themekit.rules.models.FontRules)."""

    families: dict[str, list[str]]
    elements: dict[str, list[str]]
