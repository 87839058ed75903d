"""
Placeholder substitution for translated format strings.
"""

from __future__ import annotations

import re

PLACEHOLDER_PATTERN = re.compile(r"%([%s])")


def fill_placeholder(fmt: str, value: str) -> str:
    """
    Put value in place of the first %s of a format string.

    %% becomes a literal %, any other % is kept as written, and a format
    with no placeholder is returned without the value.

    Example:
        fill_placeholder("Lire 100% %s", "<span>x</span>")
        -> "Lire 100% <span>x</span>"
    """
    filled = False

    def replace(match: re.Match[str]) -> str:
        nonlocal filled
        if match.group(1) == "%":
            return "%"
        if filled:
            return match.group(0)
        filled = True
        return value

    return PLACEHOLDER_PATTERN.sub(replace, fmt)
