"""
CSS declaration builder.
"""

from __future__ import annotations


def generate_css(
    selector: str,
    style: str,
    value: str,
    prefix: str = "",
    suffix: str = "",
) -> str:
    """
    Build a single-declaration CSS rule.

    Returns "" when there is no selector or no value.

    Example:
        generate_css("body", "font-family", "Arial,sans-serif")
        -> "body { font-family: Arial,sans-serif; }"
    """
    if not selector or not value:
        return ""
    return f"{selector} {{ {style}: {prefix}{value}{suffix}; }}"
