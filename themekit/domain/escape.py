"""
Output escaping helpers.

Key behaviors:
- esc_html / esc_attr neutralize markup in text and attribute values
- esc_url drops URLs with forbidden protocols and escapes the rest for
  use inside an href attribute
- kses keeps only allow-listed tags and attributes
"""

from __future__ import annotations

import html
import re

FORBIDDEN_PROTOCOLS: frozenset[str] = frozenset({"javascript:", "data:", "vbscript:"})

TAG_PATTERN = re.compile(r"<(/?)(\w+)([^>]*)>", re.IGNORECASE)
ATTR_PATTERN = re.compile(r'(\w[\w-]*)\s*=\s*(?:"([^"]*)"|\'([^\']*)\'|(\S+))', re.IGNORECASE)

# Characters stripped from URLs before they are emitted
_URL_STRIP_PATTERN = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\uffff]", re.IGNORECASE)


def esc_html(text: str) -> str:
    """Escape HTML special characters in text content."""
    return html.escape(text, quote=True)


def esc_attr(text: str) -> str:
    """Escape a value for use inside a quoted attribute."""
    return html.escape(text, quote=True)


def is_safe_url(url: str, forbid_protocols: frozenset[str] = FORBIDDEN_PROTOCOLS) -> bool:
    """Check that a URL does not use a forbidden protocol."""
    # Browsers ignore embedded whitespace and control chars in the scheme
    compact = re.sub(r"[\x00-\x20]", "", url).lower()
    return not any(compact.startswith(protocol) for protocol in forbid_protocols)


def esc_url(url: str, forbid_protocols: frozenset[str] = FORBIDDEN_PROTOCOLS) -> str:
    """
    Clean a URL for output in an attribute.

    Returns an empty string for empty or unsafe URLs.
    """
    url = url.strip()
    if not url or not is_safe_url(url, forbid_protocols):
        return ""

    url = url.replace(" ", "%20")
    url = _URL_STRIP_PATTERN.sub("", url)
    return url.replace("&", "&#038;").replace("'", "&#039;")


def kses(text: str, allowed: dict[str, frozenset[str]]) -> str:
    """
    Strip tags and attributes that are not allow-listed.

    Args:
        text: HTML fragment.
        allowed: Map of tag name to the attribute names it may carry.

    Returns:
        The fragment with disallowed tags removed (their text is kept).
    """

    def process_tag(match: re.Match[str]) -> str:
        is_closing = bool(match.group(1))
        tag_name = match.group(2).lower()

        if tag_name not in allowed:
            return ""
        if is_closing:
            return f"</{tag_name}>"

        kept = []
        for attr in ATTR_PATTERN.finditer(match.group(3)):
            name = attr.group(1).lower()
            if name not in allowed[tag_name]:
                continue
            value = attr.group(2) or attr.group(3) or attr.group(4) or ""
            kept.append(f'{name}="{esc_attr(value)}"')

        if kept:
            return f"<{tag_name} {' '.join(kept)}>"
        return f"<{tag_name}>"

    return TAG_PATTERN.sub(process_tag, text)
