"""
Translator port (localization lookup).

Helpers never look up translations themselves; they receive a Translator.
GettextTranslator adapts the standard gettext catalogs, and falls back to
the untranslated message when no catalog is installed.
"""

from __future__ import annotations

import gettext
from pathlib import Path
from typing import Protocol


class Translator(Protocol):
    """Port for localized string lookup."""

    def gettext(self, message: str) -> str:
        """Translate a message."""
        ...

    def pgettext(self, context: str, message: str) -> str:
        """Translate a message disambiguated by context."""
        ...


class GettextTranslator:
    """Translator backed by gettext catalogs for one text domain."""

    def __init__(
        self,
        domain: str = "themekit",
        localedir: str | Path | None = None,
        languages: list[str] | None = None,
    ) -> None:
        self.domain = domain
        self._translations = gettext.translation(
            domain,
            localedir=localedir,
            languages=languages,
            fallback=True,
        )

    def gettext(self, message: str) -> str:
        return self._translations.gettext(message)

    def pgettext(self, context: str, message: str) -> str:
        return self._translations.pgettext(context, message)


_DEFAULT_TRANSLATOR: Translator | None = None


def get_default_translator() -> Translator:
    """Shared fallback translator (no catalogs, returns messages unchanged)."""
    global _DEFAULT_TRANSLATOR
    if _DEFAULT_TRANSLATOR is None:
        _DEFAULT_TRANSLATOR = GettextTranslator()
    return _DEFAULT_TRANSLATOR
