# themekit - Ports (Protocol Interfaces)

from themekit.core.ports.hooks import FiltersPort
from themekit.core.ports.translator import (
    GettextTranslator,
    Translator,
    get_default_translator,
)

__all__ = [
    "FiltersPort",
    "GettextTranslator",
    "Translator",
    "get_default_translator",
]
