"""
Archive title component - localized, HTML-wrapped archive titles.
"""

from .component import (
    format_date,
    get_archive_title,
    page_description,
    resolve_archive_title,
    run,
)
from .models import ArchiveKind, ArchiveTitleInput, ArchiveTitleOutput

__all__ = [
    "run",
    "ArchiveKind",
    "ArchiveTitleInput",
    "ArchiveTitleOutput",
    "format_date",
    "get_archive_title",
    "page_description",
    "resolve_archive_title",
]
