from __future__ import annotations

from iconjar.core.writer import ArchiveWriter
from iconjar.domain.config import ArchiveConfig
from iconjar.domain.errors import (
    CopyFileError,
    CreationError,
    HierarchyError,
    IconJarError,
    InvalidDimensionsError,
    InvalidTypeError,
    ValidationError,
)
from iconjar.domain.models import Icon, IconGroup, IconSet, IconType, Library, License

__all__ = [
    "ArchiveConfig",
    "ArchiveWriter",
    "CopyFileError",
    "CreationError",
    "HierarchyError",
    "Icon",
    "IconGroup",
    "IconJarError",
    "IconSet",
    "IconType",
    "InvalidDimensionsError",
    "InvalidTypeError",
    "Library",
    "License",
    "ValidationError",
]
