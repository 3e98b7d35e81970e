from __future__ import annotations

"""
Archive Error Taxonomy.

Every failure raised while compiling or writing an archive derives from
IconJarError. All of them are terminal for the save call that raised them.
"""

from typing import Optional


class IconJarError(Exception):
    """
    Base class for archive compilation failures.

    Attributes:
        reason: Underlying cause, usually the OS-level error message.
    """

    def __init__(self, message: str, reason: Optional[str] = None) -> None:
        super().__init__(message)
        self.reason = reason if reason is not None else message


class ValidationError(IconJarError):
    """An icon failed its structural checks."""


class InvalidTypeError(ValidationError):
    pass


class InvalidDimensionsError(ValidationError):
    pass


class CopyFileError(IconJarError):
    """An icon asset could not be copied into the archive."""


class CreationError(IconJarError):
    """A directory or the metadata file could not be created."""


class HierarchyError(IconJarError):
    """The node tree is malformed (orphan icon or group cycle)."""
