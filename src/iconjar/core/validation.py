from __future__ import annotations

"""
Icon Validation Gate.

Structural checks an icon must pass before its record is admitted to the
archive or its asset is copied.
"""

import logging

from iconjar.domain.errors import InvalidDimensionsError, InvalidTypeError
from iconjar.domain.models import Icon, IconType

logger = logging.getLogger(__name__)


def validate_icon(icon: Icon) -> None:
    """
    Enforce the per-icon invariants.

    Vector icons (SVG) carry no raster size, so the dimension check only
    applies to the other types.

    Args:
        icon: Icon under inspection.

    Raises:
        InvalidTypeError: The icon type is UNKNOWN.
        InvalidDimensionsError: A raster icon declares a zero width or height.
    """
    if icon.type == IconType.UNKNOWN:
        msg = f"Unknown icon type for '{icon.file}'"
        logger.error(msg)
        raise InvalidTypeError(msg)

    if icon.type != IconType.SVG and (icon.width == 0 or icon.height == 0):
        msg = f"Dimensions cannot be 0 for '{icon.file}' ({icon.width}x{icon.height})"
        logger.error(msg)
        raise InvalidDimensionsError(msg)
