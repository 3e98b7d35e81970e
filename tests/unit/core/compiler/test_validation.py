from __future__ import annotations

"""
Unit tests for the Icon Validator.

Verifies:
1. Unknown types are rejected.
2. Raster icons need non-zero dimensions.
3. SVG icons are exempt from the dimension check.
"""

import pytest

from iconjar.core.validation import validate_icon
from iconjar.domain.errors import InvalidDimensionsError, InvalidTypeError, ValidationError
from iconjar.domain.models import Icon, IconType


def test_unknown_type_is_rejected() -> None:
    icon = Icon("Readme", "/tmp/readme.txt", width=16, height=16)
    assert icon.type == IconType.UNKNOWN

    with pytest.raises(InvalidTypeError):
        validate_icon(icon)


def test_png_with_zero_width_fails() -> None:
    icon = Icon("Flat", "/tmp/flat.png", IconType.PNG, width=0, height=32)

    with pytest.raises(InvalidDimensionsError):
        validate_icon(icon)


def test_png_with_zero_height_fails() -> None:
    icon = Icon("Flat", "/tmp/flat.png", IconType.PNG, width=32, height=0)

    with pytest.raises(InvalidDimensionsError):
        validate_icon(icon)


def test_svg_with_zero_width_passes() -> None:
    icon = Icon("Flat", "/tmp/flat.svg", IconType.SVG, width=0, height=0)
    validate_icon(icon)


@pytest.mark.parametrize("icon_type", [IconType.GIF, IconType.PDF, IconType.ICNS, IconType.WEBP, IconType.ICO])
def test_other_raster_types_need_dimensions(icon_type: IconType) -> None:
    with pytest.raises(InvalidDimensionsError):
        validate_icon(Icon("X", "/tmp/x", icon_type))

    validate_icon(Icon("X", "/tmp/x", icon_type, width=8, height=8))


def test_validation_errors_share_a_base() -> None:
    assert issubclass(InvalidTypeError, ValidationError)
    assert issubclass(InvalidDimensionsError, ValidationError)
