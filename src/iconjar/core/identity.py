from __future__ import annotations

"""
Identity Generator.

Produces the globally unique identifiers assigned to groups, sets, icons
and licenses.
"""

import uuid


def new_identifier() -> str:
    """
    Generate a random 128-bit identifier in canonical uppercase form.

    Returns:
        str: Hyphenated hex string, e.g. '3F2504E0-4F89-11D3-9A0C-0305E82C3301'.
    """
    return str(uuid.uuid4()).upper()


def normalize_identifier(value: str) -> str:
    """Upper-case a caller supplied identifier."""
    return str(value).strip().upper()
