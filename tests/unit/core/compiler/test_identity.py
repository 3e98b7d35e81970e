from __future__ import annotations

"""
Unit tests for the Identity Generator.

Verifies:
1. Canonical uppercase UUID rendering.
2. Uniqueness across calls.
3. Normalization of supplied identifiers.
"""

import re

from iconjar.core.identity import new_identifier, normalize_identifier

_UUID_RX = re.compile(r"^[0-9A-F]{8}-[0-9A-F]{4}-4[0-9A-F]{3}-[89AB][0-9A-F]{3}-[0-9A-F]{12}$")


def test_new_identifier_is_uppercase_uuid4() -> None:
    ident = new_identifier()
    assert _UUID_RX.match(ident), ident
    assert ident == ident.upper()


def test_new_identifier_does_not_repeat() -> None:
    idents = {new_identifier() for _ in range(1000)}
    assert len(idents) == 1000


def test_normalize_identifier_uppercases_and_strips() -> None:
    assert normalize_identifier("  abc-def ") == "ABC-DEF"
