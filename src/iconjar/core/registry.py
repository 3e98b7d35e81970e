from __future__ import annotations

"""
License Registry.

Deduplicating table of licence records keyed by identifier. Sets and
icons register the licences they reference; only the first registration
of an identifier is kept.
"""

import logging
from typing import Any, Dict, Iterator

from iconjar.domain.models import License

logger = logging.getLogger(__name__)


class LicenseRegistry:
    """Insertion-ordered store of serialized licence records."""

    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, Any]] = {}

    def register(self, license: License) -> str:
        """
        Record a licence unless its identifier is already known.

        Later registrations of a known identifier are no-ops, even when their
        field values differ from the stored record.

        Args:
            license: Licence referenced by a set or an icon.

        Returns:
            str: The licence identifier.
        """
        if license.identifier not in self._records:
            self._records[license.identifier] = {
                "name": license.name,
                "identifier": license.identifier,
                "url": license.url if license.url is not None else "",
                "text": license.description if license.description is not None else "",
            }
            logger.debug(f"Registered licence '{license.name}' ({license.identifier})")
        return license.identifier

    @property
    def records(self) -> Dict[str, Dict[str, Any]]:
        return self._records

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)
