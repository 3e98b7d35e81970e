from __future__ import annotations

"""
Timestamp Formatting Utility.

Renders every date field of the archive as 'YYYY-MM-DD HH:MM:SS'
(24-hour, zero padded). strftime with numeric directives only, so the
host locale never leaks into the output.
"""

from datetime import datetime
from typing import Optional

from iconjar.domain.constants import TIMESTAMP_FORMAT


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a datetime for the archive metadata.

    Args:
        moment: Point in time to render; the current local time when None.

    Returns:
        str: e.g. '2000-01-01 00:00:00'.
    """
    if moment is None:
        moment = datetime.now()
    return f"{moment.year:04d}-{moment.strftime(TIMESTAMP_FORMAT)}"
