from __future__ import annotations

"""
Asset Filename Resolver.

Produces collision-free filenames inside the archive's icon directory.
Two source icons sharing a basename end up as 'icon.png', 'icon.1.png',
'icon.2.png', ... in probe order.
"""

import itertools
import logging
import os
import re

from iconjar.infra.fs import Storage

logger = logging.getLogger(__name__)

# Runs of anything outside the allowed filename alphabet collapse to '-'
_RESERVED_RX = re.compile(r"[^a-z0-9@.]+", re.IGNORECASE)


def clean_filename(name: str) -> str:
    """
    Normalize a desired asset filename.

    Strips leading dots, replaces each run of reserved characters with a
    hyphen and lower-cases the result.

    Args:
        name: Raw filename, usually the basename of the source asset.

    Returns:
        str: Normalized filename.
    """
    return _RESERVED_RX.sub("-", name.lstrip(".")).lower()


def unique_filename(name: str, directory: str, storage: Storage) -> str:
    """
    Resolve a filename that does not exist yet in 'directory'.

    Args:
        name: Desired filename (normalized with clean_filename first).
        directory: Target directory probed through the storage service.
        storage: Storage service used for existence checks.

    Returns:
        str: The normalized name if free, otherwise the first free
             'base.<n>.ext' candidate with n counting up from 1.
    """
    filename = clean_filename(name)
    if not storage.exists(os.path.join(directory, filename)):
        return filename

    base, ext = os.path.splitext(filename)
    for counter in itertools.count(1):
        candidate = f"{base}.{counter}{ext}"
        if not storage.exists(os.path.join(directory, candidate)):
            logger.debug(f"Filename collision on '{filename}', using '{candidate}'")
            return candidate
