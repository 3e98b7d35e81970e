from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Defines the storage service the archive writer talks to and its local
filesystem implementation, plus the path helpers used by the CLI.
Every storage operation is synchronous and raises OSError on failure;
translating those errors into archive errors is the caller's job.
"""

import os
import shutil
from typing import Optional, Protocol

# -----------------------------------------------------------------------------
# STORAGE SERVICE CONTRACT
# -----------------------------------------------------------------------------


class Storage(Protocol):
    """Minimal storage surface needed to write an archive."""

    def mkdir(self, path: str) -> None:
        ...

    def exists(self, path: str) -> bool:
        ...

    def copy_file(self, src: str, dst: str) -> None:
        ...

    def write_file(self, path: str, data: bytes) -> None:
        ...


class LocalStorage:
    """
    Storage service backed by the host filesystem.

    mkdir is non-recursive and fails when the target already exists.
    """

    def mkdir(self, path: str) -> None:
        os.mkdir(path)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def copy_file(self, src: str, dst: str) -> None:
        shutil.copyfile(src, dst)

    def write_file(self, path: str, data: bytes) -> None:
        with open(path, "wb") as f:
            f.write(data)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)
