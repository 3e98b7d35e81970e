from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for icon assets, libraries and an in-memory storage.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set

import pytest
from PIL import Image

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from iconjar.domain.models import Icon, IconGroup, IconSet, IconType, Library, License  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class MemoryStorage:
    """
    Storage service keeping everything in dictionaries.

    Records every call so tests can assert on the I/O sequence.
    """

    def __init__(self, existing: Optional[Set[str]] = None) -> None:
        self.dirs: Set[str] = set()
        self.files: Dict[str, bytes] = {}
        self.copies: List[tuple] = []
        for path in existing or set():
            self.files[path] = b""

    def mkdir(self, path: str) -> None:
        if path in self.dirs or path in self.files:
            raise FileExistsError(f"[Errno 17] File exists: '{path}'")
        self.dirs.add(path)

    def exists(self, path: str) -> bool:
        return path in self.dirs or path in self.files

    def copy_file(self, src: str, dst: str) -> None:
        self.copies.append((src, dst))
        self.files[dst] = b"copied"

    def write_file(self, path: str, data: bytes) -> None:
        self.files[path] = data


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


# -----------------------------------------------------------------------------
# Asset Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_png(tmp_path: Path) -> Callable[..., Path]:
    """
    Return a factory writing a real PNG of the requested size.

    Files land in 'tmp_path/assets/<subdir>' so two icons may share a basename.
    """

    def _make(name: str = "icon.png", size=(16, 16), subdir: str = "") -> Path:
        folder = tmp_path / "assets" / subdir
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        Image.new("RGBA", size, (255, 0, 0, 255)).save(path, format="PNG")
        return path

    return _make


@pytest.fixture
def make_svg(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str = "vector.svg", subdir: str = "") -> Path:
        folder = tmp_path / "assets" / subdir
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        path.write_text(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0h24v24H0z"/></svg>',
            encoding="utf-8",
        )
        return path

    return _make


@pytest.fixture
def sample_library(make_png, make_svg) -> Library:
    """
    Build a small two-level library sharing one licence.

    Structure:
    Sample
      Outer (group)
        Inner (group)
          Arrows (set, licence) -> left.png, right.png (licence)
        Misc (set) -> dup/icon.png, vector.svg
    """
    licence = License("MIT", url="https://opensource.org/licenses/MIT", description="Permission is hereby granted")

    left = Icon("Left", str(make_png("left.png")), width=16, height=16, tags=["arrow", "left", "arrow"])
    right = Icon("Right", str(make_png("right.png")), width=16, height=16, license=licence)
    arrows = IconSet("Arrows", [left, right])
    arrows.license = licence

    dup = Icon("Dup", str(make_png("icon.png", subdir="dup")), IconType.PNG, width=16, height=16)
    vector = Icon("Vector", str(make_svg()))
    misc = IconSet("Misc", [dup, vector])

    inner = IconGroup("Inner", [arrows])
    outer = IconGroup("Outer", [inner, misc])
    return Library("Sample", [outer])
