from __future__ import annotations

"""
Icon Directory Discovery Service.

Builds an in-memory Library from a directory of icon files for the CLI:
- a directory containing subdirectories becomes an IconGroup; its loose
  icon files form a set of the same name placed before the nested nodes,
- a directory without subdirectories becomes an IconSet,
- loose files at the source root form a set named after the library.

Raster dimensions are read with Pillow. Entries are visited in sorted
order so repeated scans yield the same hierarchy.
"""

import logging
import os
from datetime import datetime
from typing import List, Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from iconjar.domain.constants import DEFAULT_LIBRARY_NAME
from iconjar.domain.models import Icon, IconGroup, IconSet, IconType, Library, License

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------


def scan_library(
        source_dir: str,
        name: Optional[str] = None,
        license: Optional[License] = None,
) -> Library:
    """
    Build a Library mirroring the layout of 'source_dir'.

    Args:
        source_dir: Root directory holding icon files and folders.
        name: Library name; the directory basename when omitted.
        license: Licence attached to every discovered set.

    Returns:
        Library: The populated hierarchy (not yet saved).
    """
    root = os.path.abspath(source_dir)
    default_name = _display_name(os.path.basename(root.rstrip(os.sep)))
    library = Library(name or default_name or DEFAULT_LIBRARY_NAME)

    files, dirs = _list_entries(root)
    root_set = _build_set(library.name, root, files, license)
    if root_set is not None:
        library.add_set(root_set)

    for d in dirs:
        child = _build_node(os.path.join(root, d), license)
        if child is None:
            continue
        if isinstance(child, IconGroup):
            library.add_group(child)
        else:
            library.add_set(child)

    logger.info(f"Scanned '{root}': {len(library.children)} top-level nodes")
    return library


def probe_dimensions(path: str) -> Tuple[int, int]:
    """
    Read the pixel size of a raster image.

    Args:
        path: Image file path.

    Returns:
        Tuple[int, int]: (width, height), or (0, 0) when Pillow cannot read it.
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
            return int(width), int(height)
    except (OSError, UnidentifiedImageError) as e:
        logger.debug(f"Cannot read dimensions of '{path}': {e}")
        return 0, 0


def build_icon(path: str) -> Optional[Icon]:
    """
    Create an Icon for a file, or None when it cannot be archived.

    Unsupported extensions and raster files without readable dimensions
    are skipped with a warning.
    """
    file_name = os.path.basename(path)
    icon_type = Icon.type_from_path(path)
    if icon_type == IconType.UNKNOWN:
        logger.debug(f"Skipping unsupported file '{file_name}'")
        return None

    width, height = (0, 0) if icon_type == IconType.SVG else probe_dimensions(path)
    if icon_type != IconType.SVG and (width == 0 or height == 0):
        logger.warning(f"Skipping '{path}': image dimensions could not be determined")
        return None

    stem, _ = os.path.splitext(file_name)
    return Icon(
        _display_name(stem),
        path,
        icon_type,
        width=width,
        height=height,
        date=datetime.fromtimestamp(os.path.getmtime(path)),
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------


def _list_entries(directory: str) -> Tuple[List[str], List[str]]:
    """Return sorted (files, subdirectories), ignoring hidden entries."""
    files: List[str] = []
    dirs: List[str] = []
    for entry in sorted(os.listdir(directory)):
        if entry.startswith("."):
            continue
        full = os.path.join(directory, entry)
        if os.path.isdir(full):
            dirs.append(entry)
        elif os.path.isfile(full):
            files.append(entry)
    return files, dirs


def _display_name(raw: str) -> str:
    """
    Make a filesystem name safe to serialize as UTF-8.

    Undecodable bytes surface from os.listdir as lone surrogates; they are
    replaced with U+FFFD.
    """
    try:
        raw.encode("utf-8")
        return raw
    except UnicodeEncodeError:
        fixed = raw.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        logger.warning(f"Name {raw!r} is not valid UTF-8, using '{fixed}'")
        return fixed


def _build_set(
        name: str,
        directory: str,
        files: List[str],
        license: Optional[License],
) -> Optional[IconSet]:
    """Build a set from the archivable files; None when none of them qualify."""
    icon_set = IconSet(name)
    icon_set.license = license
    for file_name in files:
        icon = build_icon(os.path.join(directory, file_name))
        if icon is not None:
            icon.license = license
            icon_set.add_icon(icon)
    return icon_set if icon_set.icons else None


def _build_node(directory: str, license: Optional[License]) -> Optional[Union[IconGroup, IconSet]]:
    """Map a directory to an IconGroup or IconSet; None when it yields no icons."""
    name = _display_name(os.path.basename(directory))
    files, dirs = _list_entries(directory)

    own_set = _build_set(name, directory, files, license)
    if not dirs:
        return own_set

    group = IconGroup(name)
    if own_set is not None:
        group.add_set(own_set)
    for d in dirs:
        child = _build_node(os.path.join(directory, d), license)
        if isinstance(child, IconGroup):
            group.add_group(child)
        elif child is not None:
            group.add_set(child)
    return group if group.children else None
