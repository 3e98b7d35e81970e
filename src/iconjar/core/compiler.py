from __future__ import annotations

"""
Tree Compiler.

Walks the Group/Set/Icon hierarchy depth-first, in stored order, and
flattens it into four identifier-keyed dictionaries (groups, sets,
licences, items). Every compiled icon's asset is copied into the archive
icon directory under a collision-free name.

All accumulated state lives in a CompilationContext created per run, so
the caller's Library is only read, never mutated.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Set

from iconjar.core.naming import unique_filename
from iconjar.core.registry import LicenseRegistry
from iconjar.core.validation import validate_icon
from iconjar.domain.errors import CopyFileError, HierarchyError
from iconjar.domain.models import Child, Icon, IconGroup, IconSet, NodeKind
from iconjar.infra.fs import Storage
from iconjar.utils.dates import format_timestamp

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

# -----------------------------------------------------------------------------
# COMPILATION STATE
# -----------------------------------------------------------------------------


@dataclass
class CompilationContext:
    """
    Mutable accumulator for a single compilation pass.

    Attributes:
        storage: Storage service used for probes and asset copies.
        icons_dir: Absolute path of the archive icon directory.
        now: Timestamp used for nodes without an explicit date.
        groups: Group records keyed by identifier.
        sets: Set records keyed by identifier.
        items: Icon records keyed by identifier.
        licences: Deduplicating licence table.
    """
    storage: Storage
    icons_dir: str
    now: datetime = field(default_factory=datetime.now)
    groups: Dict[str, Record] = field(default_factory=dict)
    sets: Dict[str, Record] = field(default_factory=dict)
    items: Dict[str, Record] = field(default_factory=dict)
    licences: LicenseRegistry = field(default_factory=LicenseRegistry)

# -----------------------------------------------------------------------------
# COMPILER
# -----------------------------------------------------------------------------


class TreeCompiler:
    """Flattens container nodes into the context dictionaries."""

    def __init__(self, context: CompilationContext) -> None:
        self.context = context
        # Groups currently on the traversal path
        self._active_groups: Set[str] = set()

    def compile_children(self, children: Iterable[Child]) -> None:
        """
        Compile an ordered sequence of groups and sets.

        Args:
            children: Top-level or nested container nodes.

        Raises:
            IconJarError: The first validation, hierarchy or copy failure.
        """
        for child in children:
            if child.kind is NodeKind.SET:
                self.compile_set(child)
            elif child.kind is NodeKind.GROUP:
                self.compile_group(child)
            else:
                raise HierarchyError(f"Unsupported node kind: {child.kind!r}")

    def compile_set(self, icon_set: IconSet) -> str:
        record: Record = {
            "name": icon_set.name,
            "identifier": icon_set.identifier,
            "sort": icon_set.sort,
            "description": icon_set.description if icon_set.description is not None else "",
            "date": self._date(icon_set.date),
        }
        if icon_set.parent_id is not None:
            record["parent"] = icon_set.parent_id
        if icon_set.license is not None:
            record["licence"] = self.context.licences.register(icon_set.license)
        self.context.sets[icon_set.identifier] = record
        logger.debug(f"Compiled set '{icon_set.name}' ({len(icon_set.icons)} icons)")

        for icon in icon_set.icons:
            self.compile_icon(icon)
        return icon_set.identifier

    def compile_icon(self, icon: Icon) -> str:
        """
        Validate, record and copy a single icon.

        Args:
            icon: Icon owned by a set.

        Returns:
            str: The icon identifier.

        Raises:
            ValidationError: The icon fails validate_icon.
            HierarchyError: The icon was never added to a set.
            CopyFileError: The asset could not be copied.
        """
        validate_icon(icon)
        if icon.set_id is None:
            raise HierarchyError(f"Icon '{icon.name}' ({icon.identifier}) has no owning set")

        storage = self.context.storage
        filename = unique_filename(icon.file, self.context.icons_dir, storage)

        record: Record = {
            "name": icon.name,
            "width": icon.width,
            "height": icon.height,
            "type": int(icon.type),
            "file": filename,
            "date": self._date(icon.date),
            "tags": icon.tags_string(),
            "identifier": icon.identifier,
            "parent": icon.set_id,
            "unicode": icon.unicode if icon.unicode is not None else "",
            "description": icon.description if icon.description is not None else "",
        }
        if icon.license is not None:
            record["licence"] = self.context.licences.register(icon.license)
        self.context.items[icon.identifier] = record

        target = os.path.join(self.context.icons_dir, filename)
        try:
            storage.copy_file(icon.file_path, target)
        except OSError as e:
            logger.error(f"Failed to copy '{icon.file_path}' to '{target}': {e}")
            raise CopyFileError(f"Cannot copy icon asset '{icon.file_path}'", reason=str(e)) from e
        return icon.identifier

    def compile_group(self, group: IconGroup) -> str:
        if group.identifier in self._active_groups:
            raise HierarchyError(f"Group '{group.name}' ({group.identifier}) is its own ancestor")

        record: Record = {
            "name": group.name,
            "identifier": group.identifier,
            "sort": group.sort,
            "description": group.description if group.description is not None else "",
        }
        if group.parent_id is not None:
            record["parent"] = group.parent_id
        self.context.groups[group.identifier] = record
        logger.debug(f"Compiled group '{group.name}'")

        self._active_groups.add(group.identifier)
        try:
            self.compile_children(group.children)
        finally:
            self._active_groups.discard(group.identifier)
        return group.identifier

    def _date(self, moment: Optional[datetime]) -> str:
        return format_timestamp(moment if moment is not None else self.context.now)
