from __future__ import annotations

"""
Icon Library Data Models.

Defines the caller-built hierarchy compiled into an archive:
Library -> (IconGroup | IconSet)* -> Icon*, plus shared License records.

Parent links are stored as identifiers (parent_id / set_id), never as
object references, so a node never owns its ancestor.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple, Union

from iconjar.core.identity import new_identifier, normalize_identifier

if TYPE_CHECKING:
    from iconjar.domain.config import ArchiveConfig
    from iconjar.infra.codec import Codec
    from iconjar.infra.fs import Storage

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------


class IconType(IntEnum):
    """Asset formats understood by the icon manager (serialized by value)."""
    UNKNOWN = -1
    SVG = 0
    PNG = 1
    GIF = 2
    PDF = 3
    ICNS = 4
    WEBP = 5
    ICO = 6


class NodeKind(str, Enum):
    """Variant tag of a container node."""
    GROUP = "group"
    SET = "set"


_EXTENSION_TYPES = {
    ".svg": IconType.SVG,
    ".png": IconType.PNG,
    ".gif": IconType.GIF,
    ".pdf": IconType.PDF,
    ".icns": IconType.ICNS,
    ".webp": IconType.WEBP,
    ".ico": IconType.ICO,
}

# -----------------------------------------------------------------------------
# SHARED RECORDS
# -----------------------------------------------------------------------------


@dataclass(eq=False)
class License:
    """
    Licence shared by any number of sets and icons.

    Attributes:
        name: Display name.
        url: Optional link to the licence text.
        description: Optional licence body, serialized as 'text'.
        identifier: Unique key; generated when not supplied.
    """
    name: str = "Untitled License"
    url: Optional[str] = None
    description: Optional[str] = None
    identifier: str = field(default_factory=new_identifier)

    def __post_init__(self) -> None:
        self.identifier = normalize_identifier(self.identifier)

# -----------------------------------------------------------------------------
# ICONS
# -----------------------------------------------------------------------------


class Icon:
    """
    A single icon asset and its metadata.

    The type is inferred from the file extension when omitted. The owning
    set is recorded as 'set_id' when the icon is added to an IconSet.
    """

    def __init__(
            self,
            name: str = "Untitled Icon",
            file_path: str = "",
            type: Optional[IconType] = None,
            *,
            width: int = 0,
            height: int = 0,
            identifier: Optional[str] = None,
            description: str = "",
            license: Optional[License] = None,
            tags: Optional[Iterable[str]] = None,
            date: Optional[datetime] = None,
            unicode: Optional[str] = None,
    ) -> None:
        self.name = name
        self.file_path = file_path
        self.type = IconType(type) if type is not None else Icon.type_from_path(file_path)
        self.width = int(width)
        self.height = int(height)
        self.identifier = normalize_identifier(identifier) if identifier else new_identifier()
        self.description = description
        self.license = license
        self.tags: List[str] = list(tags or [])
        self.date = date
        self.unicode = unicode
        self.set_id: Optional[str] = None

    @property
    def file(self) -> str:
        """Basename of the source asset."""
        return os.path.basename(str(self.file_path))

    @staticmethod
    def type_from_path(path: str) -> IconType:
        """
        Infer the icon type from a file extension (case-insensitive).

        Args:
            path: File name or path.

        Returns:
            IconType: Matching type, or UNKNOWN for unsupported extensions.
        """
        _, ext = os.path.splitext(str(path))
        return _EXTENSION_TYPES.get(ext.lower(), IconType.UNKNOWN)

    def add_tag(self, tag: str) -> Icon:
        self.tags.append(tag)
        return self

    def add_tags(self, tags: Iterable[str]) -> Icon:
        self.tags.extend(tags)
        return self

    def tags_string(self) -> str:
        """Comma-join the tags, dropping duplicates in first-seen order."""
        return ",".join(dict.fromkeys(self.tags))

    def __repr__(self) -> str:
        return f"Icon(name={self.name!r}, file={self.file!r}, type={self.type.name})"

# -----------------------------------------------------------------------------
# CONTAINERS
# -----------------------------------------------------------------------------


class IconSet:
    """Leaf container holding an ordered sequence of icons."""

    kind = NodeKind.SET

    def __init__(self, name: str = "Untitled Set", icons: Optional[Iterable[Icon]] = None) -> None:
        self.name = name
        self.identifier = new_identifier()
        self.description = ""
        self.license: Optional[License] = None
        self.date: Optional[datetime] = None
        self.sort = 0
        self.parent_id: Optional[str] = None
        self.icons: List[Icon] = []
        for icon in icons or []:
            self.add_icon(icon)

    def add_icon(self, icon: Icon) -> IconSet:
        icon.set_id = self.identifier
        self.icons.append(icon)
        return self

    def __repr__(self) -> str:
        return f"IconSet(name={self.name!r}, icons={len(self.icons)})"


class IconGroup:
    """Organizational node holding nested groups and sets."""

    kind = NodeKind.GROUP

    def __init__(self, name: str = "Untitled", children: Optional[Iterable[Child]] = None) -> None:
        self.name = name
        self.identifier = new_identifier()
        self.description = ""
        self.sort = 0
        self.parent_id: Optional[str] = None
        self._children: List[Child] = []
        for child in children or []:
            _attach(self, child)

    def add_set(self, icon_set: IconSet) -> IconGroup:
        icon_set.parent_id = self.identifier
        self._children.append(icon_set)
        return self

    def add_group(self, group: IconGroup) -> IconGroup:
        group.parent_id = self.identifier
        self._children.append(group)
        return self

    @property
    def children(self) -> Tuple[Child, ...]:
        return tuple(self._children)

    def __repr__(self) -> str:
        return f"IconGroup(name={self.name!r}, children={len(self._children)})"


Child = Union[IconGroup, IconSet]

# -----------------------------------------------------------------------------
# ROOT
# -----------------------------------------------------------------------------


class Library:
    """
    Root of an icon library; its name becomes the archive directory name.

    Top-level children carry no parent link. Compilation state is created
    per save call, so the same instance may be saved repeatedly.
    """

    def __init__(self, name: str, children: Optional[Iterable[Child]] = None) -> None:
        self.name = name
        self._children: List[Child] = []
        for child in children or []:
            _attach(self, child)

    def add_set(self, icon_set: IconSet) -> Library:
        icon_set.parent_id = None
        self._children.append(icon_set)
        return self

    def add_group(self, group: IconGroup) -> Library:
        group.parent_id = None
        self._children.append(group)
        return self

    @property
    def children(self) -> Tuple[Child, ...]:
        return tuple(self._children)

    def save(
            self,
            destination: str,
            *,
            storage: Optional[Storage] = None,
            codec: Optional[Codec] = None,
            config: Optional[ArchiveConfig] = None,
    ) -> str:
        """
        Compile the library into '<destination>/<name>.<ext>'.

        Args:
            destination: Existing directory receiving the archive.
            storage: Optional storage service (defaults to the local filesystem).
            codec: Optional byte codec for META (defaults to gzip level 1).
            config: Optional ArchiveConfig.

        Returns:
            str: Path of the created archive directory.

        Raises:
            IconJarError: On the first validation, copy or creation failure.
        """
        from iconjar.core.writer import ArchiveWriter

        writer = ArchiveWriter(storage=storage, codec=codec, config=config)
        return writer.save(self, destination)

    def __repr__(self) -> str:
        return f"Library(name={self.name!r}, children={len(self._children)})"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------


def _attach(parent: Union[IconGroup, Library], child: Child) -> None:
    """Route a constructor-supplied child to the matching add method."""
    kind = getattr(child, "kind", None)
    if kind is NodeKind.GROUP:
        parent.add_group(child)
    elif kind is NodeKind.SET:
        parent.add_set(child)
    else:
        raise TypeError(f"Expected IconGroup or IconSet, received {type(child).__name__}.")
