from __future__ import annotations

"""
Archive Writer.

Orchestrates a complete save:
1. Creates '<destination>/<name>.<ext>' and its icon subdirectory.
2. Runs the tree compiler over the library's top-level children.
3. Assembles the META envelope and serializes it to compact JSON.
4. Compresses the bytes and persists them as the metadata file.

Writes are not atomic: a failure after step 1 leaves the directories and
any assets copied so far on disk.
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

from iconjar.core.compiler import CompilationContext, TreeCompiler
from iconjar.domain.config import ArchiveConfig
from iconjar.domain.errors import CreationError
from iconjar.domain.models import Library
from iconjar.infra.codec import Codec, GzipCodec
from iconjar.infra.fs import LocalStorage, Storage
from iconjar.utils.dates import format_timestamp

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENVELOPE ASSEMBLY
# -----------------------------------------------------------------------------


def build_envelope(context: CompilationContext, version: Any, now: datetime) -> Dict[str, Any]:
    """
    Assemble the top-level META object from a compiled context.

    The top-level key is spelled 'licences' (and 'licence' on records) as
    the consuming application expects.

    Args:
        context: Context populated by the tree compiler.
        version: Archive format version tag.
        now: Archive creation time.

    Returns:
        Dict[str, Any]: Envelope ready for serialization.
    """
    return {
        "meta": {
            "version": version,
            "date": format_timestamp(now),
        },
        "groups": context.groups,
        "sets": context.sets,
        "licences": context.licences.records,
        "items": context.items,
    }


def encode_envelope(envelope: Dict[str, Any]) -> bytes:
    """Serialize the envelope as compact UTF-8 JSON, keeping insertion order."""
    return json.dumps(envelope, ensure_ascii=False, separators=(",", ":")).encode("utf-8")

# -----------------------------------------------------------------------------
# WRITER
# -----------------------------------------------------------------------------


class ArchiveWriter:
    """
    Persists a Library as an archive directory.

    Args:
        storage: Storage service; the local filesystem when None.
        codec: Byte codec for META; gzip at the configured level when None.
        config: Archive layout; defaults when None.
    """

    def __init__(
            self,
            storage: Optional[Storage] = None,
            codec: Optional[Codec] = None,
            config: Optional[ArchiveConfig] = None,
    ) -> None:
        self.config = config or ArchiveConfig()
        self.storage = storage or LocalStorage()
        self.codec = codec or GzipCodec(self.config.compression_level)

    def archive_path(self, library: Library, destination: str) -> str:
        return os.path.join(destination, f"{library.name}.{self.config.extension}")

    def save(self, library: Library, destination: str) -> str:
        """
        Compile and write the archive.

        Args:
            library: Library to persist.
            destination: Existing parent directory.

        Returns:
            str: Path of the archive root directory.

        Raises:
            CreationError: A directory or the metadata file could not be written,
                or the metadata holds text that is not valid UTF-8.
            ValidationError: An icon failed validation.
            CopyFileError: An icon asset could not be copied.
            HierarchyError: The node tree is malformed.
        """
        save_dir = self.archive_path(library, destination)
        icons_dir = os.path.join(save_dir, self.config.icons_dirname)
        logger.info(f"Writing archive '{save_dir}'")

        self._mkdir(save_dir)
        self._mkdir(icons_dir)

        now = datetime.now()
        context = CompilationContext(storage=self.storage, icons_dir=icons_dir, now=now)
        TreeCompiler(context).compile_children(library.children)

        envelope = build_envelope(context, self.config.version, now)
        meta_file = os.path.join(save_dir, self.config.meta_filename)
        try:
            serialized = encode_envelope(envelope)
        except UnicodeError as e:
            logger.error(f"Failed to serialize metadata for '{save_dir}': {e}")
            raise CreationError(f"Cannot serialize metadata file '{meta_file}'", reason=str(e)) from e
        payload = self.codec.encode(serialized)

        try:
            self.storage.write_file(meta_file, payload)
        except OSError as e:
            logger.error(f"Failed to write metadata file '{meta_file}': {e}")
            raise CreationError(f"Cannot write metadata file '{meta_file}'", reason=str(e)) from e

        logger.info(
            f"Archive complete: {len(context.groups)} groups, {len(context.sets)} sets, "
            f"{len(context.items)} icons, {len(context.licences)} licences"
        )
        return save_dir

    def _mkdir(self, path: str) -> None:
        try:
            self.storage.mkdir(path)
        except OSError as e:
            logger.error(f"Failed to create directory '{path}': {e}")
            raise CreationError(f"Cannot create directory '{path}'", reason=str(e)) from e
