from __future__ import annotations

"""
Compression Codec.

Byte-stream transform applied to the serialized META envelope.
"""

import gzip
from typing import Protocol

from iconjar.domain.constants import GZ_COMPRESSION_LEVEL


class Codec(Protocol):
    def encode(self, data: bytes) -> bytes:
        ...


class GzipCodec:
    """
    Gzip encoder with a fixed header timestamp.

    mtime is pinned to 0 so equal input always yields equal bytes.

    Args:
        level: zlib compression level (0-9); low effort by default.
    """

    def __init__(self, level: int = GZ_COMPRESSION_LEVEL) -> None:
        if not 0 <= int(level) <= 9:
            raise ValueError(f"Invalid gzip level {level}: expected 0-9.")
        self.level = int(level)

    def encode(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self.level, mtime=0)
