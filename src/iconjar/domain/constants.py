from __future__ import annotations

"""
Domain Constants.

Fixed values of the on-disk archive contract shared by the compiler,
the writer and the configuration layer.
"""

# -----------------------------------------------------------------------------
# ARCHIVE CONTRACT
# -----------------------------------------------------------------------------

ARCHIVE_EXTENSION = "iconjar"
ARCHIVE_VERSION = 2
GZ_COMPRESSION_LEVEL = 1
META_FILENAME = "META"
ICONS_DIRNAME = "icons"

# Consumed as-is by the icon manager, independent of host locale.
# The year is padded separately: glibc strftime does not pad %Y below 1000.
TIMESTAMP_FORMAT = "%m-%d %H:%M:%S"

DEFAULT_LIBRARY_NAME = "Untitled Library"
