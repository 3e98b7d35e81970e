from __future__ import annotations

"""
Archive Configuration.

Defines the immutable ArchiveConfig consumed by the writer, its default
dictionary form, and the validation layer that turns untrusted input
(JSON files, CLI overrides) into a typed configuration.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple

from iconjar.domain.constants import (
    ARCHIVE_EXTENSION,
    ARCHIVE_VERSION,
    GZ_COMPRESSION_LEVEL,
    ICONS_DIRNAME,
    META_FILENAME,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ArchiveConfig:
    """
    Immutable description of the archive layout and encoding.

    Attributes:
        extension: Suffix of the archive directory ('<name>.<extension>').
        version: Numeric format tag written to meta.version.
        compression_level: Gzip level applied to META (0-9).
        meta_filename: Name of the metadata file inside the archive root.
        icons_dirname: Name of the asset subdirectory.
    """
    extension: str = ARCHIVE_EXTENSION
    version: int = ARCHIVE_VERSION
    compression_level: int = GZ_COMPRESSION_LEVEL
    meta_filename: str = META_FILENAME
    icons_dirname: str = ICONS_DIRNAME


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default configuration dictionary.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return asdict(ArchiveConfig())

# -----------------------------------------------------------------------------
# VALIDATION API
# -----------------------------------------------------------------------------


def validate_config(config: Any, *, strict: bool = False) -> Tuple[ArchiveConfig, List[str]]:
    """
    Validate and normalize a raw configuration mapping.

    Missing keys fall back to defaults and unknown keys are dropped.
    In non-strict mode bad values are replaced by defaults and reported
    as warnings.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type or range mismatch instead of coercing.

    Returns:
        Tuple[ArchiveConfig, List[str]]: The typed config and the warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if config is None:
        return ArchiveConfig(), warnings

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return ArchiveConfig(), warnings

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown config key '{key}' ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for name in ("extension", "meta_filename", "icons_dirname"):
        merged[name] = _as_str(merged.get(name), defaults[name], name, warnings, strict)

    for name in ("version", "compression_level"):
        merged[name] = _as_int(merged.get(name), defaults[name], name, warnings, strict)

    if not 0 <= merged["compression_level"] <= 9:
        msg = f"Invalid field 'compression_level': {merged['compression_level']} is outside 0-9."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["compression_level"] = defaults["compression_level"]

    merged["extension"] = merged["extension"].lstrip(".") or defaults["extension"]

    return ArchiveConfig(**merged), warnings


def load_config(path: str) -> Tuple[ArchiveConfig, List[str]]:
    """
    Load and validate a JSON configuration file.

    A missing or unreadable file yields the defaults plus a warning.

    Args:
        path: Path to the JSON file.

    Returns:
        Tuple[ArchiveConfig, List[str]]: The typed config and the warnings.
    """
    if not os.path.exists(path):
        return ArchiveConfig(), [f"Config file not found: {path}. Using defaults."]

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read config file '{path}': {e}")
        return ArchiveConfig(), [f"Config file unreadable ({e}). Using defaults."]

    return validate_config(raw, strict=False)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce numeric strings into integers; booleans are rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict and isinstance(value, str):
        s = value.strip()
        if s.lstrip("-").isdigit():
            warnings.append(f"Field '{field}' converted from '{value}' to {int(s)}.")
            return int(s)

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
