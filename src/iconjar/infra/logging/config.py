from __future__ import annotations

"""
Logging Settings.

Holds the immutable settings consumed by configure_logging and the
factory used by the CLI to derive them from its flags.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for an archive build.

    Attributes:
        level: Minimum severity name ('DEBUG', 'INFO', ...).
        console: Emit records on stderr.
        log_file: Optional rotating log file.
        max_bytes: Rollover size of the log file.
        backup_count: Rotated files kept next to the log file.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format of log file lines.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "[iconjar] %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """Settings for a command line run."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)
