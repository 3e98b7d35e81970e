from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading,
directory scanning, archive compilation and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from iconjar.core.scanner import scan_library
from iconjar.core.writer import ArchiveWriter
from iconjar.domain.config import ArchiveConfig, load_config
from iconjar.domain.errors import IconJarError
from iconjar.domain.models import Library, NodeKind
from iconjar.infra.fs import normalize_path
from iconjar.infra.logging import LoggingConfig, configure_logging, get_logger
from iconjar.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on archive failure, 2 on bad input, 130 on interrupt.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    if args.config_file:
        config, warnings = load_config(args.config_file)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
    else:
        config = ArchiveConfig()

    source = normalize_path(args.source, os.getcwd())
    if not os.path.isdir(source):
        msg = f"Source directory does not exist: {source}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    output_dir = normalize_path(args.output_dir, os.getcwd())
    if not os.path.isdir(output_dir):
        msg = f"Output directory does not exist: {output_dir}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    license = cli_args.args_to_license(args)

    try:
        library = scan_library(source, name=args.name, license=license)
        archive = ArchiveWriter(config=config).save(library, output_dir)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except IconJarError as e:
        logger.error(f"Archive build failed: {e} ({e.reason})")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    summary = _summarize(library, archive)
    if args.json_output:
        print(json.dumps(summary, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(summary)
    return 0

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------


def _summarize(library: Library, archive: str) -> Dict[str, Any]:
    """Count the nodes of a scanned library for reporting."""
    counts = {"groups": 0, "sets": 0, "icons": 0}
    pending = list(library.children)
    while pending:
        node = pending.pop()
        if node.kind is NodeKind.SET:
            counts["sets"] += 1
            counts["icons"] += len(node.icons)
        else:
            counts["groups"] += 1
            pending.extend(node.children)
    return {"ok": True, "archive": archive, "name": library.name, **counts}


def _print_human_summary(summary: Dict[str, Any]) -> None:
    print(f"Archive created: {summary['archive']}")
    print(f"Groups: {summary['groups']}")
    print(f"Sets: {summary['sets']}")
    print(f"Icons: {summary['icons']}")


if __name__ == "__main__":
    sys.exit(main())
