from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
the inputs of the build command.
"""

import argparse
from typing import Optional

from iconjar.domain.models import License


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the iconjar CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="iconjar",
        description="Build .iconjar icon library archives.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="Pack a directory of icons into an archive.")

    # --- Path Management ---
    b.add_argument("source", help="Directory holding icon files and folders.")
    b.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help="Directory receiving the archive (default: current directory).",
    )
    b.add_argument(
        "--name",
        default=None,
        help="Library name (default: source directory name).",
    )

    # --- Licensing ---
    b.add_argument("--license-name", dest="license_name", default=None, help="Licence applied to every icon.")
    b.add_argument("--license-url", dest="license_url", default=None, help="URL of the licence.")
    b.add_argument("--license-text", dest="license_text", default=None, help="Licence body text.")

    # --- Configuration and Diagnostics ---
    b.add_argument("--config", dest="config_file", default=None, help="JSON archive configuration file.")
    b.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    b.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")
    b.add_argument("--json", dest="json_output", action="store_true", help="Print the result as JSON.")

    return p


def args_to_license(args: argparse.Namespace) -> Optional[License]:
    """
    Build the shared licence from the CLI flags.

    Returns:
        Optional[License]: None when no licence name was given.
    """
    if not args.license_name:
        return None
    return License(args.license_name, url=args.license_url, description=args.license_text)
