"""UserDB CLI entry points.

This module exposes one command per output layout. It maps argparse
commands onto SDK calls and converts domain errors into exit codes.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from core.config import UserDBConfig, parse_log_level
from core.constants import MAX_PROGRESS
from core.errors import UserDBError
from core.logging_config import configure_logging
from store.directory_sdk import UserDirectoryClient
from store.user_file_writer import USER_FILE_LAYOUTS


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="userdb",
        description="Build a merged DMR user database from public registries",
    )
    parser.add_argument("--log-level", help="Override USERDB_LOG_LEVEL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_layout_command(
        subparsers, "md380tools", "Write the length-prefixed md380tools user file"
    )
    _add_layout_command(subparsers, "md2017", "Write the plain md2017 user file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the UserDB CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = UserDBConfig.from_env()
        log_level = parse_log_level(args.log_level) if args.log_level else config.log_level
        configure_logging(log_level)
        client = UserDirectoryClient(config)
    except UserDBError as error:
        print(f"userdb: {error}", file=sys.stderr)
        return 1
    try:
        return _run_layout_command(client, args)
    finally:
        client.close()


def _run_layout_command(client: UserDirectoryClient, args: argparse.Namespace) -> int:
    """Handle a layout command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    layout = USER_FILE_LAYOUTS[args.command]
    progress = _print_progress if args.progress else None
    try:
        path = client.write_file(args.output, layout, progress)
    except UserDBError as error:
        if args.progress:
            print(file=sys.stderr)
        print(f"userdb: {error}", file=sys.stderr)
        return 1
    if args.progress:
        print(file=sys.stderr)
    print(path)
    return 0


def _print_progress(current: int) -> bool:
    """Render percent completion on one stderr line."""
    percent = 100 * current // MAX_PROGRESS
    print(f"\rbuilding user database: {percent:3d}%", end="", file=sys.stderr, flush=True)
    return True


def _add_layout_command(subparsers: Any, name: str, help_text: str) -> None:
    """Register one output layout subcommand."""
    parser = subparsers.add_parser(name, help=help_text)
    parser.add_argument("output", help="Output file path, overwritten if present")
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Print build progress to stderr",
    )

