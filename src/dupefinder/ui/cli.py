from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dupefinder.app import add_vault_entry, build_scheduler, find_duplicates
from dupefinder.common import configure_logging
from dupefinder.config import get_database_config, get_scan_config, get_steam_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Tag vault games that are already owned or wishlisted on Steam"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("scan", help="Run one duplicate scan and exit")

    watch = subparsers.add_parser("watch", help="Run duplicate scans on the configured interval")
    watch.add_argument(
        "--interval-minutes",
        type=float,
        help="Minutes between scans; 0 runs a single scan (defaults to config)",
    )
    watch.add_argument(
        "--initial-delay",
        type=float,
        help="Seconds to wait before the first scan (defaults to config)",
    )

    vault = subparsers.add_parser("vault", help="Vault management commands")
    vault_sub = vault.add_subparsers(dest="vault_command", required=True)
    vault_add = vault_sub.add_parser("add", help="Add a game to the vault")
    vault_add.add_argument(
        "--title",
        type=str,
        help="Display title of the game",
    )
    vault_add.add_argument(
        "--ref",
        dest="refs",
        action="append",
        default=[],
        help="External reference URL (repeatable), e.g. a Steam store page",
    )
    vault_add.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        help="Tag to attach to the entry (repeatable)",
    )

    subparsers.add_parser("config", help="Log the effective configuration")

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if args.command == "watch":
        if args.interval_minutes is not None and args.interval_minutes < 0:
            raise ValueError("Interval minutes must be non-negative")
        if args.initial_delay is not None and args.initial_delay < 0:
            raise ValueError("Initial delay must be non-negative")
    if args.command == "vault" and not args.title and not args.refs:
        raise ValueError("Provide --title or at least one --ref")


def _log_configuration() -> None:
    scan_config = get_scan_config()
    log.info("Steam configuration: %s", get_steam_config().censored())
    log.info("Scan configuration: %s", scan_config.censored())
    log.info("Database: %s", get_database_config().uri)


def _watch(args: argparse.Namespace) -> None:
    _log_configuration()
    scan_config = get_scan_config()
    overrides: dict[str, float] = {}
    if args.interval_minutes is not None:
        overrides["interval_minutes"] = args.interval_minutes
    if args.initial_delay is not None:
        overrides["initial_delay_seconds"] = args.initial_delay
    if overrides:
        scan_config = replace(scan_config, **overrides)

    scheduler = build_scheduler(scan_config=scan_config)
    scheduler.start()
    try:
        while not scheduler.wait(timeout=1.0):
            pass
    finally:
        scheduler.stop()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        _validate(parsed_args)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else None)

    try:
        if parsed_args.command == "scan":
            find_duplicates()
        elif parsed_args.command == "watch":
            _watch(parsed_args)
        elif parsed_args.command == "vault" and parsed_args.vault_command == "add":
            entry = add_vault_entry(
                title=parsed_args.title,
                external_refs=parsed_args.refs,
                tags=parsed_args.tags,
            )
            log.info("Created vault entry %s", entry.id)
        elif parsed_args.command == "config":
            _log_configuration()
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during duplicate detection")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
