from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from javamigrate.app import migrate_java_release
from javamigrate.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

# shorthand flag -> Foojay query parameter
_SHORTHAND_PARAMS = {
    "distribution": "distribution",
    "version": "version",
    "os": "operating_system",
    "arch": "architecture",
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Publish the newest matching Foojay Java release to SDKMAN"
    )
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Foojay query parameter; repeat a key for several values, "
        "use KEY= to fall back to the default",
    )
    parser.add_argument("--distribution", type=str, help="Foojay distribution id, e.g. temurin")
    parser.add_argument("--version", type=str, help="Java version or range, e.g. 17")
    parser.add_argument("--os", type=str, help="Operating system, e.g. linux")
    parser.add_argument("--arch", type=str, help="Architecture, e.g. x64")
    parser.add_argument(
        "--default",
        action="store_true",
        dest="default_candidate",
        help="Mark the published version as the default Java candidate",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def _build_query_params(args: argparse.Namespace) -> dict[str, list[str]]:
    params: dict[str, list[str]] = {}
    for item in args.param:
        key, separator, value = item.partition("=")
        key = key.strip()
        if not separator or not key:
            raise ValueError(f"Invalid query parameter {item!r}, expected KEY=VALUE")
        values = params.setdefault(key, [])
        if value.strip():
            values.append(value.strip())

    for flag, key in _SHORTHAND_PARAMS.items():
        value = getattr(args, flag)
        if value:
            params.setdefault(key, []).append(value)
    return params


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        query_params = _build_query_params(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    if parsed_args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        result = migrate_java_release(
            query_params,
            default_candidate=parsed_args.default_candidate,
        )
        log.info("Java migration finished: %s", result.outcome)
    except Exception:
        log.exception("Fatal error during migration")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
