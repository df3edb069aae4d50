"""Entry point for courtside package."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from courtside.client import LiveNbaClient, MockNbaClient, NbaClient
from courtside.config import AppConfig
from courtside.log import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="courtside - live NBA scores, box scores and play-by-play in the terminal",
        prog="courtside",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use built-in sample data instead of the live feed",
    )
    parser.add_argument(
        "--no-decoration",
        action="store_true",
        help="Disable leader bolding and plus/minus colors",
    )
    parser.add_argument(
        "--badges",
        action="store_true",
        help="Show badges and emphasize standout stats",
    )
    parser.add_argument(
        "--reload",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Refresh interval in seconds (default: 10)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs to this file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    """Environment defaults with command-line flags applied on top."""
    config = AppConfig.from_env()
    config.mock = args.mock
    if args.no_decoration:
        config.no_decoration = True
    if args.badges:
        config.badges = True
    if args.reload is not None:
        config.reload_seconds = args.reload
    if args.log_file:
        config.log_file = args.log_file
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config


def create_client(config: AppConfig) -> NbaClient:
    if config.mock:
        return MockNbaClient()
    return LiveNbaClient(timeout=config.timeout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the courtside application."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"courtside: {error}", file=sys.stderr)
        return 1

    from courtside.ui.app import run_app

    client = create_client(config)
    try:
        configure_logging(config.log_file, config.log_level)
        return_code = run_app(client, config)
    except Exception as e:
        logger.exception("courtside exited with an error")
        print(f"courtside: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()
    if return_code:
        logger.error(f"courtside exited with code {return_code}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
