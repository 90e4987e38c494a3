"""
Tencent Cloud provider CLI.

Loads the provider configuration the same way the controller does and runs
one provider operation against it, for debugging node and route issues.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from .cloud import TencentCloud
from .commands import BaseCommand, get_commands
from .errors import CloudProviderError, ConfigurationError
from .utils.config import ENV_PREFIX
from .utils.display import display_config_help, display_error


def build_parser(commands: Sequence[BaseCommand]) -> argparse.ArgumentParser:
    """Construct the top-level argument parser and attach subcommands."""
    parser = argparse.ArgumentParser(
        prog="tencent-ccm",
        description="Query instances and cluster routes through the tencentcloud provider.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tencent-ccm --config cloud.json node-addresses 10.0.0.5
  tencent-ccm instance-exists tencentcloud:///ap-guangzhou-3/ins-abcd1234
  tencent-ccm create-route 10.0.0.5 172.16.1.0/24
        """,
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a JSON or YAML config file (falls back to {ENV_PREFIX}* variables).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in commands:
        command.register(subparsers)

    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    console = Console()
    parser = build_parser(get_commands())
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    handler: BaseCommand = args.handler

    try:
        cloud = TencentCloud.from_config(args.config)
    except ConfigurationError as exc:
        display_error(console, str(exc))
        display_config_help(console, ENV_PREFIX)
        return 1

    try:
        return handler.execute(cloud, args, console)
    except CloudProviderError as exc:
        display_error(console, str(exc))
        return 1


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        Console().print("\n[yellow]Program interrupted by user.[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    run()
