"""Main module for the clockiReport package."""
import sys
import logging
import argparse
from typing import List, Optional

import requests
from tabulate import tabulate

from .api.client import ClockifyClient, ClockifyAPIError
from .api.http_client import HttpClient
from .reports.report_generator import run_report
from .utils.config_utils import Config, ConfigError, load_config, DEFAULT_ENV_FILE

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Log to stderr, at DEBUG level when verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (optional, defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Print the distinct tasks tracked in Clockify on a given day.",
        epilog="""
Examples:
    # Tasks tracked today
  clockireport
    ---
    # Tasks tracked yesterday
  clockireport --day -1
    ---
    # List user and workspaces with their IDs
  clockireport --list
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="clockireport"
    )
    parser.add_argument('-d', '--day', type=int, default=0, help='Day offset from today, e.g. -1 for yesterday (default: 0)')
    parser.add_argument('-c', '--config', default=DEFAULT_ENV_FILE, help=f'Environment file to load (default: {DEFAULT_ENV_FILE})')
    parser.add_argument('-l', '--list', action='store_true', help='List user and workspaces with their IDs')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def list_user_and_workspaces(client: ClockifyClient, config: Config) -> str:
    """Describe the current user and a table of their workspaces.

    The configured workspace is marked with '*'.
    """
    user = client.get_current_user()
    workspaces = client.get_all_workspaces()

    rows = [
        ["*" if ws.name == config.workspace_name else "", ws.name, ws.id]
        for ws in workspaces
    ]
    lines = [
        "User Info:",
        f"  Name: {user.name}",
        f"  Email: {user.email}",
        f"  ID: {user.id}",
        "",
        "Workspaces:",
        tabulate(rows, headers=["", "Name", "ID"], tablefmt="simple"),
    ]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    with HttpClient(config.api_key, timeout=config.timeout) as http:
        client = ClockifyClient(http, config.base_url)
        try:
            if args.list:
                output = list_user_and_workspaces(client, config)
            else:
                output = run_report(client, config, args.day)
        except (requests.RequestException, ClockifyAPIError, ValueError) as e:
            logger.error("%s", e)
            sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
