"""
WP-VulnCheck CLI

Command-line interface and main entry point.
"""

import argparse
import sys
from typing import List, Optional

from wp_vulncheck.config import CORE_ITEM_NAME, EXIT_INTERRUPTED, EXIT_NO_TOKEN, Colors
from wp_vulncheck.clients.vulndb_client import VulnDbClient
from wp_vulncheck.inventory.wp_cli import InventoryError, WpCli
from wp_vulncheck.logger import enable_debug, setup_logger
from wp_vulncheck.models import VulnResponse
from wp_vulncheck.reports.text_report import VulnerabilityReport
from wp_vulncheck.settings import MissingTokenError, resolve_token
from wp_vulncheck.ui.console import print_missing_token, print_warning

logger = setup_logger(__name__)


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='WP VulnCheck - check WordPress core and active plugins against the WPVulnDB API'
    )
    parser.add_argument('-t', dest='short_token', metavar='TOKEN',
                        help='API token (takes precedence over --token)')
    parser.add_argument('--token', dest='long_token', metavar='TOKEN',
                        help='API token')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Show the calls made to the vulnerability database')
    return parser.parse_args(argv)


def check_core(client: VulnDbClient, inventory: WpCli, report: VulnerabilityReport) -> VulnResponse:
    """Look up the installed WordPress version."""
    try:
        version = inventory.core_version()
    except InventoryError as e:
        logger.error(f"Could not read the WordPress version: {e}")
        response = VulnResponse(item=CORE_ITEM_NAME, version="?", error=str(e))
        return response.report(report)
    return client.request("core", version).report(report)


def check_plugins(client: VulnDbClient, inventory: WpCli, report: VulnerabilityReport) -> List[VulnResponse]:
    """Look up every active plugin."""
    try:
        plugins = inventory.active_plugins()
    except InventoryError as e:
        logger.error(f"Could not list active plugins: {e}")
        print_warning(f"Plugin list unavailable: {e}")
        return []

    for line in inventory.skipped_lines:
        print_warning(f"Skipped malformed plugin line: {line}")

    return [
        client.request("plugins", name, version).report(report)
        for name, version in plugins
    ]


def run_check(client: VulnDbClient, inventory: WpCli, report: VulnerabilityReport) -> int:
    """Check core and plugins, print the report and return the exit code."""
    check_core(client, inventory, report)
    check_plugins(client, inventory, report)
    report.print_report()
    return report.exit_code()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = get_args(argv)
    if args.debug:
        enable_debug()

    try:
        token = resolve_token(args.short_token, args.long_token)
    except MissingTokenError as e:
        logger.debug(str(e))
        print_missing_token(e.sources)
        return EXIT_NO_TOKEN

    report = VulnerabilityReport()
    try:
        with VulnDbClient(token) as client:
            return run_check(client, WpCli(), report)
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}[!] Interrupted.{Colors.RESET}", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
