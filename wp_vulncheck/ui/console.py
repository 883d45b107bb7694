"""
WP-VulnCheck Console UI

Terminal output helpers. The report itself goes to stdout; diagnostics to stderr.
"""

import sys
from typing import Iterable

from wp_vulncheck.config import Colors


def print_status_line(item: str, version: str, feedback: str) -> None:
    """Print the one-line classification feedback for an item."""
    print(f"{item} @ {version}: {feedback}")


def print_missing_token(sources: Iterable[str]) -> None:
    """Explain every place a token could have come from."""
    lines = [
        f"{Colors.RED}[!] No api token could be found for access to the wpvulndb.{Colors.RESET}",
        "Please provide it in one of the following ways:",
    ]
    lines.extend(f"  - {source}" for source in sources)
    print("\n".join(lines), file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{Colors.YELLOW}[!] {message}{Colors.RESET}", file=sys.stderr)
