"""
WP-VulnCheck wp-cli Inventory

Reads the installed WordPress version and the active plugins through wp-cli.
"""

import re
import subprocess
from typing import List, Optional, Sequence, Tuple

from wp_vulncheck.config import WP_CLI_COMMAND
from wp_vulncheck.logger import setup_logger

logger = setup_logger(__name__)

PLUGIN_LINE_RE = re.compile(r"^(\S+)\s+(\S+)$")
PLUGIN_LIST_HEADER = ("name", "version")


class InventoryError(RuntimeError):
    """wp-cli could not be run or reported a failure."""


def parse_plugin_list(output: str, skipped: Optional[List[str]] = None) -> List[Tuple[str, str]]:
    """
    Parse ``wp plugin list --fields=name,version`` output into (slug, version) pairs.

    Lines that are not exactly two whitespace separated tokens are skipped
    with a warning and appended to ``skipped`` when given.
    """
    plugins: List[Tuple[str, str]] = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        match = PLUGIN_LINE_RE.match(line)
        if not match:
            logger.debug(f"Skipping malformed plugin line: {line!r}")
            if skipped is not None:
                skipped.append(line)
            continue
        if match.groups() == PLUGIN_LIST_HEADER:
            continue
        plugins.append((match.group(1), match.group(2)))
    return plugins


class WpCli:
    """Thin wrapper around the wp-cli executable."""

    def __init__(self, command: Optional[Sequence[str]] = None, path: Optional[str] = None):
        self.command = list(command) if command else list(WP_CLI_COMMAND)
        self.path = path
        self.skipped_lines: List[str] = []

    def _run(self, *args: str) -> str:
        cmd = self.command + list(args)
        if self.path:
            cmd.append(f"--path={self.path}")
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except (OSError, subprocess.SubprocessError) as e:
            raise InventoryError(f"Could not run {cmd[0]}: {e}") from e
        if result.returncode != 0:
            message = (result.stderr or result.stdout or "").strip()
            raise InventoryError(f"{' '.join(cmd)} exited with {result.returncode}: {message}")
        return result.stdout

    def core_version(self) -> str:
        """Installed WordPress version."""
        return self._run("core", "version").strip()

    def active_plugins(self) -> List[Tuple[str, str]]:
        """(slug, version) for every active plugin."""
        output = self._run("plugin", "list", "--status=active", "--fields=name,version")
        return parse_plugin_list(output, self.skipped_lines)
