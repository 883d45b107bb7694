"""
WP-VulnCheck Settings

API token discovery. Sources are tried in order and the first one that
yields a token wins:

1. ``-t`` on the command line
2. ``--token`` on the command line
3. the ``WPVULNDB_TOKEN`` environment variable
4. ``token`` in ``./.wpvulndb.ini``
5. ``token`` in ``~/.wpvulndb.ini``
"""

import configparser
import os
from pathlib import Path
from typing import List, Mapping, Optional

from wp_vulncheck.config import SETTINGS_FILE, SETTINGS_TOKEN_KEY, TOKEN_ENV_VAR
from wp_vulncheck.logger import setup_logger

logger = setup_logger(__name__)

# Section name used for settings files written without a header
_DEFAULT_SECTION = "wpvulndb"


class MissingTokenError(RuntimeError):
    """No API token could be resolved from any source."""

    def __init__(self, sources: List[str]):
        self.sources = sources
        super().__init__("No API token found; tried: " + ", ".join(sources))


def settings_paths(cwd: Optional[Path] = None, home: Optional[Path] = None) -> List[Path]:
    """Settings files in lookup order: working directory first, then home."""
    cwd = cwd if cwd is not None else Path.cwd()
    home = home if home is not None else Path.home()
    return [cwd / SETTINGS_FILE, home / SETTINGS_FILE]


def read_settings_token(path: Path) -> Optional[str]:
    """Read the token key from an INI settings file, with or without sections."""
    if not path.is_file() or not os.access(path, os.R_OK):
        return None

    logger.debug(f"Reading settings from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return None

    if not text.lstrip().startswith("["):
        text = f"[{_DEFAULT_SECTION}]\n{text}"

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(text, source=str(path))
    except configparser.Error as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return None

    values = [parser.defaults().get(SETTINGS_TOKEN_KEY, "")]
    values.extend(parser.get(section, SETTINGS_TOKEN_KEY, fallback="") for section in parser.sections())
    for value in values:
        value = value.strip().strip('"').strip("'")
        if value:
            return value
    return None


def resolve_token(
    short_flag: Optional[str] = None,
    long_flag: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    paths: Optional[List[Path]] = None,
) -> str:
    """Return the first token found, or raise MissingTokenError listing every source."""
    environ = environ if environ is not None else os.environ
    paths = paths if paths is not None else settings_paths()

    for candidate in (short_flag, long_flag, environ.get(TOKEN_ENV_VAR)):
        if candidate:
            return candidate

    for path in paths:
        token = read_settings_token(path)
        if token:
            return token

    sources = [
        "command line option -t <token>",
        "command line option --token <token>",
        f"environment variable {TOKEN_ENV_VAR}",
    ]
    sources.extend(f"'{SETTINGS_TOKEN_KEY}' setting in {path}" for path in paths)
    raise MissingTokenError(sources)
