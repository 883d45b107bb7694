"""
WP-VulnCheck Configuration and Constants

All global constants and color definitions.
"""

from typing import List

# --- VULNERABILITY DATABASE API ---
API_BASE_URL = "https://wpvulndb.com/api/v3"
USER_AGENT = "WP-VulnCheck/1.0"
# Request timeout in seconds
DEFAULT_REQUEST_TIMEOUT = 30

# --- CREDENTIALS ---
TOKEN_ENV_VAR = "WPVULNDB_TOKEN"
SETTINGS_FILE = ".wpvulndb.ini"
SETTINGS_TOKEN_KEY = "token"

# --- INVENTORY ---
WP_CLI_COMMAND: List[str] = ["./wp-cli.phar"]
# Category names that refer to WordPress core itself
CORE_TYPES = ("core", "wordpress", "wordpresses")
CORE_API_PATH = "wordpresses"
CORE_ITEM_NAME = "wordpress"

# --- REPORT LAYOUT ---
COLUMN_WIDTH = 14
COLUMN_WIDTH_FIRST = 36

# --- EXIT CODES ---
# Vulnerable counts are capped below the sentinel so they never wrap at 256
MAX_EXIT_CODE = 254
EXIT_NO_TOKEN = 255
EXIT_INTERRUPTED = 130


class Colors:
    """ANSI color codes for terminal output."""
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    CYAN = '\033[96m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    GRAY = '\033[90m'
