#!/usr/bin/env python3
"""
WP-VulnCheck launcher.

Call with `--debug` to see the calls made to the vulnerability database.
"""

import sys

from wp_vulncheck.cli import main

if __name__ == "__main__":
    sys.exit(main())
