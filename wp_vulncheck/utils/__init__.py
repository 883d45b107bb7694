"""WP-VulnCheck Utilities"""

from wp_vulncheck.utils.version_utils import compare_versions, version_lt

__all__ = ["compare_versions", "version_lt"]
