"""
WP-VulnCheck: WordPress Core & Plugin Vulnerability Checker

Reports known vulnerabilities in an installation's WordPress core and active plugins.
"""

__version__ = "1.0.0"

from wp_vulncheck.models import Classification, Vulnerability, VulnResponse
from wp_vulncheck.reports.text_report import VulnerabilityReport
from wp_vulncheck.utils.version_utils import compare_versions

__all__ = [
    "Classification",
    "Vulnerability",
    "VulnResponse",
    "VulnerabilityReport",
    "compare_versions",
]
