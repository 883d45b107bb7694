"""WP-VulnCheck Reports"""

from wp_vulncheck.reports.text_report import VulnerabilityReport, format_column, format_row

__all__ = ["VulnerabilityReport", "format_column", "format_row"]
