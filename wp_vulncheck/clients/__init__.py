"""WP-VulnCheck API Clients"""

from wp_vulncheck.clients.vulndb_client import VulnDbClient

__all__ = ["VulnDbClient"]
