"""WP-VulnCheck Inventory Package"""

from wp_vulncheck.inventory.wp_cli import InventoryError, WpCli, parse_plugin_list

__all__ = ["InventoryError", "WpCli", "parse_plugin_list"]
