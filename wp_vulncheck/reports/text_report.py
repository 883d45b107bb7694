"""
WP-VulnCheck Text Report

Tallies classifications per item and renders the fixed-width summary table
and the tab separated vulnerability listing.
"""

from typing import Dict, List, Sequence, Union

from wp_vulncheck.config import COLUMN_WIDTH, COLUMN_WIDTH_FIRST, MAX_EXIT_CODE
from wp_vulncheck.models import Classification, Vulnerability, VulnResponse

HEADER = ("Name", "Unknown", "Out of Date", "Vulnerabilities")
COLUMN_ORDER = (Classification.UNKNOWN, Classification.OUT_OF_DATE, Classification.VULNERABLE)
DETAIL_HEADER = "Item\tType\tTitle\tUrl\tFixed in"


def format_column(value: Union[str, int], width: int = COLUMN_WIDTH, left: bool = False) -> str:
    """Cut ``value`` to ``width - 1`` characters and pad it to ``width``."""
    text = str(value)[:width - 1]
    return text.ljust(width) if left else text.rjust(width)


def format_row(values: Sequence[Union[str, int]]) -> str:
    first, rest = values[0], values[1:]
    cells = [format_column(first, COLUMN_WIDTH_FIRST, left=True)]
    cells.extend(format_column(value) for value in rest)
    return "".join(cells)


def table_width(columns: int = len(HEADER)) -> int:
    return COLUMN_WIDTH_FIRST + (columns - 1) * COLUMN_WIDTH


class VulnerabilityReport:
    """Per-run tally of unknown, out of date and vulnerable items."""

    def __init__(self):
        self._items: Dict[str, Dict[Classification, int]] = {}
        self._totals: Dict[Classification, int] = {c: 0 for c in Classification}
        self._details: Dict[str, Dict[Union[int, str], Vulnerability]] = {}

    def mark(self, key: str, marker: Classification) -> None:
        counts = self._items.setdefault(key, {})
        counts[marker] = counts.get(marker, 0) + 1

    def _mark_response(self, response: VulnResponse, marker: Classification) -> None:
        self.mark(response.key, marker)
        self._totals[marker] += 1

    def mark_unknown(self, response: VulnResponse) -> None:
        self._mark_response(response, Classification.UNKNOWN)

    def mark_out_of_date(self, response: VulnResponse) -> None:
        self._mark_response(response, Classification.OUT_OF_DATE)

    def mark_vulnerable(self, response: VulnResponse) -> None:
        self._mark_response(response, Classification.VULNERABLE)

    def add_vulnerability(self, response: VulnResponse, vulnerability: Vulnerability) -> None:
        """Count the item as vulnerable and keep the record, one per id."""
        self.mark_vulnerable(response)
        self._details.setdefault(response.key, {})[vulnerability.id] = vulnerability

    def items(self) -> Dict[str, Dict[Classification, int]]:
        return {key: dict(counts) for key, counts in self._items.items()}

    def totals(self) -> Dict[Classification, int]:
        return dict(self._totals)

    def details(self) -> Dict[str, List[Vulnerability]]:
        return {key: list(vulns.values()) for key, vulns in self._details.items()}

    def vulnerable_count(self) -> int:
        return self._totals[Classification.VULNERABLE]

    def exit_code(self) -> int:
        return min(self.vulnerable_count(), MAX_EXIT_CODE)

    def render_table(self) -> List[str]:
        if not self._items:
            return []

        lines = [format_row(HEADER), "=" * table_width()]
        for key, counts in self._items.items():
            lines.append(format_row([key] + [counts.get(c) or "." for c in COLUMN_ORDER]))
        lines.append("-" * table_width())
        lines.append(format_row(["Total"] + [self._totals[c] for c in COLUMN_ORDER]))
        return lines

    def render_details(self) -> List[str]:
        if not self.vulnerable_count():
            return []

        lines = ["", "", "Vulnerability Report:", DETAIL_HEADER]
        for key, vulns in self._details.items():
            for v in vulns.values():
                lines.append("\t".join([key, v.vuln_type, v.title, v.reference_url, v.fixed_in]))
        return lines

    def print_report(self) -> None:
        for line in self.render_table() + self.render_details():
            print(line)
