"""
WP-VulnCheck Data Models

Dataclasses and enums shared by the client, the classifier and the report.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

from wp_vulncheck.utils.version_utils import version_lt
from wp_vulncheck.ui.console import print_status_line

if TYPE_CHECKING:
    from wp_vulncheck.reports.text_report import VulnerabilityReport


STATUS_INSECURE = "insecure"
STATUS_NOT_FOUND = "Not found"


class Classification(Enum):
    """Report column an item is counted under."""
    UNKNOWN = "unknown"
    OUT_OF_DATE = "out_of_date"
    VULNERABLE = "vulnerable"


@dataclass(frozen=True)
class Vulnerability:
    """A single vulnerability record from the database."""
    id: Union[int, str]
    title: str = ""
    vuln_type: str = ""
    fixed_in: str = ""
    reference_url: str = ""


@dataclass
class VulnResponse:
    """Outcome of querying the database for one item at one version."""
    item: str
    version: str
    status: Optional[str] = None
    latest_version: Optional[str] = None
    vulnerabilities: List[Vulnerability] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.item}@{self.version}"

    def __str__(self) -> str:
        return self.key

    def report(self, report: "VulnerabilityReport") -> "VulnResponse":
        """
        Classify this response and record the outcome on ``report``.

        An error marks the item unknown. Otherwise an "insecure" status marks
        it vulnerable and a newer latest version marks it out of date; either
        one enables the search through the vulnerability records, where every
        record fixed in a later version than the installed one is added to the
        report. "Not found" marks the item unknown.

        The status line is printed as soon as the response is classified.
        """
        feedback = ""
        if self.error:
            feedback = f"Error: {self.error}"
            report.mark_unknown(self)
        else:
            search = False
            if self.status is not None:
                feedback = f"Status: {self.status}"
                if self.status == STATUS_INSECURE:
                    report.mark_vulnerable(self)
                    search = True
                elif self.status == STATUS_NOT_FOUND:
                    report.mark_unknown(self)

            if self.latest_version is not None and version_lt(self.version, self.latest_version):
                report.mark_out_of_date(self)
                search = True

            if search:
                for vulnerability in self.vulnerabilities:
                    if version_lt(self.version, vulnerability.fixed_in):
                        report.add_vulnerability(self, vulnerability)

        if feedback:
            print_status_line(self.item, self.version, feedback)
        return self
