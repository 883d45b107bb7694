"""
Pydantic Models for the Vulnerability Database API
"""

from typing import List, Optional, Union
from pydantic import BaseModel

from wp_vulncheck.models import Vulnerability


class ReferencesPayload(BaseModel):
    url: Optional[List[Optional[str]]] = None


class VulnerabilityPayload(BaseModel):
    id: Union[int, str]
    title: Optional[str] = None
    vuln_type: Optional[str] = None
    fixed_in: Optional[str] = None
    references: Optional[ReferencesPayload] = None

    def to_vulnerability(self) -> Vulnerability:
        urls = [u for u in (self.references.url or []) if u] if self.references else []
        return Vulnerability(
            id=self.id,
            title=self.title or "",
            vuln_type=self.vuln_type or "",
            fixed_in=self.fixed_in or "",
            reference_url=urls[0] if urls else "",
        )


class ItemPayload(BaseModel):
    """Per-item data, nested under the item name in the API response."""
    status: Optional[str] = None
    latest_version: Optional[str] = None
    vulnerabilities: Optional[List[VulnerabilityPayload]] = None
