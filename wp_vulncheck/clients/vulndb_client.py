"""
WP-VulnCheck Vulnerability Database Client

Looks up WordPress core and plugin versions in the vulnerability database API.
"""

import json
from typing import Any, Optional

import requests
from pydantic import ValidationError

from wp_vulncheck.config import (
    API_BASE_URL, CORE_API_PATH, CORE_ITEM_NAME, CORE_TYPES, DEFAULT_REQUEST_TIMEOUT
)
from wp_vulncheck.infrastructure.http_client import create_session
from wp_vulncheck.logger import setup_logger
from wp_vulncheck.models import VulnResponse
from wp_vulncheck.schemas import ItemPayload

logger = setup_logger(__name__)


class VulnDbClient:
    """
    Vulnerability database API client.

    One session is shared by every request. Use as a context manager so the
    session is closed however the run ends.
    """

    def __init__(
        self,
        token: str,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else create_session(token)

    def __enter__(self) -> "VulnDbClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
            self.session = None

    def build_request(self, type_: str, item: str, version: str = ""):
        """
        Work out the API path, the API id and the response shell for a query.

        For WordPress core ``item`` holds the installed version: the id is that
        version without dots ("5.8.1" -> "581") and the response is labelled
        ``wordpress@5.8.1``.
        """
        type_ = type_.strip()
        item = item.strip()
        version = version.strip()

        if type_ in CORE_TYPES:
            api_id = item.replace(".", "")
            api_path = CORE_API_PATH
            response = VulnResponse(item=CORE_ITEM_NAME, version=item)
        else:
            api_id = item
            api_path = type_
            response = VulnResponse(item=item, version=version)

        url = f"{self.base_url}/{api_path}/{api_id}"
        return url, item, response

    def request(self, type_: str, item: str, version: str = "") -> VulnResponse:
        """Query the database for one item. Failures are recorded on the response."""
        url, lookup_key, response = self.build_request(type_, item, version)
        logger.debug(f"GET {url}")

        try:
            http_response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.error(f"Request for {response.key} failed: {e}")
            response.error = str(e)
            return response

        logger.debug(f"{url} -> HTTP {http_response.status_code}")
        self.load(response, lookup_key, http_response.text)
        return response

    def load(self, response: VulnResponse, lookup_key: str, body: str) -> VulnResponse:
        """Map an API response body onto ``response``."""
        try:
            data: Any = json.loads(body)
        except ValueError:
            data = None

        if not isinstance(data, dict):
            response.error = body
            return response

        if lookup_key in data:
            item_data = data[lookup_key]
            if not isinstance(item_data, dict):
                response.error = body
                return response
            try:
                payload = ItemPayload.model_validate(item_data)
            except ValidationError as e:
                logger.warning(f"Unexpected data for {response.key}: {e}")
                response.error = body
                return response

            response.status = payload.status
            response.latest_version = payload.latest_version
            response.vulnerabilities = [
                v.to_vulnerability() for v in (payload.vulnerabilities or [])
            ]
        elif data.get("error") is not None:
            # Either unauthorized or not found
            response.status = str(data["error"])
        else:
            response.error = body

        return response
