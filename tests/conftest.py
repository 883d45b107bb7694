"""Pytest configuration and fixtures."""

import json
from typing import Any, Dict, List, Optional, Tuple, Union

import pytest
import requests

from wp_vulncheck.clients.vulndb_client import VulnDbClient
from wp_vulncheck.reports.text_report import VulnerabilityReport


class FakeHttpResponse:
    def __init__(self, body: Union[str, Dict[str, Any]], status_code: int = 200):
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session, answering GETs from a url -> body map."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = routes or {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.closed = False

    def get(self, url: str, **kwargs) -> FakeHttpResponse:
        self.calls.append((url, kwargs))
        answer = self.routes.get(url, ({"error": "Not found"}, 404))
        if isinstance(answer, BaseException):
            raise answer
        if isinstance(answer, tuple):
            return FakeHttpResponse(*answer)
        return FakeHttpResponse(answer)

    def close(self) -> None:
        self.closed = True


class FakeInventory:
    def __init__(self, core: Union[str, Exception] = "5.8", plugins=None, skipped=None):
        self.core = core
        self.plugins = plugins if plugins is not None else []
        self.skipped_lines = skipped or []

    def core_version(self) -> str:
        if isinstance(self.core, Exception):
            raise self.core
        return self.core

    def active_plugins(self):
        if isinstance(self.plugins, Exception):
            raise self.plugins
        return self.plugins


API = "https://api.test/v3"


@pytest.fixture
def report() -> VulnerabilityReport:
    return VulnerabilityReport()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> VulnDbClient:
    return VulnDbClient("secret", base_url=API, session=session)


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("Connection refused")
