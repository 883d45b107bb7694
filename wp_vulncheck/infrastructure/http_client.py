"""
HTTP Client Infrastructure
"""

import requests
from requests.adapters import HTTPAdapter

from wp_vulncheck.config import USER_AGENT


def create_session(token: str) -> requests.Session:
    """
    Create the requests session used for every API call in a run.

    The token is sent as ``Authorization: Token token=<token>``. Failed
    requests are reported to the caller, never retried.
    """
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=1, pool_maxsize=1, max_retries=0)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({
        "Authorization": f"Token token={token}",
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    })
    return session
