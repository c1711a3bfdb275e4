# grass_fireworks/utils/http.py
import time
from typing import Any, Dict, Optional

import requests

DEFAULT_TIMEOUT = 10.0
RETRY_STATUSES = frozenset({429, 500, 502, 503, 504})


def make_session() -> requests.Session:
    s = requests.Session()
    # timeouts are per call; requests has no session-wide timeout
    return s


def graphql_headers(token: Optional[str], user_agent: str) -> Dict[str, str]:
    headers = {"Content-Type": "application/json", "User-Agent": user_agent}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def post_graphql(
    session: requests.Session,
    url: str,
    query: str,
    variables: Dict[str, Any],
    *,
    token: Optional[str] = None,
    user_agent: str = "grass-fireworks",
    timeout: float = DEFAULT_TIMEOUT,
    retries: int = 0,
    backoff_sec: float = 0.5,
) -> Dict[str, Any]:
    """POST one GraphQL document and return the decoded response body.

    ``retries=0`` makes a single timeout-bounded attempt. Rate limiting and
    gateway errors are retried with exponential backoff; the last failure
    propagates as a ``requests`` exception (``HTTPError`` carries the
    response). A body that is not JSON raises ``ValueError``.

    GraphQL-level ``errors`` arrive with status 200 and are left to the caller.
    """
    body = {"query": query, "variables": variables}
    headers = graphql_headers(token, user_agent)
    attempt = 0
    while True:
        try:
            resp = session.request("POST", url, json=body, headers=headers, timeout=timeout)
            if resp.status_code not in RETRY_STATUSES or attempt >= retries:
                resp.raise_for_status()
                return resp.json() if resp.content else {}
        except (requests.Timeout, requests.ConnectionError):
            if attempt >= retries:
                raise
        time.sleep(backoff_sec * (2**attempt))
        attempt += 1
