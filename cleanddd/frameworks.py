"""
Framework showcase: repository descriptions from the GitHub API.

Each framework entry gets one GET request per page load. When the request fails
or the response carries no description, the entry's hard-coded introduction is
used instead. No error ever reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

import requests

from cleanddd.model import Framework


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

GITHUB_API_URL = "https://api.github.com"
REQUEST_TIMEOUT = 10.0
USER_AGENT = "cleanddd-site"


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def repo_api_url(framework: Framework, api_url: str = GITHUB_API_URL) -> str:
    return f"{api_url.rstrip('/')}/repos/{framework.repo_path}"


def _get_json(url: str, session: Optional[Any], timeout: float) -> Any:
    http = session if session is not None else requests
    resp = http.get(
        url,
        headers={"Accept": "application/vnd.github+json", "User-Agent": USER_AGENT},
        timeout=timeout,
    )
    resp.raise_for_status()
    return resp.json()


def fetch_introduction(
    framework: Framework,
    session: Optional[Any] = None,
    timeout: float = REQUEST_TIMEOUT,
    api_url: str = GITHUB_API_URL,
) -> str:
    """
    Return the repository description of `framework`, or its fallback introduction.

    `session` may be a requests.Session (or anything with a compatible get()).
    """
    url = repo_api_url(framework, api_url)
    try:
        data = _get_json(url, session, timeout)
    except (requests.RequestException, ValueError) as e:
        # ValueError covers undecodable JSON bodies
        logger.warning("Error fetching %s info: %s", framework.name, e)
        return framework.fallback_introduction

    if not isinstance(data, dict):
        logger.warning("Unexpected response for %s: %r", framework.name, type(data).__name__)
        return framework.fallback_introduction

    description = data.get("description")
    if isinstance(description, str) and description.strip():
        return description.strip()

    logger.debug("No description for %s, using fallback", framework.name)
    return framework.fallback_introduction


def load_frameworks(
    frameworks: Sequence[Framework],
    offline: bool = False,
    session: Optional[Any] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> List[Tuple[Framework, str]]:
    """
    Pair every framework with its introduction text, in showcase order.
    """
    out: List[Tuple[Framework, str]] = []
    for fw in frameworks:
        if offline:
            out.append((fw, fw.fallback_introduction))
        else:
            out.append((fw, fetch_introduction(fw, session=session, timeout=timeout)))
    return out
