from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
from urllib.parse import quote

import requests

API_ROOT = "https://api.github.com"
PAGE_SIZE = 100
_USER_AGENT = "org-stats/0.1"
_ERROR_BODY_LIMIT = 100

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """A GitHub API call answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body[:_ERROR_BODY_LIMIT]
        super().__init__(f"GitHub API {status_code}: {self.body}")


# Everything a single call can fail with; callers degrade on these.
FETCH_ERRORS = (UpstreamError, requests.RequestException, ValueError)


@dataclass(slots=True)
class RateLimiter:
    """Fixed pause after every successful call, independent of quota headers."""

    calls_per_second: float = 5.0
    sleep: Callable[[float], None] = time.sleep

    @property
    def interval(self) -> float:
        if self.calls_per_second <= 0:
            return 0.0
        return 1.0 / self.calls_per_second

    def pause(self) -> None:
        if self.interval > 0:
            self.sleep(self.interval)


@dataclass(slots=True)
class GitHubSession:
    http: requests.Session
    limiter: RateLimiter = field(default_factory=RateLimiter)
    api_root: str = API_ROOT
    timeout: float = 30.0

    @classmethod
    def create(
        cls,
        token: str,
        *,
        limiter: Optional[RateLimiter] = None,
        api_root: str = API_ROOT,
        timeout: float = 30.0,
    ) -> "GitHubSession":
        session = requests.Session()
        session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "User-Agent": _USER_AGENT,
            }
        )
        return cls(http=session, limiter=limiter or RateLimiter(), api_root=api_root.rstrip("/"), timeout=timeout)

    def close(self) -> None:
        self.http.close()


def fetch_json(session: GitHubSession, url: str) -> Any:
    response = session.http.get(url, timeout=session.timeout)
    if not response.ok:
        raise UpstreamError(response.status_code, response.text)
    session.limiter.pause()
    return response.json()


def with_page(url: str, page: int, per_page: int = PAGE_SIZE) -> str:
    join = "&" if "?" in url else "?"
    return f"{url}{join}per_page={per_page}&page={page}"


@dataclass(slots=True)
class PageResult:
    items: List[Any] = field(default_factory=list)
    failed_page: Optional[int] = None
    error: Optional[str] = None


def collect_pages(session: GitHubSession, url: str, per_page: int = PAGE_SIZE) -> PageResult:
    """Collect every item of a paginated list endpoint.

    Stops at the first short page, at a body that is not a list, or at the
    first failed call. A failure is logged and recorded on the result along
    with whatever earlier pages returned, so callers always get best-effort
    data.
    """
    result = PageResult()
    page = 1
    while True:
        try:
            data = fetch_json(session, with_page(url, page, per_page))
        except FETCH_ERRORS as error:
            logger.warning("Failed to fetch page %d of %s: %s", page, url, error)
            result.failed_page = page
            result.error = str(error)
            break
        if not isinstance(data, list):
            break
        result.items.extend(data)
        if len(data) < per_page:
            break
        page += 1
    return result


def fetch_all_pages(session: GitHubSession, url: str, per_page: int = PAGE_SIZE) -> List[Any]:
    return collect_pages(session, url, per_page).items


def fetch_search_count(session: GitHubSession, query: str) -> int:
    url = f"{session.api_root}/search/issues?q={quote(query, safe='')}&per_page=1"
    try:
        data = fetch_json(session, url)
        return int(data.get("total_count") or 0) if isinstance(data, dict) else 0
    except (*FETCH_ERRORS, TypeError) as error:
        logger.warning("Failed search query '%s': %s", query, error)
        return 0


def list_org_repos(session: GitHubSession, org: str) -> List[dict]:
    return fetch_all_pages(session, f"{session.api_root}/orgs/{org}/repos")


def get_repo(session: GitHubSession, org: str, repo: str) -> dict:
    return fetch_json(session, f"{session.api_root}/repos/{org}/{repo}")


def list_repo_releases(session: GitHubSession, org: str, repo: str) -> PageResult:
    return collect_pages(session, f"{session.api_root}/repos/{org}/{repo}/releases")
