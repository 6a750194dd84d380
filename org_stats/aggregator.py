from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import AppConfig
from .github_api import (
    FETCH_ERRORS,
    GitHubSession,
    fetch_search_count,
    get_repo,
    list_org_repos,
    list_repo_releases,
)
from .models import (
    CachedSummary,
    IssueCounts,
    LiveSummary,
    OrgStatistics,
    Outcome,
    PullRequestCounts,
    RepositoryDetail,
    RepositorySummary,
)

logger = logging.getLogger(__name__)

ISSUE_QUERIES: Tuple[Tuple[str, str], ...] = (
    ("open", "is:issue is:open"),
    ("closed", "is:issue is:closed"),
)

PULL_REQUEST_QUERIES: Tuple[Tuple[str, str], ...] = (
    ("open", "is:pr is:open draft:false"),
    ("merged", "is:pr is:merged"),
    ("closed", "is:pr is:closed is:unmerged"),
    ("drafts", "is:pr draft:true"),
)


def load_snapshot(path: Path) -> Optional[List[CachedSummary]]:
    """Read ``{"repos": [{name, stars, forks}, ...]}``; ``None`` when unusable."""
    if not path.exists():
        logger.info("Snapshot %s not found, falling back to API", path)
        return None
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return [
            CachedSummary(
                name=str(entry["name"]),
                stars=int(entry.get("stars") or 0),
                forks=int(entry.get("forks") or 0),
            )
            for entry in raw["repos"]
        ]
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as error:
        logger.info("Failed to read snapshot %s (%s), falling back to API", path, error)
        return None


def _license_id(payload: Dict[str, Any]) -> Optional[str]:
    license_info = payload.get("license")
    if isinstance(license_info, dict):
        return license_info.get("spdx_id") or None
    return None


def _live_summary(payload: Dict[str, Any]) -> LiveSummary:
    return LiveSummary(
        name=str(payload.get("name", "")),
        stars=int(payload.get("stargazers_count") or 0),
        forks=int(payload.get("forks_count") or 0),
        watchers=int(payload.get("watchers_count") or 0),
        open_issues=int(payload.get("open_issues_count") or 0),
        size_kb=int(payload.get("size") or 0),
        license=_license_id(payload),
    )


def _live_summaries(payloads: List[Any]) -> List[LiveSummary]:
    repos: List[LiveSummary] = []
    for payload in payloads:
        try:
            repos.append(_live_summary(payload))
        except (AttributeError, TypeError, ValueError) as error:
            logger.warning("Skipping malformed repository entry %r: %s", payload, error)
    return repos


def load_inventory(session: GitHubSession, config: AppConfig) -> List[RepositorySummary]:
    if config.paths.use_snapshot:
        cached = load_snapshot(config.paths.snapshot)
        if cached is not None:
            logger.info("Loaded %d repos from %s", len(cached), config.paths.snapshot)
            return list(cached)
    logger.info("Fetching repositories of %s from API", config.github.org)
    return list(_live_summaries(list_org_repos(session, config.github.org)))


def fetch_repo_detail(session: GitHubSession, org: str, name: str) -> Outcome[RepositoryDetail]:
    try:
        payload = get_repo(session, org, name)
        if not isinstance(payload, dict):
            return Outcome.failure(f"details for {name}: unexpected response")
        detail = RepositoryDetail(
            subscribers=int(payload.get("subscribers_count") or 0),
            size_kb=int(payload.get("size") or 0),
            license=_license_id(payload),
        )
    except (*FETCH_ERRORS, TypeError) as error:
        return Outcome.failure(f"details for {name}: {error}")
    return Outcome.success(detail)


def count_releases(session: GitHubSession, org: str, name: str) -> Outcome[int]:
    # A later page failing still counts the releases already listed.
    result = list_repo_releases(session, org, name)
    if result.failed_page == 1:
        return Outcome.failure(f"releases for {name}: {result.error}")
    return Outcome.success(len(result.items))


def resolve_preferred_license(tally: Counter) -> Optional[str]:
    # most_common keeps insertion order among equal counts.
    ranked = tally.most_common(1)
    return ranked[0][0] if ranked else None


def format_size_gb(size_kb: int) -> str:
    return f"{size_kb / 1024 / 1024:.2f}"


def _search_counts(session: GitHubSession, org: str, queries: Sequence[Tuple[str, str]]) -> Dict[str, int]:
    return {key: fetch_search_count(session, f"org:{org} {query}") for key, query in queries}


def collect_org_stats(session: GitHubSession, config: AppConfig) -> OrgStatistics:
    org = config.github.org
    logger.info("Fetching stats for %s", org)

    repos = load_inventory(session, config)
    total_stars = sum(repo.stars for repo in repos)
    total_forks = sum(repo.forks for repo in repos)

    logger.info("Fetching detailed repo stats (subscribers, releases, size, license)")
    total_watchers = 0
    total_releases = 0
    total_size_kb = 0
    licenses: Counter = Counter()
    failures: List[str] = []

    for repo in repos:
        detail = fetch_repo_detail(session, org, repo.name)
        if detail.ok and detail.value is not None:
            total_watchers += detail.value.subscribers
            total_size_kb += detail.value.size_kb
            if detail.value.license:
                licenses[detail.value.license] += 1
        else:
            logger.warning("Failed to fetch %s", detail.error)
            failures.append(f"detail:{repo.name}")

        releases = count_releases(session, org, repo.name)
        if releases.ok and releases.value is not None:
            total_releases += releases.value
        else:
            logger.warning("Failed to fetch %s", releases.error)
            failures.append(f"releases:{repo.name}")

    logger.info("Fetching issue and pull request counts")
    issues = _search_counts(session, org, ISSUE_QUERIES)
    pulls = _search_counts(session, org, PULL_REQUEST_QUERIES)

    stats = OrgStatistics(
        org=org,
        total_repos=len(repos),
        total_stars=total_stars,
        total_forks=total_forks,
        total_watchers=total_watchers,
        total_releases=total_releases,
        total_size_gb=format_size_gb(total_size_kb),
        preferred_license=resolve_preferred_license(licenses),
        issues=IssueCounts(open=issues["open"], closed=issues["closed"], drafts=0),
        pull_requests=PullRequestCounts(
            open=pulls["open"],
            merged=pulls["merged"],
            closed=pulls["closed"],
            drafts=pulls["drafts"],
        ),
    )
    _log_summary(stats, failures)
    return stats


def _log_summary(stats: OrgStatistics, failures: List[str]) -> None:
    logger.info("Repos: %d", stats.total_repos)
    logger.info("Stars: %d", stats.total_stars)
    logger.info("Forks: %d", stats.total_forks)
    logger.info("Releases: %d", stats.total_releases)
    logger.info("Size: %s GB", stats.total_size_gb)
    logger.info("Issues: %d open, %d closed", stats.issues.open, stats.issues.closed)
    logger.info(
        "PRs: %d open, %d merged, %d drafts",
        stats.pull_requests.open,
        stats.pull_requests.merged,
        stats.pull_requests.drafts,
    )
    if failures:
        logger.warning("%d repository calls failed: %s", len(failures), ", ".join(failures))
