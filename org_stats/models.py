from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CachedSummary:
    """Inventory entry read from the leaderboard snapshot."""

    name: str
    stars: int
    forks: int


@dataclass(frozen=True, slots=True)
class LiveSummary:
    """Inventory entry from the organization repository listing."""

    name: str
    stars: int
    forks: int
    watchers: int
    open_issues: int
    size_kb: int
    license: Optional[str] = None


RepositorySummary = Union[CachedSummary, LiveSummary]


@dataclass(frozen=True, slots=True)
class RepositoryDetail:
    subscribers: int
    size_kb: int
    license: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "Outcome[T]":
        return cls(error=error)


@dataclass(frozen=True, slots=True)
class IssueCounts:
    open: int
    closed: int
    drafts: int = 0


@dataclass(frozen=True, slots=True)
class PullRequestCounts:
    open: int
    merged: int
    closed: int
    drafts: int


@dataclass(frozen=True, slots=True)
class OrgStatistics:
    org: str
    total_repos: int
    total_stars: int
    total_forks: int
    total_watchers: int
    total_releases: int
    total_size_gb: str
    preferred_license: Optional[str]
    issues: IssueCounts
    pull_requests: PullRequestCounts
    total_packages: Optional[int] = None
    sponsors: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalRepos": self.total_repos,
            "totalStars": self.total_stars,
            "totalForks": self.total_forks,
            "totalWatchers": self.total_watchers,
            "totalReleases": self.total_releases,
            "totalPackages": self.total_packages,
            "totalSizeGB": self.total_size_gb,
            "preferredLicense": self.preferred_license,
            "sponsors": self.sponsors,
            "issues": {
                "open": self.issues.open,
                "closed": self.issues.closed,
                "drafts": self.issues.drafts,
            },
            "pullRequests": {
                "open": self.pull_requests.open,
                "merged": self.pull_requests.merged,
                "closed": self.pull_requests.closed,
                "drafts": self.pull_requests.drafts,
            },
        }
