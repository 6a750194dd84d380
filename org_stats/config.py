from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml


DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


class MissingCredentialError(RuntimeError):
    """Raised when no GitHub token is available at start-up."""


@dataclass(slots=True)
class GitHubConfig:
    org: str = "CircuitVerse"
    api_root: str = "https://api.github.com"
    token_env: str = "GITHUB_TOKEN"
    calls_per_second: float = 5.0
    timeout: float = 30.0


@dataclass(slots=True)
class PathsConfig:
    snapshot: Path = Path("public/leaderboard/overview.json")
    use_snapshot: bool = True
    svg: Path = Path("public/github-stats.svg")
    stats_json: Optional[Path] = None


@dataclass(slots=True)
class AppConfig:
    github: GitHubConfig = field(default_factory=GitHubConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)


def load_config(path: Optional[Path] = None) -> AppConfig:
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return AppConfig()

    with config_path.open("r", encoding="utf-8") as handle:
        raw: Dict[str, Any] = yaml.safe_load(handle) or {}

    github_raw = raw.get("github", {})
    paths_raw = raw.get("paths", {})
    stats_json = paths_raw.get("stats_json")

    return AppConfig(
        github=GitHubConfig(
            org=str(github_raw.get("org", "CircuitVerse")),
            api_root=str(github_raw.get("api_root", "https://api.github.com")).rstrip("/"),
            token_env=str(github_raw.get("token_env", "GITHUB_TOKEN")),
            calls_per_second=float(github_raw.get("calls_per_second", 5.0)),
            timeout=float(github_raw.get("timeout", 30.0)),
        ),
        paths=PathsConfig(
            snapshot=Path(paths_raw.get("snapshot", "public/leaderboard/overview.json")),
            use_snapshot=bool(paths_raw.get("use_snapshot", True)),
            svg=Path(paths_raw.get("svg", "public/github-stats.svg")),
            stats_json=Path(stats_json) if stats_json else None,
        ),
    )


def resolve_token(config: AppConfig, environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    token = (env.get(config.github.token_env) or "").strip()
    if not token:
        raise MissingCredentialError(f"{config.github.token_env} is required")
    return token
