from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .aggregator import collect_org_stats
from .config import AppConfig, MissingCredentialError, load_config, resolve_token
from .github_api import GitHubSession, RateLimiter
from .report import write_report, write_stats_json

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="org-stats",
        description="Render GitHub organization statistics as an SVG card.",
    )
    parser.add_argument("--config", type=Path, help="Path to settings YAML file", default=None)
    parser.add_argument("--org", help="GitHub organization to aggregate")
    parser.add_argument("--output", type=Path, help="Where to write the SVG card")
    parser.add_argument("--snapshot", type=Path, help="Leaderboard snapshot used as the repository list")
    parser.add_argument("--no-snapshot", dest="use_snapshot", action="store_false", help="Always list repositories via the API")
    parser.add_argument("--stats-json", dest="stats_json", type=Path, help="Also write the statistics record as JSON")
    parser.add_argument("--calls-per-second", dest="calls_per_second", type=float, help="Request rate; 0 disables the pause")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(use_snapshot=None)
    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.org:
        config.github.org = args.org
    if args.calls_per_second is not None:
        config.github.calls_per_second = args.calls_per_second
    if args.output:
        config.paths.svg = args.output
    if args.snapshot:
        config.paths.snapshot = args.snapshot
    if args.use_snapshot is not None:
        config.paths.use_snapshot = args.use_snapshot
    if args.stats_json:
        config.paths.stats_json = args.stats_json
    return config


def run(config: AppConfig, token: str) -> Path:
    session = GitHubSession.create(
        token,
        limiter=RateLimiter(config.github.calls_per_second),
        api_root=config.github.api_root,
        timeout=config.github.timeout,
    )
    try:
        stats = collect_org_stats(session, config)
    finally:
        session.close()

    svg_path = write_report(stats, config.paths.svg)
    logger.info("Generated %s", svg_path)
    if config.paths.stats_json:
        json_path = write_stats_json(stats, config.paths.stats_json)
        logger.info("Wrote %s", json_path)
    return svg_path


def app(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _apply_overrides(load_config(args.config), args)
    try:
        token = resolve_token(config)
        run(config, token)
    except MissingCredentialError as exc:
        logger.error("Failed to generate GitHub stats: %s", exc)
        raise SystemExit(1) from exc
    except Exception as exc:  # pragma: no cover
        logger.exception("Failed to generate GitHub stats")
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover
    app(sys.argv[1:])
