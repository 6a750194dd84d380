from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import List, Sequence, Tuple
from xml.sax.saxutils import escape

from .icons import ICONS
from .models import OrgStatistics

WIDTH = 600
HEIGHT = 340
BAR_WIDTH = 180
BAR_HEIGHT = 10

GREEN = "#22c55e"
PURPLE = "#a855f7"
RED = "#ef4444"
NEUTRAL = "#3f3f46"

_FONT = "'Segoe UI', Ubuntu, Sans-Serif"
_STYLES = (
    f".title {{ font: bold 18px {_FONT}; fill: #ffffff; }}",
    f".repo-count {{ font: 500 15px {_FONT}; fill: #58a6ff; }}",
    f".stat-label {{ font: 500 13px {_FONT}; fill: #c9d1d9; }}",
    f".section-title {{ font: 500 14px {_FONT}; fill: #58a6ff; }}",
    f".sub-label-center {{ font: 12px {_FONT}; fill: #8b949e; text-anchor: middle; }}",
    f".legend-text {{ font: 11px {_FONT}; fill: #8b949e; }}",
)


def format_number(value: int) -> str:
    if value < 1000:
        return str(value)
    thousands = (Decimal(value) / 1000).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    text = str(thousands)
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}k"


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def segment_widths(values: Sequence[Tuple[int, str]], width: float) -> List[Tuple[float, float, str]]:
    """Lay out ``(value, color)`` pairs left to right as ``(x, width, color)``.

    Zero-width segments are skipped. An all-zero input yields an empty list.
    """
    total = sum(value for value, _ in values)
    if total == 0:
        return []
    segments: List[Tuple[float, float, str]] = []
    x = 0.0
    for value, color in values:
        segment = value / total * width
        if segment > 0:
            segments.append((x, segment, color))
            x += segment
    return segments


def progress_bar(values: Sequence[Tuple[int, str]], width: float, height: float, clip_id: str) -> str:
    segments = segment_widths(values, width)
    if not segments:
        return f'<rect x="0" y="0" width="{_num(width)}" height="{_num(height)}" rx="4" fill="{NEUTRAL}"/>'
    rects = "\n        ".join(
        f'<rect x="{_num(x)}" y="0" width="{_num(w)}" height="{_num(height)}" fill="{color}"/>'
        for x, w, color in segments
    )
    return "\n".join(
        [
            "<g>",
            f'      <clipPath id="{clip_id}">',
            f'        <rect x="0" y="0" width="{_num(width)}" height="{_num(height)}" rx="4"/>',
            "      </clipPath>",
            f'      <g clip-path="url(#{clip_id})">',
            f"        {rects}",
            "      </g>",
            "    </g>",
        ]
    )


def _icon(name: str, x: int = 0, y: int = 0) -> str:
    return f'<g transform="translate({x}, {y - 10})">{ICONS[name]}</g>'


def _stat_row(icon: str, y: int, label: str) -> List[str]:
    y_attr = f' y="{y}"' if y else ""
    return [
        f"      {_icon(icon, 0, y)}",
        f'      <text x="22"{y_attr} class="stat-label">{label}</text>',
    ]


def render_svg(stats: OrgStatistics) -> str:
    issues_bar = progress_bar(
        [(stats.issues.open, GREEN), (stats.issues.closed, PURPLE)],
        BAR_WIDTH,
        BAR_HEIGHT,
        "issuesClip",
    )
    prs_bar = progress_bar(
        [
            (stats.pull_requests.open, GREEN),
            (stats.pull_requests.merged, PURPLE),
            (stats.pull_requests.closed, RED),
        ],
        BAR_WIDTH,
        BAR_HEIGHT,
        "prsClip",
    )
    packages = "N/A" if stats.total_packages is None else str(stats.total_packages)
    sponsors = "N/A" if stats.sponsors is None else str(stats.sponsors)

    lines: List[str] = []
    lines.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}" viewBox="0 0 {WIDTH} {HEIGHT}">')
    lines.append("  <defs>")
    lines.append("    <style>")
    lines.extend(f"      {rule}" for rule in _STYLES)
    lines.append("    </style>")
    lines.append("  </defs>")
    lines.append(f'  <rect width="{WIDTH}" height="{HEIGHT}" fill="#0d1117" rx="6"/>')
    lines.append(
        f'  <rect x="20" y="50" width="{WIDTH - 40}" height="{HEIGHT - 70}" fill="none" stroke="#1f6feb" stroke-width="1" rx="6"/>'
    )
    lines.append('  <text x="20" y="32" class="title">GitHub Stats</text>')

    lines.append('  <g transform="translate(35, 75)">')
    lines.append(f"    {_icon('repo')}")
    lines.append(f'    <text x="22" class="repo-count">{stats.total_repos} Repositories</text>')
    lines.append("  </g>")

    lines.append('  <g transform="translate(35, 100)">')
    lines.append("    <g>")
    license_label = escape(stats.preferred_license or "Various")
    lines.extend(_stat_row("license", 0, f"Prefers {license_label} license"))
    lines.extend(_stat_row("release", 24, f"{stats.total_releases} Releases"))
    lines.extend(_stat_row("package", 48, f"{packages} Packages"))
    lines.extend(_stat_row("storage", 72, f"{stats.total_size_gb} GB used"))
    lines.append("    </g>")
    lines.append('    <g transform="translate(280, 0)">')
    lines.extend(_stat_row("heart", 0, f"{sponsors} Sponsors"))
    lines.extend(_stat_row("star", 24, f"{format_number(stats.total_stars)} Stargazers"))
    lines.extend(_stat_row("fork", 48, f"{format_number(stats.total_forks)} Forkers"))
    lines.extend(_stat_row("eye", 72, f"{format_number(stats.total_watchers)} Watchers"))
    lines.append("    </g>")
    lines.append("  </g>")

    lines.append('  <g transform="translate(35, 200)">')
    lines.append(f"    {_icon('trend')}")
    lines.append('    <text x="22" class="section-title">Overall issues and pull requests status</text>')
    subtitle = f"On {escape(stats.org)}'s repositories"
    lines.append(f'    <text x="{_num((WIDTH - 70) / 2)}" y="20" class="sub-label-center">{subtitle}</text>')
    lines.append('    <text x="70" y="48" class="stat-label">Issues</text>')
    lines.append('    <text x="350" y="48" class="stat-label">Pull requests</text>')
    lines.append('    <g transform="translate(0, 58)">')
    lines.append(f"    {issues_bar}")
    lines.append("    </g>")
    lines.append('    <g transform="translate(280, 58)">')
    lines.append(f"    {prs_bar}")
    lines.append("    </g>")
    lines.extend(
        _legend(
            (0, 82),
            ("issue_open", f"{format_number(stats.issues.open)} open"),
            ("issue_closed", f"{format_number(stats.issues.closed)} closed"),
            offset=100,
        )
    )
    lines.extend(
        _legend(
            (280, 82),
            ("pr_open", f"{format_number(stats.pull_requests.open)} open"),
            ("pr_merged", f"{format_number(stats.pull_requests.merged)} merged"),
        )
    )
    lines.extend(
        _legend(
            (280, 100),
            ("pr_draft", f"{format_number(stats.pull_requests.drafts)} drafts"),
            ("pr_closed", f"{format_number(stats.pull_requests.closed)} closed"),
        )
    )
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines)


def _legend(origin: Tuple[int, int], first: Tuple[str, str], second: Tuple[str, str], offset: int = 90) -> List[str]:
    x, y = origin
    return [
        f'    <g transform="translate({x}, {y})">',
        f"      {ICONS[first[0]]}",
        f'      <text x="18" y="10" class="legend-text">{first[1]}</text>',
        f'      <g transform="translate({offset}, 0)">{ICONS[second[0]]}</g>',
        f'      <text x="{offset + 18}" y="10" class="legend-text">{second[1]}</text>',
        "    </g>",
    ]


def write_report(stats: OrgStatistics, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_svg(stats), encoding="utf-8")
    return path


def write_stats_json(stats: OrgStatistics, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(stats.to_dict(), indent=2) + "\n", encoding="utf-8")
    return path
