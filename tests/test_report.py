from __future__ import annotations

import json
import re
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path

from org_stats.models import IssueCounts, OrgStatistics, PullRequestCounts
from org_stats.report import (
    BAR_WIDTH,
    GREEN,
    NEUTRAL,
    PURPLE,
    RED,
    format_number,
    progress_bar,
    render_svg,
    segment_widths,
    write_report,
    write_stats_json,
)


def _stats(**overrides) -> OrgStatistics:
    base = OrgStatistics(
        org="acme",
        total_repos=2,
        total_stars=30,
        total_forks=3,
        total_watchers=8,
        total_releases=2,
        total_size_gb="0.00",
        preferred_license="MIT",
        issues=IssueCounts(open=4, closed=6),
        pull_requests=PullRequestCounts(open=1, merged=2, closed=0, drafts=1),
    )
    return replace(base, **overrides)


def _clip_widths(svg: str, clip_id: str) -> list[float]:
    block = svg.split(f'clip-path="url(#{clip_id})"', 1)[1].split("</g>", 1)[0]
    return [float(width) for width in re.findall(r'width="([0-9.e-]+)"', block)]


class FormatNumberTests(unittest.TestCase):
    def test_small_values_are_plain(self) -> None:
        for value in (0, 7, 999):
            self.assertEqual(format_number(value), str(value))

    def test_thousands(self) -> None:
        self.assertEqual(format_number(1000), "1k")
        self.assertEqual(format_number(1250), "1.3k")
        self.assertEqual(format_number(1150), "1.2k")
        self.assertEqual(format_number(1500), "1.5k")
        self.assertEqual(format_number(2000), "2k")
        self.assertEqual(format_number(999500), "999.5k")
        self.assertEqual(format_number(12345), "12.3k")


class ProgressBarTests(unittest.TestCase):
    def test_widths_sum_to_total_in_order(self) -> None:
        values = [(3, GREEN), (0, PURPLE), (5, RED), (1, NEUTRAL)]
        segments = segment_widths(values, 180)
        self.assertEqual([color for _, _, color in segments], [GREEN, RED, NEUTRAL])
        self.assertAlmostEqual(sum(width for _, width, _ in segments), 180)
        expected_x = 0.0
        for x, width, _ in segments:
            self.assertAlmostEqual(x, expected_x)
            expected_x += width

    def test_zero_total_is_single_neutral_bar(self) -> None:
        self.assertEqual(segment_widths([(0, GREEN), (0, PURPLE)], 180), [])
        bar = progress_bar([(0, GREEN), (0, PURPLE)], 180, 10, "issuesClip")
        self.assertEqual(bar, f'<rect x="0" y="0" width="180" height="10" rx="4" fill="{NEUTRAL}"/>')

    def test_clip_path_uses_given_id(self) -> None:
        bar = progress_bar([(1, GREEN), (1, RED)], 100, 8, "prsClip")
        self.assertIn('<clipPath id="prsClip">', bar)
        self.assertIn('<rect x="50" y="0" width="50" height="8" fill="#ef4444"/>', bar)


class RenderTests(unittest.TestCase):
    def test_header_and_grid(self) -> None:
        svg = render_svg(_stats(total_stars=1500, total_forks=2000, total_watchers=12))
        self.assertTrue(svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="600" height="340"'))
        self.assertIn("2 Repositories", svg)
        self.assertIn("Prefers MIT license", svg)
        self.assertIn("2 Releases", svg)
        self.assertIn("N/A Packages", svg)
        self.assertIn("0.00 GB used", svg)
        self.assertIn("N/A Sponsors", svg)
        self.assertIn("1.5k Stargazers", svg)
        self.assertIn("2k Forkers", svg)
        self.assertIn("12 Watchers", svg)
        self.assertIn("On acme's repositories", svg)

    def test_missing_license_falls_back(self) -> None:
        self.assertIn("Prefers Various license", render_svg(_stats(preferred_license=None)))

    def test_issue_bar_is_proportional(self) -> None:
        svg = render_svg(_stats())
        widths = _clip_widths(svg, "issuesClip")
        self.assertEqual(len(widths), 2)
        self.assertAlmostEqual(sum(widths), BAR_WIDTH)
        self.assertAlmostEqual(widths[0] / widths[1], 4 / 6)

    def test_pr_bar_skips_zero_segments(self) -> None:
        svg = render_svg(_stats())
        self.assertEqual(len(_clip_widths(svg, "prsClip")), 2)

    def test_legends(self) -> None:
        svg = render_svg(_stats())
        for text in ("4 open", "6 closed", "1 open", "2 merged", "1 drafts", "0 closed"):
            self.assertIn(text, svg)

    def test_output_is_deterministic_and_self_contained(self) -> None:
        first = render_svg(_stats())
        self.assertEqual(first, render_svg(_stats()))
        self.assertNotIn("href", first)
        self.assertNotIn("http://", first.replace("http://www.w3.org/2000/svg", ""))

    def test_text_is_escaped(self) -> None:
        svg = render_svg(_stats(org="a&b", preferred_license="<odd>"))
        self.assertIn("On a&amp;b's repositories", svg)
        self.assertIn("Prefers &lt;odd&gt; license", svg)


class WriterTests(unittest.TestCase):
    def test_write_report_and_json(self) -> None:
        stats = _stats()
        with tempfile.TemporaryDirectory() as tmp:
            svg_path = write_report(stats, Path(tmp) / "public" / "github-stats.svg")
            json_path = write_stats_json(stats, Path(tmp) / "public" / "github-stats.json")
            self.assertEqual(svg_path.read_text(encoding="utf-8"), render_svg(stats))
            data = json.loads(json_path.read_text(encoding="utf-8"))
        self.assertEqual(data["totalRepos"], 2)
        self.assertEqual(data["totalSizeGB"], "0.00")
        self.assertIsNone(data["totalPackages"])
        self.assertEqual(data["issues"], {"open": 4, "closed": 6, "drafts": 0})
        self.assertEqual(data["pullRequests"], {"open": 1, "merged": 2, "closed": 0, "drafts": 1})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
