"""Test plan renderers.

This module tests:
- Semantic style class mapping to colors
- Verbosity filtering of plan rows
- JSON structure
"""

import json
from io import StringIO

from rich.console import Console

from seo_head.core.plan import PlanRow, PresenterPlan
from seo_head.presenters.protocol import VerbosityLevel
from seo_head.renderers import CLIRenderer, JSONRenderer


def make_plan():
    return PresenterPlan(
        page_type="Term_Archive",
        flags={"opengraph": True, "twitter_card": False},
        rows=[
            PlanRow(presenter_id="title", categories=["base"]),
            PlanRow(presenter_id="my_addon.tag", status="unresolved"),
            PlanRow(
                presenter_id="twitter.creator",
                categories=["twitter_card", "singular_only"],
                status="excluded",
                verbosity=VerbosityLevel.VERBOSE,
            ),
        ],
    )


# ============================================================================
# CLI Renderer
# ============================================================================


class TestCLIRenderer:
    """Test CLIRenderer maps statuses to semantic styles."""

    def test_semantic_style_mapping(self):
        renderer = CLIRenderer(verbosity=VerbosityLevel.NORMAL)

        assert renderer.STYLE_MAP["success"] == "green"
        assert renderer.STYLE_MAP["warning"] == "yellow"
        assert renderer.STYLE_MAP["muted"] == "dim"
        assert renderer.style_for("run") == "green"
        assert renderer.style_for("unresolved") == "yellow"
        assert renderer.style_for("excluded") == "dim"
        assert renderer.style_for("something") == ""

    def test_normal_hides_excluded(self):
        output = StringIO()
        console = Console(file=output, width=200, no_color=True)
        CLIRenderer(verbosity=VerbosityLevel.NORMAL, console=console).render_plan(make_plan())

        text = output.getvalue()
        assert "Presenters for Term_Archive" in text
        assert "title" in text
        assert "unresolved" in text
        assert "twitter.creator" not in text

    def test_verbose_shows_excluded_and_flags(self):
        output = StringIO()
        console = Console(file=output, width=200, no_color=True)
        CLIRenderer(verbosity=VerbosityLevel.VERBOSE, console=console).render_plan(make_plan())

        text = output.getvalue()
        assert "twitter.creator" in text
        assert "opengraph=True" in text

    def test_quiet_prints_ids_only(self):
        output = StringIO()
        console = Console(file=output, width=200, no_color=True)
        CLIRenderer(verbosity=VerbosityLevel.QUIET, console=console).render_plan(make_plan())

        assert output.getvalue().strip() == "title my_addon.tag"


# ============================================================================
# JSON Renderer
# ============================================================================


class TestJSONRenderer:
    """Test JSON output."""

    def test_structure(self):
        stream = StringIO()
        JSONRenderer(stream=stream, verbosity=VerbosityLevel.NORMAL).render_plan(make_plan())

        data = json.loads(stream.getvalue())
        assert data["page_type"] == "Term_Archive"
        assert data["presenters"] == ["title", "my_addon.tag"]
        assert data["flags"]["twitter_card"] is False
        assert [row["status"] for row in data["rows"]] == ["run", "unresolved"]

    def test_verbose_rows(self):
        stream = StringIO()
        JSONRenderer(stream=stream, verbosity=VerbosityLevel.VERBOSE).render_plan(make_plan())

        data = json.loads(stream.getvalue())
        assert data["rows"][-1]["presenter_id"] == "twitter.creator"
        assert data["rows"][-1]["categories"] == ["twitter_card", "singular_only"]
