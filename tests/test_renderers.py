"""Tests for the Plotly chart and HTML card renderers."""

from dataclasses import replace

from exoexplorer.i18n import loading_stages, t
from exoexplorer.models import GroundingSource
from exoexplorer.renderers.cards import (
    render_loading_overlay,
    render_planet_card,
    render_source_chips,
    truncate_title,
)
from exoexplorer.renderers.plotly_chart import marker_sizes, render_habitability_chart


class TestHabitabilityChart:
    def test_one_point_per_planet(self, trappist_system):
        fig = render_habitability_chart(trappist_system.planets, "en")
        trace = fig.data[0]
        assert list(trace.x) == [0.69]
        assert list(trace.y) == [0.91]
        assert list(trace.text) == ["TRAPPIST-1 e"]

    def test_high_score_highlighted(self, trappist_system):
        low = replace(trappist_system.planets[0], name="low", habitability_score=40)
        fig = render_habitability_chart(trappist_system.planets + (low,), "en")
        colors = list(fig.data[0].marker.color)
        assert colors[0] != colors[1]

    def test_earth_reference_lines(self, trappist_system):
        fig = render_habitability_chart(trappist_system.planets, "zh")
        annotations = {a.text for a in fig.layout.annotations}
        assert t("chart_earth_mass", "zh") in annotations
        assert t("chart_earth_radius", "zh") in annotations
        assert len(fig.layout.shapes) == 2

    def test_marker_sizes_grow_with_score(self):
        small, large = marker_sizes([0, 100])
        assert small < large
        assert marker_sizes([150]) == marker_sizes([100])


class TestCards:
    def test_truncate_title(self):
        assert truncate_title("Short") == "Short"
        long_title = "x" * 40
        assert truncate_title(long_title) == "x" * 35 + "..."
        assert truncate_title("y" * 35) == "y" * 35

    def test_source_chips_capped_and_escaped(self):
        sources = tuple(
            GroundingSource(title=f"<b>Source {i}</b>", uri=f"https://s{i}.org")
            for i in range(6)
        )
        chips = render_source_chips(sources, "en")
        assert chips.count("class='source-chip'") == 4
        assert "<b>Source" not in chips
        assert "&lt;b&gt;Source 0" in chips
        assert "https://s4.org" not in chips

    def test_no_sources_renders_nothing(self):
        assert render_source_chips((), "en") == ""

    def test_planet_card(self, trappist_system):
        card = render_planet_card(trappist_system.planets[0], "en", "data:image/png;base64,AA==")
        assert "TRAPPIST-1 e" in card
        assert "<b>92</b>/100" in card
        assert "39.5 LY" in card
        assert t("confirmed", "en") in card
        assert "data:image/png;base64,AA==" in card

    def test_candidate_badge(self, trappist_system):
        planet = replace(trappist_system.planets[0], is_confirmed=False)
        assert t("candidate", "zh") in render_planet_card(planet, "zh", "x")

    def test_planet_description_escaped(self, trappist_system):
        planet = replace(trappist_system.planets[0], description="<script>alert(1)</script>")
        assert "<script>" not in render_planet_card(planet, "en", "x")

    def test_loading_overlay_stage(self):
        html = render_loading_overlay("en", 3)
        assert loading_stages("en")[3] in html

    def test_loading_overlay_clamps_stage(self):
        assert loading_stages("zh")[-1] in render_loading_overlay("zh", 99)
        assert loading_stages("zh")[0] in render_loading_overlay("zh", -1)
