"""Unit tests for prompt construction."""

import pytest

from exoexplorer.models import DEFAULT_FILTERS, SearchFilters
from exoexplorer.prompts import (
    build_planet_image_prompt,
    build_star_image_prompt,
    build_system_prompt,
    spectral_class,
)


class TestSystemPrompt:
    def test_includes_query_and_json_shape(self):
        prompt = build_system_prompt("TRAPPIST-1", "en")
        assert '"TRAPPIST-1"' in prompt
        for key in (
            "starName",
            "starType",
            "summary",
            "planets",
            "hostStar",
            "distanceLy",
            "discoveryYear",
            "massEarths",
            "radiusEarths",
            "habitabilityScore",
            "isConfirmed",
        ):
            assert key in prompt

    def test_no_filters_omits_block(self):
        assert "Apply these specific filters" not in build_system_prompt("Tau Ceti", "en")

    def test_default_filters(self):
        prompt = build_system_prompt("Tau Ceti", "en", DEFAULT_FILTERS)
        assert "Minimum Mass: 0.1 M⊕" in prompt
        assert "Maximum Mass: 10 M⊕" in prompt
        assert "Maximum Distance: 2000 Light Years" in prompt
        assert "Only Earth-like planets: No" in prompt
        assert "Target Star Type: Any" in prompt

    def test_absent_fields_render_any(self):
        filters = SearchFilters(
            min_mass=None, max_mass=None, max_distance=0, earth_like_only=True, star_type="M"
        )
        prompt = build_system_prompt("Ross 128", "en", filters)
        assert "Minimum Mass: Any" in prompt
        assert "Maximum Mass: Any" in prompt
        assert "Maximum Distance: Any" in prompt
        assert "Only Earth-like planets: Yes" in prompt
        assert "Target Star Type: M" in prompt

    def test_language_changes_phrasing_not_keys(self):
        en = build_system_prompt("K2-18", "en")
        zh = build_system_prompt("K2-18", "zh")
        assert "Simplified Chinese" in zh
        assert "Simplified Chinese" not in en
        assert '"habitabilityScore"' in zh

    def test_control_characters_stripped(self):
        prompt = build_system_prompt("Wolf\x00 1061\x07", "en")
        assert '"Wolf 1061"' in prompt

    def test_double_quotes_become_single(self):
        prompt = build_system_prompt('Barnard"s Star', "en")
        assert "\"Barnard's Star\"" in prompt

    def test_whitespace_query_not_rejected(self):
        assert "Search for exoplanet data" in build_system_prompt("   ", "en")


class TestSpectralClass:
    @pytest.mark.parametrize(
        "star_type, expected",
        [("M8V", "M"), ("g2v", "G"), (" K1V", "K"), ("A0", "A"), ("DA2", None), ("", None)],
    )
    def test_letter(self, star_type, expected):
        assert spectral_class(star_type) == expected


class TestImagePrompts:
    def test_red_dwarf_palette(self):
        prompt = build_star_image_prompt("Proxima Centauri", "M5.5Ve")
        assert "red" in prompt
        assert "Proxima Centauri" in prompt

    def test_sunlike_palette(self):
        assert "yellow-white" in build_star_image_prompt("Kepler-452", "G2V")

    def test_unknown_class_is_neutral(self):
        prompt = build_star_image_prompt("Mystery", "")
        assert "natural colour" in prompt
        assert "unknown" in prompt

    def test_planet_prompt(self):
        prompt = build_planet_image_prompt("TOI-700 d", "Tidally locked super-Earth")
        assert "TOI-700 d" in prompt
        assert "Tidally locked super-Earth" in prompt
