"""Unit tests for the domain model."""

import pytest

from exoexplorer.models import (
    DEFAULT_FILTERS,
    Exoplanet,
    GroundingSource,
    SearchFilters,
    StarSystemData,
)


def _planet(**overrides):
    fields = dict(
        name="Kepler-186 f",
        host_star="Kepler-186",
        distance_ly=582.0,
        discovery_year=2014,
        mass_earths=1.4,
        radius_earths=1.17,
        habitability_score=70,
        description="First Earth-sized planet found in a habitable zone.",
        is_confirmed=True,
    )
    fields.update(overrides)
    return Exoplanet(**fields)


class TestExoplanet:
    def test_score_bounds_inclusive(self):
        assert _planet(habitability_score=0).habitability_score == 0
        assert _planet(habitability_score=100).habitability_score == 100

    def test_score_out_of_range(self):
        with pytest.raises(ValueError):
            _planet(habitability_score=101)
        with pytest.raises(ValueError):
            _planet(habitability_score=-1)

    def test_negative_measurements_rejected(self):
        with pytest.raises(ValueError):
            _planet(mass_earths=-0.1)
        with pytest.raises(ValueError):
            _planet(distance_ly=-4.2)

    def test_unconfirmed_planet_is_valid(self):
        assert _planet(is_confirmed=False).is_confirmed is False

    def test_image_defaults_to_none(self):
        assert _planet().image_url is None


class TestStarSystemData:
    def test_with_star_image_returns_copy(self, trappist_system):
        updated = trappist_system.with_star_image("data:image/png;base64,AA==")
        assert updated.star_image_url == "data:image/png;base64,AA=="
        assert trappist_system.star_image_url is None
        assert updated.planets == trappist_system.planets

    def test_with_sources(self, trappist_system):
        sources = (GroundingSource(title="NASA", uri="https://nasa.gov"),)
        assert trappist_system.with_sources(sources).sources == sources

    def test_sources_default_empty(self):
        data = StarSystemData(star_name="X", star_type="G2V", planets=(), summary="")
        assert data.sources == ()


class TestSearchFilters:
    def test_defaults(self):
        assert DEFAULT_FILTERS == SearchFilters(
            min_mass=0.1,
            max_mass=10,
            max_distance=2000,
            earth_like_only=False,
            star_type="any",
        )

    @pytest.mark.parametrize("star_type", ["any", "G", "M", "K", "F", "A"])
    def test_known_star_types(self, star_type):
        assert SearchFilters(star_type=star_type).star_type == star_type

    def test_unknown_star_type(self):
        with pytest.raises(ValueError):
            SearchFilters(star_type="O")
