"""Data model definitions: the boundaries between service, controller, and render layers."""

from dataclasses import dataclass, replace

STAR_TYPES: tuple[str, ...] = ("any", "G", "M", "K", "F", "A")


@dataclass(frozen=True)
class Exoplanet:
    """A single planet as described by the generative model."""

    name: str
    host_star: str  # Host star name (reference, not ownership)
    distance_ly: float  # Distance from Earth (light years)
    discovery_year: int
    mass_earths: float  # Mass (M⊕)
    radius_earths: float  # Radius (R⊕)
    habitability_score: int  # Opaque ranking signal, 0-100
    description: str
    is_confirmed: bool
    image_url: str | None = None  # Generated or placeholder image

    def __post_init__(self) -> None:
        if not 0 <= self.habitability_score <= 100:
            raise ValueError(
                f"habitability_score out of range: {self.habitability_score}"
            )
        for field_name in ("distance_ly", "mass_earths", "radius_earths"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be >= 0")


@dataclass(frozen=True)
class GroundingSource:
    """A web citation attached to a generated answer."""

    title: str
    uri: str


@dataclass(frozen=True)
class StarSystemData:
    """One search result. Replaced wholesale on every successful search."""

    star_name: str
    star_type: str  # Spectral type string ("G2V", "M8V", ...)
    planets: tuple[Exoplanet, ...]  # Order as returned, not sorted
    summary: str
    sources: tuple[GroundingSource, ...] = ()
    star_image_url: str | None = None

    def with_star_image(self, url: str) -> "StarSystemData":
        return replace(self, star_image_url=url)

    def with_sources(self, sources: tuple[GroundingSource, ...]) -> "StarSystemData":
        return replace(self, sources=sources)


@dataclass(frozen=True)
class SearchFilters:
    """Advisory constraints forwarded to the prompt. Never enforced on results."""

    min_mass: float | None = 0.1  # M⊕; None = Any
    max_mass: float | None = 10  # M⊕; None = Any
    max_distance: float | None = 2000  # Light years; None = Any
    earth_like_only: bool = False
    star_type: str = "any"  # "any" or one of G, M, K, F, A

    def __post_init__(self) -> None:
        if self.star_type not in STAR_TYPES:
            raise ValueError(f"Unknown star type: {self.star_type!r}")


DEFAULT_FILTERS = SearchFilters(
    min_mass=0.1,
    max_mass=10,
    max_distance=2000,
    earth_like_only=False,
    star_type="any",
)
