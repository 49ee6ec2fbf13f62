"""Static star catalogue: autocomplete candidates and the featured planets shown on the home view."""

from exoexplorer.models import Exoplanet

MAX_SUGGESTIONS = 5

POPULAR_STARS: tuple[str, ...] = (
    "Proxima Centauri",
    "TRAPPIST-1",
    "Teegarden's Star",
    "Kepler-186",
    "Kepler-452",
    "Kepler-1649",
    "LHS 1140",
    "Ross 128",
    "Gliese 667 C",
    "Gliese 581",
    "Wolf 1061",
    "Tau Ceti",
    "Alpha Centauri A",
    "Alpha Centauri B",
    "Barnard's Star",
    "Luyten's Star",
    "K2-18",
    "TOI-700",
)

FEATURED_PLANETS: tuple[Exoplanet, ...] = (
    Exoplanet(
        name="Proxima Centauri b",
        host_star="Proxima Centauri",
        distance_ly=4.2,
        discovery_year=2016,
        mass_earths=1.07,
        radius_earths=1.03,
        habitability_score=85,
        description=(
            "The closest known exoplanet to our solar system, orbiting in the"
            " habitable zone of a red dwarf."
        ),
        is_confirmed=True,
    ),
    Exoplanet(
        name="TRAPPIST-1 e",
        host_star="TRAPPIST-1",
        distance_ly=39.5,
        discovery_year=2017,
        mass_earths=0.69,
        radius_earths=0.91,
        habitability_score=92,
        description=(
            "An Earth-sized planet in the middle of the habitable zone, likely"
            " rocky and potentially holding water."
        ),
        is_confirmed=True,
    ),
)


def suggest(
    partial: str,
    names: tuple[str, ...] = POPULAR_STARS,
    limit: int = MAX_SUGGESTIONS,
) -> list[str]:
    """Return up to `limit` star names containing `partial` (case-insensitive).

    Catalogue order is preserved. Empty input yields no suggestions.
    """
    if not partial:
        return []
    needle = partial.lower()
    return [name for name in names if needle in name.lower()][:limit]
