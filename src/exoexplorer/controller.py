"""Application state: query, language, filters, and the per-search state machine.

One controller lives in Streamlit's session state for the whole session. The
presentation layer only reads from it and calls its methods; nothing else
mutates search state.

Search lifecycle::

    IDLE → LOADING → SUCCESS (→ SUCCESS with star and planet images)
                   ↘ FAILED
"""

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Protocol

from exoexplorer.catalog import POPULAR_STARS, suggest
from exoexplorer.gemini import ServiceUnavailable
from exoexplorer.i18n import LANGUAGES, other_language, t
from exoexplorer.models import DEFAULT_FILTERS, Exoplanet, SearchFilters, StarSystemData
from exoexplorer.normalize import (
    PLANET_IMAGE_SIZE,
    STAR_IMAGE_SIZE,
    MalformedResponse,
    placeholder_image_url,
)

logger = logging.getLogger(__name__)


class ExplorerService(Protocol):
    """What the controller needs from the generative backend (GeminiService in production)."""

    def fetch_star_system(
        self, query: str, lang: str, filters: SearchFilters | None = None
    ) -> StarSystemData: ...

    def generate_star_image(self, star_name: str, star_type: str) -> str: ...

    def generate_planet_image(self, planet_name: str, description: str) -> str: ...


class SearchStatus(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchState:
    """Snapshot of the current search. Replaced, never mutated."""

    status: SearchStatus = SearchStatus.IDLE
    query: str = ""
    result: StarSystemData | None = None
    error: str | None = None  # User-facing message, FAILED only
    image_pending: bool = False  # SUCCESS committed, images still loading


Listener = Callable[[SearchState], Any]


class ExplorerController:
    def __init__(
        self,
        service: ExplorerService,
        lang: str = "zh",
        stars: tuple[str, ...] = POPULAR_STARS,
    ) -> None:
        if lang not in LANGUAGES:
            raise ValueError(f"Unsupported language: {lang!r}")
        self.service = service
        self.lang = lang
        self.stars = stars
        self.query = ""
        self.suggestions: list[str] = []
        self.filters: SearchFilters = DEFAULT_FILTERS
        self.advanced_open = False
        self.state = SearchState()
        self._listeners: list[Listener] = []
        self._planet_images: dict[tuple[str, str], str] = {}
        self._generation = 0

    # --- State plumbing ---

    def subscribe(self, listener: Listener) -> None:
        """Call `listener` with the new SearchState after every transition."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _commit(self, state: SearchState) -> None:
        self.state = state
        for listener in list(self._listeners):
            listener(state)

    def _is_current(self, generation: int) -> bool:
        if generation != self._generation:
            logger.info(
                "Dropping stale response (generation %d, current %d)",
                generation,
                self._generation,
            )
            return False
        return True

    # --- Input ---

    def set_query(self, text: str) -> list[str]:
        """Store the query text and recompute autocomplete suggestions."""
        self.query = text
        self.suggestions = suggest(text, self.stars)
        return self.suggestions

    def set_language(self, lang: str) -> None:
        if lang not in LANGUAGES:
            raise ValueError(f"Unsupported language: {lang!r}")
        self.lang = lang

    def toggle_language(self) -> str:
        self.lang = other_language(self.lang)
        return self.lang

    def update_filters(self, **changes: Any) -> SearchFilters:
        self.filters = replace(self.filters, **changes)
        return self.filters

    def reset_filters(self) -> SearchFilters:
        self.filters = DEFAULT_FILTERS
        return self.filters

    def go_home(self) -> None:
        """Back to the landing view. Any in-flight search result will be ignored."""
        self._generation += 1
        self.query = ""
        self.suggestions = []
        self.advanced_open = False
        self._commit(SearchState())

    # --- Search ---

    def search(self, query: str | None = None) -> SearchState:
        """Run one search: mandatory data fetch, then best-effort star and planet images.

        Args:
            query: Text to search for. Defaults to the stored query.

        Returns:
            The state after the search settles. Whitespace-only input returns
            the unchanged current state without contacting the service.
        """
        text = (self.query if query is None else query).strip()
        if not text:
            return self.state

        self._generation += 1
        generation = self._generation
        self.query = text
        self.suggestions = []
        self._commit(
            SearchState(status=SearchStatus.LOADING, query=text, result=self.state.result)
        )

        try:
            data = self.service.fetch_star_system(text, self.lang, self.filters)
        except (MalformedResponse, ServiceUnavailable) as e:
            logger.error("Search for %r failed: %s", text, e)
            return self._fail(generation, text)
        except Exception:  # anything else from the SDK still ends the search
            logger.exception("Search for %r failed unexpectedly", text)
            return self._fail(generation, text)

        if not self._is_current(generation):
            return self.state
        self._commit(
            SearchState(
                status=SearchStatus.SUCCESS, query=text, result=data, image_pending=True
            )
        )

        image_url = self._star_image(data)
        planets = []
        for planet in data.planets:
            if not self._is_current(generation):
                return self.state
            planets.append(replace(planet, image_url=self.planet_image(planet)))

        if self._is_current(generation):
            self._commit(
                SearchState(
                    status=SearchStatus.SUCCESS,
                    query=text,
                    result=replace(data, planets=tuple(planets), star_image_url=image_url),
                )
            )
        return self.state

    def _fail(self, generation: int, text: str) -> SearchState:
        if self._is_current(generation):
            self._commit(
                SearchState(
                    status=SearchStatus.FAILED,
                    query=text,
                    error=t("error_fetch", self.lang),
                )
            )
        return self.state

    def _star_image(self, data: StarSystemData) -> str:
        try:
            return self.service.generate_star_image(data.star_name, data.star_type)
        except Exception as e:  # image failure must never fail the search
            logger.warning("Star image for %r unavailable: %s", data.star_name, e)
            return placeholder_image_url(data.star_name, *STAR_IMAGE_SIZE)

    def planet_image(self, planet: Exoplanet) -> str:
        """Image URL for a planet card: existing, cached, generated, or placeholder.

        The cache lives for the whole session and is keyed on (name, description).
        """
        if planet.image_url:
            return planet.image_url
        key = (planet.name, planet.description)
        cached = self._planet_images.get(key)
        if cached is not None:
            return cached
        try:
            url = self.service.generate_planet_image(planet.name, planet.description)
        except Exception as e:
            logger.warning("Planet image for %r unavailable: %s", planet.name, e)
            url = placeholder_image_url(planet.name, *PLANET_IMAGE_SIZE)
        self._planet_images[key] = url
        return url
