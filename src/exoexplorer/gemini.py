"""Gemini client: grounded star-system lookup and star/planet image generation."""

import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from exoexplorer.config import ConfigError, Settings, load_settings
from exoexplorer.models import SearchFilters, StarSystemData
from exoexplorer.normalize import (
    extract_grounding_sources,
    image_data_uri,
    parse_star_system,
    response_parts,
)
from exoexplorer.prompts import (
    build_planet_image_prompt,
    build_star_image_prompt,
    build_system_prompt,
)

logger = logging.getLogger(__name__)

STAR_ASPECT_RATIO = "1:1"
PLANET_ASPECT_RATIO = "16:9"


class ServiceUnavailable(Exception):
    """Gemini API or transport failure (including timeouts)."""


class GeminiService:
    """Thin wrapper around `genai.Client` speaking the explorer's domain types.

    Args:
        settings: Resolved configuration. Loaded from the environment if None.
        client: Pre-built client (tests inject a fake). Built from settings if None.

    Raises:
        ConfigError: No client given and no API key configured.
    """

    def __init__(self, settings: Settings | None = None, client: Any = None) -> None:
        self.settings = settings or load_settings()
        if client is None:
            if not self.settings.api_key:
                raise ConfigError("GEMINI_API_KEY is not set")
            client = genai.Client(
                api_key=self.settings.api_key,
                http_options=types.HttpOptions(
                    timeout=int(self.settings.request_timeout * 1000)
                ),
            )
        self._client = client

    def _generate(
        self, model: str, contents: Any, config: types.GenerateContentConfig
    ) -> Any:
        try:
            return self._client.models.generate_content(
                model=model, contents=contents, config=config
            )
        except (errors.APIError, httpx.HTTPError) as e:
            raise ServiceUnavailable(f"{model} request failed: {e}") from e

    def fetch_star_system(
        self, query: str, lang: str, filters: SearchFilters | None = None
    ) -> StarSystemData:
        """Ask the text model (with Google Search grounding) about `query`.

        Raises:
            ServiceUnavailable: API/transport failure.
            MalformedResponse: Payload does not parse into a StarSystemData.
        """
        logger.info("Fetching star system for %r (lang=%s)", query, lang)
        response = self._generate(
            self.settings.text_model,
            build_system_prompt(query, lang, filters),
            types.GenerateContentConfig(
                tools=[types.Tool(google_search=types.GoogleSearch())],
                response_mime_type="application/json",
            ),
        )
        data = parse_star_system(response.text or "")
        return data.with_sources(extract_grounding_sources(response))

    def _generate_image(self, prompt: str, aspect_ratio: str) -> str:
        response = self._generate(
            self.settings.image_model,
            [prompt],
            types.GenerateContentConfig(
                image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
            ),
        )
        return image_data_uri(response_parts(response))

    def generate_star_image(self, star_name: str, star_type: str) -> str:
        """Square star portrait as a data URI.

        Raises:
            NoImageProduced: Response had no inline image.
            ServiceUnavailable: API/transport failure.
        """
        return self._generate_image(
            build_star_image_prompt(star_name, star_type), STAR_ASPECT_RATIO
        )

    def generate_planet_image(self, planet_name: str, description: str) -> str:
        """Widescreen planet portrait as a data URI. Raises like `generate_star_image`."""
        return self._generate_image(
            build_planet_image_prompt(planet_name, description), PLANET_ASPECT_RATIO
        )
