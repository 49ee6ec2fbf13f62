"""Natural-language instructions for the Gemini text and image models."""

import re
import unicodedata

from exoexplorer.models import SearchFilters

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_SPECTRAL_LETTERS = "OBAFGKM"

# Spectral class letter → visual palette for star portraits
_STAR_PALETTES: dict[str, str] = {
    "O": "a fierce blue-white giant, violet-blue corona, searing ultraviolet glow",
    "B": "a brilliant blue-white star, cool blue corona, crisp hot highlights",
    "A": "a brilliant white-blue star, clean white photosphere, faint blue halo",
    "F": "a white star with a soft yellow tint, pale golden corona",
    "G": "a bright yellow-white star like our Sun, golden corona, warm granulation",
    "K": "an orange dwarf, amber surface, copper-toned corona",
    "M": "a deep red/orange dwarf, dim crimson surface, smouldering red flares",
}

_NEUTRAL_PALETTE = "a luminous star rendered in its natural colour"

_JSON_SHAPE = """{
    "starName": "Name",
    "starType": "Spectral Class (e.g. G2V, M1V)",
    "summary": "Evocative scientific summary of the system here",
    "planets": [
      {
        "name": "Planet Name",
        "hostStar": "Star Name",
        "distanceLy": number,
        "discoveryYear": number,
        "massEarths": number,
        "radiusEarths": number,
        "habitabilityScore": number (0-100),
        "description": "Short bio",
        "isConfirmed": boolean
      }
    ]
  }"""


def _clean_query(query: str) -> str:
    """NFKC-normalize, drop control characters, and swap double quotes for single.

    The quote swap keeps the name from closing the quoted string in the prompt.
    Nothing is rejected here.
    """
    query = unicodedata.normalize("NFKC", query)
    query = _CONTROL_CHARS.sub("", query)
    return query.strip().replace('"', "'")


def _advisory(value: float | None, unit: str) -> str:
    if not value:
        return "Any"
    return f"{value:g} {unit}"


def _filter_block(filters: SearchFilters) -> str:
    star_type = "Any" if filters.star_type == "any" else filters.star_type
    return (
        "Apply these specific filters if possible:\n"
        f"  - Minimum Mass: {_advisory(filters.min_mass, 'M⊕')}\n"
        f"  - Maximum Mass: {_advisory(filters.max_mass, 'M⊕')}\n"
        f"  - Maximum Distance: {_advisory(filters.max_distance, 'Light Years')}\n"
        f"  - Only Earth-like planets: {'Yes' if filters.earth_like_only else 'No'}\n"
        f"  - Target Star Type: {star_type}\n"
    )


def build_system_prompt(
    query: str, lang: str, filters: SearchFilters | None = None
) -> str:
    """Compose the data request sent to the text model.

    Args:
        query: Star or planet name as typed by the user. Emptiness is checked by the caller.
        lang: 'en' or 'zh'. Only changes the language of free-text fields; JSON keys stay fixed.
        filters: Advisory constraints. None omits the filter block entirely.

    Returns:
        A single instruction string asking for strict JSON.
    """
    lines = [
        "You are a professional astronomer. "
        f'Search for exoplanet data for the star: "{_clean_query(query)}".',
        "Provide accurate details for any known potentially HABITABLE planets orbiting this star.",
    ]
    if filters is not None:
        lines.append(_filter_block(filters))
    lines += [
        "If the query is a specific planet, provide details for that planet and its system.",
        "Include planetary mass, radius, distance from Earth (light years), discovery year,"
        " and a short description.",
        "",
        'IMPORTANT: You must provide a "summary" field.',
        "The summary should be an evocative, scientifically grounded, and concise one-to-two"
        " sentence overview of the star system's most remarkable feature (e.g., its similarity"
        " to our Sun, the stability of its habitable zone, or its unique orbital resonance).",
    ]
    if lang == "zh":
        lines.append(
            'Write the "summary" and every "description" value in Simplified Chinese.'
            " Keep names and all JSON keys in English."
        )
    else:
        lines.append('Write the "summary" and every "description" value in English.')
    lines += [
        "",
        "IMPORTANT: Return the response strictly as a JSON object matching the following structure:",
        f"  {_JSON_SHAPE}",
    ]
    return "\n".join(lines)


def spectral_class(star_type: str) -> str | None:
    """Leading Morgan-Keenan letter of a spectral type ("M8V" → "M"), or None."""
    for ch in star_type.strip().upper():
        if ch in _SPECTRAL_LETTERS:
            return ch
        if ch.isalpha():
            return None
    return None


def build_star_image_prompt(star_name: str, star_type: str) -> str:
    """Square star portrait prompt whose palette follows the spectral class."""
    palette = _STAR_PALETTES.get(spectral_class(star_type) or "", _NEUTRAL_PALETTE)
    return (
        "A breathtaking, scientifically accurate astronomical visualization of the star"
        f' "{_clean_query(star_name)}".\n'
        f"Spectral type: {star_type or 'unknown'}.\n"
        f"Appearance: {palette}.\n"
        "Visual features: Intense solar flares, glowing corona, textured surface with"
        " convection cells, background of a dense star field.\n"
        "High contrast, 4K space photography style."
    )


def build_planet_image_prompt(planet_name: str, description: str) -> str:
    """Widescreen artist's impression prompt for a single planet."""
    return (
        "A highly detailed, cinematic artist's impression of the exoplanet"
        f" {_clean_query(planet_name)}.\n"
        f"Description context: {description}.\n"
        "Style: Realistic space photography, NASA-inspired, 4k resolution, epic scale,"
        " starry background."
    )
