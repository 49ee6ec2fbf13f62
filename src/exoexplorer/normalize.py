"""Parsing of Gemini responses into the domain model.

The text model is asked for strict JSON but the payload is still untrusted:
every field is read defensively and range invariants are enforced here, so
that `Exoplanet` construction never fails on model output.
"""

import base64
import json
import math
import re
from typing import Any
from urllib.parse import quote

from exoexplorer.models import Exoplanet, GroundingSource, StarSystemData

STAR_IMAGE_SIZE = (600, 600)
PLANET_IMAGE_SIZE = (800, 450)

_FENCE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


class MalformedResponse(Exception):
    """Text-model output is not valid JSON or lacks required fields."""


class NoImageProduced(Exception):
    """Image-model response carried no inline image data."""


def _as_float(value: Any, field: str) -> float:
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise MalformedResponse(f"{field} is not a number: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedResponse(f"{field} is not a number: {value!r}")
    if not math.isfinite(number):
        raise MalformedResponse(f"{field} is not finite: {value!r}")
    return max(number, 0.0)


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "yes", "1")


def _parse_planet(raw: Any, index: int, star_name: str) -> Exoplanet:
    if not isinstance(raw, dict):
        raise MalformedResponse(f"planets[{index}] is not an object")
    name = str(raw.get("name") or "").strip()
    if not name:
        raise MalformedResponse(f"planets[{index}] has no name")

    score = round(_as_float(raw.get("habitabilityScore"), "habitabilityScore"))
    return Exoplanet(
        name=name,
        host_star=str(raw.get("hostStar") or star_name),
        distance_ly=_as_float(raw.get("distanceLy"), "distanceLy"),
        discovery_year=int(_as_float(raw.get("discoveryYear"), "discoveryYear")),
        mass_earths=_as_float(raw.get("massEarths"), "massEarths"),
        radius_earths=_as_float(raw.get("radiusEarths"), "radiusEarths"),
        habitability_score=min(max(score, 0), 100),
        description=str(raw.get("description") or ""),
        is_confirmed=_as_bool(raw.get("isConfirmed", False)),
    )


def parse_star_system(raw_text: str) -> StarSystemData:
    """Parse the text model's JSON payload into a StarSystemData.

    Grounding sources are not part of the payload; attach them separately
    with `extract_grounding_sources`.

    Raises:
        MalformedResponse: Invalid JSON or a missing/invalid required field.
    """
    match = _FENCE.match(raw_text or "")
    text = match.group(1) if match else (raw_text or "")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"Response is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedResponse("Response is not a JSON object")

    missing = [key for key in ("starName", "starType", "planets") if key not in payload]
    if missing:
        raise MalformedResponse(f"Missing required fields: {', '.join(missing)}")
    if not isinstance(payload["planets"], list):
        raise MalformedResponse("planets is not a list")

    star_name = str(payload["starName"] or "").strip()
    if not star_name:
        raise MalformedResponse("starName is empty")

    return StarSystemData(
        star_name=star_name,
        star_type=str(payload["starType"] or ""),
        planets=tuple(
            _parse_planet(raw, i, star_name) for i, raw in enumerate(payload["planets"])
        ),
        summary=str(payload.get("summary") or ""),
    )


def _first_candidate(response: Any) -> Any | None:
    candidates = getattr(response, "candidates", None) or []
    return candidates[0] if candidates else None


def extract_grounding_sources(response: Any) -> tuple[GroundingSource, ...]:
    """Web citations from the first candidate's grounding metadata.

    Non-web chunks and chunks without a URI are dropped; duplicate URIs keep
    their first occurrence.
    """
    candidate = _first_candidate(response)
    metadata = getattr(candidate, "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources: list[GroundingSource] = []
    seen: set[str] = set()
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = (getattr(web, "uri", None) or "").strip() if web is not None else ""
        if not uri or uri in seen:
            continue
        seen.add(uri)
        title = getattr(web, "title", None) or getattr(web, "domain", None) or uri
        sources.append(GroundingSource(title=title, uri=uri))
    return tuple(sources)


def response_parts(response: Any) -> list[Any]:
    """Content parts of the first candidate, or an empty list."""
    candidate = _first_candidate(response)
    content = getattr(candidate, "content", None)
    return list(getattr(content, "parts", None) or [])


def image_data_uri(parts: list[Any]) -> str:
    """Encode the first inline image part as a data URI.

    Raises:
        NoImageProduced: No part carries inline data.
    """
    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is None or not getattr(inline, "data", None):
            continue
        data = inline.data
        if isinstance(data, bytes):
            data = base64.b64encode(data).decode("ascii")
        mime_type = getattr(inline, "mime_type", None) or "image/png"
        return f"data:{mime_type};base64,{data}"
    raise NoImageProduced(f"No inline image in {len(parts)} response part(s)")


def placeholder_image_url(seed: str, width: int, height: int) -> str:
    """Deterministic placeholder image: the same seed always yields the same URL."""
    return f"https://picsum.photos/seed/{quote(seed, safe='')}/{width}/{height}"
