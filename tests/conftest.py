"""
Shared test fixtures.

All tests are offline: the Gemini client is replaced by fakes built from
SimpleNamespace objects shaped like google-genai responses.
"""

import json
from types import SimpleNamespace

import pytest

from exoexplorer.models import Exoplanet, StarSystemData
from exoexplorer.normalize import NoImageProduced


@pytest.fixture
def trappist_payload():
    """Raw text-model payload for the TRAPPIST-1 scenario."""
    return {
        "starName": "TRAPPIST-1",
        "starType": "M8V",
        "summary": "Seven Earth-sized worlds locked in resonance around an ultracool dwarf.",
        "planets": [
            {
                "name": "TRAPPIST-1 e",
                "hostStar": "TRAPPIST-1",
                "distanceLy": 39.5,
                "discoveryYear": 2017,
                "massEarths": 0.69,
                "radiusEarths": 0.91,
                "habitabilityScore": 92,
                "description": "Rocky, temperate, possibly wet.",
                "isConfirmed": True,
            }
        ],
    }


@pytest.fixture
def trappist_system():
    return StarSystemData(
        star_name="TRAPPIST-1",
        star_type="M8V",
        planets=(
            Exoplanet(
                name="TRAPPIST-1 e",
                host_star="TRAPPIST-1",
                distance_ly=39.5,
                discovery_year=2017,
                mass_earths=0.69,
                radius_earths=0.91,
                habitability_score=92,
                description="Rocky, temperate, possibly wet.",
                is_confirmed=True,
            ),
        ),
        summary="Seven Earth-sized worlds.",
    )


def make_text_response(payload, chunks=()):
    """A generate_content response carrying JSON text and grounding chunks."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    candidate = SimpleNamespace(
        grounding_metadata=SimpleNamespace(grounding_chunks=list(chunks)),
        content=SimpleNamespace(parts=[SimpleNamespace(text=text, inline_data=None)]),
    )
    return SimpleNamespace(text=text, candidates=[candidate])


def make_image_response(data=None, mime_type="image/png"):
    """A generate_content response with one inline image part, or text only if data is None."""
    parts = [SimpleNamespace(text="Here is your image.", inline_data=None)]
    if data is not None:
        parts.append(
            SimpleNamespace(
                text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type)
            )
        )
    candidate = SimpleNamespace(content=SimpleNamespace(parts=parts), grounding_metadata=None)
    return SimpleNamespace(text=None, candidates=[candidate])


def web_chunk(uri, title=None, domain=None):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title, domain=domain))


class FakeModels:
    """Stands in for `client.models`: replays queued responses and records calls."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class FakeClient:
    def __init__(self, *responses):
        self.models = FakeModels(responses)


class FakeService:
    """In-memory ExplorerService for controller tests."""

    def __init__(self, system=None, error=None, star_image=None, star_error=None):
        self.system = system
        self.error = error
        self.star_image = star_image
        self.star_error = star_error
        self.planet_error = None
        self.fetch_calls = []
        self.star_image_calls = []
        self.planet_image_calls = []
        self.on_fetch = None

    def fetch_star_system(self, query, lang, filters=None):
        self.fetch_calls.append((query, lang, filters))
        if self.on_fetch is not None:
            self.on_fetch()
        if self.error is not None:
            raise self.error
        return self.system

    def generate_star_image(self, star_name, star_type):
        self.star_image_calls.append((star_name, star_type))
        if self.star_error is not None:
            raise self.star_error
        if self.star_image is None:
            raise NoImageProduced("no inline data")
        return self.star_image

    def generate_planet_image(self, planet_name, description):
        self.planet_image_calls.append((planet_name, description))
        if self.planet_error is not None:
            raise self.planet_error
        return f"data:image/png;base64,{planet_name}"


@pytest.fixture
def fake_service(trappist_system):
    return FakeService(system=trappist_system, star_image="data:image/png;base64,U1RBUg==")
