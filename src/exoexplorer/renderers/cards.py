"""HTML fragments for Streamlit markdown: planet cards, source chips, loading overlay."""

import html

from exoexplorer.i18n import loading_stages, t
from exoexplorer.models import Exoplanet, GroundingSource

TITLE_LIMIT = 35
MAX_SOURCES = 4


def truncate_title(title: str, limit: int = TITLE_LIMIT) -> str:
    """Shorten a source title for display. The stored title is never modified."""
    if len(title) <= limit:
        return title
    return title[:limit] + "..."


def render_source_chips(
    sources: tuple[GroundingSource, ...], lang: str, max_items: int = MAX_SOURCES
) -> str:
    """Linked chips for the first `max_items` grounding sources. Empty string if none."""
    if not sources:
        return ""
    chips = "".join(
        f"<a class='source-chip' href='{html.escape(s.uri, quote=True)}'"
        " target='_blank' rel='noopener noreferrer'>"
        f"{html.escape(truncate_title(s.title))}</a>"
        for s in sources[:max_items]
    )
    return (
        f"<div class='sources'><h5>{html.escape(t('sources', lang))}</h5>"
        f"<div class='source-row'>{chips}</div></div>"
    )


def _fmt(value: float) -> str:
    return f"{value:g}"


def render_planet_card(planet: Exoplanet, lang: str, image_url: str) -> str:
    """Card with image, score badge, and the four headline statistics."""
    status = t("confirmed", lang) if planet.is_confirmed else t("candidate", lang)
    stats = (
        (t("distance", lang), f"{_fmt(planet.distance_ly)} LY"),
        (t("mass", lang), f"{_fmt(planet.mass_earths)} M⊕"),
        (t("radius", lang), f"{_fmt(planet.radius_earths)} R⊕"),
        (t("discovery", lang), str(planet.discovery_year or "—")),
    )
    stat_html = "".join(
        f"<div class='stat'><span>{html.escape(label)}</span><b>{html.escape(value)}</b></div>"
        for label, value in stats
    )
    return (
        "<div class='planet-card'>"
        f"<img src='{html.escape(image_url, quote=True)}' alt='{html.escape(planet.name, quote=True)}'/>"
        "<div class='planet-body'>"
        f"<div class='planet-head'><h3>{html.escape(planet.name)}</h3>"
        f"<span class='badge'>{html.escape(status)}</span></div>"
        f"<div class='score'>{html.escape(t('habitability_score', lang))}:"
        f" <b>{planet.habitability_score}</b>/100"
        f"<div class='score-bar'><div style='width:{planet.habitability_score}%'></div></div></div>"
        f"<div class='stats'>{stat_html}</div>"
        f"<p>{html.escape(planet.description)}</p>"
        "</div></div>"
    )


def render_loading_overlay(lang: str, stage: int = 0) -> str:
    """Full-screen loading overlay showing the given progress stage."""
    stages = loading_stages(lang)
    stage = min(max(stage, 0), len(stages) - 1)
    progress = int((stage + 1) / len(stages) * 100)
    return (
        "<div class='loading-overlay'><div>"
        f"<h4>{html.escape(t('loading', lang))}</h4>"
        f"<p class='loading-stage'>{html.escape(stages[stage])}</p>"
        f"<div class='progress'><div style='width:{progress}%'></div></div>"
        "</div></div>"
    )
