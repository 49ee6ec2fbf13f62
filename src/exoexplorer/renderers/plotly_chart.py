"""Plotly mass-radius habitability chart.

Each planet is a bubble at (mass, radius); bubble area grows with the
habitability score. Dashed lines mark one Earth mass and one Earth radius.
"""

import numpy as np
import plotly.graph_objects as go

from exoexplorer.i18n import t
from exoexplorer.models import Exoplanet

_BG = "#0b1222"
_AXIS_COLOR = "#475569"
_HIGH_COLOR = "#22d3ee"
_LOW_COLOR = "#3b82f6"
_EARTH_COLOR = "#ef4444"

HIGH_SCORE = 80
_MIN_SIZE = 10
_MAX_SIZE = 32


def marker_sizes(scores: list[int]) -> list[float]:
    """Map 0-100 scores linearly onto marker diameters."""
    arr = np.clip(np.asarray(scores, dtype=float), 0, 100)
    return list(_MIN_SIZE + (_MAX_SIZE - _MIN_SIZE) * arr / 100)


def render_habitability_chart(planets: tuple[Exoplanet, ...], lang: str) -> go.Figure:
    """Render planets as a Plotly scatter of mass (x) against radius (y).

    Args:
        planets: Planets of the current result, any order.
        lang: Display language for axis titles and reference-line labels.

    Returns:
        Plotly Figure object.
    """
    scores = [p.habitability_score for p in planets]
    colors = [_HIGH_COLOR if s > HIGH_SCORE else _LOW_COLOR for s in scores]

    trace = go.Scatter(
        x=[p.mass_earths for p in planets],
        y=[p.radius_earths for p in planets],
        mode="markers",
        marker=dict(
            size=marker_sizes(scores),
            color=colors,
            opacity=0.6,
            line=dict(width=1, color=colors),
        ),
        customdata=scores,
        text=[p.name for p in planets],
        hovertemplate=(
            "<b>%{text}</b><br>"
            f"{t('mass', lang)}: %{{x}} M⊕<br>"
            f"{t('radius', lang)}: %{{y}} R⊕<br>"
            f"{t('habitability_score', lang)}: %{{customdata}}<extra></extra>"
        ),
        name="planets",
    )

    fig = go.Figure(data=[trace])
    fig.add_vline(
        x=1,
        line=dict(color=_EARTH_COLOR, dash="dash", width=1),
        annotation_text=t("chart_earth_mass", lang),
        annotation_position="top",
        annotation_font=dict(color=_EARTH_COLOR, size=9),
    )
    fig.add_hline(
        y=1,
        line=dict(color=_EARTH_COLOR, dash="dash", width=1),
        annotation_text=t("chart_earth_radius", lang),
        annotation_position="right",
        annotation_font=dict(color=_EARTH_COLOR, size=9),
    )

    axis = dict(
        rangemode="tozero",
        color=_AXIS_COLOR,
        gridcolor="rgba(71,85,105,0.25)",
        zeroline=False,
    )
    fig.update_layout(
        title=dict(text=t("chart_title", lang), font=dict(size=12, color="#94a3b8")),
        xaxis=dict(title=f"{t('mass', lang)} (M⊕)", **axis),
        yaxis=dict(title=f"{t('radius', lang)} (R⊕)", **axis),
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        height=320,
        margin=dict(l=40, r=40, t=50, b=40),
    )
    return fig
