"""Exoplanet Explorer — Streamlit app for AI-charted habitable worlds."""

import html

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from exoexplorer.catalog import FEATURED_PLANETS  # noqa: E402
from exoexplorer.config import ConfigError, configure_logging, load_settings  # noqa: E402
from exoexplorer.controller import (  # noqa: E402
    ExplorerController,
    SearchState,
    SearchStatus,
)
from exoexplorer.gemini import GeminiService  # noqa: E402
from exoexplorer.i18n import t  # noqa: E402
from exoexplorer.models import STAR_TYPES, SearchFilters  # noqa: E402
from exoexplorer.renderers.cards import (  # noqa: E402
    render_loading_overlay,
    render_planet_card,
    render_source_chips,
)
from exoexplorer.renderers.plotly_chart import render_habitability_chart  # noqa: E402

try:
    settings = load_settings()
except ConfigError as e:
    st.error(str(e))
    st.stop()

configure_logging(settings.log_level)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once; until the JS call returns, the configured
# default language is used.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "zh" if _browser_lang.lower().startswith("zh") else "en"

_lang: str = st.session_state.get("lang", settings.default_lang)

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "controller" not in st.session_state:
    try:
        service = GeminiService(settings)
    except ConfigError as e:
        st.error(t("error_config", _lang).format(error=html.escape(str(e))))
        st.stop()
    st.session_state.controller = ExplorerController(service, lang=_lang)
if "pending_query" not in st.session_state:
    st.session_state.pending_query = None

controller: ExplorerController = st.session_state.controller
if controller.lang != _lang and "lang" in st.session_state:
    controller.set_language(_lang)
_lang = controller.lang


def _sync_filter_widgets(filters: SearchFilters) -> None:
    st.session_state.f_min_mass = float(filters.min_mass or 0.0)
    st.session_state.f_max_mass = float(filters.max_mass or 0.0)
    st.session_state.f_max_distance = float(filters.max_distance or 0.0)
    st.session_state.f_earth_like = filters.earth_like_only
    st.session_state.f_star_type = filters.star_type


if "f_min_mass" not in st.session_state:
    _sync_filter_widgets(controller.filters)
if "query_input" not in st.session_state:
    st.session_state.query_input = controller.query


# --- Widget callbacks (run before the script body on the next rerun) ---


def _on_query_change() -> None:
    controller.set_query(st.session_state.query_input)


def _on_submit() -> None:
    st.session_state.pending_query = st.session_state.query_input


def _on_pick(name: str) -> None:
    st.session_state.query_input = name
    controller.set_query(name)
    st.session_state.pending_query = name


def _on_home() -> None:
    controller.go_home()
    st.session_state.query_input = ""
    st.session_state.pending_query = None


def _on_toggle_language() -> None:
    st.session_state.lang = controller.toggle_language()


def _on_filters_change() -> None:
    controller.update_filters(
        min_mass=st.session_state.f_min_mass or None,
        max_mass=st.session_state.f_max_mass or None,
        max_distance=st.session_state.f_max_distance or None,
        earth_like_only=st.session_state.f_earth_like,
        star_type=st.session_state.f_star_type,
    )


def _on_reset_filters() -> None:
    _sync_filter_widgets(controller.reset_filters())


# --- Dark theme CSS (static) ---
st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #020617 !important;
        color: #e2e8f0;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] { display: none !important; }
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    [data-testid="stTextInput"] input {
        background-color: rgba(15, 23, 42, 0.8) !important;
        color: #ffffff !important;
        border: 2px solid #1e293b !important;
        border-radius: 1.2rem !important;
        font-size: 1.1rem !important;
    }
    [data-testid="stButton"] button {
        background-color: rgba(6, 182, 212, 0.15) !important;
        color: #22d3ee !important;
        border: 1px solid rgba(6, 182, 212, 0.5) !important;
        border-radius: 999px !important;
        font-weight: 600;
    }
    [data-testid="stButton"] button:hover { background-color: rgba(6, 182, 212, 0.3) !important; }
    label, [data-testid="stWidgetLabel"] p { color: #94a3b8 !important; font-size: 0.85rem !important; }
    .hero h1 { font-size: 4rem; text-align: center; color: #f8fafc; margin-bottom: 0; }
    .hero p { text-align: center; color: #64748b; letter-spacing: 0.3em; text-transform: uppercase; }
    .error-box {
        color: #f87171; background: rgba(239, 68, 68, 0.1);
        border: 1px solid rgba(239, 68, 68, 0.2); border-radius: 1rem;
        padding: 0.8rem; text-align: center; font-weight: 700;
    }
    .star-head { display: flex; align-items: center; gap: 1.5rem; }
    .star-head img {
        width: 7rem; height: 7rem; border-radius: 50%; object-fit: cover;
        box-shadow: 0 0 60px rgba(255, 165, 0, 0.5);
    }
    .star-head h2 { font-size: 3.5rem; color: #fff; margin: 0; }
    .pill {
        display: inline-block; padding: 0.3rem 0.9rem; margin-right: 0.5rem;
        border-radius: 0.7rem; font-size: 0.75rem; font-weight: 700; text-transform: uppercase;
        color: #22d3ee; border: 1px solid rgba(6, 182, 212, 0.3); background: rgba(6, 182, 212, 0.1);
    }
    .summary {
        font-size: 1.6rem; font-style: italic; font-weight: 300; color: #e2e8f0;
        border-left: 3px solid rgba(6, 182, 212, 0.6); padding: 1rem 1.5rem;
        background: rgba(15, 23, 42, 0.4); border-radius: 1.5rem;
    }
    .sources h5 { color: #475569; font-size: 0.65rem; letter-spacing: 0.3em; text-transform: uppercase; }
    .source-row { display: flex; flex-wrap: wrap; gap: 0.6rem; }
    .source-chip {
        padding: 0.5rem 1.1rem; border: 1px solid #1e293b; border-radius: 1rem;
        font-size: 0.75rem; color: #64748b !important; text-decoration: none;
    }
    .source-chip:hover { color: #22d3ee !important; border-color: #06b6d4; }
    .planet-card {
        background: rgba(15, 23, 42, 0.4); border: 1px solid rgba(30, 41, 59, 0.8);
        border-radius: 1.5rem; overflow: hidden; margin-bottom: 0.6rem;
    }
    .planet-card img { width: 100%; aspect-ratio: 16 / 10; object-fit: cover; }
    .planet-body { padding: 1.2rem 1.4rem; }
    .planet-head { display: flex; justify-content: space-between; align-items: center; }
    .planet-head h3 { color: #fff; margin: 0; }
    .badge { font-size: 0.65rem; color: #22d3ee; text-transform: uppercase; letter-spacing: 0.2em; }
    .score { color: #94a3b8; font-size: 0.85rem; margin: 0.6rem 0; }
    .score-bar, .progress { height: 4px; background: #1e293b; border-radius: 2px; margin-top: 0.3rem; }
    .score-bar div, .progress div { height: 100%; background: linear-gradient(90deg, #0891b2, #22d3ee); }
    .stats { display: grid; grid-template-columns: 1fr 1fr; gap: 0.4rem; }
    .stat span { display: block; font-size: 0.65rem; color: #64748b; text-transform: uppercase; }
    .stat b { color: #e2e8f0; }
    .planet-body p { color: #94a3b8; font-size: 0.9rem; }
    @keyframes breathe {
        0%, 100% { background-color: #020617; }
        50%       { background-color: #0b1a33; }
    }
    .loading-overlay {
        position: fixed !important; inset: 0 !important; z-index: 9999 !important;
        display: flex !important; align-items: center !important; justify-content: center !important;
        animation: breathe 4s ease-in-out infinite; text-align: center;
    }
    .loading-overlay h4 { color: #22d3ee; letter-spacing: 0.2em; }
    .loading-stage { color: #94a3b8; }
    .loading-overlay .progress { width: 18rem; margin: 0 auto; }
    [data-testid="stElementContainer"]:has(.loading-overlay) { all: unset !important; }
    .empty { text-align: center; padding: 5rem 0; color: #64748b; font-size: 1.4rem;
             border: 2px dashed rgba(30, 41, 59, 0.5); border-radius: 3rem; }
    .footer { margin-top: 6rem; padding-top: 2rem; border-top: 1px solid rgba(255,255,255,0.05);
              color: #475569; font-size: 0.8rem; display: flex; justify-content: space-between; }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Top bar: home + language toggle ---
_, nav_home, nav_lang = st.columns([8, 1, 1])
with nav_home:
    if controller.state.result is not None:
        st.button(t("btn_home", _lang), key="home_btn", on_click=_on_home)
with nav_lang:
    st.button(t("btn_language", _lang), key="lang_btn", on_click=_on_toggle_language)

if controller.state.result is None and controller.state.status is not SearchStatus.LOADING:
    st.markdown(
        f"<div class='hero'><h1>{t('title', _lang)}</h1>"
        f"<p>{t('subtitle', _lang)}</p></div>",
        unsafe_allow_html=True,
    )

# --- Search bar ---
# st.text_input reports edits on Enter or blur, not per keystroke, so suggestions
# refresh at that granularity. Enter commits the text; the Explore button searches.
col_query, col_btn = st.columns([6, 1])
with col_query:
    st.text_input(
        t("btn_search", _lang),
        key="query_input",
        placeholder=t("search_placeholder", _lang),
        on_change=_on_query_change,
        label_visibility="collapsed",
    )
with col_btn:
    st.button(
        t("btn_search", _lang),
        key="submit_btn",
        on_click=_on_submit,
        use_container_width=True,
    )

if controller.suggestions and st.session_state.pending_query is None:
    st.caption(t("suggestions", _lang))
    sug_cols = st.columns(len(controller.suggestions))
    for col, name in zip(sug_cols, controller.suggestions):
        with col:
            st.button(f"✦ {name}", key=f"sug_{name}", on_click=_on_pick, args=(name,))

# --- Advanced filters ---
with st.expander(t("advanced", _lang), expanded=controller.advanced_open):
    fcol1, fcol2, fcol3 = st.columns(3)
    with fcol1:
        st.number_input(
            t("min_mass", _lang), min_value=0.0, step=0.1, key="f_min_mass",
            on_change=_on_filters_change,
        )
    with fcol2:
        st.number_input(
            t("max_mass", _lang), min_value=0.0, step=0.5, key="f_max_mass",
            on_change=_on_filters_change,
        )
    with fcol3:
        st.number_input(
            t("max_distance", _lang), min_value=0.0, step=50.0, key="f_max_distance",
            on_change=_on_filters_change,
        )
    fcol4, fcol5, fcol6 = st.columns([1, 2, 1])
    with fcol4:
        st.checkbox(t("earth_like_only", _lang), key="f_earth_like", on_change=_on_filters_change)
    with fcol5:
        st.selectbox(
            t("star_type", _lang),
            options=STAR_TYPES,
            format_func=lambda code: t(f"spectral_{code}", _lang),
            key="f_star_type",
            on_change=_on_filters_change,
        )
    with fcol6:
        st.button(t("reset", _lang), key="reset_btn", on_click=_on_reset_filters)

error_placeholder = st.empty()
loading_placeholder = st.empty()


def _show_progress(state: SearchState) -> None:
    if state.status is SearchStatus.LOADING:
        loading_placeholder.markdown(render_loading_overlay(_lang, 1), unsafe_allow_html=True)
    elif state.status is SearchStatus.SUCCESS and state.image_pending:
        loading_placeholder.markdown(render_loading_overlay(_lang, 3), unsafe_allow_html=True)
    else:
        loading_placeholder.empty()


# --- Search handler ---
if st.session_state.pending_query is not None:
    pending = st.session_state.pending_query
    st.session_state.pending_query = None
    controller.subscribe(_show_progress)
    try:
        controller.search(pending)
    finally:
        controller.unsubscribe(_show_progress)
        loading_placeholder.empty()
    st.rerun()

state = controller.state

# --- Error message ---
if state.status is SearchStatus.FAILED and state.error:
    error_placeholder.markdown(
        f"<div class='error-box'>{html.escape(state.error)}</div>", unsafe_allow_html=True
    )

# --- Results ---
if state.result is not None:
    result = state.result
    info_col, chart_col = st.columns([2, 1])
    with info_col:
        img_html = (
            f"<img src='{html.escape(result.star_image_url, quote=True)}'"
            f" alt='{html.escape(result.star_name, quote=True)}'/>"
            if result.star_image_url
            else ""
        )
        count_pill = (
            f"<span class='pill'>{t('habitables', _lang).format(count=len(result.planets))}</span>"
            if result.planets
            else ""
        )
        st.markdown(
            f"<div class='star-head'>{img_html}<div>"
            f"<h2>{html.escape(result.star_name)}</h2>"
            f"<span class='pill'>{t('spectral', _lang)}: {html.escape(result.star_type)}</span>"
            f"{count_pill}</div></div>",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"<p class='summary'>“{html.escape(result.summary)}”</p>", unsafe_allow_html=True
        )
        st.markdown(render_source_chips(result.sources, _lang), unsafe_allow_html=True)
    with chart_col:
        if result.planets:
            st.plotly_chart(
                render_habitability_chart(result.planets, _lang),
                use_container_width=True,
                config={"displayModeBar": False},
            )

    st.subheader(t("discovered_planets", _lang))
    if result.planets:
        gallery = st.columns(3)
        for i, planet in enumerate(result.planets):
            with gallery[i % 3]:
                st.markdown(
                    render_planet_card(planet, _lang, controller.planet_image(planet)),
                    unsafe_allow_html=True,
                )
    else:
        st.markdown(f"<div class='empty'>{t('no_results', _lang)}</div>", unsafe_allow_html=True)
        st.button(t("clear_filters", _lang), key="clear_filters_btn", on_click=_on_reset_filters)
else:
    # --- Default view: featured discoveries ---
    st.subheader(t("recent_discoveries", _lang))
    feat_cols = st.columns(len(FEATURED_PLANETS))
    for col, planet in zip(feat_cols, FEATURED_PLANETS):
        with col:
            st.markdown(
                render_planet_card(planet, _lang, controller.planet_image(planet)),
                unsafe_allow_html=True,
            )
            st.button(
                f"✦ {planet.host_star}",
                key=f"feat_{planet.name}",
                on_click=_on_pick,
                args=(planet.name,),
                use_container_width=True,
            )

# --- Footer ---
st.markdown(
    f"<div class='footer'><span>{t('author', _lang)}</span><span>{t('credits', _lang)}</span></div>",
    unsafe_allow_html=True,
)
