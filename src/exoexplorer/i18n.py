"""Simple two-language (en/zh) translation helper."""

LANGUAGES: tuple[str, ...] = ("en", "zh")

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "Exoplanet Explorer",
        "zh": "Exoplanet Explorer",
    },
    "title": {
        "en": "Exoplanet",
        "zh": "Exoplanet",
    },
    "subtitle": {
        "en": "Charting Habitable Worlds",
        "zh": "宜居行星集汇",
    },
    "search_placeholder": {
        "en": "Enter star name (e.g. TRAPPIST-1, Proxima Centauri)...",
        "zh": "输入恒星名称 (如 TRAPPIST-1, 比邻星)...",
    },
    "btn_search": {
        "en": "Explore",
        "zh": "探索",
    },
    "btn_home": {
        "en": "Home",
        "zh": "首页",
    },
    "btn_language": {
        "en": "中文",
        "zh": "English",
    },
    "credits": {
        "en": "Designed by DaKES Institute",
        "zh": "DaKES Institute 设计制作",
    },
    "author": {
        "en": "Author: Fred Y. Ye",
        "zh": "作者：Fred Y. Ye (叶鹰)",
    },
    "distance": {
        "en": "Distance",
        "zh": "距离",
    },
    "mass": {
        "en": "Mass",
        "zh": "质量",
    },
    "radius": {
        "en": "Radius",
        "zh": "半径",
    },
    "habitability_score": {
        "en": "Habitability Score",
        "zh": "宜居指数",
    },
    "discovery": {
        "en": "Discovered",
        "zh": "发现年份",
    },
    "confirmed": {
        "en": "Confirmed",
        "zh": "已确认",
    },
    "candidate": {
        "en": "Candidate",
        "zh": "候选",
    },
    "sources": {
        "en": "Grounding Sources",
        "zh": "数据来源",
    },
    "spectral": {
        "en": "Spectral",
        "zh": "光谱",
    },
    "habitables": {
        "en": "{count} Habitables",
        "zh": "{count} 颗宜居行星",
    },
    "no_results": {
        "en": "No habitable planets found for this star. Try another!",
        "zh": "未找到该恒星的宜居行星。请尝试搜索其他恒星！",
    },
    "clear_filters": {
        "en": "Clear Filter Protocols",
        "zh": "清除筛选条件",
    },
    "recent_discoveries": {
        "en": "Key Discoveries",
        "zh": "最新发现行星",
    },
    "discovered_planets": {
        "en": "Discovered Planets",
        "zh": "已发现行星",
    },
    "suggestions": {
        "en": "Suggestions",
        "zh": "推荐",
    },
    "error_fetch": {
        "en": "Failed to fetch celestial data. Please check your connection.",
        "zh": "获取天体数据失败，请检查网络连接。",
    },
    "error_config": {
        "en": "The generative service is not configured: {error}",
        "zh": "生成服务未配置：{error}",
    },
    "loading": {
        "en": "Stargazing...",
        "zh": "正在数星星...",
    },
    "loading_step_1": {
        "en": "Scanning deep space frequencies...",
        "zh": "正在扫描深空频段...",
    },
    "loading_step_2": {
        "en": "Synthesizing planetary data...",
        "zh": "正在合成行星档案...",
    },
    "advanced": {
        "en": "Advanced Filters",
        "zh": "高级筛选",
    },
    "min_mass": {
        "en": "Min Mass (M⊕)",
        "zh": "最小质量 (M⊕)",
    },
    "max_mass": {
        "en": "Max Mass (M⊕)",
        "zh": "最大质量 (M⊕)",
    },
    "max_distance": {
        "en": "Max Distance (LY)",
        "zh": "最大距离 (光年)",
    },
    "earth_like_only": {
        "en": "Earth-like Only",
        "zh": "仅限类地行星",
    },
    "star_type": {
        "en": "Star Spectral Type",
        "zh": "恒星光谱类型",
    },
    "reset": {
        "en": "Reset Filters",
        "zh": "重置筛选",
    },
    "chart_title": {
        "en": "Mass-Radius Habitability Matrix",
        "zh": "质量-半径宜居矩阵",
    },
    "chart_earth_mass": {
        "en": "Earth Mass",
        "zh": "地球质量",
    },
    "chart_earth_radius": {
        "en": "Earth Radius",
        "zh": "地球半径",
    },
    "spectral_any": {
        "en": "All Types",
        "zh": "所有类型",
    },
    "spectral_G": {
        "en": "G-Type (Sun-like)",
        "zh": "G型 (类太阳)",
    },
    "spectral_M": {
        "en": "M-Dwarf (Red Dwarf)",
        "zh": "M型 (红矮星)",
    },
    "spectral_K": {
        "en": "K-Type (Orange Dwarf)",
        "zh": "K型 (橙矮星)",
    },
    "spectral_F": {
        "en": "F-Type (Yellow-White)",
        "zh": "F型 (黄白矮星)",
    },
    "spectral_A": {
        "en": "A-Type (White Star)",
        "zh": "A型 (白星)",
    },
}

_LOADING_STAGES: dict[str, tuple[str, ...]] = {
    "en": (
        "Calibrating telescope focus...",
        "Searching astronomical archives...",
        "Analyzing orbital trajectories...",
        "Generating planetary visuals...",
        "Finalizing celestial map...",
    ),
    "zh": (
        "校准望远镜焦距...",
        "检索天文档案...",
        "分析轨道运行轨迹...",
        "合成行星视觉图像...",
        "完成星图绘制...",
    ),
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def loading_stages(lang: str) -> tuple[str, ...]:
    """Ordered progress messages for the loading overlay."""
    return _LOADING_STAGES.get(lang, _LOADING_STAGES["en"])


def other_language(lang: str) -> str:
    return "en" if lang == "zh" else "zh"
