"""Unit tests for the translation table."""

import pytest

from exoexplorer.i18n import _STRINGS, LANGUAGES, loading_stages, other_language, t
from exoexplorer.models import STAR_TYPES


@pytest.mark.parametrize("key", sorted(_STRINGS))
def test_every_key_has_both_languages(key):
    for lang in LANGUAGES:
        assert _STRINGS[key][lang]


def test_lookup():
    assert t("btn_search", "en") == "Explore"
    assert t("btn_search", "zh") == "探索"


def test_unknown_language_falls_back_to_english():
    assert t("btn_search", "fr") == "Explore"


def test_unknown_key_returns_key():
    assert t("no_such_key", "en") == "no_such_key"


def test_spectral_labels_exist_for_every_star_type():
    for code in STAR_TYPES:
        assert t(f"spectral_{code}", "en") != f"spectral_{code}"


def test_loading_stages():
    assert len(loading_stages("en")) == len(loading_stages("zh")) == 5
    assert loading_stages("fr") == loading_stages("en")


def test_other_language():
    assert other_language("en") == "zh"
    assert other_language("zh") == "en"
