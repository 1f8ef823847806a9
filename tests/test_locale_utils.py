"""Tests for locale_utils.py.

Covers normalize_locale and the cached get_babel_locale lookup, including
property-based tests with Hypothesis for locale normalization.

Python 3.13+.
"""

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from cldrplural.locale_utils import get_babel_locale, normalize_locale


class TestNormalizeLocale:
    """normalize_locale converts BCP-47 separators to POSIX."""

    def test_bcp47_to_posix(self) -> None:
        """Hyphen becomes underscore."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        """POSIX codes are unchanged."""
        assert normalize_locale("en_US") == "en_US"

    def test_simple_locale(self) -> None:
        """Language-only codes are unchanged."""
        assert normalize_locale("en") == "en"

    def test_multiple_hyphens(self) -> None:
        """Every hyphen is converted."""
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_surrounding_whitespace_stripped(self) -> None:
        """Whitespace around the code is removed."""
        assert normalize_locale("  pt-BR\n") == "pt_BR"

    @given(
        parts=st.lists(
            st.text(alphabet=st.characters(categories=("Ll", "Lu")), min_size=1, max_size=8),
            min_size=1,
            max_size=4,
        )
    )
    def test_no_hyphens_survive(self, parts: list[str]) -> None:
        """Property: output has no hyphens and the same number of subtags."""
        event(f"subtags={len(parts)}")
        result = normalize_locale("-".join(parts))
        assert "-" not in result
        assert result.split("_") == parts

    @given(code=st.text(alphabet="abcdefghijklmnopqrstuvwxyz_-", max_size=20))
    def test_idempotent(self, code: str) -> None:
        """Property: normalizing twice equals normalizing once."""
        once = normalize_locale(code)
        assert normalize_locale(once) == once


class TestGetBabelLocale:
    """get_babel_locale parses and caches Babel Locale objects."""

    def test_returns_locale(self) -> None:
        """A Babel Locale is returned for BCP-47 input."""
        locale = get_babel_locale("en-US")

        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_cached(self) -> None:
        """Repeated lookups return the same object."""
        assert get_babel_locale("lv_LV") is get_babel_locale("lv_LV")

    def test_cache_info_counts_hits(self) -> None:
        """The lookup is an lru_cache."""
        get_babel_locale.cache_clear()
        get_babel_locale("de")
        get_babel_locale("de")

        info = get_babel_locale.cache_info()
        assert info.hits == 1
        assert info.misses == 1

    def test_unknown_locale_raises(self) -> None:
        """Unknown locales propagate Babel's UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx_XX")

    @pytest.mark.parametrize("code", ["", "123"])
    def test_malformed_locale_raises(self, code: str) -> None:
        """Malformed codes propagate ValueError."""
        with pytest.raises(ValueError):
            get_babel_locale(code)
