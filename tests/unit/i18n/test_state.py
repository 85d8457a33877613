"""Tests for localekit.i18n.state module."""

import pytest

from localekit.i18n import InvalidLocaleError, LocaleState


class TestLocaleState:
    """Tests for LocaleState."""

    def test_current_locale_defaults(self):
        """Without a selected locale the default locale applies."""
        state = LocaleState(default_locale="en")
        assert state.locale is None
        assert state.current_locale() == "en"

    def test_set_locale_normalizes(self):
        state = LocaleState()
        assert state.set_locale("bs-ba") == "bs_BA"
        assert state.current_locale() == "bs_BA"

    def test_set_locale_none_clears(self):
        state = LocaleState(locale="fr")
        assert state.set_locale(None) == "en"

    def test_set_locale_invalid(self):
        """Malformed codes raise and leave the state unchanged."""
        state = LocaleState(locale="fr")
        with pytest.raises(InvalidLocaleError):
            state.set_locale("not a locale")
        assert state.current_locale() == "fr"

    def test_fallback_chain_current_is_default(self):
        """No fallbacks when the current locale is the default and baseline."""
        assert LocaleState(locale="en").fallback_chain() == []

    def test_fallback_chain_order(self):
        """Fallback locale, then default, then baseline, without repeats."""
        state = LocaleState(
            locale="bs_BA",
            default_locale="fr",
            fallback_locale="hr",
            baseline_locale="en",
        )
        assert state.fallback_chain() == ["hr", "fr", "en"]

    def test_fallback_chain_deduplicates(self):
        state = LocaleState(locale="bs_BA", default_locale="en", fallback_locale="en")
        assert state.fallback_chain() == ["en"]

    def test_fallback_chain_disabled(self):
        state = LocaleState(locale="bs_BA", no_fallbacks=True)
        assert state.fallback_chain() == []

    def test_set_no_fallbacks(self):
        state = LocaleState(locale="bs_BA")
        state.set_no_fallbacks(True)
        assert state.no_fallbacks is True
        assert state.fallback_chain() == []
