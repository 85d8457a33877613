"""Translation service facade.

Provides the ``I18n`` entry point used by rendering code: ``t``/``translate``
with keyword options, ``lookup``, number helpers and locale switching.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from localekit.i18n.factory import AnyTranslator, create_translator
from localekit.i18n.models import KeyPath, TranslateOptions, TranslationResult
from localekit.i18n.numbers import Number, NumberFormat
from localekit.i18n.resolvers import LocaleNegotiator
from localekit.i18n.verbose import (
    FlagStore,
    VerboseTranslator,
    enable_verbose_localization_session,
)


class I18n:
    """Class-based translation service.

    Thin facade over a Translator. Keyword arguments other than the named
    options become interpolation values.

    Usage:
        i18n = I18n(create_translator(table=table))
        i18n.t("greeting", name="Ana")          # "Hello, Ana!"
        i18n.t("apples", count=5)               # "5 apples"
        i18n.t("hint", key="Enter")             # "Press Enter to continue"
        i18n.t("switch", values={"locale": "Bosnian"})
        i18n.set_locale("bs_BA")
    """

    def __init__(self, translator: Optional[AnyTranslator] = None):
        self._translator = translator or create_translator()

    @property
    def translator(self) -> AnyTranslator:
        """Underlying translator."""
        return self._translator

    @staticmethod
    def _options(
        scope: Optional[str] = None,
        locale: Optional[str] = None,
        count: Optional[Number] = None,
        default: Optional[Any] = None,
        values: Optional[dict] = None,
    ) -> TranslateOptions:
        return TranslateOptions(
            scope=scope,
            locale=locale,
            count=count,
            default=default,
            values=values or {},
        )

    def translate(
        self,
        key: KeyPath,
        /,
        *,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
        count: Optional[Number] = None,
        default: Optional[Any] = None,
        values: Optional[Mapping[str, Any]] = None,
        **extra_values: Any,
    ) -> str:
        """Translate a key to a display string. Never raises.

        Args:
            key: Dotted key path or list of segments.
            scope: Key path prefix.
            locale: Locale override.
            count: Count selecting a plural branch.
            default: Value used when the key is missing.
            values: Interpolation values, including names that clash with
                the options above (e.g. ``{"locale": "Bosnian"}``).
            **extra_values: More interpolation values; these win over
                ``values`` on the same name.
        """
        options = self._options(
            scope, locale, count, default, _merge_values(values, extra_values)
        )
        return self._translator.translate(key, options)

    t = translate

    def translate_result(
        self,
        key: KeyPath,
        /,
        *,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
        count: Optional[Number] = None,
        default: Optional[Any] = None,
        values: Optional[Mapping[str, Any]] = None,
        **extra_values: Any,
    ) -> TranslationResult:
        """Like translate, but reports whether the key resolved."""
        options = self._options(
            scope, locale, count, default, _merge_values(values, extra_values)
        )
        return self._translator.translate_result(key, options)

    def lookup(
        self,
        key: KeyPath,
        *,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
        default: Optional[Any] = None,
    ) -> Any:
        """Raw value at a key path, or default/None."""
        return self._translator.lookup(
            key, self._options(scope=scope, locale=locale, default=default)
        )

    def pluralize(
        self,
        count: Number,
        key: KeyPath,
        /,
        *,
        values: Optional[Mapping[str, Any]] = None,
        **extra_values: Any,
    ) -> str:
        """Translate a pluralized key for a count.

        Every keyword becomes an interpolation value.
        """
        return self.translate(
            key, count=count, values=_merge_values(values, extra_values)
        )

    p = pluralize

    def missing_translation(self, key: KeyPath, tag: Optional[str] = None) -> str:
        return self._translator.missing_translation(key, tag)

    def to_number(
        self, number: Number, locale: Optional[str] = None, **options: Any
    ) -> str:
        """Format a number; options are NumberFormat fields."""
        return self._translator.to_number(number, NumberFormat(**options), locale)

    def to_human_size(
        self, number: Number, locale: Optional[str] = None, **options: Any
    ) -> str:
        return self._translator.to_human_size(number, NumberFormat(**options), locale)

    def to_percentage(
        self, number: Number, locale: Optional[str] = None, **options: Any
    ) -> str:
        return self._translator.to_percentage(number, NumberFormat(**options), locale)

    def current_locale(self) -> str:
        return self._translator.current_locale()

    def set_locale(self, locale: Optional[str]) -> str:
        """Switch the current locale without reloading translations.

        Raises:
            InvalidLocaleError: If the code is malformed.
        """
        return self._translator.state.set_locale(locale)

    def available_locales(self) -> list:
        return self._translator.table.locales

    def negotiate_locale(
        self,
        accept_language: Optional[str],
        available: Optional[Iterable[str]] = None,
    ) -> str:
        """Switch to the best available locale for an Accept-Language header.

        Args:
            accept_language: Header value, e.g. "bs-BA,bs;q=0.9,en;q=0.8".
            available: Candidate locales (default: locales in the table).

        Returns:
            The new current locale.
        """
        state = self._translator.state
        negotiator = LocaleNegotiator(default_locale=state.default_locale)
        locale = negotiator.negotiate(
            accept_language,
            self.available_locales() if available is None else available,
        )
        return state.set_locale(locale)

    def enable_verbose_localization(self) -> None:
        """Wrap the translator with verbose diagnostics."""
        if not isinstance(self._translator, VerboseTranslator):
            self._translator = VerboseTranslator(self._translator)

    def enable_verbose_localization_session(self, store: FlagStore) -> str:
        """Persist verbose mode for the session and enable it now."""
        message = enable_verbose_localization_session(store)
        self.enable_verbose_localization()
        return message


def _merge_values(
    values: Optional[Mapping[str, Any]], extra_values: Mapping[str, Any]
) -> Dict[str, Any]:
    merged = dict(values or {})
    merged.update(extra_values)
    return merged
