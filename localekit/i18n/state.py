"""Current-locale state shared by the translator.

Holds the locale configuration that can change at runtime without reloading
translation data. Mutations are guarded by a lock so the state can be shared
across threads.
"""

import threading
from typing import List, Optional

from localekit.i18n.models import normalize_locale
from localekit.logging import get_module_logger

logger = get_module_logger()


class LocaleState:
    """Locale selection for a translator.

    Attributes:
        default_locale: Locale used when no current locale is set.
        fallback_locale: Locale tried first when a key is missing.
        baseline_locale: Last locale of the fallback chain.
        no_fallbacks: Disable the fallback chain.
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        default_locale: str = "en",
        fallback_locale: Optional[str] = None,
        baseline_locale: str = "en",
        no_fallbacks: bool = False,
    ):
        self._lock = threading.Lock()
        self._locale = locale
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale
        self.baseline_locale = baseline_locale
        self.no_fallbacks = no_fallbacks

    @property
    def locale(self) -> Optional[str]:
        """Explicitly selected locale, None if unset."""
        return self._locale

    def current_locale(self) -> str:
        """Selected locale, or the default locale when none is selected."""
        return self._locale or self.default_locale

    def set_locale(self, locale: Optional[str]) -> str:
        """Switch the current locale.

        Args:
            locale: Locale code, normalized before use. None clears the
                selection so the default locale applies.

        Returns:
            The new current locale.

        Raises:
            InvalidLocaleError: If the code is malformed.
        """
        new_locale = normalize_locale(locale) if locale is not None else None
        with self._lock:
            old_locale = self._locale
            self._locale = new_locale
        logger.info(
            "locale_changed",
            old_locale=old_locale,
            new_locale=new_locale or self.default_locale,
        )
        return self.current_locale()

    def set_no_fallbacks(self, value: bool) -> None:
        with self._lock:
            self.no_fallbacks = value

    def fallback_chain(self, requested: Optional[str] = None) -> List[str]:
        """Locales tried after the requested one, in order.

        Fallback locale, then the default and baseline locales when they
        differ from the requested locale (the current locale unless given).
        Empty when fallbacks are disabled.
        """
        if self.no_fallbacks:
            return []

        current = requested or self.current_locale()
        candidates = [self.fallback_locale]
        if current != self.default_locale:
            candidates.append(self.default_locale)
        if current != self.baseline_locale:
            candidates.append(self.baseline_locale)

        chain: List[str] = []
        for locale in candidates:
            if locale and locale not in chain:
                chain.append(locale)
        return chain
