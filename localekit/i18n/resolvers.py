"""Locale negotiation for picking the locale to switch to.

Chooses the best available locale from an Accept-Language header or a list
of requested locale codes.
"""

from typing import Iterable, List, Optional, Tuple

from localekit.i18n.models import InvalidLocaleError, language_of, normalize_locale
from localekit.logging import get_module_logger

logger = get_module_logger()


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into locale codes by preference.

    "bs-BA,bs;q=0.9,en;q=0.8" -> ["bs_BA", "bs", "en"]. Wildcards and
    malformed ranges are dropped; an invalid quality counts as 1.0.
    """
    if not header:
        return []

    preferences: List[Tuple[str, float, int]] = []
    for position, part in enumerate(header.split(",")):
        lang_range = part.split(";")[0].strip()
        quality = 1.0

        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        if not lang_range or lang_range == "*":
            continue
        try:
            preferences.append((normalize_locale(lang_range), quality, position))
        except InvalidLocaleError:
            logger.debug("skipped_invalid_language_range", lang_range=lang_range)

    preferences.sort(key=lambda item: (-item[1], item[2]))
    return [locale for locale, _, _ in preferences]


class LocaleNegotiator:
    """Matches requested locales against available ones.

    Attributes:
        default_locale: Returned when nothing matches.
    """

    def __init__(self, default_locale: str = "en"):
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    @staticmethod
    def matches(requested: str, available: str, strict: bool = False) -> bool:
        """Check if an available locale satisfies a requested one.

        Args:
            requested: Requested locale (e.g. "bs_BA").
            available: Available locale (e.g. "bs").
            strict: Require an exact match instead of a language match.
        """
        if requested.lower() == available.lower():
            return True
        if strict:
            return False
        return language_of(requested) == language_of(available)

    def best_match(
        self,
        requested: Iterable[str],
        available: Iterable[str],
    ) -> Optional[str]:
        """Best available locale for the requested ones, None if no match.

        Each requested locale is tried in order, first exactly and then by
        language.
        """
        available = list(available)
        for req in requested:
            for avail in available:
                if self.matches(req, avail, strict=True):
                    return avail
            for avail in available:
                if self.matches(req, avail):
                    return avail
        return None

    def negotiate(
        self,
        accept_language: Optional[str],
        available: Iterable[str],
    ) -> str:
        """Resolve the locale for an Accept-Language header.

        Returns:
            Best available locale, or the default locale.
        """
        match = self.best_match(parse_accept_language(accept_language), available)
        if match is None:
            self.log.info("no_matching_locale_in_header", header=accept_language)
            return self.default_locale
        self.log.info("resolved_from_header", locale=match)
        return match
