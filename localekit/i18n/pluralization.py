"""Pluralization rules for selecting a plural branch from a count.

A rule maps the absolute value of a count to a plural category tag, or to an
ordered list of tags to probe (most specific first). Every locale without a
rule of its own uses the baseline English rule.
"""

from typing import Callable, Dict, List, Optional, Sequence, Union

from localekit.i18n.models import language_of
from localekit.logging import get_module_logger

logger = get_module_logger()

PluralTags = Union[str, Sequence[str]]
PluralRule = Callable[[float], PluralTags]

OTHER = "other"


def _is_integer(n: float) -> bool:
    return float(n).is_integer()


def english_rule(n: float) -> PluralTags:
    """Baseline rule: zero probes zero/none/other, one is "one"."""
    if n == 0:
        return ["zero", "none", OTHER]
    if n == 1:
        return "one"
    return OTHER


def bosnian_rule(n: float) -> PluralTags:
    """Bosnian, Croatian and Serbian integers: one, few, other."""
    if not _is_integer(n):
        return OTHER
    i = int(n)
    if i % 10 == 1 and i % 100 != 11:
        return "one"
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return "few"
    return OTHER


def east_slavic_rule(n: float) -> PluralTags:
    """Russian and Ukrainian: one, few, many; fractions are other."""
    if not _is_integer(n):
        return OTHER
    i = int(n)
    if i % 10 == 1 and i % 100 != 11:
        return "one"
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return "few"
    return "many"


def polish_rule(n: float) -> PluralTags:
    if not _is_integer(n):
        return OTHER
    i = int(n)
    if i == 1:
        return "one"
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return "few"
    return "many"


def czech_rule(n: float) -> PluralTags:
    if not _is_integer(n):
        return "many"
    if n == 1:
        return "one"
    if 2 <= n <= 4:
        return "few"
    return OTHER


def french_rule(n: float) -> PluralTags:
    """French treats both 0 and 1 (and fractions below 2) as singular."""
    if 0 <= n < 2:
        return "one"
    return OTHER


def arabic_rule(n: float) -> PluralTags:
    if not _is_integer(n):
        return OTHER
    i = int(n)
    if i == 0:
        return "zero"
    if i == 1:
        return "one"
    if i == 2:
        return "two"
    if 3 <= i % 100 <= 10:
        return "few"
    if 11 <= i % 100 <= 99:
        return "many"
    return OTHER


def invariant_rule(n: float) -> PluralTags:
    """Languages without grammatical number."""
    return OTHER


BUILTIN_RULES: Dict[str, PluralRule] = {
    "en": english_rule,
    "bs": bosnian_rule,
    "bs_BA": bosnian_rule,
    "hr": bosnian_rule,
    "sr": bosnian_rule,
    "ru": east_slavic_rule,
    "uk": east_slavic_rule,
    "pl": polish_rule,
    "pl_PL": polish_rule,
    "cs": czech_rule,
    "sk": czech_rule,
    "fr": french_rule,
    "ar": arabic_rule,
    "ja": invariant_rule,
    "ko": invariant_rule,
    "zh_CN": invariant_rule,
    "zh_TW": invariant_rule,
}


class PluralizationRules:
    """Registry of pluralization rules keyed by locale.

    Lookup order for a locale: exact code, language-only code, then the
    baseline locale's rule.

    Attributes:
        baseline_locale: Locale whose rule applies when nothing else does.
    """

    def __init__(
        self,
        rules: Optional[Dict[str, PluralRule]] = None,
        baseline_locale: str = "en",
    ):
        self._rules: Dict[str, PluralRule] = dict(BUILTIN_RULES)
        if rules:
            self._rules.update(rules)
        self.baseline_locale = baseline_locale
        if baseline_locale not in self._rules:
            self._rules[baseline_locale] = english_rule

    def register(self, locale: str, rule: PluralRule) -> None:
        """Register or replace the rule for a locale."""
        self._rules[locale] = rule
        logger.debug("registered_plural_rule", locale=locale)

    def rule_for(self, locale: str) -> PluralRule:
        """Rule applying to a locale."""
        rule = self._rules.get(locale)
        if rule is None:
            rule = self._rules.get(language_of(locale))
        if rule is None:
            rule = self._rules[self.baseline_locale]
        return rule

    def tags_for(self, locale: str, count: float) -> List[str]:
        """Category tags to probe for a count, most specific first.

        The rule receives the absolute value of the count.
        """
        tags = self.rule_for(locale)(abs(count))
        if isinstance(tags, str):
            return [tags]
        return list(tags)

    def candidate_keys(self, locale: str, count: float) -> List[str]:
        """Keys to probe in a pluralization object for a count.

        Exact-count keys (e.g. "0") come first, then the rule's tags, then
        "other".
        """
        keys = [exact_count_key(count)]
        for tag in self.tags_for(locale, count):
            if tag not in keys:
                keys.append(tag)
        if OTHER not in keys:
            keys.append(OTHER)
        return keys


def exact_count_key(count: float) -> str:
    """String form of a count used for exact-count overrides."""
    if isinstance(count, float) and count.is_integer():
        return str(int(count))
    return str(count)
