"""i18n system - message lookup, pluralization and interpolation.

Main components:
- models: TranslationTable, TranslateOptions, TranslationResult
- loader: TranslationLoader, MappingTranslationLoader, YAMLTranslationLoader
- pluralization: PluralizationRules and built-in rules
- interpolation: placeholder substitution
- numbers: to_number and NumberFormat
- translator: Translator (lookup, translate, number helpers)
- verbose: VerboseTranslator and session flag stores
- resolvers: LocaleNegotiator for Accept-Language negotiation
- service: I18n facade with the ``t`` alias
"""

from localekit.i18n.factory import create_translator
from localekit.i18n.interpolation import interpolate
from localekit.i18n.loader import (
    MappingTranslationLoader,
    TranslationLoadError,
    TranslationLoader,
    YAMLTranslationLoader,
)
from localekit.i18n.models import (
    InterpolationResult,
    InvalidLocaleError,
    TranslateOptions,
    TranslationResult,
    TranslationTable,
)
from localekit.i18n.numbers import NumberFormat, to_number
from localekit.i18n.pluralization import PluralizationRules
from localekit.i18n.resolvers import LocaleNegotiator
from localekit.i18n.service import I18n
from localekit.i18n.state import LocaleState
from localekit.i18n.translator import Translator
from localekit.i18n.verbose import (
    FileFlagStore,
    FlagStore,
    InMemoryFlagStore,
    VerboseTranslator,
)


def create_i18n(**kwargs) -> I18n:
    """I18n facade over a translator built by create_translator(**kwargs)."""
    return I18n(create_translator(**kwargs))


__all__ = [
    "I18n",
    "create_i18n",
    "create_translator",
    "Translator",
    "VerboseTranslator",
    "LocaleState",
    "LocaleNegotiator",
    "PluralizationRules",
    "TranslationTable",
    "TranslateOptions",
    "TranslationResult",
    "InterpolationResult",
    "InvalidLocaleError",
    "TranslationLoader",
    "MappingTranslationLoader",
    "YAMLTranslationLoader",
    "TranslationLoadError",
    "FlagStore",
    "InMemoryFlagStore",
    "FileFlagStore",
    "NumberFormat",
    "interpolate",
    "to_number",
]
