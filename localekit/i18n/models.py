"""Translation models for the i18n system.

Defines the translation table, the options record accepted by the resolver
and the explicit result types returned by resolution and interpolation.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

SEPARATOR = "."

KeyPath = Union[str, Sequence[str]]

_LOCALE_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:[_-][A-Za-z0-9]{2,8})*$")


class InvalidLocaleError(ValueError):
    """Raised when a locale code is malformed."""


def normalize_locale(locale_str: str) -> str:
    """Normalize a locale code to underscore form.

    "pt-br" and "pt_BR" both become "pt_BR"; "EN" becomes "en".

    Args:
        locale_str: Locale code in hyphen or underscore form.

    Returns:
        Normalized locale code.

    Raises:
        InvalidLocaleError: If the code is malformed.
    """
    candidate = (locale_str or "").strip()
    if not _LOCALE_PATTERN.match(candidate):
        raise InvalidLocaleError(f"Invalid locale: {locale_str!r}")

    parts = re.split(r"[_-]", candidate)
    language = parts[0].lower()
    rest = []
    for part in parts[1:]:
        # Region subtags are upper case, scripts title case (e.g. zh_Hant_TW)
        if len(part) == 4 and part.isalpha():
            rest.append(part.title())
        elif len(part) in (2, 3):
            rest.append(part.upper())
        else:
            rest.append(part)
    return "_".join([language] + rest)


def language_of(locale_str: str) -> str:
    """Language part of a locale code ("bs" from "bs_BA")."""
    return re.split(r"[_-]", locale_str)[0].lower()


def split_key(key: KeyPath) -> List[str]:
    """Split a key path into its segments.

    List items holding dots are split too, so
    ``split_key(["user.profile", "title"]) == ["user", "profile", "title"]``.
    """
    if isinstance(key, str):
        return key.split(SEPARATOR)
    return [part for segment in key for part in str(segment).split(SEPARATOR)]


def join_key(key: KeyPath) -> str:
    """Join a key path into its dotted form."""
    if isinstance(key, str):
        return key
    return SEPARATOR.join(str(segment) for segment in key)


def is_count(value: Any) -> bool:
    """True if value is a numeric count that triggers pluralization."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class TranslateOptions:
    """Options for a single lookup or translation.

    Attributes:
        scope: Key path prefix prepended to the requested key.
        locale: Locale override for this call.
        count: Numeric count; selects a plural branch and is interpolated.
        default: Value returned by lookup when the path is missing.
        values: Interpolation values by placeholder name.
    """

    scope: Optional[str] = None
    locale: Optional[str] = None
    count: Optional[Union[int, float]] = None
    default: Optional[Any] = None
    values: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def merge(cls, *sources: Optional["TranslateOptions"]) -> "TranslateOptions":
        """Merge several option sources.

        For each field the first non-None value wins, scanning the sources
        left to right. Interpolation values are merged per name with the
        same precedence.

        Args:
            *sources: Option records, highest precedence first. None entries
                are skipped.

        Returns:
            Merged TranslateOptions.
        """
        merged: Dict[str, Any] = {}
        values: Dict[str, Any] = {}
        for source in sources:
            if source is None:
                continue
            for name in ("scope", "locale", "count", "default"):
                value = getattr(source, name)
                if merged.get(name) is None and value is not None:
                    merged[name] = value
            for name, value in source.values.items():
                if values.get(name) is None and value is not None:
                    values[name] = value
        return cls(values=values, **merged)

    def with_locale(self, locale: str) -> "TranslateOptions":
        """Copy of these options resolving against another locale."""
        return TranslateOptions(
            scope=self.scope,
            locale=locale,
            count=self.count,
            default=self.default,
            values=self.values,
        )

    @property
    def needs_pluralization(self) -> bool:
        """True if count is a number."""
        return is_count(self.count)

    def interpolation_values(self) -> Dict[str, Any]:
        """Values visible to placeholders, count included."""
        result = dict(self.values)
        if self.count is not None and result.get("count") is None:
            result["count"] = self.count
        return result


@dataclass
class TranslationTable:
    """Locale-keyed nested translation data.

    Attributes:
        translations: {locale: nested mapping} walked under the root segment.
        extras: {locale: nested mapping} walked with the un-rooted path when
            the primary table yields nothing.
        loaded_at: Timestamp (ISO 8601) when the data was loaded.
    """

    translations: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    extras: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    @property
    def locales(self) -> List[str]:
        """Locales with primary translations, sorted."""
        return sorted(self.translations.keys())

    def messages_for(self, locale: str) -> Dict[str, Any]:
        """Primary translations for a locale (empty if unknown)."""
        return self.translations.get(locale) or {}

    def extras_for(self, locale: str) -> Optional[Dict[str, Any]]:
        """Extras translations for a locale, None if there are none."""
        return self.extras.get(locale) or None

    def merge(self, other: "TranslationTable") -> None:
        """Deep-merge another table into this one.

        Later entries override earlier ones.

        Args:
            other: TranslationTable to merge.
        """
        for locale, messages in other.translations.items():
            self.translations[locale] = deep_merge(
                self.translations.get(locale, {}), messages
            )
        for locale, messages in other.extras.items():
            self.extras[locale] = deep_merge(self.extras.get(locale, {}), messages)


def deep_merge(base: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge incoming into a copy of base."""
    result = dict(base)
    for key, value in incoming.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            result[key] = deep_merge({}, value)
        else:
            result[key] = value
    return result


@dataclass(frozen=True)
class InterpolationResult:
    """Outcome of placeholder substitution.

    Attributes:
        text: Interpolated text, None on failure.
        error: Reason for failure, None on success.
        missing: Placeholder names that had no value.
    """

    text: Optional[str] = None
    error: Optional[str] = None
    missing: tuple = ()

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of a translation.

    Attributes:
        text: Display string; the missing-translation marker when degraded.
        resolved: True if a translation was found and interpolated.
        locale: Locale the translation was resolved from, if any.
        reason: Why the result degraded ("missing", "plural_missing",
            "interpolation_failed"), None when resolved.
    """

    text: str
    resolved: bool
    locale: Optional[str] = None
    reason: Optional[str] = None

    def __str__(self) -> str:
        return self.text
