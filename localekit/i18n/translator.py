"""Translation resolver.

Resolves dotted key paths against a locale-keyed translation table, walks the
locale fallback chain, selects plural branches and interpolates placeholders.
Translation never raises: anything that cannot be resolved degrades to a
bracketed missing-translation marker.
"""

from typing import Any, Mapping, Optional

from localekit.i18n.interpolation import interpolate
from localekit.i18n.models import (
    SEPARATOR,
    KeyPath,
    TranslateOptions,
    TranslationResult,
    TranslationTable,
    join_key,
    split_key,
)
from localekit.i18n.numbers import (
    DEFAULT_NUMBER_FORMAT,
    Number,
    NumberFormat,
    apply_unit_format,
    human_size_parts,
    to_number,
)
from localekit.i18n.pluralization import PluralizationRules
from localekit.i18n.state import LocaleState
from localekit.logging import get_module_logger

logger = get_module_logger()

DEFAULT_ROOT_SEGMENT = "js"
DEFAULT_STORAGE_FORMAT = "%n %u"
DEFAULT_PERCENTAGE_FORMAT = "%n%"


class Translator:
    """Service for looking up and translating messages.

    Attributes:
        table: Translation data, read-only after construction.
        state: Current-locale state and fallback configuration.
        rules: Pluralization rule registry.
        root_segment: Segment prefixed to every primary-table key path.
    """

    def __init__(
        self,
        table: TranslationTable,
        state: Optional[LocaleState] = None,
        rules: Optional[PluralizationRules] = None,
        root_segment: str = DEFAULT_ROOT_SEGMENT,
    ):
        self.table = table
        self.state = state or LocaleState()
        self.rules = rules or PluralizationRules(
            baseline_locale=self.state.baseline_locale
        )
        self.root_segment = root_segment
        logger.info(
            "initialized_translator",
            locales=table.locales,
            default_locale=self.state.default_locale,
            fallback_locale=self.state.fallback_locale,
        )

    def current_locale(self) -> str:
        return self.state.current_locale()

    # Lookup

    def lookup(self, key: KeyPath, options: Optional[TranslateOptions] = None) -> Any:
        """Return the raw value stored at a key path.

        The scope option is prepended to the key and the root segment is
        prepended unless already present. When the primary table has nothing
        at that path, the extras table for the same locale is walked with the
        un-rooted path.

        Args:
            key: Dotted key path or list of segments.
            options: Lookup options (scope, locale, default).

        Returns:
            A string, a nested mapping (e.g. a pluralization object), the
            default option, or None.
        """
        options = options or TranslateOptions()
        locale = options.locale or self.current_locale()

        path = split_key(key)
        if options.scope:
            path = split_key(options.scope) + path

        segments = path
        if not path or path[0] != self.root_segment:
            segments = [self.root_segment, *path]

        value = _walk(self.table.messages_for(locale), segments)

        if value is None:
            extras = self.table.extras_for(locale)
            if extras is not None:
                value = _walk(extras, path)

        if value is None:
            return options.default
        return value

    # Pluralization

    def select_plural(
        self,
        translation: Mapping[str, Any],
        count: Number,
        locale: Optional[str] = None,
    ) -> Optional[Any]:
        """Pick the branch of a pluralization object for a count.

        Probes the exact count key, then the locale rule's tags, then
        "other".

        Returns:
            The branch value, or None if no candidate key is present.
        """
        locale = locale or self.current_locale()
        for candidate in self.rules.candidate_keys(locale, count):
            value = translation.get(candidate)
            if value is not None:
                return value
        return None

    def _find_translation(self, key: KeyPath, options: TranslateOptions):
        """Resolve a key at options.locale.

        Returns:
            (value, failed plural tag or None)
        """
        value = self.lookup(key, options)
        if options.needs_pluralization and isinstance(value, Mapping):
            locale = options.locale or self.current_locale()
            branch = self.select_plural(value, options.count, locale)
            if branch is None:
                return None, self.rules.tags_for(locale, options.count)[0]
            return branch, None
        return value, None

    # Translation

    def missing_translation(self, key: KeyPath, tag: Optional[str] = None) -> str:
        """Marker for an unresolved translation, e.g. ``[en.nope.missing]``."""
        message = f"[{self.current_locale()}{SEPARATOR}{join_key(key)}"
        if tag:
            message += f"{SEPARATOR}{tag}"
        return message + "]"

    def translate_result(
        self,
        key: KeyPath,
        options: Optional[TranslateOptions] = None,
    ) -> TranslationResult:
        """Translate a key, reporting whether it resolved.

        Tries the requested (or current) locale, then the fallback chain,
        stopping at the first non-empty value. The resolved string is
        interpolated with the option values and the count.

        Args:
            key: Dotted key path or list of segments.
            options: Translation options.

        Returns:
            TranslationResult; ``text`` is the missing-translation marker when
            ``resolved`` is False.
        """
        options = TranslateOptions.merge(options)
        requested = options.locale or self.current_locale()

        attempts = [requested]
        for locale in self.state.fallback_chain(requested):
            if locale not in attempts:
                attempts.append(locale)

        value: Any = None
        resolved_locale: Optional[str] = None
        plural_tag: Optional[str] = None
        for locale in attempts:
            value, failed_tag = self._find_translation(key, options.with_locale(locale))
            if failed_tag and plural_tag is None:
                plural_tag = failed_tag
            if value:
                resolved_locale = locale
                break

        if resolved_locale is not None and resolved_locale != requested:
            logger.debug(
                "used_fallback_translation",
                key=join_key(key),
                requested_locale=requested,
                fallback_locale=resolved_locale,
            )

        if value is None:
            reason = "plural_missing" if plural_tag else "missing"
            logger.warning(
                "translation_not_found",
                key=join_key(key),
                locale=requested,
                attempted_locales=attempts,
                plural_tag=plural_tag,
            )
            return TranslationResult(
                text=self.missing_translation(key, plural_tag),
                resolved=False,
                reason=reason,
            )

        result = interpolate(value, options.interpolation_values())
        if not result.ok:
            logger.warning(
                "interpolation_failed",
                key=join_key(key),
                locale=resolved_locale or requested,
                error=result.error,
            )
            return TranslationResult(
                text=self.missing_translation(key),
                resolved=False,
                locale=resolved_locale,
                reason="interpolation_failed",
            )

        if result.missing:
            logger.debug(
                "missing_interpolation_value",
                key=join_key(key),
                variables=list(result.missing),
            )

        return TranslationResult(
            text=result.text,
            resolved=True,
            locale=resolved_locale or requested,
        )

    def translate(
        self,
        key: KeyPath,
        options: Optional[TranslateOptions] = None,
    ) -> str:
        """Translate a key to a display string. Never raises."""
        return self.translate_result(key, options).text

    # Numbers

    def number_format(
        self, locale: Optional[str] = None, path: str = "number.format"
    ) -> NumberFormat:
        """Number format options stored in the table for a locale."""
        return NumberFormat.from_mapping(
            self.lookup(path, TranslateOptions(locale=locale))
        )

    def to_number(
        self,
        number: Number,
        options: Optional[NumberFormat] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Format a number with the locale's separator and delimiter.

        Caller options take precedence over the table's ``number.format``
        entry, which takes precedence over the defaults.
        """
        fmt = NumberFormat.merge(
            options, self.number_format(locale), DEFAULT_NUMBER_FORMAT
        )
        return to_number(number, fmt)

    def to_human_size(
        self,
        number: Number,
        options: Optional[NumberFormat] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Format a byte count with a storage unit, e.g. "1.5 MB"."""
        size, unit_key, precision = human_size_parts(number)
        units = "number.human.storage_units.units"
        if unit_key is None:
            count = int(size) if size.is_integer() else size
            unit = self.translate(
                f"{units}.byte", TranslateOptions(locale=locale, count=count)
            )
        else:
            unit = self.translate(f"{units}.{unit_key}", TranslateOptions(locale=locale))

        stored = self.lookup(
            "number.human.storage_units.format", TranslateOptions(locale=locale)
        )
        fmt = NumberFormat.merge(
            options,
            NumberFormat(
                precision=precision,
                delimiter="",
                format=stored if isinstance(stored, str) else DEFAULT_STORAGE_FORMAT,
            ),
        )
        return apply_unit_format(fmt.format, self.to_number(size, fmt, locale), unit)

    def to_percentage(
        self,
        number: Number,
        options: Optional[NumberFormat] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Format a number as a percentage, e.g. "12.500%"."""
        fmt = NumberFormat.merge(
            options,
            self.number_format(locale, "number.percentage.format"),
            NumberFormat(format=DEFAULT_PERCENTAGE_FORMAT),
        )
        return fmt.format.replace("%n", self.to_number(number, fmt, locale))


def _walk(tree: Any, segments) -> Any:
    node = tree
    for segment in segments:
        if not isinstance(node, Mapping):
            return None
        node = node.get(segment)
        if node is None:
            return None
    return node
