"""Translation loading interface and implementations.

Defines the contract for loading translation tables and provides mapping-
and YAML-based loaders.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from localekit.i18n.models import TranslationTable, deep_merge
from localekit.logging import get_module_logger

logger = get_module_logger()

EXTRAS_DOMAIN = "extras"


class TranslationLoadError(ValueError):
    """Raised when translation data cannot be read or parsed."""


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self) -> TranslationTable:
        """Load the complete translation table.

        Returns:
            TranslationTable with primary and extras translations.

        Raises:
            TranslationLoadError: If the data cannot be loaded.
        """


class MappingTranslationLoader(TranslationLoader):
    """Loader for in-memory, locale-keyed nested mappings.

    Example:
        loader = MappingTranslationLoader(
            {"en": {"js": {"greeting": "Hello, {{name}}!"}}}
        )
    """

    def __init__(
        self,
        translations: Mapping[str, Any],
        extras: Optional[Mapping[str, Any]] = None,
    ):
        self.translations = translations
        self.extras = extras or {}

    def load(self) -> TranslationTable:
        table = TranslationTable(loaded_at=_timestamp())
        for locale, messages in self.translations.items():
            table.translations[locale] = _as_tree(messages, locale)
        for locale, messages in self.extras.items():
            table.extras[locale] = _as_tree(messages, locale)
        logger.info(
            "loaded_translations_from_mapping",
            locale_count=len(table.translations),
            extras_locale_count=len(table.extras),
        )
        return table


def _as_tree(messages: Any, locale: str) -> Dict[str, Any]:
    if not isinstance(messages, Mapping):
        raise TranslationLoadError(
            f"Translations for locale {locale} must be a mapping"
        )
    return deep_merge({}, messages)


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named ``<domain>.<locale>.yml`` (or ``.yaml``) in the
    translations directory. Files whose domain is ``extras`` populate the
    extras table. A file may hold the locale subtree directly or wrap it in
    a single top-level key equal to its locale (``bs_BA: {js: ...}``).

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether to keep the loaded table in memory.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Optional[TranslationTable] = None

        if not self.translations_dir.is_dir():
            raise TranslationLoadError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files(self):
        return sorted(
            list(self.translations_dir.glob("*.yml"))
            + list(self.translations_dir.glob("*.yaml"))
        )

    def load(self) -> TranslationTable:
        """Load every translation file in the directory.

        Raises:
            TranslationLoadError: If no files are found or a file is not
                valid YAML.
        """
        if self.use_cache and self.cache is not None:
            logger.debug("loaded_from_cache")
            return self.cache

        files = self._files()
        if not files:
            raise TranslationLoadError(
                f"No translation files found in {self.translations_dir}"
            )

        table = TranslationTable(loaded_at=_timestamp())
        for yaml_file in files:
            parts = yaml_file.stem.split(".")
            if len(parts) < 2:
                logger.warning("skipped_unnamed_translation_file", file=str(yaml_file))
                continue
            domain, locale = parts[0], parts[-1]

            data = self._read(yaml_file)
            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            if len(data) == 1 and locale in data and isinstance(data[locale], dict):
                data = data[locale]

            target = table.extras if domain == EXTRAS_DOMAIN else table.translations
            target[locale] = deep_merge(target.get(locale, {}), data)

        logger.info(
            "loaded_translations",
            file_count=len(files),
            locales=table.locales,
            extras_locales=sorted(table.extras.keys()),
        )

        if self.use_cache:
            self.cache = table
        return table

    def _read(self, yaml_file: Path) -> Any:
        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise TranslationLoadError(f"Failed to parse {yaml_file}: {e}") from e

    def clear_cache(self) -> None:
        """Clear the cached table."""
        self.cache = None
        logger.info("cleared_translation_cache")
