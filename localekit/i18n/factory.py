"""Factory functions for creating i18n components.

Builds translators from the application settings, selecting the verbose
wrapper at construction time when it is configured.
"""

from pathlib import Path
from typing import Optional, Union

from localekit.configuration import I18nSettings
from localekit.configuration import settings as app_settings
from localekit.i18n.loader import (
    MappingTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from localekit.i18n.models import TranslationTable
from localekit.i18n.pluralization import PluralizationRules
from localekit.i18n.state import LocaleState
from localekit.i18n.translator import Translator
from localekit.i18n.verbose import (
    FileFlagStore,
    FlagStore,
    VerboseTranslator,
    verbose_session_enabled,
)
from localekit.logging import get_module_logger

logger = get_module_logger()

AnyTranslator = Union[Translator, VerboseTranslator]


def create_state(config: I18nSettings) -> LocaleState:
    """LocaleState configured from settings."""
    return LocaleState(
        locale=config.LOCALE,
        default_locale=config.DEFAULT_LOCALE,
        fallback_locale=config.FALLBACK_LOCALE,
        baseline_locale=config.BASELINE_LOCALE,
        no_fallbacks=config.NO_FALLBACKS,
    )


def create_loader(
    config: I18nSettings,
    translations_dir: Optional[Path] = None,
) -> TranslationLoader:
    """Loader for the configured translations directory.

    Without a directory, an empty mapping loader is returned so the
    translator still works and reports every key as missing.
    """
    directory = translations_dir or config.TRANSLATIONS_DIR
    if directory is None:
        logger.warning("no_translations_dir_configured")
        return MappingTranslationLoader({})
    return YAMLTranslationLoader(translations_dir=Path(directory))


def create_translator(
    config: Optional[I18nSettings] = None,
    table: Optional[TranslationTable] = None,
    translations_dir: Optional[Path] = None,
    rules: Optional[PluralizationRules] = None,
    flag_store: Optional[FlagStore] = None,
) -> AnyTranslator:
    """Create and configure a translator.

    Args:
        config: I18n settings (default: application settings).
        table: Preloaded translation table; skips the loader when given.
        translations_dir: Directory of YAML files (default: from settings).
        rules: Pluralization rules (default: built-in rules).
        flag_store: Session flag store consulted for verbose mode (default:
            file store from settings, if configured).

    Returns:
        Translator, wrapped in VerboseTranslator when verbose localization
        is configured or enabled for the session.

    Raises:
        TranslationLoadError: If the translation files cannot be loaded.

    Usage:
        translator = create_translator(table=MappingTranslationLoader(data).load())
        translator.translate("greeting", TranslateOptions(values={"name": "Ana"}))
    """
    config = config or app_settings.i18n

    if table is None:
        table = create_loader(config, translations_dir).load()

    state = create_state(config)
    translator = Translator(
        table=table,
        state=state,
        rules=rules or PluralizationRules(baseline_locale=config.BASELINE_LOCALE),
        root_segment=config.ROOT_SEGMENT,
    )

    if flag_store is None and config.VERBOSE_FLAG_FILE:
        flag_store = FileFlagStore(Path(config.VERBOSE_FLAG_FILE))

    if config.VERBOSE_LOCALIZATION or verbose_session_enabled(flag_store):
        logger.info("translator_created_verbose", locale=state.current_locale())
        return VerboseTranslator(translator)

    logger.info(
        "translator_created",
        locale=state.current_locale(),
        locale_count=len(table.locales),
    )
    return translator
