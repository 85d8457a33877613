"""Configuration module - public API.

Centralized configuration using pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation resolver settings class

Example:
    ```python
    from localekit.configuration import settings

    locale = settings.i18n.LOCALE or settings.i18n.DEFAULT_LOCALE
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
