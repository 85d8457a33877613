"""Translation resolver settings."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from localekit.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Translation resolver configuration.

    Environment Variables:
        I18N_LOCALE: Locale selected at startup (default: the default locale)
        I18N_DEFAULT_LOCALE: Locale tried after the fallback locale (default: en)
        I18N_FALLBACK_LOCALE: Locale tried first when a key is missing
        I18N_BASELINE_LOCALE: Last locale of the fallback chain (default: en)
        I18N_ROOT_SEGMENT: Segment prefixed to every key path (default: js)
        I18N_NO_FALLBACKS: Disable the fallback chain entirely
        I18N_VERBOSE_LOCALIZATION: Wrap the translator with verbose diagnostics
        I18N_TRANSLATIONS_DIR: Directory holding <domain>.<locale>.yml files
        I18N_VERBOSE_FLAG_FILE: File persisting the verbose session flag

    Example:
        ```python
        from localekit.configuration import settings

        default_locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    LOCALE: Optional[str] = Field(default=None, alias="I18N_LOCALE")
    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    FALLBACK_LOCALE: Optional[str] = Field(default=None, alias="I18N_FALLBACK_LOCALE")
    BASELINE_LOCALE: str = Field(default="en", alias="I18N_BASELINE_LOCALE")
    ROOT_SEGMENT: str = Field(default="js", alias="I18N_ROOT_SEGMENT")
    NO_FALLBACKS: bool = Field(default=False, alias="I18N_NO_FALLBACKS")
    VERBOSE_LOCALIZATION: bool = Field(
        default=False, alias="I18N_VERBOSE_LOCALIZATION"
    )
    TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    VERBOSE_FLAG_FILE: Optional[str] = Field(
        default=None, alias="I18N_VERBOSE_FLAG_FILE"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("LOCALE", "FALLBACK_LOCALE", "TRANSLATIONS_DIR", mode="before")
    @classmethod
    def empty_string_is_unset(cls, value):
        """Treat blank environment values as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("ROOT_SEGMENT")
    @classmethod
    def root_segment_has_no_separator(cls, value: str) -> str:
        """The root segment must be a single path segment."""
        if not value or "." in value:
            raise ValueError(f"Invalid root segment: {value!r}")
        return value
