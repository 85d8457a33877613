"""Verbose localization diagnostics.

Wraps a Translator so every distinct key gets a number, is logged the first
time it is requested, and carries that number in its output, e.g.
``"Hello, Ana! (#3)"``. The mode can be persisted for a session through a
FlagStore.
"""

import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from localekit.i18n.models import KeyPath, TranslateOptions, TranslationResult, join_key
from localekit.i18n.translator import Translator
from localekit.logging import get_module_logger

logger = get_module_logger()

VERBOSE_FLAG = "verbose_localization"
ENABLED_MESSAGE = (
    "Verbose localization is enabled for this session. Translators created "
    "from now on number each translation key and log it on first use."
)


class FlagStore(ABC):
    """Session-scoped persistence for boolean flags."""

    @abstractmethod
    def get(self, name: str) -> bool:
        """Return the flag value, False if unset."""

    @abstractmethod
    def set(self, name: str, value: bool) -> None:
        """Persist a flag value."""


class InMemoryFlagStore(FlagStore):
    """Flag store living as long as the process."""

    def __init__(self):
        self._flags: Dict[str, bool] = {}

    def get(self, name: str) -> bool:
        return self._flags.get(name, False)

    def set(self, name: str, value: bool) -> None:
        self._flags[name] = value


class FileFlagStore(FlagStore):
    """Flag store backed by a small JSON file.

    Attributes:
        path: JSON file holding {flag_name: bool}.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, bool]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("flag_store_unreadable", path=str(self.path), error=str(e))
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, name: str) -> bool:
        return bool(self._read().get(name, False))

    def set(self, name: str, value: bool) -> None:
        data = self._read()
        data[name] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")


class VerboseTranslator:
    """Translator wrapper numbering and logging every distinct key.

    Fallbacks are disabled on the wrapped translator so untranslated keys
    show up as missing markers. Attributes other than the translate methods
    are delegated to the wrapped translator.
    """

    def __init__(self, translator: Translator):
        self._translator = translator
        self._keys: Dict[str, int] = {}
        self._lock = threading.Lock()
        translator.state.set_no_fallbacks(True)
        logger.info("verbose_localization_enabled")

    @property
    def wrapped(self) -> Translator:
        return self._translator

    def __getattr__(self, name: str) -> Any:
        return getattr(self._translator, name)

    def _number_for(self, key: KeyPath, options: Optional[TranslateOptions]) -> int:
        path = join_key(key)
        with self._lock:
            number = self._keys.get(path)
            if number is not None:
                return number
            number = len(self._keys) + 1
            self._keys[path] = number

        parameters = _describe(options)
        if parameters:
            logger.info(
                "verbose_translation", number=number, key=path, parameters=parameters
            )
        else:
            logger.info("verbose_translation", number=number, key=path)
        return number

    def translate_result(
        self,
        key: KeyPath,
        options: Optional[TranslateOptions] = None,
    ) -> TranslationResult:
        number = self._number_for(key, options)
        result = self._translator.translate_result(key, options)
        return TranslationResult(
            text=f"{result.text} (#{number})",
            resolved=result.resolved,
            locale=result.locale,
            reason=result.reason,
        )

    def translate(
        self,
        key: KeyPath,
        options: Optional[TranslateOptions] = None,
    ) -> str:
        return self.translate_result(key, options).text


def _describe(options: Optional[TranslateOptions]) -> Dict[str, Any]:
    if options is None:
        return {}
    parameters = {
        name: value
        for name, value in (
            ("scope", options.scope),
            ("locale", options.locale),
            ("count", options.count),
            ("default", options.default),
        )
        if value is not None
    }
    parameters.update(options.values)
    return parameters


def verbose_session_enabled(store: Optional[FlagStore]) -> bool:
    """True if verbose localization was enabled for this session."""
    return bool(store and store.get(VERBOSE_FLAG))


def enable_verbose_localization_session(store: FlagStore) -> str:
    """Persist the verbose localization flag for the session.

    Translators created afterwards through the factory are wrapped with
    VerboseTranslator.

    Returns:
        Confirmation message for the operator.
    """
    store.set(VERBOSE_FLAG, True)
    logger.info("verbose_localization_session_enabled")
    return ENABLED_MESSAGE
