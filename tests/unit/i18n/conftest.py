"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from localekit.i18n import I18n, YAMLTranslationLoader
from tests.factories.i18n import make_translation_table, make_translator


@pytest.fixture
def translation_table():
    """TranslationTable built from the factory data."""
    return make_translation_table()


@pytest.fixture
def translator():
    """Translator with current locale "en"."""
    return make_translator()


@pytest.fixture
def bosnian_translator():
    """Translator with current locale "bs_BA" and default "en"."""
    return make_translator(locale="bs_BA")


@pytest.fixture
def i18n(translator):
    """I18n facade over the English translator."""
    return I18n(translator)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a temporary directory with sample YAML translation files.

    - client.en.yml (locale subtree)
    - client.bs_BA.yml (wrapped in a top-level locale key)
    - admin.en.yml
    - extras.en.yml
    """
    with open(tmp_path / "client.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"js": {"greeting": "Hello, {{name}}!", "topic": {"title": "Topic"}}},
            f,
        )

    with open(tmp_path / "client.bs_BA.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"bs_BA": {"js": {"greeting": "Zdravo, {{name}}!"}}},
            f,
            allow_unicode=True,
        )

    with open(tmp_path / "admin.en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"js": {"topic": {"admin_title": "Topic admin"}}}, f)

    with open(tmp_path / "extras.en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"admin_js": {"dashboard": "Dashboard"}}, f)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """YAMLTranslationLoader for the temporary directory, no cache."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)
