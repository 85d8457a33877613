"""Tests for localekit.i18n.loader module."""

import pytest
import yaml

from localekit.i18n import (
    MappingTranslationLoader,
    TranslationLoadError,
    YAMLTranslationLoader,
)


class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_loader_initialization(self, temp_translations_dir):
        """YAMLTranslationLoader initializes with a valid directory."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        assert loader.translations_dir == temp_translations_dir
        assert loader.use_cache is True
        assert loader.cache is None

    def test_loader_initialization_nonexistent_directory(self, tmp_path):
        """A missing directory raises TranslationLoadError."""
        with pytest.raises(TranslationLoadError):
            YAMLTranslationLoader(tmp_path / "nonexistent")

    def test_load_error_is_value_error(self):
        assert issubclass(TranslationLoadError, ValueError)

    def test_load_merges_domains(self, yaml_loader):
        """Files of the same locale are deep-merged."""
        table = yaml_loader.load()

        topic = table.translations["en"]["js"]["topic"]
        assert topic == {"title": "Topic", "admin_title": "Topic admin"}
        assert table.translations["en"]["js"]["greeting"] == "Hello, {{name}}!"

    def test_load_unwraps_locale_key(self, yaml_loader):
        """A file wrapped in its locale key is unwrapped."""
        table = yaml_loader.load()
        assert table.translations["bs_BA"]["js"]["greeting"] == "Zdravo, {{name}}!"

    def test_load_extras(self, yaml_loader):
        """extras.<locale>.yml populates the extras table."""
        table = yaml_loader.load()

        assert table.extras == {"en": {"admin_js": {"dashboard": "Dashboard"}}}
        assert "admin_js" not in table.translations["en"]

    def test_load_sets_timestamp(self, yaml_loader):
        assert yaml_loader.load().loaded_at is not None

    def test_locales(self, yaml_loader):
        assert yaml_loader.load().locales == ["bs_BA", "en"]

    def test_empty_directory(self, tmp_path):
        """A directory without YAML files cannot be loaded."""
        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(TranslationLoadError):
            loader.load()

    def test_malformed_yaml(self, tmp_path):
        """Invalid YAML raises TranslationLoadError."""
        (tmp_path / "client.en.yml").write_text("js: [unclosed", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)

        with pytest.raises(TranslationLoadError):
            loader.load()

    def test_skips_non_mapping_and_unnamed_files(self, tmp_path):
        """Files without a locale part or a mapping body are skipped."""
        (tmp_path / "README.yml").write_text("js: {a: b}", encoding="utf-8")
        (tmp_path / "list.en.yml").write_text("- a\n- b\n", encoding="utf-8")
        (tmp_path / "empty.en.yml").write_text("", encoding="utf-8")
        with open(tmp_path / "client.en.yaml", "w", encoding="utf-8") as f:
            yaml.dump({"js": {"ok": "OK"}}, f)

        table = YAMLTranslationLoader(tmp_path).load()

        assert table.translations == {"en": {"js": {"ok": "OK"}}}

    def test_cache(self, temp_translations_dir):
        """Cached loaders return the same table until cleared."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)

        first = loader.load()
        assert loader.load() is first

        loader.clear_cache()
        assert loader.load() is not first

    def test_no_cache(self, yaml_loader):
        assert yaml_loader.load() is not yaml_loader.load()


class TestMappingTranslationLoader:
    """Tests for MappingTranslationLoader."""

    def test_load(self):
        loader = MappingTranslationLoader(
            {"en": {"js": {"greeting": "Hello"}}},
            extras={"en": {"admin_js": {"x": "X"}}},
        )

        table = loader.load()

        assert table.translations == {"en": {"js": {"greeting": "Hello"}}}
        assert table.extras == {"en": {"admin_js": {"x": "X"}}}

    def test_load_copies_input(self):
        """The loaded table does not share nested dicts with the input."""
        data = {"en": {"js": {"greeting": "Hello"}}}
        table = MappingTranslationLoader(data).load()

        table.translations["en"]["js"]["greeting"] = "Changed"

        assert data["en"]["js"]["greeting"] == "Hello"

    def test_non_mapping_locale(self):
        with pytest.raises(TranslationLoadError):
            MappingTranslationLoader({"en": "not a mapping"}).load()
