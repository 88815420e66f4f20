"""Test splitter config loading and validation."""

import pytest

from sentencesplit.config.loader import load_config, load_config_from_string
from sentencesplit.config.schema import SplitterConfig
from sentencesplit.core.errors import ConfigLoadError
from sentencesplit.segmenters.sentence import SentenceSplitter


class TestConfigLoading:
    """Test config loading from YAML files and strings."""

    def test_load_valid_config_from_string(self, sample_config_yaml):
        config = load_config_from_string(sample_config_yaml)

        assert isinstance(config, SplitterConfig)
        assert config.language == "de"
        assert config.prefix_file is None

    def test_empty_document_uses_defaults(self):
        config = load_config_from_string("")
        assert config.language == "en"
        assert config.prefix_file is None

    def test_load_invalid_yaml(self):
        invalid_yaml = """
        invalid: yaml: content:
          - missing: bracket
        """

        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_config_from_string(invalid_yaml)

    def test_load_non_mapping(self):
        with pytest.raises(ConfigLoadError, match="YAML mapping"):
            load_config_from_string("- en\n- de\n")

    def test_load_extra_forbidden_fields(self):
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("language: en\nmodel: punkt\n")

    def test_load_invalid_language(self):
        with pytest.raises(ConfigLoadError, match="Invalid language code"):
            load_config_from_string("language: EN\n")

    def test_load_missing_prefix_file(self, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(ConfigLoadError, match="Prefix file not found"):
            load_config_from_string(f"language: en\nprefix_file: {missing}\n")

    def test_load_nonexistent_file(self, tmp_path):
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(tmp_path / "does_not_exist.yaml")

    def test_load_valid_config_from_file(self, tmp_path, sample_config_yaml):
        config_path = tmp_path / "splitter.yaml"
        config_path.write_text(sample_config_yaml, encoding="utf-8")

        config = load_config(config_path)
        assert config.language == "de"

    def test_relative_prefix_file_resolved(self, tmp_path, sample_prefix_text):
        (tmp_path / "prefixes.txt").write_text(sample_prefix_text, encoding="utf-8")
        config_path = tmp_path / "splitter.yaml"
        config_path.write_text("language: xx\nprefix_file: prefixes.txt\n", encoding="utf-8")

        config = load_config(config_path)
        assert config.prefix_file == str(tmp_path / "prefixes.txt")


class TestConfigSchema:
    """Test the config schema."""

    def test_defaults(self):
        config = SplitterConfig()
        assert config.language == "en"
        assert config.prefix_file is None
        assert config.validate_settings() == []

    def test_validate_settings_reports_issues(self):
        config = SplitterConfig(language="english", prefix_file="  ")
        issues = config.validate_settings()
        assert len(issues) == 2

    def test_splitter_from_config(self, temp_prefix_file):
        config = SplitterConfig(language="xx", prefix_file=str(temp_prefix_file))
        splitter = SentenceSplitter.from_config(config)

        assert splitter.language == "xx"
        assert splitter.prefixes.source == "file"
        assert splitter.split("Hello. Prefix1. Good bye.") == ["Hello.", "Prefix1. Good bye."]
