"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest
import yaml

from kssdoc.config import CONFIG_FILENAME, ProjectConfig, load_config
from kssdoc.schemas import ParseOptions
from kssdoc.traverse import DEFAULT_MASK


class TestParseOptions:
    """Tests for ParseOptions.from_dict."""

    def test_defaults(self) -> None:
        """Test defaults for an empty mapping."""
        assert ParseOptions.from_dict({}) == ParseOptions(markdown=True, header=True, custom=())

    def test_values(self) -> None:
        """Test reading every option."""
        options = ParseOptions.from_dict({"markdown": False, "header": False, "custom": ["a", "b"]})

        assert options == ParseOptions(markdown=False, header=False, custom=("a", "b"))

    def test_single_custom_name(self) -> None:
        """Test a single custom property given as a string."""
        assert ParseOptions.from_dict({"custom": "owner"}).custom == ("owner",)

    @pytest.mark.parametrize(
        "data", [{"markdown": "yes"}, {"header": 1}, {"custom": [1, 2]}]
    )
    def test_invalid_types(self, data: dict) -> None:
        """Test that wrong types are rejected."""
        with pytest.raises(ValueError):
            ParseOptions.from_dict(data)


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_config_file(self, tmp_path: Path) -> None:
        """Test defaults when the project has no config file."""
        config = load_config(project_root=tmp_path)

        assert config == ProjectConfig()
        assert config.mask == DEFAULT_MASK

    def test_default_config_file(self, tmp_path: Path) -> None:
        """Test reading .kssdoc.yaml from the project root."""
        (tmp_path / CONFIG_FILENAME).write_text(
            "source:\n  - styles\nmask: '*.scss'\nmarkdown: false\ncustom:\n  - owner\n"
        )
        config = load_config(project_root=tmp_path)

        assert config.source == ["styles"]
        assert config.mask == "*.scss"
        assert config.options == ParseOptions(markdown=False, custom=("owner",))

    def test_broken_default_file_warns(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a malformed default file falls back to defaults."""
        (tmp_path / CONFIG_FILENAME).write_text("source: [unclosed\n")

        with caplog.at_level(logging.WARNING, logger="kssdoc.config"):
            config = load_config(project_root=tmp_path)

        assert config == ProjectConfig()
        assert "Could not load" in caplog.text

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test loading an explicit config file."""
        path = tmp_path / "kss.yml"
        path.write_text("source: styles\nheader: false\n")

        config = load_config(path)

        assert config.source == ["styles"]
        assert config.options.header is False

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """Test that a missing explicit file raises."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yml")

    def test_explicit_path_malformed(self, tmp_path: Path) -> None:
        """Test that YAML errors in an explicit file propagate."""
        path = tmp_path / "kss.yml"
        path.write_text("source: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_config(path)

    def test_explicit_path_not_a_mapping(self, tmp_path: Path) -> None:
        """Test that a YAML list is rejected."""
        path = tmp_path / "kss.yml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError):
            load_config(path)
