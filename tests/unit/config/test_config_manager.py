"""Tests for configuration manager functionality."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from gettext_tasks.config.manager import ConfigManager, load_package_metadata
from gettext_tasks.config.schema import GettextConfig
from gettext_tasks.utils.core.exceptions import ConfigurationError


class TestConfigManager:
    """Test cases for ConfigManager functionality."""

    @pytest.fixture
    def temp_config_file(self, tmp_path: Path) -> Path:
        """Create a temporary config file for testing."""
        config_path = tmp_path / "gettext.yml"
        config_data = {
            "source": "po",
            "target": "static/lang",
            "sources": ["src", "templates/app.js"],
            "languages": ["fr", "de"],
            "compact": True,
        }
        with config_path.open("w", encoding="utf-8") as f:
            yaml.dump(config_data, f, default_flow_style=False)
        return config_path

    def test_load_config_success(self, temp_config_file: Path) -> None:
        """Test successful configuration loading."""
        config = ConfigManager.load_config(temp_config_file)

        assert isinstance(config, GettextConfig)
        assert config.source == Path("po")
        assert config.target == Path("static/lang")
        assert config.sources == (Path("src"), Path("templates/app.js"))
        assert config.languages == ("fr", "de")
        assert config.compact is True
        assert config.no_wrap is True

    def test_load_config_file_not_found(self, tmp_path: Path) -> None:
        """Test loading config when file doesn't exist."""
        with pytest.raises(FileNotFoundError):
            _ = ConfigManager.load_config(tmp_path / "missing.yml")

    def test_load_config_invalid_yaml(self, tmp_path: Path) -> None:
        """Test loading config with invalid YAML syntax."""
        config_path = tmp_path / "broken.yml"
        _ = config_path.write_text("invalid: yaml: content: [", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            _ = ConfigManager.load_config(config_path)

    def test_load_config_not_a_mapping(self, tmp_path: Path) -> None:
        """Test loading config whose root is a list."""
        config_path = tmp_path / "list.yml"
        _ = config_path.write_text("- fr\n- de\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _ = ConfigManager.load_config(config_path)

    def test_load_empty_config(self, tmp_path: Path) -> None:
        """Test that an empty file yields the defaults."""
        config_path = tmp_path / "empty.yml"
        _ = config_path.write_text("", encoding="utf-8")

        assert ConfigManager.load_config(config_path) == GettextConfig()

    def test_load_config_validation_error(self, tmp_path: Path) -> None:
        """Test loading config with validation errors."""
        config_path = tmp_path / "bad.yml"
        _ = config_path.write_text("compact: maybe-not\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            _ = ConfigManager.load_config(config_path)

    def test_overrides_take_precedence(self) -> None:
        """Test merge order defaults < file < overrides, ignoring None overrides."""
        config = ConfigManager.build_config(
            {"languages": ["fr"], "target": "out", "verbose": True},
            {"languages": ["de", "it"], "target": None, "compact": True},
        )

        assert config.languages == ("de", "it")
        assert config.target == Path("out")
        assert config.verbose is True
        assert config.compact is True

    def test_build_config_does_not_mutate_inputs(self) -> None:
        """Test that input mappings are left untouched."""
        file_data: dict[str, object] = {"languages": ["fr"]}
        overrides: dict[str, object] = {"compact": True}

        _ = ConfigManager.build_config(file_data, overrides)

        assert file_data == {"languages": ["fr"]}
        assert overrides == {"compact": True}

    def test_dump_config(self) -> None:
        """Test YAML rendering of a configuration."""
        config = ConfigManager.build_config({"languages": ["fr"], "source": "po"})

        dumped = yaml.safe_load(ConfigManager.dump_config(config))

        assert dumped["languages"] == ["fr"]
        assert dumped["source"] == "po"
        assert list(dumped)[0] == "source"


class TestLoadPackageMetadata:
    """Test load_package_metadata."""

    def test_reads_project_table(self, tmp_path: Path) -> None:
        """Test name, version and author email."""
        package_file = tmp_path / "pyproject.toml"
        _ = package_file.write_text(
            '[project]\nname = "demo"\nversion = "2.0.1"\n'
            'authors = [{ name = "Jane Doe", email = "jane@example.org" }]\n',
            encoding="utf-8",
        )

        metadata = load_package_metadata(package_file)

        assert metadata is not None
        assert metadata.name == "demo"
        assert metadata.version == "2.0.1"
        assert metadata.bugs_address == "jane@example.org"

    def test_author_name_fallback(self, tmp_path: Path) -> None:
        """Test that the author name is used when no email is given."""
        package_file = tmp_path / "pyproject.toml"
        _ = package_file.write_text(
            '[project]\nname = "demo"\nversion = "1"\nauthors = [{ name = "Jane Doe" }]\n',
            encoding="utf-8",
        )

        metadata = load_package_metadata(package_file)

        assert metadata is not None
        assert metadata.bugs_address == "Jane Doe"

    def test_missing_file_returns_none(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a missing package file is a warning, not an error."""
        assert load_package_metadata(tmp_path / "pyproject.toml") is None
        assert any("Package file not found" in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize(
        "project",
        [
            '[project]\nname = "demo"\n',
            '[project]\nname = "demo"\ndynamic = ["version"]\n',
        ],
    )
    def test_missing_version_returns_none(
        self, tmp_path: Path, project: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a package without a static version omits the metadata."""
        package_file = tmp_path / "pyproject.toml"
        _ = package_file.write_text(project, encoding="utf-8")

        assert load_package_metadata(package_file) is None
        assert any(
            record.levelno == logging.WARNING and "omitting package metadata" in record.getMessage()
            for record in caplog.records
        )

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Test that malformed TOML raises ConfigurationError."""
        package_file = tmp_path / "pyproject.toml"
        _ = package_file.write_text("[project\nname=", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _ = load_package_metadata(package_file)
