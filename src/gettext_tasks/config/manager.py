"""Configuration manager for gettext-tasks.

This module loads YAML configuration files, merges them with command-line
overrides into a single validated GettextConfig, and reads the package
metadata that xgettext writes into the template header.
"""

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path

import yaml

from .schema import GettextConfig, PackageMetadata
from ..utils.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Configuration manager building the immutable configuration of one run.

    All methods are static: the manager holds no state, the resulting
    GettextConfig is passed explicitly to every task.
    """

    @staticmethod
    def load_config(config_path: Path) -> GettextConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            GettextConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML syntax is invalid
            ConfigurationError: If the file does not contain a mapping
            ValidationError: If the configuration fails Pydantic validation
        """
        return ConfigManager.build_config(ConfigManager.read_config_file(config_path))

    @staticmethod
    def read_config_file(config_path: Path) -> dict[str, object]:
        """
        Read the raw mapping stored in a YAML configuration file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            dict[str, object]: Raw configuration values (empty for an empty file)
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            return {}
        if not isinstance(raw_config_data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}",
                context=config_path,
            )

        return {str(key): value for key, value in raw_config_data.items()}  # pyright: ignore[reportUnknownVariableType]

    @staticmethod
    def build_config(
        file_data: Mapping[str, object] | None = None,
        overrides: Mapping[str, object] | None = None,
    ) -> GettextConfig:
        """
        Merge defaults, file values and overrides into one configuration.

        Overrides whose value is None are ignored so that unset command-line
        options do not mask values from the configuration file.

        Args:
            file_data: Values read from the configuration file
            overrides: Values supplied by the caller (e.g. command line)

        Returns:
            GettextConfig: Validated, frozen configuration
        """
        merged: dict[str, object] = dict(file_data or {})

        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value

        return GettextConfig.model_validate(merged)

    @staticmethod
    def dump_config(config: GettextConfig) -> str:
        """
        Render a configuration as YAML for display.

        Args:
            config: Configuration to render

        Returns:
            str: YAML document with the effective values
        """
        return yaml.safe_dump(
            config.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )


def load_package_metadata(package_file: Path) -> PackageMetadata | None:
    """
    Read package name, version and bugs address from a pyproject.toml file.

    The bugs address is the first author's email, or the first author's
    name when no email is given.

    Args:
        package_file: Path to the pyproject.toml file

    Returns:
        PackageMetadata, or None when the file does not exist or declares
        no static name and version (for example ``dynamic = ["version"]``)

    Raises:
        ConfigurationError: If the file is malformed or has no [project] table
    """
    if not package_file.exists():
        logger.warning(f"Package file not found, omitting package metadata: {package_file}")
        return None

    try:
        with open(package_file, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f"Failed to read package metadata from {package_file}: {e}",
            context=package_file,
        ) from e

    project_data = data.get("project")
    if not isinstance(project_data, dict):
        raise ConfigurationError(
            f"[project] section not found or invalid in {package_file}",
            context=package_file,
        )

    name = project_data.get("name")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    version = project_data.get("version")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    if not isinstance(name, str) or not isinstance(version, str):
        logger.warning(
            f"No static [project] name and version in {package_file}, omitting package metadata"
        )
        return None

    bugs_address: str | None = None
    authors = project_data.get("authors")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    if isinstance(authors, list) and authors and isinstance(authors[0], dict):
        first_author: dict[str, object] = authors[0]  # pyright: ignore[reportUnknownVariableType]
        email = first_author.get("email")
        author_name = first_author.get("name")
        if isinstance(email, str) and email:
            bugs_address = email
        elif isinstance(author_name, str) and author_name:
            bugs_address = author_name

    metadata = PackageMetadata(name=name, version=version, bugs_address=bugs_address)
    logger.debug(f"Loaded package metadata: {metadata.name} {metadata.version}")
    return metadata
