"""
Global test configuration fixtures for gettext-tasks tests.

Provides configuration objects whose source and target directories live in
a per-test temporary directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gettext_tasks.config.manager import ConfigManager
from gettext_tasks.config.schema import GettextConfig, PackageMetadata


@pytest.fixture
def po_dir(tmp_path: Path) -> Path:
    """Directory holding .po and .pot files."""
    directory = tmp_path / "po"
    directory.mkdir()
    return directory


@pytest.fixture
def json_dir(tmp_path: Path) -> Path:
    """Directory receiving generated .json files."""
    return tmp_path / "lang"


@pytest.fixture
def base_config(tmp_path: Path, po_dir: Path, json_dir: Path) -> GettextConfig:
    """
    Create a runnable configuration for two languages.

    Returns:
        GettextConfig: Configuration with fr and de and one source directory
    """
    src = tmp_path / "app"
    src.mkdir()
    _ = (src / "main.py").write_text('print(_("Hello"))\n', encoding="utf-8")

    return ConfigManager.build_config(
        {
            "source": po_dir,
            "target": json_dir,
            "sources": [src],
            "languages": ["fr", "de"],
        }
    )


@pytest.fixture
def metadata() -> PackageMetadata:
    """Package metadata used for extraction."""
    return PackageMetadata(name="demo", version="1.2.3", bugs_address="dev@example.org")
