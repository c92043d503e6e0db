"""
Tests for the gettext command line builders.

These tests check the exact argument lists handed to xgettext, msginit and
msgmerge for default and customised configurations.
"""

from __future__ import annotations

from pathlib import Path

from gettext_tasks.config.manager import ConfigManager
from gettext_tasks.config.schema import PackageMetadata
from gettext_tasks.toolchain.commands import (
    msginit_command,
    msgmerge_command,
    xgettext_command,
)

POT = Path("po/messages.pot")
PO = Path("po/fr.po")


class TestXgettextCommand:
    """Test xgettext_command."""

    def test_default_flags(self, metadata: PackageMetadata) -> None:
        """Test the command built from the default configuration."""
        config = ConfigManager.build_config()

        command = xgettext_command(config, POT, [Path("a.py"), Path("b/c.py")], metadata)

        assert command == [
            "xgettext",
            "--force-po",
            f"--output={POT}",
            "--language=Python",
            "--from-code=UTF-8",
            "--package-name=demo",
            "--package-version=1.2.3",
            "--msgid-bugs-address=dev@example.org",
            "--no-location",
            "--add-location=file",
            "--no-wrap",
            "--sort-output",
            "--add-comments=gettext",
            "a.py",
            str(Path("b/c.py")),
        ]

    def test_optional_flags(self) -> None:
        """Test flags that are off by default and disabled options."""
        config = ConfigManager.build_config(
            {
                "indent": True,
                "no_location": False,
                "add_location": None,
                "no_wrap": False,
                "sort_output": False,
                "sort_by_file": True,
                "add_comments": None,
                "source_language": None,
                "from_code": "ISO-8859-1",
            }
        )

        command = xgettext_command(config, POT, [Path("a.js")])

        assert command == [
            "xgettext",
            "--force-po",
            f"--output={POT}",
            "--from-code=ISO-8859-1",
            "--indent",
            "--sort-by-file",
            "a.js",
        ]

    def test_metadata_without_bugs_address(self) -> None:
        """Test that a missing bugs address is left out."""
        config = ConfigManager.build_config()
        metadata = PackageMetadata(name="demo", version="0.1")

        command = xgettext_command(config, POT, [], metadata)

        assert "--package-name=demo" in command
        assert not any(arg.startswith("--msgid-bugs-address") for arg in command)

    def test_without_metadata(self) -> None:
        """Test that package flags are omitted without metadata."""
        command = xgettext_command(ConfigManager.build_config(), POT, [])

        assert not any(arg.startswith("--package-") for arg in command)


class TestMsginitCommand:
    """Test msginit_command."""

    def test_default_flags(self) -> None:
        """Test msginit with no-wrap enabled."""
        command = msginit_command(ConfigManager.build_config(), POT, PO, "fr")

        assert command == [
            "msginit",
            f"--input={POT}",
            f"--output={PO}",
            "--locale=fr",
            "--no-translator",
            "--no-wrap",
        ]

    def test_wrapping_enabled(self) -> None:
        """Test msginit without no-wrap."""
        config = ConfigManager.build_config({"no_wrap": False})

        assert "--no-wrap" not in msginit_command(config, POT, PO, "fr")


class TestMsgmergeCommand:
    """Test msgmerge_command."""

    def test_default_flags(self) -> None:
        """Test msgmerge with the default configuration."""
        command = msgmerge_command(ConfigManager.build_config(), POT, PO)

        assert command == [
            "msgmerge",
            "--update",
            "--quiet",
            "--verbose",
            "--backup=off",
            "--no-location",
            "--no-wrap",
            "--sort-output",
            str(PO),
            str(POT),
        ]

    def test_all_flags(self) -> None:
        """Test msgmerge with every optional flag enabled."""
        config = ConfigManager.build_config({"indent": True, "sort_by_file": True})

        command = msgmerge_command(config, POT, PO)

        assert command[5:-2] == ["--indent", "--no-location", "--no-wrap", "--sort-output", "--sort-by-file"]
        assert command[-2:] == [str(PO), str(POT)]
