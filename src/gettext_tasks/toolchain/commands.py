"""
Command line builders for xgettext, msginit and msgmerge.

The builders are pure functions of the configuration so the exact argument
lists can be checked without running any binary.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..config.schema import GettextConfig, PackageMetadata


def xgettext_command(
    config: GettextConfig,
    pot_file: Path,
    input_files: Sequence[Path],
    metadata: PackageMetadata | None = None,
) -> list[str]:
    """
    Build the xgettext command extracting strings into a template.

    Args:
        config: Effective configuration
        pot_file: Template to write
        input_files: Source files to scan
        metadata: Package information for the template header

    Returns:
        Argument list starting with the program name
    """
    command = ["xgettext", "--force-po", f"--output={pot_file}"]

    if config.source_language:
        command.append(f"--language={config.source_language}")
    command.append(f"--from-code={config.from_code}")

    if metadata is not None:
        command.append(f"--package-name={metadata.name}")
        command.append(f"--package-version={metadata.version}")
        if metadata.bugs_address:
            command.append(f"--msgid-bugs-address={metadata.bugs_address}")

    if config.indent:
        command.append("--indent")
    if config.no_location:
        command.append("--no-location")
    if config.add_location:
        command.append(f"--add-location={config.add_location}")
    if config.no_wrap:
        command.append("--no-wrap")
    if config.sort_output:
        command.append("--sort-output")
    if config.sort_by_file:
        command.append("--sort-by-file")
    if config.add_comments:
        command.append(f"--add-comments={config.add_comments}")

    command.extend(str(path) for path in input_files)
    return command


def msginit_command(config: GettextConfig, pot_file: Path, po_file: Path, language: str) -> list[str]:
    """Build the msginit command creating a new language file."""
    command = [
        "msginit",
        f"--input={pot_file}",
        f"--output={po_file}",
        f"--locale={language}",
        "--no-translator",
    ]

    if config.no_wrap:
        command.append("--no-wrap")

    return command


def msgmerge_command(config: GettextConfig, pot_file: Path, po_file: Path) -> list[str]:
    """Build the msgmerge command updating a language file in place."""
    command = ["msgmerge", "--update", "--quiet", "--verbose", "--backup=off"]

    if config.indent:
        command.append("--indent")
    if config.no_location:
        command.append("--no-location")
    if config.no_wrap:
        command.append("--no-wrap")
    if config.sort_output:
        command.append("--sort-output")
    if config.sort_by_file:
        command.append("--sort-by-file")

    command.extend([str(po_file), str(pot_file)])
    return command
