"""
Extraction, initialization and merge steps.

Extraction failures propagate to the caller because no language can be
processed without a template. Init and merge failures only end the step of
the affected language: they are logged and reported through the return value.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from .commands import msginit_command, msgmerge_command, xgettext_command
from .runner import run_tool
from ..config.schema import GettextConfig, PackageMetadata
from ..utils.core.exceptions import ToolInvocationError
from ..utils.fs import scan_paths

logger = logging.getLogger(__name__)

ASCII_CONTENT_TYPE = "Content-Type: text/plain; charset=ASCII"
UTF8_CONTENT_TYPE = "Content-Type: text/plain; charset=UTF-8"

# Header xgettext refreshes on every run
CREATION_DATE_PREFIX = b'"POT-Creation-Date:'


async def xgettext(config: GettextConfig, metadata: PackageMetadata | None = None) -> Path:
    """
    Extract translatable strings from the configured sources.

    The template is only replaced when its content changed; a new
    ``POT-Creation-Date`` alone keeps the existing file.

    Args:
        config: Effective configuration
        metadata: Package information for the template header

    Returns:
        Path of the template

    Raises:
        ToolInvocationError: If xgettext is missing or fails
        FileNotFoundError: If a configured source path does not exist
    """
    pot_file = config.pot_file
    input_files = scan_paths(config.sources)
    logger.debug(f"Scanning {len(input_files)} source files")

    _ = pot_file.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        dir=pot_file.parent,
        prefix=f".{pot_file.name}.",
        suffix=".tmp",
        delete=False,
    ) as temp_file:
        temp_path = Path(temp_file.name)

    try:
        _ = await run_tool(
            xgettext_command(config, temp_path, input_files, metadata),
            verbose=config.verbose,
        )

        if pot_file.exists() and same_template(pot_file.read_bytes(), temp_path.read_bytes()):
            logger.debug(f"Template unchanged: {pot_file}")
        else:
            _ = temp_path.replace(pot_file)
            logger.info(f"write {pot_file}")
    finally:
        temp_path.unlink(missing_ok=True)

    return pot_file


def same_template(old: bytes, new: bytes) -> bool:
    """Compare two templates, ignoring their creation date header."""

    def _body(content: bytes) -> list[bytes]:
        return [line for line in content.splitlines() if not line.startswith(CREATION_DATE_PREFIX)]

    return _body(old) == _body(new)


def force_utf8_charset(po_file: Path) -> bool:
    """
    Replace the ASCII charset msginit writes for plain-ASCII templates.

    Returns:
        True if the file was rewritten
    """
    content = po_file.read_text(encoding="utf-8")
    if ASCII_CONTENT_TYPE not in content:
        return False

    _ = po_file.write_text(content.replace(ASCII_CONTENT_TYPE, UTF8_CONTENT_TYPE, 1), encoding="utf-8")
    logger.debug(f"Switched charset to UTF-8 in {po_file}")
    return True


async def msginit(config: GettextConfig, pot_file: Path, po_file: Path, language: str) -> bool:
    """
    Create a new language file from the template.

    Returns:
        True on success, False if msginit failed (already logged)
    """
    try:
        _ = await run_tool(
            msginit_command(config, pot_file, po_file, language),
            verbose=config.verbose,
        )
    except ToolInvocationError as e:
        logger.error(str(e))
        return False

    if po_file.exists():
        _ = force_utf8_charset(po_file)
    return True


async def msgmerge(config: GettextConfig, pot_file: Path, po_file: Path) -> bool:
    """
    Update an existing language file against the template.

    Returns:
        True on success, False if msgmerge failed (already logged)
    """
    try:
        _ = await run_tool(
            msgmerge_command(config, pot_file, po_file),
            verbose=config.verbose,
        )
    except ToolInvocationError as e:
        logger.error(str(e))
        return False

    return True
