"""
Task pipeline for the gettext workflow.

Every language is processed completely before the next one starts. The
configuration and package metadata are passed in explicitly; nothing is
reloaded between steps.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .results import ConversionResult, ExecResult
from ..catalog.projection import load_projection
from ..catalog.serializer import write_projection
from ..config.manager import ConfigManager
from ..config.schema import GettextConfig, PackageMetadata
from ..toolchain import steps
from ..utils.core.exceptions import ToolInvocationError
from ..utils.fs import unlink_files

logger = logging.getLogger(__name__)


async def exec_po(config: GettextConfig, metadata: PackageMetadata | None = None) -> ExecResult:
    """
    Extract the template, then merge or initialize every language file.

    Args:
        config: Effective configuration
        metadata: Package information for the template header

    Returns:
        ExecResult describing what happened to each language
    """
    result = ExecResult()

    if not config.is_runnable():
        logger.info("no valid config options (check generator configuration)")
        result.skipped = True
        return result

    try:
        result.pot_file = await steps.xgettext(config, metadata)
    except (ToolInvocationError, FileNotFoundError) as e:
        logger.error(str(e))
        return result

    for language in config.languages:
        po_file = config.po_file(language)

        if po_file.exists():
            ok = await steps.msgmerge(config, result.pot_file, po_file)
            (result.merged if ok else result.failed).append(language)
        else:
            ok = await steps.msginit(config, result.pot_file, po_file, language)
            (result.initialized if ok else result.failed).append(language)

    logger.info(str(result))
    return result


async def convert(config: GettextConfig) -> ConversionResult:
    """
    Convert every language file to a JSON catalog.

    A missing language file is reported and skipped; the remaining languages
    are still converted.

    Raises:
        CatalogError: If an existing language file cannot be parsed
    """
    result = ConversionResult()

    for language in config.languages:
        po_file = config.po_file(language)

        if not po_file.exists():
            logger.warning(f"doesn't exist: {po_file}")
            result.missing_languages.append(language)
            continue

        json_file = config.json_file(language)
        write_projection(load_projection(po_file), json_file, compact=config.compact)
        result.written_files.append(json_file)

    logger.info(str(result))
    return result


async def build(
    config: GettextConfig, metadata: PackageMetadata | None = None
) -> ExecResult | ConversionResult:
    """
    Run extraction and merging, then convert the language files.

    Returns:
        The ExecResult when extraction failed and nothing was converted,
        otherwise the ConversionResult
    """
    exec_result = await exec_po(config, metadata)
    if not exec_result.skipped and not exec_result.extracted:
        logger.error("Extraction failed, build aborted")
        return exec_result

    return await convert(config)


async def clear(config: GettextConfig) -> list[Path]:
    """Remove the generated JSON catalog of every configured language."""
    return unlink_files(config.json_file(language) for language in config.languages)


async def show_config(config: GettextConfig) -> None:
    """Log the effective configuration."""
    for line in ConfigManager.dump_config(config).rstrip().split("\n"):
        logger.info(line)
