"""
File system helpers shared by the task steps.

Provides the recursive source scan used to build the xgettext argument list
and small logged wrappers for writing and removing generated files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def scan_paths(paths: Iterable[Path]) -> list[Path]:
    """
    Expand files and directories into a flat list of files.

    Directories are walked recursively with their entries visited in sorted
    order, so the same tree always yields the same list.

    Args:
        paths: Files or directories to expand, in the order given

    Returns:
        List of file paths

    Raises:
        FileNotFoundError: If a configured path does not exist
    """
    files: list[Path] = []

    def _scan(path: Path) -> None:
        if path.is_dir():
            for item in sorted(path.iterdir()):
                _scan(item)
        elif path.exists():
            files.append(path)
        else:
            raise FileNotFoundError(f"Source path does not exist: {path}")

    for path in paths:
        _scan(path)

    return files


def write_file(path: Path, content: str) -> None:
    """
    Write text to a file, creating parent directories as needed.

    Args:
        path: Destination file
        content: Text to write (UTF-8)
    """
    _ = path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as file:
        _ = file.write(content)

    logger.info(f"write {path} ({len(content.encode('utf-8'))} bytes)")


def unlink_files(paths: Iterable[Path]) -> list[Path]:
    """
    Remove files, ignoring the ones that do not exist.

    Args:
        paths: Files to remove

    Returns:
        List of files that were actually removed
    """
    removed: list[Path] = []

    for path in paths:
        if not path.exists():
            logger.debug(f"Nothing to remove: {path}")
            continue
        path.unlink()
        removed.append(path)
        logger.info(f"remove {path}")

    return removed
