"""
Asynchronous invocation of external gettext binaries.

Each command runs as a child process that the caller awaits; output lines
are forwarded to the log once the process has finished.
"""

from __future__ import annotations

import asyncio
import logging
import shlex
from collections.abc import Sequence
from typing import NamedTuple

from ..utils.core.exceptions import ToolInvocationError

logger = logging.getLogger(__name__)


class ToolResult(NamedTuple):
    """Outcome of a finished external command."""

    command: list[str]
    returncode: int
    stdout: str
    stderr: str


def log_output(stdout: str, stderr: str) -> None:
    """Log every non-empty line a tool wrote to stdout or stderr."""
    for line in (stdout + stderr).strip().split("\n"):
        if line:
            logger.info(line)


async def run_tool(command: Sequence[str], verbose: bool = False) -> ToolResult:
    """
    Run an external command and wait for it to finish.

    Args:
        command: Program and arguments
        verbose: Log the command line before running it

    Returns:
        ToolResult of a successful run

    Raises:
        ToolInvocationError: If the program is missing or exits non-zero
    """
    argv = list(command)

    if verbose:
        logger.info(f"exec {shlex.join(argv)}")

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise ToolInvocationError(
            f"{argv[0]} command not found. Install gettext tools to run this task.",
            command=argv,
        ) from e

    raw_stdout, raw_stderr = await process.communicate()
    stdout = raw_stdout.decode("utf-8", errors="replace")
    stderr = raw_stderr.decode("utf-8", errors="replace")
    returncode = process.returncode if process.returncode is not None else -1

    log_output(stdout, stderr)

    if returncode != 0:
        raise ToolInvocationError(
            f"Command failed with exit code {returncode}: {shlex.join(argv)}\n{stderr.strip()}",
            command=argv,
            returncode=returncode,
            stderr=stderr,
        )

    return ToolResult(command=argv, returncode=returncode, stdout=stdout, stderr=stderr)
