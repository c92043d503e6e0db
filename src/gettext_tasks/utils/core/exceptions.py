"""
Basic exception classes for gettext-tasks.

This module contains the error taxonomy shared by the configuration layer,
the external toolchain wrappers and the catalog projection.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path


class ErrorCategory(Enum):
    """Categories of errors, reported with the error message."""

    CONFIGURATION = "configuration"
    TOOL = "tool"
    CATALOG = "catalog"
    UNKNOWN = "unknown"


class GettextTasksError(Exception):
    """Base exception class for gettext-tasks specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.context: object | None = context


class ConfigurationError(GettextTasksError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message, category=ErrorCategory.CONFIGURATION, context=context)


class ToolInvocationError(GettextTasksError):
    """An external gettext binary could not be run or exited with an error."""

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message, category=ErrorCategory.TOOL, context=list(command))
        self.command: list[str] = list(command)
        self.returncode: int | None = returncode
        self.stderr: str = stderr


class CatalogError(GettextTasksError):
    """A translation file could not be read or parsed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message, category=ErrorCategory.CATALOG, context=path)
        self.path: Path = path
