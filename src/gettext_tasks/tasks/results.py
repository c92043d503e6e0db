"""Result records returned by the pipeline tasks."""

from __future__ import annotations

from pathlib import Path
from typing_extensions import override


class ExecResult:
    """Result of an extract-and-merge run."""

    def __init__(self) -> None:
        self.pot_file: Path | None = None
        self.merged: list[str] = []
        self.initialized: list[str] = []
        self.failed: list[str] = []
        self.skipped: bool = False

    @property
    def extracted(self) -> bool:
        """Whether a template was produced."""
        return self.pot_file is not None

    @override
    def __str__(self) -> str:
        """String representation of exec results."""
        if self.skipped:
            return "Exec Results: skipped (no languages or sources configured)"
        if not self.extracted:
            return "Exec Results: extraction failed"
        return (
            f"Exec Results: "
            f"{len(self.merged)} merged, "
            f"{len(self.initialized)} initialized, "
            f"{len(self.failed)} failed"
        )


class ConversionResult:
    """Result of converting language files to JSON catalogs."""

    def __init__(self) -> None:
        self.written_files: list[Path] = []
        self.missing_languages: list[str] = []

    @property
    def success_count(self) -> int:
        """Number of catalogs written."""
        return len(self.written_files)

    @property
    def failed(self) -> bool:
        """Error flag: at least one language had no translation file."""
        return bool(self.missing_languages)

    @override
    def __str__(self) -> str:
        """String representation of conversion results."""
        return (
            f"Conversion Results: "
            f"{self.success_count} written, "
            f"{len(self.missing_languages)} missing"
        )
