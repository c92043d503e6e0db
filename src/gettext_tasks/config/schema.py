"""Configuration schema for gettext-tasks using Pydantic models."""

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GettextConfig(BaseModel):
    """
    Effective configuration of one invocation.

    The model is frozen: it is built once from defaults, the optional config
    file and command-line overrides, and then handed to every task step.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    # Directory layout
    source: Path = Field(
        default=Path("."),
        description="Directory holding messages.pot and the <language>.po files",
    )
    target: Path = Field(
        default=Path("."),
        description="Directory receiving the generated <language>.json files",
    )
    sources: tuple[Path, ...] = Field(
        default=(),
        description="Source files or directories scanned recursively by xgettext",
    )
    languages: tuple[str, ...] = Field(
        default=(),
        description="Language codes to generate localization files for, in processing order",
    )

    # xgettext / msgmerge / msginit flags
    from_code: str = Field(
        default="UTF-8",
        description="Encoding of the input files (--from-code)",
        min_length=1,
    )
    add_comments: str | None = Field(
        default="gettext",
        description="Keep comment blocks starting with this tag (--add-comments)",
    )
    indent: bool = Field(
        default=False,
        description="Write the .po file using indented style (--indent)",
    )
    no_location: bool = Field(
        default=True,
        description="Do not write '#: filename:line' lines (--no-location)",
    )
    add_location: Literal["full", "file", "never"] | None = Field(
        default="file",
        description="Style of '#: filename:line' lines (--add-location)",
    )
    no_wrap: bool = Field(
        default=True,
        description="Do not break long message lines (--no-wrap)",
    )
    sort_output: bool = Field(
        default=True,
        description="Generate sorted output (--sort-output)",
    )
    sort_by_file: bool = Field(
        default=False,
        description="Sort output by file location (--sort-by-file)",
    )
    source_language: str | None = Field(
        default="Python",
        description="Source language passed to xgettext (--language), None to infer from extensions",
    )

    # Runner behaviour
    verbose: bool = Field(
        default=False,
        description="Log every external command line before running it",
    )
    compact: bool = Field(
        default=False,
        description="Write compact JSON instead of indented JSON",
    )
    package_file: Path = Field(
        default=Path("pyproject.toml"),
        description="Project file providing package name, version and bugs address",
    )

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Strip language codes and reject blank entries."""
        cleaned: list[str] = []
        for code in v:
            code = code.strip()
            if not code:
                raise ValueError("Language codes must not be empty")
            cleaned.append(code)
        return tuple(cleaned)

    @field_validator("add_comments", "source_language")
    @classmethod
    def empty_as_none(cls, v: str | None) -> str | None:
        """Treat an empty string as 'option disabled'."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def pot_file(self) -> Path:
        """Path of the extracted template."""
        return self.source / "messages.pot"

    def po_file(self, language: str) -> Path:
        """Path of the translation source file for a language."""
        return self.source / f"{language}.po"

    def json_file(self, language: str) -> Path:
        """Path of the generated catalog file for a language."""
        return self.target / f"{language}.json"

    def is_runnable(self) -> bool:
        """Whether there is anything to extract and merge."""
        return bool(self.languages) and bool(self.sources)


class PackageMetadata(BaseModel):
    """Package information forwarded to xgettext."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    bugs_address: str | None = None
