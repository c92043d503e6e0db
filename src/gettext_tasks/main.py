"""
Command-line interface for gettext-tasks.

This module parses the command line, builds the configuration of the run,
sets up logging, loads package metadata and runs one named task.

Usage Examples:
    Extract, merge and convert using a config file:
        gettext-tasks --config gettext.yml build

    Convert existing .po files to compact JSON:
        gettext-tasks --source po --target static/lang --languages fr de --compact json

    Remove generated JSON files:
        gettext-tasks --config gettext.yml gettext:clear
"""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

import yaml
from pydantic import ValidationError

from .config.manager import ConfigManager, load_package_metadata
from .config.schema import GettextConfig, PackageMetadata
from .tasks.registry import NAME, TASK_NAMES, Task, create_tasks
from .tasks.results import ConversionResult, ExecResult
from .utils.core.exceptions import GettextTasksError

logger = logging.getLogger(__name__)

# Tasks that run xgettext and therefore need package metadata
EXTRACTING_TASKS = {"build", "exec"}


class CliArgs(NamedTuple):
    """Type-safe container for command-line arguments."""

    task: str
    config_file: Path | None
    source: Path | None
    target: Path | None
    sources: list[Path] | None
    languages: list[str] | None
    compact: bool
    verbose: bool
    prefix: str
    suffix: str
    log_file: Path | None


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable debug logging on the console
        log_file: Optional file receiving detailed, rotated logs
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        _ = log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gettext-tasks",
        description="Extract, merge and compile gettext translations to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Tasks:
  config   show the effective configuration
  build    exec, then json
  exec     extract messages.pot and merge/init every <language>.po
  json     convert every <language>.po to <language>.json
  clear    remove every generated <language>.json

--sources and --languages take one or more values: give the task before them,
or put another option in between.

Examples:
  %(prog)s --config gettext.yml build
  %(prog)s json --languages fr de --sources src
  %(prog)s --config gettext.yml gettext:clear
        """,
    )

    _ = parser.add_argument("task", help="Task to run, with or without its prefix/suffix")
    _ = parser.add_argument(
        "--config",
        dest="config_file",
        type=Path,
        help="YAML configuration file",
    )
    _ = parser.add_argument("--source", type=Path, help="Directory with .po and .pot files")
    _ = parser.add_argument("--target", type=Path, help="Directory for generated .json files")
    _ = parser.add_argument(
        "--sources",
        type=Path,
        nargs="+",
        help="Source files or directories to extract strings from",
    )
    _ = parser.add_argument(
        "--languages",
        nargs="+",
        help='Language codes to process (e.g., "fr", "de")',
    )
    _ = parser.add_argument(
        "--compact",
        action="store_true",
        help="Write compact JSON",
    )
    _ = parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging and log external commands",
    )
    _ = parser.add_argument("--prefix", default=f"{NAME}:", help="Task name prefix (default: %(default)s)")
    _ = parser.add_argument("--suffix", default="", help="Task name suffix")
    _ = parser.add_argument("--log-file", type=Path, help="Also write detailed logs to this file")

    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> CliArgs:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments in a type-safe container
    """
    args = create_argument_parser().parse_args(argv)

    # argparse returns Any types
    task: str = args.task
    config_file: Path | None = args.config_file
    source: Path | None = args.source
    target: Path | None = args.target
    sources: list[Path] | None = args.sources
    languages: list[str] | None = args.languages
    compact: bool = args.compact
    verbose: bool = args.verbose
    prefix: str = args.prefix
    suffix: str = args.suffix
    log_file: Path | None = args.log_file

    return CliArgs(
        task=task,
        config_file=config_file,
        source=source,
        target=target,
        sources=sources,
        languages=languages,
        compact=compact,
        verbose=verbose,
        prefix=prefix,
        suffix=suffix,
        log_file=log_file,
    )


def build_config(args: CliArgs) -> GettextConfig:
    """Merge the configuration file with command-line overrides."""
    file_data: dict[str, object] = {}
    if args.config_file is not None:
        file_data = ConfigManager.read_config_file(args.config_file)

    overrides: dict[str, object] = {
        "source": args.source,
        "target": args.target,
        "sources": args.sources,
        "languages": args.languages,
        # flags only override when given
        "compact": True if args.compact else None,
        "verbose": True if args.verbose else None,
    }

    return ConfigManager.build_config(file_data, overrides)


def resolve_task_name(task: str, prefix: str, suffix: str) -> str | None:
    """Return the bare task name for a plain or decorated task name."""
    if task in TASK_NAMES:
        return task
    for name in TASK_NAMES:
        if task == f"{prefix}{name}{suffix}":
            return name
    return None


def exit_code_for(result: object) -> int:
    """Map a task result to a process exit code."""
    match result:
        case ConversionResult() if result.failed:
            return 1
        case ExecResult() if not result.skipped and not result.extracted:
            return 1
        case _:
            return 0


async def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the command-line interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_file)

    name = resolve_task_name(args.task, args.prefix, args.suffix)
    if name is None:
        logger.error(f"Unknown task: {args.task} (expected one of {', '.join(TASK_NAMES)})")
        return 1

    try:
        config = build_config(args)

        metadata: PackageMetadata | None = None
        if name in EXTRACTING_TASKS and config.is_runnable():
            metadata = load_package_metadata(config.package_file)

        tasks = create_tasks(config, metadata, prefix=args.prefix, suffix=args.suffix)
        task: Task = tasks[f"{args.prefix}{name}{args.suffix}"]

        logger.info(f"Running task {args.prefix}{name}{args.suffix}")
        result = await task()

    except (FileNotFoundError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except GettextTasksError as e:
        logger.error(f"{e.category.value.capitalize()} error: {e}")
        return 1

    return exit_code_for(result)
