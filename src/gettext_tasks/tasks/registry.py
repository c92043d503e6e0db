"""
Named task table.

``create_tasks`` binds a configuration (and package metadata) to the pipeline
functions and exposes them under prefixed names such as ``gettext:build``,
ready to be plugged into a build runner.

Usage Examples:
    >>> tasks = create_tasks(config, metadata)
    >>> asyncio.run(tasks["gettext:build"]())
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from . import pipeline
from ..config.schema import GettextConfig, PackageMetadata

NAME = "gettext"

TASK_NAMES = ("config", "build", "exec", "json", "clear")

Task = Callable[[], Awaitable[object]]

# Exported pipeline entry points
METHODS: dict[str, Callable[..., Awaitable[object]]] = {
    "build": pipeline.build,
}


def create_tasks(
    config: GettextConfig,
    metadata: PackageMetadata | None = None,
    prefix: str = f"{NAME}:",
    suffix: str = "",
) -> dict[str, Task]:
    """
    Create the task table for one configuration.

    Args:
        config: Effective configuration shared by all tasks
        metadata: Package information used by extraction
        prefix: Text placed before every task name
        suffix: Text placed after every task name

    Returns:
        Mapping of task name to a zero-argument coroutine factory
    """

    async def config_task() -> None:
        await pipeline.show_config(config)

    async def build_task() -> object:
        return await pipeline.build(config, metadata)

    async def exec_task() -> object:
        return await pipeline.exec_po(config, metadata)

    async def json_task() -> object:
        return await pipeline.convert(config)

    async def clear_task() -> object:
        return await pipeline.clear(config)

    factories: dict[str, Task] = {
        "config": config_task,
        "build": build_task,
        "exec": exec_task,
        "json": json_task,
        "clear": clear_task,
    }

    return {f"{prefix}{name}{suffix}": factories[name] for name in TASK_NAMES}
