"""Project loading: parse a project file and build a populated scheduler."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from . import context
from .exceptions import NotFoundError
from .logger import get_logger
from .parser import ProjectDefinition, ProjectParser
from .scheduler import Scheduler
from .unified_config import (
    CONFIG_FILENAME,
    UnifiedConfig,
    get_scheduling_config,
    load_unified_config,
)

logger = get_logger()


def discover_config(
    project_path: Path | str | None = None,
    config_path: Path | None = None,
) -> UnifiedConfig | None:
    """Discover unified config from various locations.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. project file directory / critpath_config.yaml
    4. Current directory / critpath_config.yaml
    """
    # 1. Explicit argument
    if config_path and config_path.exists():
        return load_unified_config(config_path)

    # 2. Global context
    ctx_config = context.get_config_path()
    if ctx_config and ctx_config.exists():
        return load_unified_config(ctx_config)

    # 3. Project file directory
    if project_path is not None:
        dir_config = Path(project_path).parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_unified_config(dir_config)

    # 4. Current directory
    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_unified_config(cwd_config)

    return None


def build_scheduler(
    project: ProjectDefinition,
    start_date: date | None = None,
    config: UnifiedConfig | None = None,
) -> Scheduler:
    """Feed a parsed project into a new scheduler.

    The start date is taken from, in order: the start_date argument, the
    project metadata, the scheduler config, today.

    Raises:
        NotFoundError: If a dependency names a task that isn't defined
        ValidationError: For invalid names, durations or dependencies
    """
    scheduling_config = get_scheduling_config(config)
    scheduler = Scheduler(start_date or project.start_date, scheduling_config)

    for record in project.tasks:
        scheduler.add_task(record.name, record.duration)

    for pred, succ in project.dependencies:
        for name in (pred, succ):
            if scheduler.find_task(name) is None:
                raise NotFoundError(f"Dependency {pred} -> {succ} references unknown task: {name}")
        scheduler.add_dependency(pred, succ)

    logger.changes(
        f"Loaded project {project.name or '(unnamed)'}: "
        f"{len(project.tasks)} tasks, {len(project.dependencies)} dependencies"
    )
    return scheduler


def load_project(
    path: Path | str,
    config_path: Path | None = None,
    *,
    start_date: date | None = None,
    config: UnifiedConfig | None = None,
) -> Scheduler:
    """Load a project file and return a scheduler with dates computed.

    This is the main entry point for loading projects. It handles:
    1. Config discovery (unless config is given)
    2. YAML parsing and schema validation
    3. Task and dependency insertion (names, durations, cycles checked)
    4. A first recompute

    Args:
        path: Path to the project YAML file
        config_path: Optional explicit path to config file
        start_date: Optional project start date override
        config: Optional explicit unified config (overrides discovery)

    Returns:
        Scheduler holding the project, already recomputed
    """
    path = Path(path)

    if config is None:
        config = discover_config(path, config_path)

    project = ProjectParser().parse_file(path)
    scheduler = build_scheduler(project, start_date, config)
    scheduler.recompute()
    return scheduler
