"""YAML parser for critpath project files."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .schemas import ProjectSchema, TaskSchema


def _default_task_list() -> list[TaskRecord]:
    return []


def _default_edge_list() -> list[tuple[str, str]]:
    return []


@dataclass(frozen=True)
class TaskRecord:
    """A (name, duration) pair ready to be fed into the scheduler."""

    name: str
    duration: int


@dataclass
class ProjectDefinition:
    """Parsed project: task records and dependency edges in file order."""

    name: str | None = None
    start_date: date | None = None
    tasks: list[TaskRecord] = field(default_factory=_default_task_list)
    dependencies: list[tuple[str, str]] = field(default_factory=_default_edge_list)


def resolve_dependencies(tasks: dict[str, TaskSchema]) -> list[tuple[str, str]]:
    """Collect (predecessor, successor) edges from both `requires` and `enables`.

    An edge declared from both ends is kept once, at its first position.
    """
    edges: list[tuple[str, str]] = []
    seen: set[tuple[str, str]] = set()

    for name, task in tasks.items():
        declared = [(pred, name) for pred in task.requires] + [(name, succ) for succ in task.enables]
        for edge in declared:
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)

    return edges


class ProjectParser:
    """Parser for project YAML files.

    Only handles YAML parsing and record extraction. Building a scheduler
    (and thereby validating names, durations and cycles) is done by
    load_project() in critpath.loader.
    """

    def parse_file(self, file_path: Path | str) -> ProjectDefinition:
        """Parse a YAML file into a ProjectDefinition."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        return self.parse_data(data)

    def parse_string(self, text: str) -> ProjectDefinition:
        """Parse YAML text into a ProjectDefinition."""
        try:
            data: Any = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        return self.parse_data(data)

    def parse_data(self, data: Any) -> ProjectDefinition:
        """Convert loaded YAML data into a ProjectDefinition."""
        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        try:
            schema = ProjectSchema.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid YAML structure: {e}") from e

        return ProjectDefinition(
            name=schema.metadata.name,
            start_date=schema.metadata.start_date,
            tasks=[
                TaskRecord(name=name, duration=task.duration)
                for name, task in schema.tasks.items()
            ],
            dependencies=resolve_dependencies(schema.tasks),
        )
