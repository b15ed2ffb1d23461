"""Pydantic schemas for project YAML validation."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, StrictInt, field_validator


class TaskSchema(BaseModel):
    """Schema for a single task entry."""

    duration: StrictInt  # No bool or float coercion; range is checked by the scheduler
    requires: list[str] = Field(default_factory=list)  # Predecessors
    enables: list[str] = Field(default_factory=list)  # Successors
    description: str | None = None

    @field_validator("requires", "enables", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class ProjectMetadataSchema(BaseModel):
    """Schema for the metadata block."""

    name: str | None = None
    start_date: date | None = None

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name_to_string(cls, v: Any) -> str | None:
        """Allow numeric project names."""
        if v is None:
            return None
        return str(v)


class ProjectSchema(BaseModel):
    """Schema for the whole project file."""

    metadata: ProjectMetadataSchema = Field(default_factory=ProjectMetadataSchema)
    tasks: dict[str, TaskSchema] = Field(default_factory=dict)

    @field_validator("tasks", mode="before")
    @classmethod
    def expand_shorthand(cls, v: Any) -> Any:
        """Accept `name: 3` as shorthand for `name: {duration: 3}`."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        expanded: dict[str, Any] = {}
        for name, entry in v.items():  # type: ignore[misc]
            if isinstance(entry, int) and not isinstance(entry, bool):
                entry = {"duration": entry}
            expanded[str(name)] = entry  # type: ignore[misc]
        return expanded
