"""Unified configuration loader.

A single critpath_config.yaml combines scheduler settings with display
preferences for the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from .scheduler import SchedulingConfig

CONFIG_FILENAME = "critpath_config.yaml"
DEFAULT_DATE_FORMAT = "%d/%m/%Y"


class DisplayConfig(BaseModel):
    """Configuration for how schedules are printed."""

    date_format: str = DEFAULT_DATE_FORMAT  # strftime pattern, day/month/year by default
    show_late_dates: bool = True

    @field_validator("date_format")
    @classmethod
    def check_date_format(cls, v: str) -> str:
        """Reject formats without any strftime directive."""
        if "%" not in v:
            raise ValueError(f"date_format must contain strftime directives, got '{v}'")
        return v


class UnifiedConfig(BaseModel):
    """Unified configuration with optional scheduler and display sections."""

    scheduler: SchedulingConfig | None = None
    display: DisplayConfig | None = None


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load unified configuration from a YAML file.

    Args:
        config_path: Path to critpath_config.yaml

    Returns:
        UnifiedConfig with whichever sections are present

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config is empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if not data:
        raise ValueError("Empty configuration file")
    if not isinstance(data, dict):
        raise ValueError("Config must contain a mapping at the root level")

    # pydantic's ValidationError is a ValueError subclass
    return UnifiedConfig.model_validate(data)


def get_display_config(config: UnifiedConfig | None) -> DisplayConfig:
    """Get the display section, falling back to defaults."""
    if config and config.display:
        return config.display
    return DisplayConfig()


def get_scheduling_config(config: UnifiedConfig | None) -> SchedulingConfig:
    """Get the scheduler section, falling back to defaults."""
    if config and config.scheduler:
        return config.scheduler
    return SchedulingConfig()
