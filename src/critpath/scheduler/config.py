"""Configuration classes for the scheduling engine."""

from datetime import date

from pydantic import BaseModel


class SchedulingConfig(BaseModel):
    """Configuration for the CPM scheduler."""

    # Project start date; None means today
    start_date: date | None = None

    # Recompute after every successful mutation instead of waiting for recompute()
    auto_recompute: bool = False
