"""Pytest configuration and fixtures for critpath tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest

from critpath import context
from critpath.logger import reset_logger
from critpath.scheduler import Scheduler

START = date(2025, 1, 6)

SCENARIO_ONE_YAML = """
metadata:
  name: Scenario one
  start_date: 2025-01-06
tasks:
  A: 2
  B: 1
  C: 6
  D:
    duration: 3
    requires: [A, B]
  E:
    duration: 3
    requires: [B, C]
  F:
    duration: 5
    requires: [D, E]
"""


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Reset the logger and the global config path around every test."""
    reset_logger()
    context.set_config_path(None)
    yield
    reset_logger()
    context.set_config_path(None)


@pytest.fixture
def scenario_one() -> Scheduler:
    """A(2), B(1), C(6), D(3), E(3), F(5) with A,B->D; B,C->E; D,E->F. Not recomputed."""
    scheduler = Scheduler(START)
    for name, duration in [("A", 2), ("B", 1), ("C", 6), ("D", 3), ("E", 3), ("F", 5)]:
        scheduler.add_task(name, duration)
    for pred, succ in [("A", "D"), ("B", "D"), ("B", "E"), ("C", "E"), ("D", "F"), ("E", "F")]:
        scheduler.add_dependency(pred, succ)
    return scheduler


@pytest.fixture
def scenario_two() -> Scheduler:
    """A(10) on its own plus the chain B(5) -> C(3). Not recomputed."""
    scheduler = Scheduler(START)
    scheduler.add_task("A", 10)
    scheduler.add_task("B", 5)
    scheduler.add_task("C", 3)
    scheduler.add_dependency("B", "C")
    return scheduler


@pytest.fixture
def scenario_one_file(tmp_path: Path) -> Path:
    """Scenario one written as a project file."""
    path = tmp_path / "project.yaml"
    path.write_text(SCENARIO_ONE_YAML, encoding="utf-8")
    return path
