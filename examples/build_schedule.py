"""Build a schedule through the Python API instead of a project file.

Usage:
    python examples/build_schedule.py
"""

from datetime import date

from critpath import Scheduler
from critpath.report import describe_early, describe_late

scheduler = Scheduler(date(2025, 1, 6))

for name, duration in [("A", 2), ("B", 1), ("C", 6), ("D", 3), ("E", 3), ("F", 5)]:
    scheduler.add_task(name, duration)

for pred, succ in [("A", "D"), ("B", "D"), ("B", "E"), ("C", "E"), ("D", "F"), ("E", "F")]:
    scheduler.add_dependency(pred, succ)

result = scheduler.recompute()

for task in scheduler.list_tasks():
    print(describe_early(task))
    print(describe_late(task))

print(f"Project ends on {result.project_end_date} ({result.project_duration} days)")
print(f"Critical path: {' -> '.join(result.critical_path)}")
