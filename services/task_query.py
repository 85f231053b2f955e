"""Derived views over the task collection: filtered list and summary stats.

Everything here is recomputed from scratch on each call; nothing is cached.
"""
from __future__ import annotations
import math
from typing import Iterable, List

from core.models import Task, TaskFilter, TaskStats

NO_TASKS = "No tasks found"
NO_MATCHES = "No tasks match your search"


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter = TaskFilter.ALL, search_term: str = "") -> List[Task]:
    filtered = list(tasks)
    if search_term:
        needle = search_term.lower()
        filtered = [t for t in filtered if needle in t.text.lower()]
    if task_filter is TaskFilter.COMPLETED:
        filtered = [t for t in filtered if t.completed]
    elif task_filter is TaskFilter.PENDING:
        filtered = [t for t in filtered if not t.completed]
    return filtered


def round_half_up(value: float) -> int:
    # round() would give 12 for 12.5
    return int(math.floor(value + 0.5))


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    tasks = list(tasks)
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    progress = round_half_up(completed / total * 100) if total > 0 else 0
    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        progress_percentage=progress,
    )


def empty_message(tasks: List[Task]) -> str:
    """Placeholder for an empty list view: nothing at all vs. nothing matching."""
    return NO_TASKS if not tasks else NO_MATCHES
