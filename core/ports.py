"""
Presentation port used by the controller.

The controller only talks to this Protocol, so the Tkinter window and the
test fakes are interchangeable.
"""
from __future__ import annotations
from typing import List, Optional, Protocol

from core.models import Task, TaskStats


class TaskView(Protocol):
    def render_tasks(self, tasks: List[Task], editing_id: Optional[int], empty_message: str) -> None: ...

    def render_stats(self, stats: TaskStats) -> None: ...

    def show_filter_label(self, label: str) -> None: ...

    def clear_inputs(self) -> None: ...

    def notify(self, message: str) -> None:
        """Blocking notice (validation failures)."""
        ...

    def confirm(self, message: str) -> bool: ...

    def focus_edit(self, task_id: int) -> None:
        """Move focus to the edit entry of a row once it has been rendered."""
        ...
