# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from core.models import Task, TaskStats


@dataclass
class RenderCall:
    tasks: list[Task]
    editing_id: int | None
    empty_message: str


@dataclass
class FakeView:
    """
    Recording TaskView for controller tests.

    - Captures every outbound call for assertions
    - `confirm_answer` decides what the delete-all prompt returns
    """

    confirm_answer: bool = True
    renders: list[RenderCall] = field(default_factory=list)
    stats: list[TaskStats] = field(default_factory=list)
    filter_labels: list[str] = field(default_factory=list)
    notifications: list[str] = field(default_factory=list)
    confirmations: list[str] = field(default_factory=list)
    focused: list[int] = field(default_factory=list)
    cleared: int = 0

    def render_tasks(self, tasks: list[Task], editing_id: int | None, empty_message: str) -> None:
        self.renders.append(RenderCall(list(tasks), editing_id, empty_message))

    def render_stats(self, stats: TaskStats) -> None:
        self.stats.append(stats)

    def show_filter_label(self, label: str) -> None:
        self.filter_labels.append(label)

    def clear_inputs(self) -> None:
        self.cleared += 1

    def notify(self, message: str) -> None:
        self.notifications.append(message)

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.confirm_answer

    def focus_edit(self, task_id: int) -> None:
        self.focused.append(task_id)

    @property
    def last_render(self) -> RenderCall:
        return self.renders[-1]

    @property
    def last_stats(self) -> TaskStats:
        return self.stats[-1]
