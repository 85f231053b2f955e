import logging
import time
from typing import Callable, List, Optional, Union

from core.exceptions import InvalidFilterError, TaskValidationError
from core.models import Task, TaskFilter, TaskStats
from core.ports import TaskView
from services.task_query import compute_stats, empty_message, filter_tasks
from services.validation import MSG_CONFIRM_DELETE_ALL, validate_edit, validate_new_task

logger = logging.getLogger(__name__)


class TaskController:
    """Owns the task list and the view filters; pushes stats and renders to the view."""
    def __init__(self, view: Optional[TaskView] = None, clock: Callable[[], float] = time.time):
        self.view = view
        self.tasks: List[Task] = []
        self.filter: TaskFilter = TaskFilter.ALL
        self.search_term: str = ""
        self.editing_id: Optional[int] = None
        self._clock = clock
        self._last_id = 0

    # ---- UI integration ----
    def set_view(self, view: TaskView):
        self.view = view

    def start(self):
        """Publish the initial (empty) state once the view exists."""
        self.update_stats()
        self.render_tasks()

    # ---- queries ----
    def get_task(self, task_id: int) -> Optional[Task]:
        return next((t for t in self.tasks if t.id == task_id), None)

    def get_filtered_tasks(self) -> List[Task]:
        return filter_tasks(self.tasks, self.filter, self.search_term)

    def get_stats(self) -> TaskStats:
        return compute_stats(self.tasks)

    # ---- tasks ----
    def add_task(self, text: str, due_date: str) -> Optional[Task]:
        try:
            text, due_date = validate_new_task(text, due_date)
        except TaskValidationError as e:
            logger.info("Add rejected: %s", e.message)
            self._notify(e.message)
            return None
        task = Task(id=self._allocate_id(), text=text, due_date=due_date)
        self.tasks.append(task)
        logger.debug("Added task %s", task.id)
        if self.view:
            self.view.clear_inputs()
        self._refresh()
        return task

    def toggle_task(self, task_id: int):
        task = self.get_task(task_id)
        if not task:
            logger.debug("Toggle ignored, unknown task %s", task_id)
            return
        task.completed = not task.completed
        self._refresh()

    def delete_task(self, task_id: int):
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        if len(self.tasks) == before:
            logger.debug("Delete ignored, unknown task %s", task_id)
        if self.editing_id == task_id:
            self.editing_id = None
        self._refresh()

    def delete_all_tasks(self) -> bool:
        if not self.tasks:
            return False
        if not (self.view and self.view.confirm(MSG_CONFIRM_DELETE_ALL)):
            return False
        logger.info("Deleting all %d tasks", len(self.tasks))
        self.tasks = []
        self.editing_id = None
        self._refresh()
        return True

    # ---- view filters ----
    def set_filter(self, task_filter: Union[TaskFilter, str]):
        try:
            task_filter = TaskFilter(task_filter)
        except ValueError:
            raise InvalidFilterError(f"Unknown filter: {task_filter!r}") from None
        self.filter = task_filter
        self.render_tasks()
        if self.view:
            self.view.show_filter_label(task_filter.label)

    def set_search_term(self, term: str):
        self.search_term = term or ""
        self.render_tasks()

    # ---- inline edit ----
    def edit_task(self, task_id: int):
        if not self.get_task(task_id):
            logger.debug("Edit ignored, unknown task %s", task_id)
            return
        self.editing_id = task_id
        self.render_tasks()
        if self.view:
            self.view.focus_edit(task_id)

    def save_edit_task(self, task_id: int, text: str, due_date: str) -> bool:
        task = self.get_task(task_id)
        if not task:
            logger.debug("Save ignored, unknown task %s", task_id)
            return False
        try:
            text, due_date = validate_edit(text, due_date)
        except TaskValidationError as e:
            logger.info("Edit of task %s rejected: %s", task_id, e.message)
            self._notify(e.message)
            return False
        task.text = text
        task.due_date = due_date
        if self.editing_id == task_id:
            self.editing_id = None
        self.render_tasks()
        return True

    def cancel_edit_task(self, task_id: int):
        if self.editing_id == task_id:
            self.editing_id = None
        self.render_tasks()

    # ---- publishing ----
    def update_stats(self):
        if self.view:
            self.view.render_stats(self.get_stats())

    def render_tasks(self):
        if self.view:
            self.view.render_tasks(self.get_filtered_tasks(), self.editing_id, empty_message(self.tasks))

    def _refresh(self):
        self.update_stats()
        self.render_tasks()

    def _notify(self, message: str):
        if self.view:
            self.view.notify(message)

    def _allocate_id(self) -> int:
        # millisecond timestamp, bumped when two adds land in the same ms
        nid = max(int(self._clock() * 1000), self._last_id + 1)
        self._last_id = nid
        return nid
