import tkinter as tk
from tkinter import ttk, messagebox as mb
from typing import List, Optional

from core.config import ROW_WRAP, TOPMOST, WINDOW_GEOMETRY, WINDOW_TITLE
from core.models import Task, TaskFilter, TaskStats
from controller.task_controller import TaskController
from gui.task_list import ScrollableTaskList

FILTER_MENU = [("All", TaskFilter.ALL), ("Completed", TaskFilter.COMPLETED), ("Pending", TaskFilter.PENDING)]


class MainWindow(tk.Tk):
    """Tk implementation of the TaskView port; every widget action goes straight to the controller."""
    def __init__(self, controller: TaskController):
        super().__init__()
        self.controller = controller
        self.title(WINDOW_TITLE)
        self.geometry(WINDOW_GEOMETRY)
        self.configure(padx=8, pady=8)
        if TOPMOST:
            self.attributes("-topmost", True)

        # Stats bar
        stats = ttk.Frame(self)
        stats.pack(fill="x", pady=(0, 6))
        self.total_var = tk.StringVar(value="0")
        self.completed_var = tk.StringVar(value="0")
        self.pending_var = tk.StringVar(value="0")
        self.progress_text_var = tk.StringVar(value="0%")
        self.progress_var = tk.IntVar(value=0)
        for label, var in (("Total", self.total_var), ("Completed", self.completed_var),
                           ("Pending", self.pending_var), ("Progress", self.progress_text_var)):
            ttk.Label(stats, text=f"{label}:").pack(side="left")
            ttk.Label(stats, textvariable=var, width=5).pack(side="left", padx=(2, 10))
        self.progress = ttk.Progressbar(stats, maximum=100, variable=self.progress_var)
        self.progress.pack(side="left", fill="x", expand=True)

        # Header: quick add
        header = ttk.Frame(self)
        header.pack(fill="x", pady=(0, 4))
        ttk.Label(header, text="New task:").pack(side="left")
        self.entry = ttk.Entry(header)
        self.entry.pack(side="left", fill="x", expand=True, padx=6)
        self.entry.bind("<Return>", self._on_add)
        ttk.Label(header, text="Due (YYYY-MM-DD):").pack(side="left")
        self.date_entry = ttk.Entry(header, width=11)
        self.date_entry.pack(side="left", padx=6)
        self.date_entry.bind("<Return>", self._on_add)
        ttk.Button(header, text="Add", command=self._on_add).pack(side="left")

        # Toolbar: search, filter, delete all
        toolbar = ttk.Frame(self)
        toolbar.pack(fill="x", pady=(0, 6))
        ttk.Label(toolbar, text="Search:").pack(side="left")
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(toolbar, textvariable=self.search_var)
        self.search_entry.pack(side="left", fill="x", expand=True, padx=6)
        self.search_var.trace_add("write", self._on_search)

        self.filter_btn = ttk.Menubutton(toolbar, text=TaskFilter.ALL.label)
        filter_menu = tk.Menu(self.filter_btn, tearoff=False)
        for label, task_filter in FILTER_MENU:
            filter_menu.add_command(label=label, command=lambda f=task_filter: self.controller.set_filter(f))
        self.filter_btn["menu"] = filter_menu
        self.filter_btn.pack(side="left", padx=(0, 6))
        ttk.Button(toolbar, text="Delete all", command=self.controller.delete_all_tasks).pack(side="left")

        # Scrollable task list; per-row callbacks are the controller's own methods
        self.task_list = ScrollableTaskList(
            self,
            on_toggle=self.controller.toggle_task,
            on_edit=self.controller.edit_task,
            on_delete=self.controller.delete_task,
            on_save=self.controller.save_edit_task,
            on_cancel=self.controller.cancel_edit_task,
            row_wrap=ROW_WRAP,
        )
        self.task_list.pack(fill="both", expand=True)

        # Shortcuts
        self.bind("<Control-f>", self._focus_search)

        self.controller.set_view(self)

    # ---------- TaskView ----------
    def render_tasks(self, tasks: List[Task], editing_id: Optional[int], empty_message: str) -> None:
        self.task_list.set_tasks(tasks, editing_id, empty_message)

    def render_stats(self, stats: TaskStats) -> None:
        self.total_var.set(str(stats.total))
        self.completed_var.set(str(stats.completed))
        self.pending_var.set(str(stats.pending))
        self.progress_text_var.set(f"{stats.progress_percentage}%")
        self.progress_var.set(stats.progress_percentage)

    def show_filter_label(self, label: str) -> None:
        self.filter_btn.configure(text=label)

    def clear_inputs(self) -> None:
        self.entry.delete(0, "end")
        self.date_entry.delete(0, "end")

    def notify(self, message: str) -> None:
        mb.showwarning(WINDOW_TITLE, message, parent=self)

    def confirm(self, message: str) -> bool:
        return bool(mb.askyesno(WINDOW_TITLE, message, parent=self))

    def focus_edit(self, task_id: int) -> None:
        # the edit entry is created by this render; focus it once Tk is idle
        self.after(0, lambda: self.task_list.focus_edit(task_id))

    # ---------- actions ----------
    def _on_add(self, event=None):
        self.controller.add_task(self.entry.get(), self.date_entry.get())

    def _on_search(self, *_):
        self.controller.set_search_term(self.search_var.get())

    def _focus_search(self, event=None):
        self.search_entry.focus_set()
        return "break"
