"""
Scrollable Task List widget for Tkinter
--------------------------------------
Renders each task as its own row (a Frame) inside a scrollable Canvas, with:
- a Checkbutton to mark completion
- the task text and due date (or entries for both while the row is in edit mode)
- a colored status badge (Completed / Pending)
- Edit/Delete buttons, or Save/Cancel while editing

Integration notes (MVC-friendly):
- The widget is view-only state. All state changes are driven by the controller
  via callbacks passed in the constructor; every row gets them rebound on render.
- Use `set_tasks()` with the controller's filtered list to (re)render.
- Text goes through Tk `text=`/`textvariable`, so it is always shown literally.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import tkinter as tk
from tkinter import ttk
import tkinter.font as tkfont

from core.models import Task

BADGE_COLORS = {True: "#10B981", False: "#F59E0B"}
ROW_CHROME = 360  # date, badge and buttons
MIN_WRAP = 80


class TaskRow(ttk.Frame):
    """A single task row; layout depends on whether the task is being edited."""
    def __init__(
        self,
        master,
        task: Task,
        editing: bool = False,
        on_toggle: Optional[Callable[[int], None]] = None,
        on_edit: Optional[Callable[[int], None]] = None,
        on_delete: Optional[Callable[[int], None]] = None,
        on_save: Optional[Callable[[int, str, str], None]] = None,
        on_cancel: Optional[Callable[[int], None]] = None,
        wrap: int = 420,
    ):
        super().__init__(master)
        self.task_id = task.id
        self.editing = editing
        self._on_toggle = on_toggle
        self._on_edit = on_edit
        self._on_delete = on_delete
        self._on_save = on_save
        self._on_cancel = on_cancel
        self.var = tk.BooleanVar(value=task.completed)
        self.lbl: Optional[ttk.Label] = None
        self.text_entry: Optional[ttk.Entry] = None

        self.columnconfigure(1, weight=1)

        # Checkbox
        self.chk = ttk.Checkbutton(self, variable=self.var, command=self._toggle)
        self.chk.grid(row=0, column=0, padx=(8, 6), pady=4, sticky="w")

        if editing:
            self._build_edit(task)
        else:
            self._build_view(task, wrap)

        # Status badge; tk.Label allows a background color without ttk style plumbing
        badge_bg = BADGE_COLORS[task.completed]
        self.badge = tk.Label(
            self,
            text="Completed" if task.completed else "Pending",
            bg=badge_bg,
            fg=_ideal_text_color(badge_bg),
            padx=4,
            pady=2,
            borderwidth=0,
            relief="flat",
        )
        self.badge.grid(row=0, column=3, padx=(6, 6))

    # --- Public API ---
    def set_wrap(self, wrap: int):
        if self.lbl is not None:
            self.lbl.configure(wraplength=max(wrap, MIN_WRAP))

    def focus_edit(self):
        if self.text_entry is not None:
            self.text_entry.focus_set()
            self.text_entry.icursor("end")

    # --- Internals ---
    def _build_view(self, task: Task, wrap: int):
        style = "Task.Done.TLabel" if task.completed else "Task.Normal.TLabel"
        self.lbl = ttk.Label(self, text=task.text, wraplength=wrap, anchor="w", justify="left", style=style)
        self.lbl.grid(row=0, column=1, sticky="we")
        ttk.Label(self, text=task.due_date or "-", width=11).grid(row=0, column=2, padx=(6, 0))
        ttk.Button(self, text="Edit", width=6, command=self._edit).grid(row=0, column=4, padx=(0, 4))
        ttk.Button(self, text="Delete", width=6, command=self._delete).grid(row=0, column=5, padx=(0, 8))

    def _build_edit(self, task: Task):
        self.text_var = tk.StringVar(value=task.text)
        self.date_var = tk.StringVar(value=task.due_date or "")
        self.text_entry = ttk.Entry(self, textvariable=self.text_var)
        self.text_entry.grid(row=0, column=1, sticky="we")
        self.date_entry = ttk.Entry(self, textvariable=self.date_var, width=11)
        self.date_entry.grid(row=0, column=2, padx=(6, 0))
        for entry in (self.text_entry, self.date_entry):
            entry.bind("<Return>", lambda e: self._save())
            entry.bind("<Escape>", lambda e: self._cancel())
        ttk.Button(self, text="Save", width=6, command=self._save).grid(row=0, column=4, padx=(0, 4))
        ttk.Button(self, text="Cancel", width=6, command=self._cancel).grid(row=0, column=5, padx=(0, 8))

    def _toggle(self):
        if self._on_toggle:
            self._on_toggle(self.task_id)

    def _edit(self):
        if self._on_edit:
            self._on_edit(self.task_id)

    def _delete(self):
        if self._on_delete:
            self._on_delete(self.task_id)

    def _save(self):
        if self._on_save:
            self._on_save(self.task_id, self.text_var.get(), self.date_var.get())

    def _cancel(self):
        if self._on_cancel:
            self._on_cancel(self.task_id)


class ScrollableTaskList(ttk.Frame):
    """Canvas + interior Frame pattern with mousewheel support; rebuilt on every render."""
    def __init__(
        self,
        master,
        on_toggle: Optional[Callable[[int], None]] = None,
        on_edit: Optional[Callable[[int], None]] = None,
        on_delete: Optional[Callable[[int], None]] = None,
        on_save: Optional[Callable[[int, str, str], None]] = None,
        on_cancel: Optional[Callable[[int], None]] = None,
        row_wrap: int = 420,
        row_padding: Tuple[int, int] = (2, 2),
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._callbacks = dict(
            on_toggle=on_toggle,
            on_edit=on_edit,
            on_delete=on_delete,
            on_save=on_save,
            on_cancel=on_cancel,
        )
        self._min_wrap = max(row_wrap, MIN_WRAP)
        self._row_wrap = self._min_wrap
        self._row_padding = row_padding
        self._rows: Dict[int, TaskRow] = {}
        self._empty_lbl: Optional[ttk.Label] = None

        # --- styles ---
        style = ttk.Style(self)
        done_font = tkfont.nametofont("TkDefaultFont").copy()
        done_font.configure(overstrike=1)
        self._done_font = done_font  # keep a reference or Tk drops the font
        style.configure("Task.Normal.TLabel")
        style.configure("Task.Done.TLabel", foreground="#888888", font=done_font)
        style.configure("Task.Empty.TLabel", foreground="#888888")

        # --- layout ---
        self.canvas = tk.Canvas(self, highlightthickness=0)
        self.vbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self.vbar.set)

        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.interior = ttk.Frame(self.canvas)
        self.interior.columnconfigure(0, weight=1)
        self._win_id = self.canvas.create_window(0, 0, window=self.interior, anchor="nw")

        self.interior.bind("<Configure>", self._on_interior_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)

        self._bind_mousewheel(self.canvas)

    # --- Public API ---
    def set_tasks(self, tasks: List[Task], editing_id: Optional[int] = None, empty_message: str = ""):
        """Replace all rows. Rows are rebuilt from scratch so callbacks always match live tasks."""
        for row in list(self._rows.values()):
            row.destroy()
        self._rows.clear()
        if self._empty_lbl is not None:
            self._empty_lbl.destroy()
            self._empty_lbl = None

        if not tasks:
            self._empty_lbl = ttk.Label(self.interior, text=empty_message, style="Task.Empty.TLabel", anchor="center")
            self._empty_lbl.grid(row=0, column=0, sticky="we", pady=16)

        for i, task in enumerate(tasks):
            row = TaskRow(
                self.interior,
                task,
                editing=(task.id == editing_id),
                wrap=self._row_wrap,
                **self._callbacks,
            )
            self._rows[task.id] = row
            row.grid(row=i, column=0, sticky="we", padx=(8, 8), pady=self._row_padding)

        self._update_scrollregion()

    def row_count(self) -> int:
        return len(self._rows)

    def focus_edit(self, task_id: int):
        row = self._rows.get(task_id)
        if row:
            row.focus_edit()

    # --- Internals ---
    def _update_scrollregion(self):
        self.update_idletasks()
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_interior_configure(self, _):
        self._update_scrollregion()

    def _on_canvas_configure(self, event):
        # Keep interior width synced to canvas for wrapping
        self.canvas.itemconfigure(self._win_id, width=event.width)
        self._row_wrap = wrap_for_width(event.width, self._min_wrap)
        for row in self._rows.values():
            row.set_wrap(self._row_wrap)

    # Mousewheel helpers
    def _bind_mousewheel(self, widget):
        widget.bind_all("<MouseWheel>", self._on_mousewheel_windows_mac, add="+")
        widget.bind_all("<Button-4>", self._on_mousewheel_linux, add="+")
        widget.bind_all("<Button-5>", self._on_mousewheel_linux, add="+")

    def _on_mousewheel_windows_mac(self, event):
        # On Windows, event.delta is usually +/-120; on macOS it's different.
        delta = int(-1 * (event.delta / 120))
        self.canvas.yview_scroll(delta, "units")

    def _on_mousewheel_linux(self, event):
        if event.num == 4:
            self.canvas.yview_scroll(-1, "units")
        elif event.num == 5:
            self.canvas.yview_scroll(1, "units")


def wrap_for_width(canvas_width: int, minimum: int = MIN_WRAP) -> int:
    """Label wraplength for a canvas width; never below `minimum`."""
    return max(canvas_width - ROW_CHROME, minimum, MIN_WRAP)


# --- Utility: pick readable text color for a given bg ---
def _ideal_text_color(bg_hex: str) -> str:
    """Return black or white depending on background brightness."""
    bg_hex = bg_hex.strip().lstrip('#')
    if len(bg_hex) == 3:
        bg_hex = ''.join(c*2 for c in bg_hex)
    try:
        r = int(bg_hex[0:2], 16)
        g = int(bg_hex[2:4], 16)
        b = int(bg_hex[4:6], 16)
    except ValueError:
        return "black"
    # Perceived luminance
    luminance = 0.299*r + 0.587*g + 0.114*b
    return "black" if luminance > 186 else "white"
