# tests/test_gui.py

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from types import SimpleNamespace

import pytest

from controller.task_controller import TaskController
from core.config import ROW_WRAP
from gui import main_window as main_window_module
from gui.main_window import MainWindow
from gui.task_list import MIN_WRAP, ROW_CHROME, _ideal_text_color, wrap_for_width


@pytest.fixture()
def window():
    try:
        win = MainWindow(TaskController())
    except tk.TclError as e:
        pytest.skip(f"no display: {e}")
    win.withdraw()
    win.controller.start()
    yield win
    win.destroy()


def _texts(widget) -> list[str]:
    out = []
    for child in widget.winfo_children():
        if isinstance(child, (ttk.Label, tk.Label)):
            out.append(str(child.cget("text")))
        out.extend(_texts(child))
    return out


def test_ideal_text_color() -> None:
    assert _ideal_text_color("#ffffff") == "black"
    assert _ideal_text_color("#000") == "white"
    assert _ideal_text_color("nope") == "black"


def test_wrap_follows_width_but_never_drops_below_minimum() -> None:
    assert wrap_for_width(1000, 240) == 1000 - ROW_CHROME
    assert wrap_for_width(400, 240) == 240
    assert wrap_for_width(100, 0) == MIN_WRAP


def test_configured_wrap_survives_resize(window) -> None:
    window.task_list._on_canvas_configure(SimpleNamespace(width=200))
    window.controller.add_task("A long task", "2024-01-01")
    assert window.task_list._row_wrap >= ROW_WRAP
    row = next(iter(window.task_list._rows.values()))
    assert int(str(row.lbl.cget("wraplength"))) >= ROW_WRAP


def test_add_from_entries_renders_row_and_stats(window) -> None:
    window.entry.insert(0, "Buy milk")
    window.date_entry.insert(0, "2024-01-01")
    window._on_add()
    assert window.task_list.row_count() == 1
    assert window.entry.get() == ""
    assert window.total_var.get() == "1"
    assert window.pending_var.get() == "1"


def test_markup_is_shown_literally(window) -> None:
    window.controller.add_task("<b>bold</b> & co", "2024-01-01")
    assert "<b>bold</b> & co" in _texts(window.task_list.interior)


def test_empty_message_and_filter_label(window) -> None:
    assert "No tasks found" in _texts(window.task_list.interior)
    window.controller.add_task("A", "2024-01-01")
    window.controller.set_filter("completed")
    assert window.filter_btn.cget("text") == "COMPLETED"
    assert "No tasks match your search" in _texts(window.task_list.interior)


def test_search_entry_drives_controller(window) -> None:
    window.controller.add_task("Alpha", "2024-01-01")
    window.controller.add_task("Beta", "2024-01-01")
    window.search_var.set("alp")
    assert window.controller.search_term == "alp"
    assert window.task_list.row_count() == 1


def test_edit_row_save_through_widget(window) -> None:
    task = window.controller.add_task("Old", "2024-01-01")
    window.controller.edit_task(task.id)
    row = window.task_list._rows[task.id]
    assert row.editing
    row.text_var.set("New")
    row._save()
    assert task.text == "New"
    assert window.controller.editing_id is None


def test_rejections_use_messagebox(window, monkeypatch: pytest.MonkeyPatch) -> None:
    shown = []
    monkeypatch.setattr(main_window_module.mb, "showwarning", lambda title, msg, **kw: shown.append(msg))
    monkeypatch.setattr(main_window_module.mb, "askyesno", lambda title, msg, **kw: False)
    window.controller.add_task("", "")
    assert len(shown) == 1
    window.controller.add_task("A", "2024-01-01")
    assert window.controller.delete_all_tasks() is False
    assert len(window.controller.tasks) == 1
