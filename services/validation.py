from __future__ import annotations
import datetime as dt
import re
from typing import Optional, Tuple

from core.exceptions import TaskValidationError

MSG_BOTH_MISSING = "Oops, it's still empty: enter a task and a due date."
MSG_TEXT_MISSING = "Enter the task first, don't forget!"
MSG_DATE_MISSING = "Enter the due date first, don't forget!"
MSG_DATE_INVALID = "The due date must look like YYYY-MM-DD."
MSG_EDIT_TEXT_EMPTY = "A task can't be empty!"
MSG_CONFIRM_DELETE_ALL = "Are you sure you want to delete all tasks?"

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def is_iso_date(value: str) -> bool:
    """True for a real calendar date written exactly as YYYY-MM-DD."""
    if not ISO_DATE_RE.fullmatch(value):
        return False
    try:
        dt.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_new_task(text: Optional[str], due_date: Optional[str]) -> Tuple[str, str]:
    """Return the stripped (text, due_date) or raise TaskValidationError.

    Checks run in a fixed order so the message names everything missing:
    both empty, then text, then date, then date format.
    """
    text, due_date = _clean(text), _clean(due_date)
    if not text and not due_date:
        raise TaskValidationError(MSG_BOTH_MISSING)
    if not text:
        raise TaskValidationError(MSG_TEXT_MISSING)
    if not due_date:
        raise TaskValidationError(MSG_DATE_MISSING)
    if not is_iso_date(due_date):
        raise TaskValidationError(MSG_DATE_INVALID)
    return text, due_date


def validate_edit(text: Optional[str], due_date: Optional[str]) -> Tuple[str, str]:
    # an edited task may drop its due date
    text, due_date = _clean(text), _clean(due_date)
    if not text:
        raise TaskValidationError(MSG_EDIT_TEXT_EMPTY)
    if due_date and not is_iso_date(due_date):
        raise TaskValidationError(MSG_DATE_INVALID)
    return text, due_date
