# tests/test_validation.py

from __future__ import annotations

import pytest

from core.exceptions import TaskListError, TaskValidationError
from services.validation import (
    MSG_DATE_INVALID,
    MSG_EDIT_TEXT_EMPTY,
    MSG_TEXT_MISSING,
    is_iso_date,
    validate_edit,
    validate_new_task,
)


@pytest.mark.parametrize(
    "value, ok",
    [
        ("2024-01-01", True),
        ("2024-02-29", True),
        ("2023-02-29", False),
        ("2024-1-1", False),
        ("20240101", False),
        ("", False),
        ("2024-01-01T10:00", False),
        ("2024-W01-1", False),
        ("2024-001", False),
        ("\uff12\uff10\uff12\uff14-01-01", False),
    ],
)
def test_is_iso_date(value, ok) -> None:
    assert is_iso_date(value) is ok


def test_validate_new_task_returns_stripped_values() -> None:
    assert validate_new_task("  hi ", " 2024-01-01\n") == ("hi", "2024-01-01")


def test_validate_new_task_accepts_none() -> None:
    with pytest.raises(TaskValidationError) as exc:
        validate_new_task(None, "2024-01-01")
    assert exc.value.message == MSG_TEXT_MISSING
    assert isinstance(exc.value, TaskListError)


def test_validate_edit_allows_empty_date() -> None:
    assert validate_edit(" new ", "  ") == ("new", "")


def test_validate_edit_rejects() -> None:
    with pytest.raises(TaskValidationError) as exc:
        validate_edit("", "2024-01-01")
    assert exc.value.message == MSG_EDIT_TEXT_EMPTY
    with pytest.raises(TaskValidationError) as exc:
        validate_edit("ok", "soon")
    assert exc.value.message == MSG_DATE_INVALID
