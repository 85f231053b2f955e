# tests/conftest.py

from __future__ import annotations

import pytest

from controller.task_controller import TaskController
from fakes import FakeView


class FixedClock:
    """Always returns the same instant, so ids come from the same-millisecond bump."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def controller(view: FakeView, clock: FixedClock) -> TaskController:
    c = TaskController(view, clock=clock)
    c.start()
    return c
