from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class TaskFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @property
    def label(self) -> str:
        """Text shown on the filter control."""
        return "FILTER" if self is TaskFilter.ALL else self.value.upper()


@dataclass
class Task:
    id: int
    text: str
    completed: bool = False
    due_date: str = ""  # YYYY-MM-DD or empty
    created_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class TaskStats:
    total: int = 0
    completed: int = 0
    pending: int = 0
    progress_percentage: int = 0
