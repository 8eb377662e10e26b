"""Board, column and task models for the Kanban board.

Snapshots are immutable: every change produces a new ``Board`` that shares
the untouched ``Column`` objects with the previous one.
"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Iterator, Optional


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Fields a caller may set on a task; the id is never editable
TASK_FIELDS = ("title", "description", "assignee", "due_date", "priority")


@dataclass(frozen=True)
class Task:
    """A single card on the board."""

    id: str
    title: str
    description: Optional[str] = None
    assignee: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[TaskPriority] = None


@dataclass(frozen=True)
class Column:
    """A named, ordered bucket of tasks (top to bottom)."""

    id: str
    title: str
    tasks: tuple[Task, ...] = ()

    def index_of(self, task_id: str) -> int:
        """Position of ``task_id`` in this column, or -1."""
        for i, task in enumerate(self.tasks):
            if task.id == task_id:
                return i
        return -1

    def with_tasks(self, tasks: tuple[Task, ...]) -> "Column":
        return replace(self, tasks=tuple(tasks))


@dataclass(frozen=True)
class Board:
    """The ordered columns of the board (left to right)."""

    columns: tuple[Column, ...] = ()

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def column_index(self, column_id: str) -> int:
        for i, column in enumerate(self.columns):
            if column.id == column_id:
                return i
        return -1

    def find_task(self, task_id: str) -> Optional[tuple[int, int]]:
        """Return ``(column_index, task_index)`` of the first match, or None."""
        for col_index, column in enumerate(self.columns):
            task_index = column.index_of(task_id)
            if task_index != -1:
                return col_index, task_index
        return None

    def get_task(self, task_id: str) -> Optional[Task]:
        location = self.find_task(task_id)
        if location is None:
            return None
        col_index, task_index = location
        return self.columns[col_index].tasks[task_index]

    def task_ids(self) -> list[str]:
        return [task.id for column in self.columns for task in column.tasks]

    def replace_columns(self, updates: dict[int, Column]) -> "Board":
        """Return a new board with the columns at the given indexes swapped in."""
        columns = tuple(
            updates.get(i, column) for i, column in enumerate(self.columns)
        )
        return replace(self, columns=columns)
