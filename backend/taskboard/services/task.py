"""Task service for Kanban board operations."""

import logging
import time
from dataclasses import replace
from datetime import date
from typing import Any, Mapping, Optional

from ..models.board import Board, Task, TaskPriority, TASK_FIELDS
from .board import BoardStore

logger = logging.getLogger(__name__)


def _coerce_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Keep known task fields, converting plain values to model types.

    Values that cannot be converted are dropped so the task keeps its
    current value.
    """
    values = {k: v for k, v in fields.items() if k in TASK_FIELDS}
    if isinstance(values.get("priority"), str):
        try:
            values["priority"] = TaskPriority(values["priority"])
        except ValueError:
            logger.warning(f"Ignoring invalid priority: {values['priority']}")
            del values["priority"]
    if isinstance(values.get("due_date"), str):
        try:
            values["due_date"] = date.fromisoformat(values["due_date"])
        except ValueError:
            logger.warning(f"Ignoring invalid due date: {values['due_date']}")
            del values["due_date"]
    return values


class TaskService:
    """Service for creating, editing and deleting board tasks.

    Title validation is left to the caller; the service stores what it is given.
    """

    def __init__(self, store: BoardStore):
        self.store = store

    def get_board(self) -> Board:
        return self.store.get_state()

    def get_task(self, task_id: str) -> Optional[Task]:
        """Get a single task by ID."""
        return self.store.get_state().get_task(task_id)

    def _new_task_id(self, board: Board) -> str:
        """Millisecond timestamp id, above every numeric id in use or issued before."""
        existing = set(board.task_ids())
        candidate = max(int(time.time() * 1000), self.store.last_issued_id + 1)
        numeric = [int(tid) for tid in existing if tid.isascii() and tid.isdigit()]
        if numeric:
            candidate = max(candidate, max(numeric) + 1)
        while str(candidate) in existing:
            candidate += 1
        self.store.last_issued_id = candidate
        return str(candidate)

    def add_task(self, column_id: str, fields: Mapping[str, Any]) -> Optional[Task]:
        """Create a task at the end of a column."""
        board = self.store.get_state()
        col_index = board.column_index(column_id)
        if col_index == -1:
            logger.warning(f"Cannot add task: column {column_id} not found")
            return None

        values = _coerce_fields(fields)
        task = Task(id=self._new_task_id(board), **values)

        column = board.columns[col_index]
        self.store.replace_state(
            board.replace_columns({col_index: column.with_tasks(column.tasks + (task,))})
        )
        logger.info(f"Task added: {task.id} to {column_id}")
        return task

    def edit_task(self, task_id: str, fields: Mapping[str, Any]) -> Optional[Task]:
        """Replace the given fields of a task, keeping its column and position."""
        board = self.store.get_state()
        location = board.find_task(task_id)
        if location is None:
            logger.debug(f"Cannot edit task {task_id}: not found")
            return None

        col_index, task_index = location
        column = board.columns[col_index]
        task = replace(column.tasks[task_index], **_coerce_fields(fields))

        tasks = list(column.tasks)
        tasks[task_index] = task
        self.store.replace_state(
            board.replace_columns({col_index: column.with_tasks(tuple(tasks))})
        )
        logger.info(f"Task updated: {task_id}")
        return task

    def delete_task(self, task_id: str) -> bool:
        """Remove a task from whichever column holds it."""
        board = self.store.get_state()
        location = board.find_task(task_id)
        if location is None:
            logger.debug(f"Cannot delete task {task_id}: not found")
            return False

        col_index, task_index = location
        column = board.columns[col_index]
        tasks = column.tasks[:task_index] + column.tasks[task_index + 1:]
        self.store.replace_state(
            board.replace_columns({col_index: column.with_tasks(tasks)})
        )
        logger.info(f"Task deleted: {task_id}")
        return True
