"""Response envelope and board schemas shared by the API routes."""

from typing import Any, Optional
from pydantic import BaseModel

from ..models.board import Board, Column, Task


class ApiResponse(BaseModel):
    success: bool = True
    data: Any = None
    message: Optional[str] = None
    error: Optional[str] = None


class TaskSchema(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    assignee: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[str] = None


class ColumnSchema(BaseModel):
    id: str
    title: str
    count: int
    tasks: list[TaskSchema]


class BoardSchema(BaseModel):
    columns: list[ColumnSchema]


def task_to_schema(task: Task) -> TaskSchema:
    """Convert a Task model to TaskSchema."""
    return TaskSchema(
        id=task.id,
        title=task.title,
        description=task.description,
        assignee=task.assignee,
        due_date=task.due_date.isoformat() if task.due_date else None,
        priority=task.priority.value if task.priority else None,
    )


def column_to_schema(column: Column) -> ColumnSchema:
    return ColumnSchema(
        id=column.id,
        title=column.title,
        count=len(column.tasks),
        tasks=[task_to_schema(t) for t in column.tasks],
    )


def board_to_schema(board: Board) -> BoardSchema:
    return BoardSchema(columns=[column_to_schema(c) for c in board.columns])
