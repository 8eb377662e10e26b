"""Board models for the task board."""

from .board import Board, Column, Task, TaskPriority

__all__ = [
    "Board",
    "Column",
    "Task",
    "TaskPriority",
]
