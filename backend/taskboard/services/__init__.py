"""Services for the task board."""

from .board import BoardStore, build_board
from .drag import DragSession
from .reconcile import array_move, reconcile
from .task import TaskService

__all__ = [
    "BoardStore",
    "build_board",
    "DragSession",
    "array_move",
    "reconcile",
    "TaskService",
]
