"""API routers for the task board."""

from .board import router as board_router
from .tasks import router as tasks_router

__all__ = [
    "board_router",
    "tasks_router",
]
