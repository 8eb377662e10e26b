"""Drag session tracking for the Kanban board."""

import logging
from typing import Optional

from fastapi import Request

from ..models.board import Task
from .board import BoardStore
from .reconcile import reconcile

logger = logging.getLogger(__name__)


class DragSession:
    """
    Tracks the task being dragged between gesture start and end.

    The pointer handling itself lives in the browser; this side only receives
    the active id on start and the (active id, over id) pair on drop.
    """

    def __init__(self, store: BoardStore):
        self.store = store
        self._active_task_id: Optional[str] = None

    @property
    def active_task_id(self) -> Optional[str]:
        return self._active_task_id

    def active_task(self) -> Optional[Task]:
        """Get the task being dragged, for rendering the drag overlay."""
        if self._active_task_id is None:
            return None
        return self.store.get_state().get_task(self._active_task_id)

    def on_drag_start(self, task_id: str) -> None:
        """Start a drag. A drag already in progress is replaced."""
        if self._active_task_id is not None and self._active_task_id != task_id:
            logger.debug(f"Drag of task {self._active_task_id} replaced by {task_id}")
        self._active_task_id = task_id

    def on_drag_end(self, active_task_id: str, over_id: Optional[str]) -> bool:
        """
        Finish a drag and apply the drop.

        Returns True if the board changed. Dropping a task on itself or
        outside any target leaves the board untouched.
        """
        self._active_task_id = None

        if over_id is None or over_id == active_task_id:
            return False

        board = self.store.get_state()
        new_board = reconcile(board, active_task_id, over_id)
        if new_board is board:
            return False

        self.store.replace_state(new_board)
        logger.info(f"Task {active_task_id} moved over {over_id}")
        return True

    def on_drag_cancel(self) -> None:
        """Abandon the current drag without touching the board."""
        self._active_task_id = None


def get_drag_session(request: Request) -> DragSession:
    """Get the drag session of the running application."""
    return request.app.state.drag_session
