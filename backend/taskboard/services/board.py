"""Board state store and initial board construction."""

import logging

from fastapi import Request

from ..config import BoardConfig
from ..models.board import Board, Column, Task, TaskPriority

logger = logging.getLogger(__name__)


# Demo tasks loaded when board.seed_tasks is enabled, keyed by column id
SEED_TASKS = {
    "todo": [
        Task(id="1", title="Design new dashboard layout",
             description="Create wireframes and mockups", priority=TaskPriority.HIGH),
        Task(id="2", title="Develop API for user stats",
             description="Implement REST endpoints", priority=TaskPriority.MEDIUM),
    ],
    "in-progress": [
        Task(id="3", title="Implement dark mode theme",
             description="Add theme switching functionality", priority=TaskPriority.HIGH),
    ],
    "done": [
        Task(id="4", title="Fix login page bug",
             description="Resolve authentication issues", priority=TaskPriority.MEDIUM),
        Task(id="5", title="Update README documentation",
             description="Improve project documentation", priority=TaskPriority.LOW),
    ],
}


def build_board(board_config: BoardConfig) -> Board:
    """Create the initial board from the configured columns."""
    columns = []
    for col in board_config.columns:
        tasks = SEED_TASKS.get(col.id, []) if board_config.seed_tasks else []
        columns.append(Column(id=col.id, title=col.title, tasks=tuple(tasks)))
    return Board(columns=tuple(columns))


class BoardStore:
    """Holds the authoritative board snapshot."""

    def __init__(self, board: Board):
        self._board = board
        # Highest task id handed out for this board, deleted tasks included
        self.last_issued_id = 0

    def get_state(self) -> Board:
        """Return the current board snapshot."""
        return self._board

    def replace_state(self, new_board: Board) -> None:
        """Swap in a complete new board."""
        self._board = new_board


def get_board_store(request: Request) -> BoardStore:
    """Get the board store of the running application."""
    return request.app.state.board_store
