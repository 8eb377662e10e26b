"""Drop reconciliation: compute the new board after a drag-and-drop."""

import logging
from typing import Optional, Sequence, TypeVar

from ..models.board import Board

logger = logging.getLogger(__name__)

T = TypeVar("T")


def array_move(items: Sequence[T], from_index: int, to_index: int) -> tuple[T, ...]:
    """Move the element at ``from_index`` so it ends up at ``to_index``.

    ``to_index`` is an index into the result, i.e. it is applied after the
    element has been removed. Out-of-range indexes are clamped.
    """
    moved = list(items)
    if not moved:
        return ()
    from_index = max(0, min(from_index, len(moved) - 1))
    item = moved.pop(from_index)
    to_index = max(0, min(to_index, len(moved)))
    moved.insert(to_index, item)
    return tuple(moved)


def _locate_target(board: Board, over_id: str) -> Optional[tuple[int, Optional[int]]]:
    """Resolve the drop target to ``(column_index, task_index)``.

    ``task_index`` is None when ``over_id`` names a column rather than a task.
    The first column, in board order, that holds the task or carries the id wins.
    """
    for column_index, column in enumerate(board.columns):
        task_index = column.index_of(over_id)
        if task_index != -1:
            return column_index, task_index
        if column.id == over_id:
            return column_index, None
    return None


def reconcile(board: Board, active_task_id: str, over_id: Optional[str]) -> Board:
    """Return the board after dropping ``active_task_id`` over ``over_id``.

    ``over_id`` may be a task id (insert at that task's position) or a column
    id (append to that column). Any unresolvable drop returns ``board`` itself.
    """
    if over_id is None or over_id == active_task_id:
        return board

    source = board.find_task(active_task_id)
    if source is None:
        logger.debug(f"Drop ignored: task {active_task_id} is not on the board")
        return board

    target = _locate_target(board, over_id)
    if target is None:
        logger.debug(f"Drop ignored: unknown target {over_id}")
        return board

    source_col, source_index = source
    target_col, target_index = target

    if source_col == target_col:
        column = board.columns[source_col]
        if target_index is None:
            target_index = len(column.tasks) - 1
        if target_index == source_index:
            return board
        tasks = array_move(column.tasks, source_index, target_index)
        return board.replace_columns({source_col: column.with_tasks(tasks)})

    source_column = board.columns[source_col]
    target_column = board.columns[target_col]

    source_tasks = list(source_column.tasks)
    moved = source_tasks.pop(source_index)

    target_tasks = list(target_column.tasks)
    if target_index is None:
        target_index = len(target_tasks)
    target_tasks.insert(target_index, moved)

    return board.replace_columns({
        source_col: source_column.with_tasks(tuple(source_tasks)),
        target_col: target_column.with_tasks(tuple(target_tasks)),
    })
