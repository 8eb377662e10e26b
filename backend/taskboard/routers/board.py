"""Board and drag-and-drop API routes."""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel

from ..services.board import BoardStore, get_board_store
from ..services.drag import DragSession, get_drag_session
from .responses import ApiResponse, board_to_schema, task_to_schema


router = APIRouter(prefix="/api/board", tags=["board"])


class DragStartRequest(BaseModel):
    task_id: str


class DragEndRequest(BaseModel):
    active_id: str
    # Task or column under the pointer; null when dropped outside any target
    over_id: Optional[str] = None


@router.get("", response_model=ApiResponse)
async def get_board(store: BoardStore = Depends(get_board_store)):
    """Get all columns and their tasks in display order."""
    return ApiResponse(data=board_to_schema(store.get_state()))


@router.get("/drag", response_model=ApiResponse)
async def get_active_drag(drag: DragSession = Depends(get_drag_session)):
    """Get the task currently being dragged, if any."""
    task = drag.active_task()
    return ApiResponse(data=task_to_schema(task) if task else None)


@router.post("/drag/start", response_model=ApiResponse)
async def drag_start(
    request: DragStartRequest,
    drag: DragSession = Depends(get_drag_session),
):
    """Record the start of a drag gesture."""
    if drag.store.get_state().get_task(request.task_id) is None:
        raise HTTPException(status_code=404, detail="Task not found")

    drag.on_drag_start(request.task_id)
    return ApiResponse(data={"active_id": drag.active_task_id})


@router.post("/drag/end", response_model=ApiResponse)
async def drag_end(
    request: DragEndRequest,
    drag: DragSession = Depends(get_drag_session),
):
    """Apply a drop (drag-and-drop) and return the resulting board."""
    moved = drag.on_drag_end(request.active_id, request.over_id)

    return ApiResponse(
        data={"moved": moved, "board": board_to_schema(drag.store.get_state())},
        message="Task moved successfully!" if moved else None,
    )


@router.post("/drag/cancel", response_model=ApiResponse)
async def drag_cancel(drag: DragSession = Depends(get_drag_session)):
    """Abandon the current drag gesture."""
    drag.on_drag_cancel()
    return ApiResponse()
