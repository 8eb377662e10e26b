"""Task/Kanban API routes."""

from datetime import date
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel

from ..config import get_config
from ..models.board import TaskPriority
from ..services.board import BoardStore, get_board_store
from ..services.task import TaskService
from .responses import ApiResponse, task_to_schema


router = APIRouter(prefix="/api/tasks", tags=["tasks"])


class CreateTaskRequest(BaseModel):
    title: str
    description: Optional[str] = None
    assignee: Optional[str] = None
    due_date: Optional[date] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    column_id: Optional[str] = None


class UpdateTaskRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    assignee: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[TaskPriority] = None


@router.get("/{task_id}", response_model=ApiResponse)
async def get_task(
    task_id: str,
    store: BoardStore = Depends(get_board_store),
):
    """Get a single task by ID."""
    task = TaskService(store).get_task(task_id)

    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")

    return ApiResponse(data=task_to_schema(task))


@router.post("", response_model=ApiResponse, status_code=201)
async def create_task(
    request: CreateTaskRequest,
    store: BoardStore = Depends(get_board_store),
):
    """Create a new task."""
    if not request.title.strip():
        raise HTTPException(status_code=400, detail="Title is required")

    column_id = request.column_id or get_config().board.default_column
    fields = request.model_dump(exclude={"column_id"})
    fields["title"] = request.title.strip()

    task = TaskService(store).add_task(column_id, fields)

    if task is None:
        raise HTTPException(status_code=404, detail="Column not found")

    return ApiResponse(data=task_to_schema(task), message="Task added successfully!")


@router.put("/{task_id}", response_model=ApiResponse)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    store: BoardStore = Depends(get_board_store),
):
    """Update a task. Only the fields present in the request are changed."""
    fields = request.model_dump(exclude_unset=True)

    if "title" in fields:
        if not (fields["title"] or "").strip():
            raise HTTPException(status_code=400, detail="Title is required")
        fields["title"] = fields["title"].strip()

    task = TaskService(store).edit_task(task_id, fields)

    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")

    return ApiResponse(data=task_to_schema(task), message="Task updated successfully!")


@router.delete("/{task_id}", response_model=ApiResponse)
async def delete_task(
    task_id: str,
    store: BoardStore = Depends(get_board_store),
):
    """Delete a task."""
    success = TaskService(store).delete_task(task_id)

    if not success:
        raise HTTPException(status_code=404, detail="Task not found")

    return ApiResponse(message="Task deleted successfully!")
