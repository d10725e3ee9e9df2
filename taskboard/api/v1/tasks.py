"""Task endpoints"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.dependencies import get_current_user
from taskboard.models import User
from taskboard.schemas import (
    ErrorResponse,
    TaskCreate,
    TaskCreated,
    TaskDeleted,
    TaskDetail,
    TaskDetailResponse,
    TaskEdit,
    TaskProgress,
    TaskProgressSave,
)
from taskboard.services.task_service import TaskService

router = APIRouter(
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


@router.post("", response_model=TaskCreated, status_code=status.HTTP_201_CREATED)
def create_task(
    task_in: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a task, and its subtasks, in one of the current user's columns."""
    return TaskService(db, current_user).create(task_in)


@router.get("/{task_id}", response_model=TaskDetailResponse)
def get_task_detail(
    task_id: str,
    board_id: Optional[str] = Query(None, alias="boardId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return a task with its subtasks plus the columns of its board."""
    return TaskService(db, current_user).get_task_detail(task_id, board_id)


@router.post("/{task_id}/progress", response_model=TaskProgress)
def save_task_detail(
    task_id: str,
    progress_in: TaskProgressSave,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Save subtask completion and the task's column."""
    return TaskService(db, current_user).save_task_detail(task_id, progress_in)


@router.patch("/{task_id}", response_model=TaskDetail)
def edit_task(
    task_id: str,
    task_edit: TaskEdit,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return TaskService(db, current_user).edit_task(task_id, task_edit)


@router.delete("/{task_id}", response_model=TaskDeleted)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return TaskService(db, current_user).delete_task(task_id)
