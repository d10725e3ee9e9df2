"""Ownership lookups used to authorize every task operation.

Each ``*_owner_of`` helper answers "which user owns the board this row hangs
off" with a single joined query, or ``None`` when the row does not exist.
The ``ensure_*`` variants turn a missing row and a row owned by someone else
into the same ``NotFoundError`` so callers cannot probe for other users' ids.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from taskboard.errors import NotFoundError
from taskboard.models import Board, BoardColumn, Task, User


def board_owner_of(db: Session, board_id: str) -> Optional[str]:
    return db.execute(select(Board.user_id).where(Board.id == board_id)).scalar_one_or_none()


def column_owner_of(db: Session, column_id: str) -> Optional[str]:
    stmt = (
        select(Board.user_id)
        .join(BoardColumn, BoardColumn.board_id == Board.id)
        .where(BoardColumn.id == column_id)
    )
    return db.execute(stmt).scalar_one_or_none()


def task_owner_of(db: Session, task_id: str) -> Optional[str]:
    stmt = (
        select(Board.user_id)
        .join(BoardColumn, BoardColumn.board_id == Board.id)
        .join(Task, Task.board_column_id == BoardColumn.id)
        .where(Task.id == task_id)
    )
    return db.execute(stmt).scalar_one_or_none()


def ensure_column_owner(db: Session, column_id: str, user: User) -> None:
    if column_owner_of(db, column_id) != user.id:
        raise NotFoundError("Column not found")


def ensure_task_owner(db: Session, task_id: str, user: User) -> Task:
    if task_owner_of(db, task_id) != user.id:
        raise NotFoundError("Task not found")
    return db.get(Task, task_id)
