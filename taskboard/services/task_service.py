"""Task service: ownership-scoped CRUD over tasks and their subtasks.

Every operation authorizes against the acting user before touching data.
Multi-row writes run inside one ``transaction`` scope with the ownership
check as the first statement, so a rejected call never leaves a partial
write behind.
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from taskboard.database import transaction
from taskboard.errors import NotFoundError, error_boundary
from taskboard.models import BoardColumn, Subtask, Task, User
from taskboard.schemas import (
    BoardColumnSummary,
    SubtaskCount,
    SubtaskRef,
    SubtaskResponse,
    TaskCreate,
    TaskCreated,
    TaskDeleted,
    TaskDetail,
    TaskDetailResponse,
    TaskEdit,
    TaskProgress,
    TaskProgressSave,
)
from taskboard.services.ownership import ensure_column_owner, ensure_task_owner

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations on behalf of one authenticated user."""

    def __init__(self, db: Session, user: User):
        self.db = db
        self.user = user

    @error_boundary("task.create")
    def create(self, payload: TaskCreate) -> TaskCreated:
        """Create a task in one of the user's columns, with optional subtasks."""
        logger.debug("Creating task: user_id=%s, column_id=%s", self.user.id, payload.column_id)
        with transaction(self.db):
            ensure_column_owner(self.db, payload.column_id, self.user)

            task = Task(
                title=payload.title,
                description=payload.description,
                board_column_id=payload.column_id,
            )
            self.db.add(task)
            self.db.flush()

            if payload.subtasks:
                self._add_subtasks(task.id, [st.title for st in payload.subtasks])
                self.db.flush()

            created = self._created_summary(task)

        logger.info("Task %s created in column %s with %d subtasks", created.id, payload.column_id, created.count.sub_tasks)
        return created

    @error_boundary("task.getTaskDetail")
    def get_task_detail(self, task_id: str, board_id: Optional[str] = None) -> TaskDetailResponse:
        """Return a task with its subtasks and the columns of the board it lives on.

        The column list always comes from the task's own board. ``board_id`` is
        accepted from clients that still send it, but must name that board.
        """
        logger.debug("Getting task detail: user_id=%s, task_id=%s", self.user.id, task_id)
        task = ensure_task_owner(self.db, task_id, self.user)
        owning_board_id = task.board_column.board_id
        if board_id is not None and board_id != owning_board_id:
            raise NotFoundError("Board not found")

        columns = (
            self.db.execute(
                select(BoardColumn)
                .where(BoardColumn.board_id == owning_board_id)
                .order_by(BoardColumn.created_at, BoardColumn.id)
            )
            .scalars()
            .all()
        )
        return TaskDetailResponse(
            task_detail=self._detail(task),
            board_columns=[BoardColumnSummary.model_validate(column) for column in columns],
        )

    @error_boundary("task.saveTaskDetail")
    def save_task_detail(self, task_id: str, payload: TaskProgressSave) -> TaskProgress:
        """Toggle subtask completion and optionally move the task, atomically."""
        logger.debug(
            "Saving task progress: user_id=%s, task_id=%s, subtasks=%d, column_id=%s",
            self.user.id,
            task_id,
            len(payload.subtasks),
            payload.column_id,
        )
        with transaction(self.db):
            task = ensure_task_owner(self.db, task_id, self.user)

            for st in payload.subtasks:
                self._update_subtask(task.id, st.id, completed=st.completed)

            if payload.column_id:
                self._move(task, payload.column_id)

            self.db.flush()
            progress = TaskProgress(
                id=task.id,
                sub_tasks=self._subtasks(task.id),
                column_id=task.board_column_id,
            )

        logger.info("Task %s progress saved", task_id)
        return progress

    @error_boundary("task.editTask")
    def edit_task(self, task_id: str, payload: TaskEdit) -> TaskDetail:
        """Edit task fields and its subtasks in one all-or-nothing write."""
        logger.debug("Editing task: user_id=%s, task_id=%s", self.user.id, task_id)
        with transaction(self.db):
            task = ensure_task_owner(self.db, task_id, self.user)

            for st in payload.update_subtasks:
                self._update_subtask(task.id, st.id, title=st.title)

            if payload.task_title is not None:
                task.title = payload.task_title
            if payload.task_description is not None:
                task.description = payload.task_description
            if payload.column_id:
                self._move(task, payload.column_id)

            if payload.create_subtasks:
                self._add_subtasks(task.id, [st.title for st in payload.create_subtasks])
            if payload.delete_subtasks:
                # Ids belonging to other tasks simply match nothing.
                self.db.execute(
                    delete(Subtask).where(
                        Subtask.task_id == task.id,
                        Subtask.id.in_(payload.delete_subtasks),
                    )
                )

            self.db.flush()
            detail = self._detail(task)

        logger.info(
            "Task %s edited: %d subtasks created, %d renamed, %d deleted",
            task_id,
            len(payload.create_subtasks),
            len(payload.update_subtasks),
            len(payload.delete_subtasks),
        )
        return detail

    @error_boundary("task.deleteTask")
    def delete_task(self, task_id: str) -> TaskDeleted:
        """Delete a task and its subtasks, returning the column it was in."""
        logger.debug("Deleting task: user_id=%s, task_id=%s", self.user.id, task_id)
        with transaction(self.db):
            task = ensure_task_owner(self.db, task_id, self.user)
            column_id = task.board_column_id
            self.db.delete(task)

        logger.info("Task %s deleted from column %s", task_id, column_id)
        return TaskDeleted(column_id=column_id)

    def _update_subtask(self, task_id: str, subtask_id: str, **values) -> None:
        result = self.db.execute(
            update(Subtask)
            .where(Subtask.id == subtask_id, Subtask.task_id == task_id)
            .values(**values)
        )
        if result.rowcount == 0:
            raise NotFoundError("Subtask not found")

    def _add_subtasks(self, task_id: str, titles: List[str]) -> None:
        # Positions continue after the highest existing one.
        last = self.db.execute(
            select(func.max(Subtask.position)).where(Subtask.task_id == task_id)
        ).scalar_one()
        start = 0 if last is None else last + 1
        self.db.add_all(
            [Subtask(title=title, task_id=task_id, position=start + offset) for offset, title in enumerate(titles)]
        )

    def _move(self, task: Task, column_id: str) -> None:
        ensure_column_owner(self.db, column_id, self.user)
        task.board_column_id = column_id

    def _subtasks(self, task_id: str) -> List[SubtaskResponse]:
        rows = (
            self.db.execute(
                select(Subtask)
                .where(Subtask.task_id == task_id)
                .order_by(Subtask.position, Subtask.created_at)
                .execution_options(populate_existing=True)
            )
            .scalars()
            .all()
        )
        return [SubtaskResponse.model_validate(row) for row in rows]

    def _detail(self, task: Task) -> TaskDetail:
        return TaskDetail(
            id=task.id,
            title=task.title,
            description=task.description,
            sub_tasks=self._subtasks(task.id),
            column_id=task.board_column_id,
        )

    def _created_summary(self, task: Task) -> TaskCreated:
        completed_ids = (
            self.db.execute(
                select(Subtask.id).where(Subtask.task_id == task.id, Subtask.completed.is_(True))
            )
            .scalars()
            .all()
        )
        total = self.db.execute(
            select(func.count(Subtask.id)).where(Subtask.task_id == task.id)
        ).scalar_one()
        return TaskCreated(
            id=task.id,
            title=task.title,
            sub_tasks=[SubtaskRef(id=subtask_id) for subtask_id in completed_ids],
            count=SubtaskCount(sub_tasks=total),
        )
