"""Taskboard database models"""
from taskboard.models.user import User
from taskboard.models.session import Session
from taskboard.models.board import Board
from taskboard.models.board_column import BoardColumn
from taskboard.models.task import Task
from taskboard.models.subtask import Subtask
from taskboard.utils.primary_keys import register_string_pk_listener

__all__ = [
    "User",
    "Session",
    "Board",
    "BoardColumn",
    "Task",
    "Subtask",
]


for _model in (
    User,
    Session,
    Board,
    BoardColumn,
    Task,
    Subtask,
):
    register_string_pk_listener(_model)
