import pytest
from sqlalchemy.orm import Session

from taskboard.errors import NotFoundError
from taskboard.models import Task
from taskboard.services.ownership import (
    board_owner_of,
    column_owner_of,
    ensure_column_owner,
    ensure_task_owner,
    task_owner_of,
)


@pytest.fixture()
def task(db_session: Session, columns) -> Task:
    todo, _, _ = columns
    task = Task(title="Wash car", board_column_id=todo.id)
    db_session.add(task)
    db_session.commit()
    return task


def test_owner_lookups_walk_up_to_the_board(db_session: Session, owner, board, columns, task):
    todo, _, _ = columns

    assert board_owner_of(db_session, board.id) == owner.id
    assert column_owner_of(db_session, todo.id) == owner.id
    assert task_owner_of(db_session, task.id) == owner.id


def test_owner_lookups_return_none_for_unknown_ids(db_session: Session):
    assert board_owner_of(db_session, "nope") is None
    assert column_owner_of(db_session, "nope") is None
    assert task_owner_of(db_session, "nope") is None


def test_ensure_task_owner_returns_the_task(db_session: Session, owner, task):
    assert ensure_task_owner(db_session, task.id, owner).title == "Wash car"


def test_missing_and_foreign_rows_raise_the_same_error(db_session: Session, stranger, columns, task):
    todo, _, _ = columns

    with pytest.raises(NotFoundError) as foreign:
        ensure_task_owner(db_session, task.id, stranger)
    with pytest.raises(NotFoundError) as missing:
        ensure_task_owner(db_session, "does-not-exist", stranger)
    assert foreign.value.message == missing.value.message

    with pytest.raises(NotFoundError):
        ensure_column_owner(db_session, todo.id, stranger)
