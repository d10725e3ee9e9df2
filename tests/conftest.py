from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard import models
from taskboard.database import Base

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_user(session: Session, email: str, token: Optional[str] = None, expires_in: timedelta = timedelta(hours=1)) -> models.User:
    user = models.User(email=email, name=email.split("@")[0])
    session.add(user)
    session.flush()
    if token:
        session.add(
            models.Session(
                session_token=token,
                user_id=user.id,
                expires=datetime.now(timezone.utc) + expires_in,
            )
        )
    session.commit()
    return user


def create_board(
    session: Session,
    owner: models.User,
    title: str = "Chores",
    columns: Iterable = ("Todo", "Doing", "Done"),
) -> models.Board:
    """Create a board; ``columns`` items are titles or ``(id, title)`` pairs."""
    board = models.Board(title=title, user_id=owner.id)
    session.add(board)
    session.flush()
    for column in columns:
        column_id, column_title = column if isinstance(column, tuple) else (None, column)
        session.add(models.BoardColumn(id=column_id, title=column_title, board_id=board.id))
    session.commit()
    session.refresh(board)
    return board


@pytest.fixture()
def owner(db_session: Session) -> models.User:
    return create_user(db_session, "owner@example.com", token="owner-token")


@pytest.fixture()
def stranger(db_session: Session) -> models.User:
    return create_user(db_session, "stranger@example.com", token="stranger-token")


@pytest.fixture()
def board(db_session: Session, owner: models.User) -> models.Board:
    return create_board(db_session, owner)


@pytest.fixture()
def columns(board: models.Board):
    by_title = {column.title: column for column in board.board_columns}
    return by_title["Todo"], by_title["Doing"], by_title["Done"]


@pytest.fixture()
def make_user(db_session: Session):
    def _make_user(email: str, **kwargs) -> models.User:
        return create_user(db_session, email, **kwargs)

    return _make_user


@pytest.fixture()
def make_board(db_session: Session):
    def _make_board(owner: models.User, **kwargs) -> models.Board:
        return create_board(db_session, owner, **kwargs)

    return _make_board
