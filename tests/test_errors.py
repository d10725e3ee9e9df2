import logging

import pytest
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from taskboard.errors import (
    NotFoundError,
    TaskServiceError,
    error_boundary,
    format_error,
)


def test_format_error_maps_missing_rows_to_not_found():
    assert isinstance(format_error(NoResultFound()), NotFoundError)


@pytest.mark.parametrize(
    "message",
    ["UNIQUE constraint failed: users.email", "FOREIGN KEY constraint failed"],
)
def test_format_error_treats_constraint_violations_as_server_errors(message):
    translated = format_error(IntegrityError("INSERT", {}, Exception(message)))

    assert type(translated) is TaskServiceError
    assert translated.status_code == 500
    assert "constraint" not in translated.message


def test_format_error_hides_unexpected_detail():
    translated = format_error(OperationalError("SELECT", {}, Exception("connection refused")))

    assert type(translated) is TaskServiceError
    assert translated.code == "INTERNAL_SERVER_ERROR"
    assert "connection refused" not in translated.message


def test_format_error_passes_service_errors_through():
    err = NotFoundError("Task not found")

    assert format_error(err) is err


def test_error_boundary_translates_and_chains(caplog):
    @error_boundary("task.explode")
    def explode():
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR, logger="taskboard.errors"):
        with pytest.raises(TaskServiceError) as exc:
            explode()

    assert isinstance(exc.value.__cause__, RuntimeError)
    assert "task.explode failed" in caplog.text


def test_error_boundary_returns_result_untouched():
    @error_boundary("task.noop")
    def noop(value):
        return value

    assert noop(42) == 42
