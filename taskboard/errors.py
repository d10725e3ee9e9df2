"""Error taxonomy for the task service and its translation from storage failures."""
import functools
import logging
from typing import Callable, Optional, TypeVar

from fastapi import status
from sqlalchemy.exc import NoResultFound

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


class TaskServiceError(Exception):
    """Uniform error surfaced to the transport layer."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong, please try again later"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(TaskServiceError):
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Record not found"


class BadRequestError(TaskServiceError):
    code = "BAD_REQUEST"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UnauthorizedError(TaskServiceError):
    code = "UNAUTHORIZED"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


def format_error(err: Exception) -> TaskServiceError:
    """Map any exception to the error taxonomy without leaking storage detail.

    Constraint violations and every other storage failure surface as the
    generic server error.
    """
    if isinstance(err, TaskServiceError):
        return err
    if isinstance(err, NoResultFound):
        return NotFoundError()
    return TaskServiceError()


def error_boundary(operation: str) -> Callable[[F], F]:
    """Wrap a service operation so every failure leaves it as a TaskServiceError.

    Client-side failures are logged at info level, anything else with its
    traceback.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as err:
                translated = format_error(err)
                if translated.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
                    logger.exception("%s failed: %r", operation, err)
                else:
                    logger.info("%s rejected: %r", operation, translated)
                if translated is err:
                    raise
                raise translated from err

        return wrapper  # type: ignore[return-value]

    return decorator
