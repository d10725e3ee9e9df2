"""
Pydantic schemas for request/response validation
"""
from taskboard.schemas.task import (
    BoardColumnSummary,
    SubtaskCount,
    SubtaskCreate,
    SubtaskProgress,
    SubtaskRef,
    SubtaskRename,
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
from taskboard.schemas.error import ErrorResponse

__all__ = [
    "BoardColumnSummary",
    "SubtaskCount",
    "SubtaskCreate",
    "SubtaskProgress",
    "SubtaskRef",
    "SubtaskRename",
    "SubtaskResponse",
    "TaskCreate",
    "TaskCreated",
    "TaskDeleted",
    "TaskDetail",
    "TaskDetailResponse",
    "TaskEdit",
    "TaskProgress",
    "TaskProgressSave",
    "ErrorResponse",
]
