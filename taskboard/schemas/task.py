"""Schemas for task and subtask requests and responses

Field aliases carry the camelCase names the kanban client sends and reads;
Python callers may use the snake_case field names.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from taskboard.models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, TITLE_MIN_LENGTH


class _CamelModel(BaseModel):
    class Config:
        populate_by_name = True


class SubtaskProgress(BaseModel):
    id: str
    title: str
    completed: bool


class SubtaskCreate(BaseModel):
    title: str = Field(..., min_length=1)


class SubtaskRename(BaseModel):
    id: str
    title: str = Field(..., min_length=1)


class TaskCreate(_CamelModel):
    title: str = Field(..., min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    column_id: str = Field(..., min_length=6, alias="columnId")
    subtasks: List[SubtaskCreate] = Field(default_factory=list)


class TaskProgressSave(_CamelModel):
    column_id: Optional[str] = Field(None, alias="columnId")
    subtasks: List[SubtaskProgress] = Field(default_factory=list)


class TaskEdit(_CamelModel):
    column_id: Optional[str] = Field(None, alias="columnId")
    task_title: Optional[str] = Field(
        None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH, alias="taskTitle"
    )
    task_description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH, alias="taskDescription")
    delete_subtasks: List[str] = Field(default_factory=list, alias="deleteSubtasks")
    update_subtasks: List[SubtaskRename] = Field(default_factory=list, alias="updateSubtasks")
    create_subtasks: List[SubtaskCreate] = Field(default_factory=list, alias="createSubtasks")


class SubtaskRef(BaseModel):
    id: str


class SubtaskResponse(BaseModel):
    id: str
    title: str
    completed: bool

    class Config:
        from_attributes = True


class SubtaskCount(_CamelModel):
    sub_tasks: int = Field(..., alias="subTasks")


class TaskCreated(_CamelModel):
    id: str
    title: str
    # Only the completed subtasks; a new task never has any.
    sub_tasks: List[SubtaskRef] = Field(..., alias="subTasks")
    count: SubtaskCount = Field(..., alias="_count")


class TaskDetail(_CamelModel):
    id: str
    title: str
    description: Optional[str]
    sub_tasks: List[SubtaskResponse] = Field(..., alias="subTasks")
    column_id: str = Field(..., alias="columnId")


class BoardColumnSummary(BaseModel):
    id: str
    title: str

    class Config:
        from_attributes = True


class TaskDetailResponse(_CamelModel):
    task_detail: TaskDetail = Field(..., alias="taskDetail")
    board_columns: List[BoardColumnSummary] = Field(..., alias="boardColumns")


class TaskProgress(_CamelModel):
    id: str
    sub_tasks: List[SubtaskResponse] = Field(..., alias="subTasks")
    column_id: str = Field(..., alias="columnId")


class TaskDeleted(_CamelModel):
    column_id: str = Field(..., alias="columnId")
