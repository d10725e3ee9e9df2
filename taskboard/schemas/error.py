"""Schema for error bodies"""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    detail: str
    code: str
