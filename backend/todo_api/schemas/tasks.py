from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator
from ..core.clock import as_utc


def _require_title(value: Optional[str]) -> str:
    if value is None:
        raise ValueError("title cannot be null")
    value = value.strip()
    if not value:
        raise ValueError("title must not be empty")
    return value


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> str:
        return _require_title(value)

    class Config:
        extra = "forbid"

class TaskId(BaseModel):
    id: int

    class Config:
        extra = "forbid"

class TaskUpdate(BaseModel):
    """
    Partial update. A field left out of the request stays unchanged; a field
    sent explicitly overwrites, so ``description: null`` clears it.
    """
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> str:
        return _require_title(value)

    @field_validator("completed")
    @classmethod
    def completed_not_null(cls, value: Optional[bool]) -> bool:
        if value is None:
            raise ValueError("completed cannot be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent, excluding ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"})

    class Config:
        extra = "forbid"

class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    completed: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    class Config:
        from_attributes = True

class Found(BaseModel):
    kind: Literal["found"] = "found"
    task: TaskOut

class NotFound(BaseModel):
    kind: Literal["not_found"] = "not_found"

# getOne / update result: the task, or an explicit "no such record"
TaskLookup = Annotated[Union[Found, NotFound], Field(discriminator="kind")]
