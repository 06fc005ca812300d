from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from ..core.clock import utcnow


class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted row
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: Optional[str] = None
    completed: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)
