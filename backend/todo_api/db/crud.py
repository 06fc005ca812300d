from typing import Any, List, Optional
from sqlmodel import Session, select
from ..core.clock import as_utc, utcnow
from .models import Task


class _Unset:
    """Marks an update field the caller did not supply (distinct from None)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def create_task(session: Session, title: str, description: Optional[str] = None) -> Task:
    now = utcnow()
    task = Task(title=title, description=description, completed=False,
                created_at=now, updated_at=now)
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def get_task(session: Session, task_id: int) -> Optional[Task]:
    return session.get(Task, task_id)

def list_tasks(session: Session) -> List[Task]:
    stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
    return list(session.exec(stmt).all())

def update_task(
    session: Session,
    task_id: int,
    *,
    title: Any = UNSET,
    description: Any = UNSET,
    completed: Any = UNSET,
) -> Optional[Task]:
    """
    Apply a partial update. Fields left as UNSET keep their stored value;
    ``description=None`` clears the description.
    """
    task = session.get(Task, task_id)
    if task is None:
        return None

    if title is not UNSET:
        task.title = title
    if description is not UNSET:
        task.description = description
    if completed is not UNSET:
        task.completed = completed
    # never move updated_at backwards, even if the wall clock does
    task.updated_at = max(as_utc(utcnow()), as_utc(task.updated_at))

    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def delete_task(session: Session, task_id: int) -> bool:
    task = session.get(Task, task_id)
    if task is None:
        return False
    session.delete(task)
    session.commit()
    return True
