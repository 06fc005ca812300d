"""Operation handlers behind the RPC procedures.

Each handler makes exactly one store call. Store errors are logged and
re-raised untouched; there is no retry or partial recovery here.
"""
import logging
from typing import List, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..db import crud
from ..schemas.tasks import Found, NotFound, TaskCreate, TaskId, TaskOut, TaskUpdate

logger = logging.getLogger(__name__)


def create(session: Session, body: TaskCreate) -> TaskOut:
    try:
        task = crud.create_task(session, body.title, body.description)
    except SQLAlchemyError:
        logger.exception("Task creation failed")
        raise
    logger.info("Created task id=%s", task.id)
    return TaskOut.model_validate(task)

def get_one(session: Session, body: TaskId) -> Union[Found, NotFound]:
    try:
        task = crud.get_task(session, body.id)
    except SQLAlchemyError:
        logger.exception("Get task id=%s failed", body.id)
        raise
    if task is None:
        return NotFound()
    return Found(task=TaskOut.model_validate(task))

def get_all(session: Session) -> List[TaskOut]:
    try:
        tasks = crud.list_tasks(session)
    except SQLAlchemyError:
        logger.exception("Listing tasks failed")
        raise
    return [TaskOut.model_validate(t) for t in tasks]

def update(session: Session, body: TaskUpdate) -> Union[Found, NotFound]:
    changes = body.changes()
    try:
        task = crud.update_task(session, body.id, **changes)
    except SQLAlchemyError:
        logger.exception("Update task id=%s failed", body.id)
        raise
    if task is None:
        logger.debug("Update skipped, no task id=%s", body.id)
        return NotFound()
    logger.info("Updated task id=%s fields=%s", task.id, sorted(changes))
    return Found(task=TaskOut.model_validate(task))

def delete(session: Session, body: TaskId) -> bool:
    try:
        deleted = crud.delete_task(session, body.id)
    except SQLAlchemyError:
        logger.exception("Delete task id=%s failed", body.id)
        raise
    if deleted:
        logger.info("Deleted task id=%s", body.id)
    return deleted
