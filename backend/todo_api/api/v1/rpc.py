from fastapi import APIRouter, Depends
from sqlmodel import Session
from ...db.session import get_session
from ...schemas.tasks import TaskCreate, TaskId, TaskLookup, TaskOut, TaskUpdate
from ...services import tasks as handlers
from typing import List

# One POST per named procedure: {prefix}/rpc/<name>
router = APIRouter(prefix="/rpc", tags=["rpc"])

@router.post("/create", response_model=TaskOut)
def create(body: TaskCreate, session: Session = Depends(get_session)):
    return handlers.create(session, body)

@router.post("/getOne", response_model=TaskLookup)
def get_one(body: TaskId, session: Session = Depends(get_session)):
    return handlers.get_one(session, body)

@router.post("/getAll", response_model=List[TaskOut])
def get_all(session: Session = Depends(get_session)):
    return handlers.get_all(session)

@router.post("/update", response_model=TaskLookup)
def update(body: TaskUpdate, session: Session = Depends(get_session)):
    return handlers.update(session, body)

@router.post("/delete", response_model=bool)
def delete(body: TaskId, session: Session = Depends(get_session)):
    return handlers.delete(session, body)
