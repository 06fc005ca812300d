"""Client-side state for the task page.

``TodoBoard`` owns everything one UI session needs: the task list, both form
states, the edit-mode flag and the error banner. When the backend cannot be
reached it switches to demo mode and mutates its own list instead; those
changes live only in this object and are never written back to the server.

Demo tasks get negative ids, which the store never issues, and are only ever
changed locally, even after the backend is reachable again. The next
successful ``load`` drops them and leaves demo mode.
"""
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional, Set

from todo_api.core.clock import utcnow
from todo_api.schemas.tasks import Found, TaskOut

from .rpc import RpcClient, RpcTransportError, RpcValidationError

logger = logging.getLogger(__name__)

DEMO_LOAD = "Backend is unreachable. Showing demo tasks."
DEMO_CREATE = "Backend is unreachable. Created a demo task locally."
DEMO_UPDATE = "Backend is unreachable. Updated locally."
DEMO_DELETE = "Backend is unreachable. Deleted locally."


def demo_tasks() -> List[TaskOut]:
    now = utcnow()
    return [
        TaskOut(id=-1, title="Learn Streamlit", description="Study widgets and session state",
                completed=False, created_at=now, updated_at=now),
        TaskOut(id=-2, title="Build Todo App", description="Wire the page to the RPC backend",
                completed=True, created_at=now - timedelta(days=1), updated_at=now),
    ]


@dataclass
class TodoBoard:
    client: RpcClient
    todos: List[TaskOut] = field(default_factory=list)
    new_title: str = ""
    new_description: Optional[str] = None
    editing_id: Optional[int] = None
    edit_title: str = ""
    edit_description: Optional[str] = None
    error: Optional[str] = None
    is_loading: bool = False
    demo_mode: bool = False
    demo_ids: Set[int] = field(default_factory=set)

    def is_demo(self, task_id: int) -> bool:
        return task_id in self.demo_ids

    def _fallback(self, message: str, exc: Exception) -> None:
        logger.warning("%s (%s)", message, exc)
        self.error = message
        self.demo_mode = True

    def _next_demo_id(self) -> int:
        return min(self.demo_ids, default=0) - 1

    def _replace(self, task: TaskOut) -> None:
        self.todos = [task if t.id == task.id else t for t in self.todos]

    def _drop(self, task_id: int) -> None:
        self.todos = [t for t in self.todos if t.id != task_id]
        self.demo_ids.discard(task_id)

    def _patch_local(self, task_id: int, **changes) -> None:
        self.todos = [
            t.model_copy(update={**changes, "updated_at": utcnow()}) if t.id == task_id else t
            for t in self.todos
        ]

    def load(self) -> None:
        try:
            self.todos = self.client.get_all()
            self.error = None
        except RpcTransportError as e:
            self._fallback(DEMO_LOAD, e)
            self.todos = demo_tasks()
            self.demo_ids = {t.id for t in self.todos}
            return
        self.demo_mode = False
        self.demo_ids = set()

    def create(self) -> Optional[TaskOut]:
        title = self.new_title.strip()
        if not title:
            return None
        description = self.new_description or None

        self.is_loading = True
        try:
            task = self.client.create(title, description)
            self.error = None
        except RpcValidationError as e:
            self.error = str(e)
            return None
        except RpcTransportError as e:
            self._fallback(DEMO_CREATE, e)
            now = utcnow()
            task = TaskOut(id=self._next_demo_id(), title=title, description=description,
                           completed=False, created_at=now, updated_at=now)
            self.demo_ids.add(task.id)
        finally:
            self.is_loading = False

        self.todos = [task] + self.todos
        self.new_title = ""
        self.new_description = None
        return task

    def toggle_complete(self, task: TaskOut) -> None:
        if self.is_demo(task.id):
            self._patch_local(task.id, completed=not task.completed)
            return
        try:
            result = self.client.update(task.id, completed=not task.completed)
            self.error = None
        except RpcValidationError as e:
            self.error = str(e)
            return
        except RpcTransportError as e:
            self._fallback(DEMO_UPDATE, e)
            self._patch_local(task.id, completed=not task.completed)
            return
        if isinstance(result, Found):
            self._replace(result.task)
        else:
            # removed elsewhere since the last load
            self._drop(task.id)

    def start_edit(self, task: TaskOut) -> None:
        self.editing_id = task.id
        self.edit_title = task.title
        self.edit_description = task.description

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.edit_title = ""
        self.edit_description = None

    def save_edit(self) -> None:
        if self.editing_id is None or not self.edit_title.strip():
            return
        task_id = self.editing_id
        title = self.edit_title.strip()
        # an emptied description box clears the stored description
        description = self.edit_description or None

        if self.is_demo(task_id):
            self._patch_local(task_id, title=title, description=description)
            self.cancel_edit()
            return
        try:
            result = self.client.update(task_id, title=title, description=description)
            self.error = None
        except RpcValidationError as e:
            self.error = str(e)
            return
        except RpcTransportError as e:
            self._fallback(DEMO_UPDATE, e)
            self._patch_local(task_id, title=title, description=description)
        else:
            if isinstance(result, Found):
                self._replace(result.task)
            else:
                self._drop(task_id)
        self.cancel_edit()

    def delete(self, task_id: int) -> None:
        if self.is_demo(task_id):
            self._drop(task_id)
            return
        try:
            deleted = self.client.delete(task_id)
            self.error = None
        except RpcValidationError as e:
            self.error = str(e)
            return
        except RpcTransportError as e:
            self._fallback(DEMO_DELETE, e)
            deleted = True
        if deleted:
            self._drop(task_id)
