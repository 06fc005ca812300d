"""requests-based client for the task RPC procedures."""
import logging
from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import TypeAdapter

from todo_api.schemas.tasks import Found, NotFound, TaskLookup, TaskOut

logger = logging.getLogger(__name__)

_lookup = TypeAdapter(TaskLookup)
_task_list = TypeAdapter(List[TaskOut])


class RpcError(Exception):
    def __init__(self, procedure: str, message: str):
        super().__init__(f"{procedure}: {message}")
        self.procedure = procedure


class RpcTransportError(RpcError):
    """The server could not be reached or did not answer successfully."""


class RpcValidationError(RpcError):
    """The server rejected the request payload (HTTP 422)."""

    def __init__(self, procedure: str, detail: Any):
        super().__init__(procedure, f"invalid request: {detail}")
        self.detail = detail


class RpcClient:
    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _call(self, procedure: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}/rpc/{procedure}"
        try:
            r = self.session.post(url, json=payload or {}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("RPC %s failed: %s", procedure, e)
            raise RpcTransportError(procedure, str(e)) from e
        if not 200 <= r.status_code < 300 and r.status_code != 422:
            logger.warning("RPC %s answered HTTP %s", procedure, r.status_code)
            raise RpcTransportError(procedure, f"HTTP {r.status_code}")
        try:
            data = r.json()
        except ValueError as e:
            logger.warning("RPC %s answered a non-JSON body", procedure)
            raise RpcTransportError(procedure, "response is not JSON") from e
        if r.status_code == 422:
            raise RpcValidationError(procedure, data.get("detail") if isinstance(data, dict) else data)
        return data

    def create(self, title: str, description: Optional[str] = None) -> TaskOut:
        data = self._call("create", {"title": title, "description": description})
        return TaskOut.model_validate(data)

    def get_one(self, task_id: int) -> Union[Found, NotFound]:
        return _lookup.validate_python(self._call("getOne", {"id": task_id}))

    def get_all(self) -> List[TaskOut]:
        return _task_list.validate_python(self._call("getAll"))

    def update(self, task_id: int, **changes: Any) -> Union[Found, NotFound]:
        """Send only the given fields; ``description=None`` clears it on the server."""
        return _lookup.validate_python(self._call("update", {"id": task_id, **changes}))

    def delete(self, task_id: int) -> bool:
        return bool(self._call("delete", {"id": task_id}))
