"""
HTTP endpoints for tasks.

``TaskHandler`` translates between HTTP and :class:`TaskService`.  It
contains no business logic: it decodes request bodies, calls the
service and maps results and errors to responses.

Two endpoints are served:

* ``/tasks`` -- ``GET`` lists all tasks, ``POST`` creates one.
* ``/tasks/{id}`` -- ``GET`` reads, ``PUT`` replaces and ``DELETE``
  removes a single task.

Any other method yields 405.  Some status codes are kept for
compatibility with existing clients even though they are unusual:

* an unparseable id answers 400 with the text ``Not found``;
* a failed single-task read (missing id or store failure) answers
  204 rather than 404;
* validation failures on ``POST``/``PUT`` answer 500.
"""

import logging
import re

from fastapi import Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_api.app.core.errors import DecodeError, TaskAPIError
from task_api.app.schemas.task import decode_task
from task_api.app.services.task_service import TaskService


logger = logging.getLogger(__name__)

METHOD_NOT_AVAILABLE = "Method is not available"
NOT_FOUND = "Not found"
INVALID_INPUT = "Invalid input"

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")

# SQLite INTEGER range.
_MIN_TASK_ID = -(2**63)
_MAX_TASK_ID = 2**63 - 1


def _text(message: str, status_code: int) -> Response:
    # A 204 response cannot carry a body, so the text is dropped there.
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status_code)
    return PlainTextResponse(message, status_code=status_code)


def _parse_task_id(raw: str) -> int:
    if not _TASK_ID_RE.fullmatch(raw):
        raise ValueError(f"invalid task id: {raw!r}")
    value = int(raw)
    if not _MIN_TASK_ID <= value <= _MAX_TASK_ID:
        raise ValueError(f"task id out of range: {raw!r}")
    return value


class TaskHandler:
    """Request handlers for the task endpoints."""

    def __init__(self, service: TaskService) -> None:
        self.service = service

    async def handle_tasks(self, request: Request) -> Response:
        """Handle ``/tasks`` (``GET`` list, ``POST`` create)."""
        if request.method == "GET":
            try:
                tasks = await run_in_threadpool(self.service.get_tasks)
            except TaskAPIError as exc:
                return _text(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
            return JSONResponse([task.model_dump() for task in tasks])

        if request.method == "POST":
            try:
                task = decode_task(await request.body())
            except DecodeError as exc:
                return _text(str(exc), status.HTTP_400_BAD_REQUEST)
            try:
                created = await run_in_threadpool(self.service.create_task, task)
            except TaskAPIError as exc:
                return _text(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
            return JSONResponse(created.model_dump(), status_code=status.HTTP_201_CREATED)

        return _text(METHOD_NOT_AVAILABLE, status.HTTP_405_METHOD_NOT_ALLOWED)

    async def handle_task_by_id(self, request: Request, task_id: str) -> Response:
        """Handle ``/tasks/{id}`` (``GET`` read, ``PUT`` replace, ``DELETE``)."""
        try:
            parsed_id = _parse_task_id(task_id)
        except ValueError:
            return _text(NOT_FOUND, status.HTTP_400_BAD_REQUEST)

        if request.method == "GET":
            try:
                task = await run_in_threadpool(self.service.get_task_by_id, parsed_id)
            except TaskAPIError as exc:
                logger.debug("Lookup of task %s failed: %s", parsed_id, exc)
                return _text(NOT_FOUND, status.HTTP_204_NO_CONTENT)
            return JSONResponse(task.model_dump())

        if request.method == "PUT":
            try:
                task = decode_task(await request.body())
            except DecodeError:
                return _text(INVALID_INPUT, status.HTTP_400_BAD_REQUEST)
            try:
                updated = await run_in_threadpool(self.service.update_task, parsed_id, task)
            except TaskAPIError as exc:
                return _text(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
            return JSONResponse(updated.model_dump())

        if request.method == "DELETE":
            try:
                await run_in_threadpool(self.service.delete_task, parsed_id)
            except TaskAPIError as exc:
                return _text(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        return _text(METHOD_NOT_AVAILABLE, status.HTTP_405_METHOD_NOT_ALLOWED)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer methods the router itself rejects with the handler's 405 body.

    Other HTTP errors keep FastAPI's default JSON rendering.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return _text(METHOD_NOT_AVAILABLE, status.HTTP_405_METHOD_NOT_ALLOWED)
    return await http_exception_handler(request, exc)
