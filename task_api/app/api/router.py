"""
Route registration for the Task API.

Routes are registered on a fresh ``APIRouter`` bound to the handler
passed in, rather than on a module-level router, so each application
instance gets its own wiring.  Both endpoints accept every common method; the
handler itself answers 405 for the ones it does not support.  Methods
outside ``ALL_METHODS`` are rejected by the router and rendered the
same way by ``method_not_allowed_handler``.
"""

from fastapi import APIRouter

from .endpoints.tasks import TaskHandler


ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def build_router(handler: TaskHandler) -> APIRouter:
    """Return a router serving ``/tasks`` and ``/tasks/{id}`` via ``handler``."""
    router = APIRouter()
    router.add_api_route(
        "/tasks",
        handler.handle_tasks,
        methods=ALL_METHODS,
        tags=["tasks"],
        summary="List or create tasks",
    )
    # ``:path`` captures the whole tail (including empty or nested
    # segments) so malformed ids reach the handler instead of 404ing.
    router.add_api_route(
        "/tasks/{task_id:path}",
        handler.handle_task_by_id,
        methods=ALL_METHODS,
        tags=["tasks"],
        summary="Read, replace or delete a task",
    )
    return router
