"""Task API client.

A thin wrapper around the Task API built on the ``requests`` library.
It exposes one method per endpoint:

* :meth:`TaskAPIClient.list_tasks` -- ``GET /tasks``
* :meth:`TaskAPIClient.get_task` -- ``GET /tasks/{id}``
* :meth:`TaskAPIClient.create_task` -- ``POST /tasks``
* :meth:`TaskAPIClient.update_task` -- ``PUT /tasks/{id}``
* :meth:`TaskAPIClient.delete_task` -- ``DELETE /tasks/{id}``

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``error`` is a dictionary with
``status_code`` and ``message`` keys.  Note that the server answers a
read of a missing task with 204 and no body, which this client reports
as ``(None, None)``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TaskAPIClient:
    """Client for the Task API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/tasks``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` when the response has no body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            # Error bodies are plain text, not JSON.
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all tasks.

        Returns:
            A tuple ``(tasks, error)``.  ``tasks`` is empty on failure.
        """
        data, error = self._request("GET", "/tasks")
        if error:
            return [], error
        return data or [], None

    def get_task(self, task_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single task.  ``(None, None)`` if it does not exist."""
        return self._request("GET", f"/tasks/{task_id}")

    def create_task(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a task from ``payload`` (``title`` is required).

        Returns:
            A tuple ``(task, error)``; ``task`` includes the new ``id``.
        """
        return self._request("POST", "/tasks", json_body=payload)

    def update_task(
        self, task_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace every field of a task with ``payload``."""
        return self._request("PUT", f"/tasks/{task_id}", json_body=payload)

    def delete_task(self, task_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a task.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/tasks/{task_id}")
        if error:
            return False, error
        return True, None
