"""
Persistence for tasks.

``TaskStore`` is the interface the service layer depends on;
``SQLiteTaskStore`` is the SQLite implementation used by the
application.  The store owns no business rules: it runs exactly one
statement per call and translates driver failures into
:class:`StoreError`, including integers outside SQLite's 64-bit range.

Each call opens its own connection, so one store instance can be
shared by concurrently handled requests.  Conflicting writes are
serialised by SQLite itself (last write wins).
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Protocol

from task_api.app.core.db import get_connection, get_database_path
from task_api.app.core.errors import NotFoundError, StoreError
from task_api.app.schemas.task import Task


logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    """CRUD operations a task persistence backend must provide."""

    def get_all(self) -> List[Task]: ...

    def get_by_id(self, task_id: int) -> Task: ...

    def create(self, task: Task) -> Task: ...

    def update(self, task_id: int, task: Task) -> Task: ...

    def delete(self, task_id: int) -> None: ...


class SQLiteTaskStore:
    """SQLite-backed :class:`TaskStore`.

    Parameters
    ----------
    db_path : Optional[str]
        Database file.  Defaults to ``settings.database_url``.  The
        ``tasks`` table must already exist (see ``core.db.init_db``).
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = get_database_path(db_path)

    def get_all(self) -> List[Task]:
        """Return every stored task, ordered by id.  Empty list if none."""
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT id, title, description, completed FROM tasks ORDER BY id"
            ).fetchall()
            return [self._row_to_task(row) for row in rows]
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()

    def get_by_id(self, task_id: int) -> Task:
        """Return the task with ``task_id``.

        Raises
        ------
        NotFoundError
            If no row has that id.
        """
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, title, description, completed FROM tasks WHERE id = ?",
                (task_id,),
            ).fetchone()
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()
        if row is None:
            raise NotFoundError(f"task {task_id} not found")
        return self._row_to_task(row)

    def create(self, task: Task) -> Task:
        """Insert ``task`` and return a copy carrying the generated id.

        Any id on the input is ignored.
        """
        conn = self._connect()
        try:
            cursor = conn.execute(
                "INSERT INTO tasks (title, description, completed) VALUES (?, ?, ?)",
                (task.title, task.description, int(task.completed)),
            )
            conn.commit()
            task_id = cursor.lastrowid
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()
        logger.debug("Inserted task row %s", task_id)
        return task.model_copy(update={"id": task_id})

    def update(self, task_id: int, task: Task) -> Task:
        """Replace title, description and completed for ``task_id``.

        Existence is not checked: updating a missing id affects no rows
        and still returns ``task`` with ``id`` set to ``task_id``.
        """
        conn = self._connect()
        try:
            cursor = conn.execute(
                "UPDATE tasks SET title = ?, description = ?, completed = ? WHERE id = ?",
                (task.title, task.description, int(task.completed), task_id),
            )
            conn.commit()
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()
        logger.debug("Updated task row %s (%s affected)", task_id, cursor.rowcount)
        return task.model_copy(update={"id": task_id})

    def delete(self, task_id: int) -> None:
        """Delete ``task_id``.  Deleting a missing id is not an error."""
        conn = self._connect()
        try:
            cursor = conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            conn.commit()
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()
        logger.debug("Deleted task row %s (%s affected)", task_id, cursor.rowcount)

    def _connect(self) -> sqlite3.Connection:
        try:
            return get_connection(self.db_path)
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        """Convert a database row to a :class:`Task`."""
        return Task(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            completed=bool(row["completed"]),
        )
