"""
Service layer for tasks.

``TaskService`` sits between the HTTP handler and the store.  It
enforces the only business rule the resource has (a task needs a
title) and otherwise passes calls straight through.  Errors from the
store propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import List

from task_api.app.core.errors import ValidationError
from task_api.app.schemas.task import Task
from task_api.app.store.task_store import TaskStore


logger = logging.getLogger(__name__)


class TaskService:
    """Validate and orchestrate task operations over a :class:`TaskStore`."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def get_tasks(self) -> List[Task]:
        return self.store.get_all()

    def get_task_by_id(self, task_id: int) -> Task:
        return self.store.get_by_id(task_id)

    def create_task(self, task: Task) -> Task:
        """Create ``task`` after checking it has a title.

        Raises
        ------
        ValidationError
            If ``title`` is empty.  Nothing is written in that case.
        """
        self._validate(task)
        created = self.store.create(task)
        logger.info("Created task %s", created.id)
        return created

    def update_task(self, task_id: int, task: Task) -> Task:
        """Replace all fields of ``task_id`` with those of ``task``.

        Raises
        ------
        ValidationError
            If ``title`` is empty.  Nothing is written in that case.
        """
        self._validate(task)
        updated = self.store.update(task_id, task)
        logger.info("Updated task %s", task_id)
        return updated

    def delete_task(self, task_id: int) -> None:
        self.store.delete(task_id)
        logger.info("Deleted task %s", task_id)

    @staticmethod
    def _validate(task: Task) -> None:
        if task.title == "":
            raise ValidationError("title is required")
