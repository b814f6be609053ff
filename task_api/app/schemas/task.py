"""
Pydantic model for the task resource.

The same shape is used for request bodies and responses: ``id``,
``title``, ``description`` and ``completed``.  Missing fields and
fields sent as ``null`` take their zero values, unknown fields are
ignored, and values of the wrong JSON type are rejected rather than
coerced.  A body of ``null`` decodes to an all-zero task, which then
fails title validation in the service.
"""

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from task_api.app.core.errors import DecodeError


class Task(BaseModel):
    """A single to-do item.

    ``id`` is ``0`` until the store assigns one on creation.
    """

    id: int = 0
    title: str = ""
    description: str = ""
    completed: bool = False

    model_config = {
        "extra": "ignore",
        "strict": True,
    }

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


def decode_task(body: bytes) -> Task:
    """Parse a JSON request body into a :class:`Task`.

    Raises
    ------
    DecodeError
        If the body is not valid JSON, is neither an object nor
        ``null``, or a field has the wrong type.
    """
    if body.strip() == b"null":
        return Task()
    try:
        return Task.model_validate_json(body)
    except PydanticValidationError as exc:
        raise DecodeError(str(exc)) from exc
