from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class _TodoFields(BaseModel):
    """
    Caller-supplied todo fields.

    Every field is optional and values are kept exactly as sent, whatever
    their JSON type. Unknown fields are ignored.
    """

    title: Optional[Any] = Field(default=None, description="Short title for the todo item")
    description: Optional[Any] = Field(default=None, description="Detailed description")
    completed: Optional[Any] = Field(default=None, description="Completion status flag")

    def to_fields(self) -> Dict[str, Any]:
        """
        Return only the fields the caller actually sent.
        """
        return self.model_dump(exclude_unset=True)


# PUBLIC_INTERFACE
class TodoCreate(_TodoFields):
    """
    Schema for creating a new Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "description": "I should buy groceries",
                "completed": False,
            }
        },
    )


# PUBLIC_INTERFACE
class TodoUpdate(_TodoFields):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "completed": True,
            }
        },
    )


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.

    Serialized with ``exclude_unset`` so fields absent from the stored record
    are absent from the response as well.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "description": "2%",
                "completed": False,
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: Optional[Any] = Field(default=None, description="Short title for the todo item")
    description: Optional[Any] = Field(default=None, description="Detailed description")
    completed: Optional[Any] = Field(default=None, description="Completion status flag")


# PUBLIC_INTERFACE
class TodoCreated(BaseModel):
    """Body of the 201 response to a create request."""

    model_config = ConfigDict(json_schema_extra={"example": {"id": 1}})

    id: int = Field(..., description="Identifier assigned to the new todo item")
