"""Todo data models using Pydantic."""

from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field

TODO_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

TODO_FIELDS = ("id", "owner", "status", "body", "category")


class TodoBase(BaseModel):
    """Base model for todo items."""

    owner: str = Field(..., min_length=1)
    status: bool = False
    body: str = ""
    category: str = ""


class TodoCreate(TodoBase):
    """Model for seeding todos into a store."""


class Todo(TodoBase):
    """Complete todo model with its store-assigned identifier."""

    id: str = Field(..., pattern=rf"^{TODO_ID_PATTERN.pattern}$")

    model_config = ConfigDict(from_attributes=True, frozen=True)


class OwnerTodo(BaseModel):
    """A todo inside an owner group: its id and category."""

    id: str
    category: str


class CategoryTodo(BaseModel):
    """A todo inside a category group: its id and owner."""

    id: str
    owner: str


class TodoByOwner(BaseModel):
    """Todos grouped under a single owner."""

    owner: str = Field(..., alias="_id")
    count: int
    todos: List[OwnerTodo] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class TodoByCategory(BaseModel):
    """Todos grouped under a single category."""

    category: str = Field(..., alias="_id")
    count: int
    todos: List[CategoryTodo] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
