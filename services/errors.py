"""Errors raised by the todo query layer."""

from __future__ import annotations

from typing import Optional


class TodoQueryError(Exception):
    """Base class for todo query failures."""


class MalformedIdError(TodoQueryError, ValueError):
    """The identifier cannot be parsed into the store's id format."""

    def __init__(self, todo_id: str) -> None:
        super().__init__("The requested todo id wasn't a legal identifier")
        self.todo_id = todo_id


class TodoNotFoundError(TodoQueryError, LookupError):
    """The identifier is well formed but no todo has it."""

    def __init__(self, todo_id: str) -> None:
        super().__init__("The requested todo was not found")
        self.todo_id = todo_id


class InvalidParameterError(TodoQueryError, ValueError):
    """A request parameter with an enumerated value set was out of range."""

    def __init__(self, parameter: str, message: str, value: Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value
