"""Todo repository - data access layer."""

from __future__ import annotations

import json
import logging
import secrets
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from models.todo import TODO_ID_PATTERN, Todo, TodoCreate
from services.errors import MalformedIdError
from services.query_builder import SortSpec, TodoFilter

logger = logging.getLogger(__name__)


def new_todo_id() -> str:
    """Generate a fresh 24 character lowercase hex identifier."""
    return secrets.token_hex(12)


class TodoRepository:
    """Repository for todo data access with in-memory storage.

    ``find`` yields records in identifier order.
    """

    def __init__(self, initial_items: Optional[Iterable[Todo]] = None) -> None:
        self._todos: Dict[str, Todo] = {}
        if initial_items:
            for todo in initial_items:
                self._store(todo)

    def parse_id(self, todo_id: str) -> str:
        if not TODO_ID_PATTERN.fullmatch(todo_id):
            raise MalformedIdError(todo_id)
        return todo_id.lower()

    def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """Get todo by ID."""
        return self._todos.get(todo_id)

    def find(self, todo_filter: TodoFilter, sort: Optional[SortSpec] = None) -> List[Todo]:
        """Get todos matching a filter, optionally sorted."""
        matching = [
            self._todos[todo_id]
            for todo_id in sorted(self._todos)
            if todo_filter.matches(self._todos[todo_id])
        ]
        if sort is not None:
            return sort.apply(matching)
        return matching

    def add(self, todo_data: TodoCreate, todo_id: Optional[str] = None) -> Todo:
        """Store a new todo, assigning an identifier unless one is given."""
        todo = Todo(id=self.parse_id(todo_id) if todo_id else new_todo_id(), **todo_data.model_dump())
        return self._store(todo)

    def load_seed(self, path: Union[str, Path]) -> List[Todo]:
        """Load todos from a JSON array of objects.

        Each object carries ``owner``, ``status``, ``body`` and ``category``
        and optionally ``_id`` or ``id``, either as a string or as an
        extended-JSON ``{"$oid": "..."}`` object.

        Raises:
            ValueError: if the file or any entry is malformed.
        """
        with open(path, "r", encoding="utf-8") as fh:
            entries: List[Any] = json.load(fh)
        if not isinstance(entries, list):
            raise ValueError(f"Seed file {path} must contain a JSON array")
        loaded = []
        for position, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"Seed entry {position} in {path} must be a JSON object")
            todo_id = _seed_id(entry.get("_id") or entry.get("id"), position)
            loaded.append(self.add(TodoCreate.model_validate(entry), todo_id=todo_id))
        logger.info("Loaded %d todos from %s", len(loaded), path)
        return loaded

    def clear(self) -> None:
        """Clear all stored todos (testing helper)."""
        self._todos.clear()

    def count(self) -> int:
        return len(self._todos)

    def _store(self, todo: Todo) -> Todo:
        if todo.id in self._todos:
            raise ValueError(f"Todo id {todo.id} already exists")
        self._todos[todo.id] = todo
        return todo


def _seed_id(raw_id: Any, position: int) -> Optional[str]:
    if isinstance(raw_id, dict) and set(raw_id) == {"$oid"}:
        raw_id = raw_id["$oid"]
    if raw_id is None or isinstance(raw_id, str):
        return raw_id
    raise ValueError(f"Seed entry {position} has an id that is not a string: {raw_id!r}")
