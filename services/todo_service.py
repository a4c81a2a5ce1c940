"""Todo service - query logic layer."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from models.todo import Todo, TodoByCategory, TodoByOwner
from repositories.base import TodoStore
from repositories.todo_repository import TodoRepository
from services.aggregator import TodoAggregator
from services.errors import TodoNotFoundError
from services.query_builder import build_query

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo lookups, listings and summaries."""

    def __init__(self, repository: Optional[TodoStore] = None) -> None:
        self.repository = repository or TodoRepository()
        self.aggregator = TodoAggregator(self.repository)

    def get_todo(self, todo_id: str) -> Todo:
        """Get a specific todo by ID.

        Raises:
            MalformedIdError: if ``todo_id`` is not a legal identifier.
            TodoNotFoundError: if no todo has that identifier.
        """
        canonical_id = self.repository.parse_id(todo_id)
        todo = self.repository.get_by_id(canonical_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def list_todos(self, params: Optional[Mapping[str, str]] = None) -> List[Todo]:
        """List todos matching the filter parameters, in the requested order."""
        todo_filter, sort = build_query(params or {})
        todos = self.repository.find(todo_filter, sort)
        logger.info(
            "Listed %d todos (filtered=%s, sortby=%s, desc=%s)",
            len(todos),
            not todo_filter.is_empty(),
            sort.field,
            sort.descending,
        )
        return todos

    def todos_by_owner(
        self, *, sort_by: Optional[str] = None, sort_order: Optional[str] = None
    ) -> List[TodoByOwner]:
        """Summarise todos per owner."""
        return self.aggregator.todos_by_owner(sort_by=sort_by, sort_order=sort_order)

    def todos_by_category(
        self, *, sort_by: Optional[str] = None, sort_order: Optional[str] = None
    ) -> List[TodoByCategory]:
        """Summarise todos per category."""
        return self.aggregator.todos_by_category(sort_by=sort_by, sort_order=sort_order)
