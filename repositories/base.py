"""Store interface the todo services depend on."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol

from models.todo import Todo

if TYPE_CHECKING:
    from services.query_builder import SortSpec, TodoFilter


class TodoStore(Protocol):
    """Read access to a collection of todos.

    Implementations may raise any exception on infrastructure failure;
    callers let it propagate.
    """

    def parse_id(self, todo_id: str) -> str:
        """Return the canonical form of ``todo_id``.

        Raises:
            MalformedIdError: if ``todo_id`` is not a legal identifier.
        """
        ...

    def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """Return the todo with a canonical identifier, or None."""
        ...

    def find(self, todo_filter: TodoFilter, sort: Optional[SortSpec] = None) -> List[Todo]:
        """Return todos matching the filter, in sort order when given."""
        ...
