"""Group todos by owner or category."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from models.todo import CategoryTodo, OwnerTodo, Todo, TodoByCategory, TodoByOwner
from repositories.base import TodoStore
from services.query_builder import TodoFilter

logger = logging.getLogger(__name__)

GROUP_ID_KEY = "_id"
COUNT_KEY = "count"


@dataclass
class TodoGroup:
    """One distinct value of the grouping field and its members."""

    value: str
    members: List[Dict[str, str]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.members)


def resolve_group_sort(group_field: str, sort_by: Optional[str]) -> str:
    """Map a requested sort field to either ``_id`` or ``count``.

    The grouping field's own name means the group identity. Unknown
    values fall back to the group identity.
    """
    if sort_by in (None, "", GROUP_ID_KEY, group_field):
        return GROUP_ID_KEY
    if sort_by == COUNT_KEY:
        return COUNT_KEY
    logger.debug("Unknown group sort field %r for %s; using %s", sort_by, group_field, GROUP_ID_KEY)
    return GROUP_ID_KEY


def group_todos(
    todos: Iterable[Todo],
    group_field: str,
    member_field: str,
    *,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
) -> List[TodoGroup]:
    """Partition todos by ``group_field`` and order the partitions.

    Members keep the order the todos were given in. Groups with equal sort
    keys keep the order their first member was encountered, in either
    direction.
    """
    groups: Dict[str, TodoGroup] = {}
    for todo in todos:
        value = getattr(todo, group_field)
        group = groups.get(value)
        if group is None:
            group = groups[value] = TodoGroup(value=value)
        group.members.append({"id": todo.id, member_field: getattr(todo, member_field)})

    by_count = resolve_group_sort(group_field, sort_by) == COUNT_KEY

    def sort_key(group: TodoGroup):
        return group.count if by_count else group.value

    return sorted(groups.values(), key=sort_key, reverse=sort_order == "desc")


class TodoAggregator:
    """Builds owner and category summaries over every todo in a store."""

    def __init__(self, repository: TodoStore) -> None:
        self.repository = repository

    def _group(
        self,
        group_field: str,
        member_field: str,
        sort_by: Optional[str],
        sort_order: Optional[str],
    ) -> List[TodoGroup]:
        todos = self.repository.find(TodoFilter())
        return group_todos(
            todos,
            group_field,
            member_field,
            sort_by=sort_by,
            sort_order=sort_order,
        )

    def todos_by_owner(
        self, *, sort_by: Optional[str] = None, sort_order: Optional[str] = None
    ) -> List[TodoByOwner]:
        groups = self._group("owner", "category", sort_by, sort_order)
        return [
            TodoByOwner(
                owner=group.value,
                count=group.count,
                todos=[OwnerTodo(**member) for member in group.members],
            )
            for group in groups
        ]

    def todos_by_category(
        self, *, sort_by: Optional[str] = None, sort_order: Optional[str] = None
    ) -> List[TodoByCategory]:
        groups = self._group("category", "owner", sort_by, sort_order)
        return [
            TodoByCategory(
                category=group.value,
                count=group.count,
                todos=[CategoryTodo(**member) for member in group.members],
            )
            for group in groups
        ]
