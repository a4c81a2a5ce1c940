"""Translate request parameters into todo filters and sort orders."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from models.todo import TODO_FIELDS, Todo
from services.errors import InvalidParameterError

logger = logging.getLogger(__name__)

OWNER_KEY = "owner"
CATEGORY_KEY = "category"
STATUS_KEY = "status"
BODY_KEY = "body"
CONTAINS_KEY = "contains"
SORT_BY_KEY = "sortby"
SORT_ORDER_KEY = "sortorder"

DEFAULT_SORT_FIELD = "category"
STATUS_VALUES = {"complete": True, "incomplete": False}
STATUS_ERROR = "The status filter must be either 'complete' or 'incomplete'"


def literal_pattern(value: str, *, whole: bool) -> re.Pattern[str]:
    """Compile a case-insensitive pattern that matches ``value`` literally.

    With ``whole`` the pattern only matches the entire field, otherwise it
    matches anywhere inside it.
    """
    escaped = re.escape(value)
    if whole:
        escaped = rf"\A{escaped}\Z"
    return re.compile(escaped, re.IGNORECASE)


@dataclass(frozen=True)
class TodoQueryParams:
    """Validated listing parameters, one field per recognised parameter."""

    owner: Optional[str] = None
    category: Optional[str] = None
    status: Optional[bool] = None
    body: Optional[str] = None
    sortby: str = DEFAULT_SORT_FIELD
    sortorder: str = "asc"


@dataclass(frozen=True)
class TodoFilter:
    """Conjunction of optional per-field predicates."""

    owner: Optional[re.Pattern[str]] = None
    category: Optional[re.Pattern[str]] = None
    status: Optional[bool] = None
    body: Optional[re.Pattern[str]] = None

    def is_empty(self) -> bool:
        return (
            self.owner is None
            and self.category is None
            and self.status is None
            and self.body is None
        )

    def matches(self, todo: Todo) -> bool:
        if self.owner is not None and not self.owner.search(todo.owner):
            return False
        if self.category is not None and not self.category.search(todo.category):
            return False
        if self.status is not None and todo.status != self.status:
            return False
        if self.body is not None and not self.body.search(todo.body):
            return False
        return True


@dataclass(frozen=True)
class SortSpec:
    """Sort field and direction for todo listings."""

    field: str = DEFAULT_SORT_FIELD
    descending: bool = False

    def apply(self, todos: Iterable[Todo]) -> List[Todo]:
        """Order todos by the field; ties keep identifier order."""
        by_id = sorted(todos, key=lambda todo: todo.id)
        return sorted(
            by_id,
            key=lambda todo: getattr(todo, self.field),
            reverse=self.descending,
        )


def parse_query_params(params: Mapping[str, str]) -> TodoQueryParams:
    """Validate raw request parameters.

    Empty ``owner``, ``category`` and ``body`` values add no predicate.

    Raises:
        InvalidParameterError: if ``status`` is present but not one of the
            recognised values.
    """
    status: Optional[bool] = None
    if STATUS_KEY in params:
        raw_status = params[STATUS_KEY]
        if raw_status not in STATUS_VALUES:
            raise InvalidParameterError(STATUS_KEY, STATUS_ERROR, raw_status)
        status = STATUS_VALUES[raw_status]

    body = params.get(BODY_KEY)
    if body is None:
        body = params.get(CONTAINS_KEY)

    sortby = params.get(SORT_BY_KEY) or DEFAULT_SORT_FIELD
    if sortby not in TODO_FIELDS:
        logger.debug("Unknown sort field %r; using %s", sortby, DEFAULT_SORT_FIELD)
        sortby = DEFAULT_SORT_FIELD

    return TodoQueryParams(
        owner=params.get(OWNER_KEY) or None,
        category=params.get(CATEGORY_KEY) or None,
        status=status,
        body=body or None,
        sortby=sortby,
        sortorder=params.get(SORT_ORDER_KEY) or "asc",
    )


def build_filter(params: TodoQueryParams) -> TodoFilter:
    return TodoFilter(
        owner=literal_pattern(params.owner, whole=True) if params.owner is not None else None,
        category=(
            literal_pattern(params.category, whole=True) if params.category is not None else None
        ),
        status=params.status,
        body=literal_pattern(params.body, whole=False) if params.body is not None else None,
    )


def build_sort(params: TodoQueryParams) -> SortSpec:
    return SortSpec(field=params.sortby, descending=params.sortorder == "desc")


def build_query(params: Mapping[str, str]) -> Tuple[TodoFilter, SortSpec]:
    """Parse parameters and return the filter and sort order for a listing."""
    query = parse_query_params(params)
    return build_filter(query), build_sort(query)
