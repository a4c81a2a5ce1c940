"""API routes for todo queries."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_todo_service
from models.todo import Todo, TodoByCategory, TodoByOwner
from services.errors import InvalidParameterError, MalformedIdError, TodoNotFoundError
from services.todo_service import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[Todo])
def get_todos(
    owner: Optional[str] = Query(None, description="Owner, matched whole and ignoring case"),
    category: Optional[str] = Query(None, description="Category, matched whole and ignoring case"),
    status: Optional[str] = Query(None, description="complete or incomplete"),
    body: Optional[str] = Query(None, description="Text contained in the body, ignoring case"),
    contains: Optional[str] = Query(None, description="Alias for body"),
    sortby: Optional[str] = Query(None, description="Field to sort by (default category)"),
    sortorder: Optional[str] = Query(None, description="asc or desc"),
    service: TodoService = Depends(get_todo_service),
) -> List[Todo]:
    """List todos, filtered by owner, category, status or body and sorted."""
    supplied = {
        "owner": owner,
        "category": category,
        "status": status,
        "body": body,
        "contains": contains,
        "sortby": sortby,
        "sortorder": sortorder,
    }
    params = {name: value for name, value in supplied.items() if value is not None}
    try:
        return service.list_todos(params)
    except InvalidParameterError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/todos/{todo_id}", response_model=Todo)
def get_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Get a specific todo item by ID."""
    try:
        return service.get_todo(todo_id)
    except MalformedIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TodoNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/todosByOwner", response_model=List[TodoByOwner])
def get_todos_by_owner(
    sort_by: Optional[str] = Query(None, alias="sortBy", description="owner or count"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc or desc"),
    service: TodoService = Depends(get_todo_service),
) -> List[TodoByOwner]:
    """Todo ids and categories grouped by owner."""
    return service.todos_by_owner(sort_by=sort_by, sort_order=sort_order)


@router.get("/todosByCategory", response_model=List[TodoByCategory])
def get_todos_by_category(
    sort_by: Optional[str] = Query(None, alias="sortBy", description="category or count"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc or desc"),
    service: TodoService = Depends(get_todo_service),
) -> List[TodoByCategory]:
    """Todo ids and owners grouped by category."""
    return service.todos_by_category(sort_by=sort_by, sort_order=sort_order)
