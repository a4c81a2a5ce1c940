"""API dependencies for todo queries."""

from functools import lru_cache

from fastapi import Depends

from core.settings import get_settings
from repositories.todo_repository import TodoRepository
from services.todo_service import TodoService


@lru_cache
def get_todo_repository() -> TodoRepository:
    """Shared store, seeded from TODO_SEED_FILE on first use."""
    repository = TodoRepository()
    seed_file = get_settings().seed_file
    if seed_file:
        repository.load_seed(seed_file)
    return repository


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
