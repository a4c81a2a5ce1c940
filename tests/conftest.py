"""Test configuration for repo-root tests."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from api.dependencies import get_todo_repository  # noqa: E402
from models.todo import TodoCreate  # noqa: E402
from repositories.todo_repository import TodoRepository, new_todo_id  # noqa: E402
from services.todo_service import TodoService  # noqa: E402
from todo_main import app  # noqa: E402

TEST_TODOS = [
    TodoCreate(owner="Chris", status=True, body="This is a video games todo", category="video games"),
    TodoCreate(owner="Chris", status=True, body="This is another video games todo", category="video games"),
    TodoCreate(owner="Pat", status=False, body="This is a homework todo", category="homework"),
    TodoCreate(owner="Jamie", status=False, body="This is a software design todo", category="software design"),
]


@pytest.fixture
def sams_id() -> str:
    """Identifier seeded for Sam's todo."""
    return new_todo_id()


@pytest.fixture
def todo_repository(sams_id: str) -> TodoRepository:
    """Repository holding the four test todos plus Sam's."""
    repository = TodoRepository()
    for todo in TEST_TODOS:
        repository.add(todo)
    repository.add(
        TodoCreate(owner="Sam", status=True, body="This is Sam's todo", category="homework"),
        todo_id=sams_id,
    )
    return repository


@pytest.fixture
def todo_service(todo_repository: TodoRepository) -> TodoService:
    return TodoService(todo_repository)


@pytest.fixture
def client(todo_repository: TodoRepository):
    """TestClient whose routes read from the seeded repository."""
    app.dependency_overrides[get_todo_repository] = lambda: todo_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
