"""Service layer tests."""

from typing import List, Optional

from pytest import raises

from models.todo import Todo
from repositories.todo_repository import TodoRepository, new_todo_id
from services.errors import InvalidParameterError, MalformedIdError, TodoNotFoundError
from services.query_builder import SortSpec, TodoFilter
from services.todo_service import TodoService


class FailingStore(TodoRepository):
    """Store whose reads always fail."""

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def find(self, todo_filter: TodoFilter, sort: Optional[SortSpec] = None) -> List[Todo]:
        self.calls += 1
        raise ConnectionError("store unreachable")


class TestTodoService:
    """Test suite for TodoService."""

    def test_get_all_todos(self, todo_service: TodoService, todo_repository: TodoRepository) -> None:
        todos = todo_service.list_todos()
        assert len(todos) == todo_repository.count()

    def test_default_sort_is_category(self, todo_service: TodoService) -> None:
        categories = [todo.category for todo in todo_service.list_todos()]
        assert categories == sorted(categories)

    def test_filter_by_owner(self, todo_service: TodoService) -> None:
        todos = todo_service.list_todos({"owner": "Chris"})
        assert len(todos) == 2
        assert all(todo.owner == "Chris" for todo in todos)

    def test_filter_by_owner_ignores_case(self, todo_service: TodoService) -> None:
        assert len(todo_service.list_todos({"owner": "cHRIS"})) == 2

    def test_filter_by_category(self, todo_service: TodoService) -> None:
        todos = todo_service.list_todos({"category": "video games"})
        assert len(todos) == 2

    def test_filter_by_status(self, todo_service: TodoService) -> None:
        incomplete = todo_service.list_todos({"status": "incomplete"})
        assert len(incomplete) == 2
        assert {todo.owner for todo in incomplete} == {"Pat", "Jamie"}

        complete = todo_service.list_todos({"status": "complete"})
        assert len(complete) == 3
        assert all(todo.status for todo in complete)

    def test_invalid_status_skips_store(self) -> None:
        store = FailingStore()
        with raises(InvalidParameterError) as excinfo:
            TodoService(store).list_todos({"status": "bad"})
        assert str(excinfo.value) == "The status filter must be either 'complete' or 'incomplete'"
        assert store.calls == 0

    def test_filter_by_body(self, todo_service: TodoService) -> None:
        todos = todo_service.list_todos({"body": "GAMES"})
        assert len(todos) == 2
        assert all("games" in todo.body for todo in todos)

        assert len(todo_service.list_todos({"contains": "homework"})) == 1

    def test_combined_filters(self, todo_service: TodoService) -> None:
        todos = todo_service.list_todos({"category": "homework", "status": "complete"})
        assert [todo.owner for todo in todos] == ["Sam"]

        assert todo_service.list_todos({"owner": "Pat", "status": "complete"}) == []

    def test_filters_are_sound_and_complete(self, todo_service: TodoService) -> None:
        everything = todo_service.list_todos()
        for params in (
            {"owner": "chris"},
            {"category": "homework"},
            {"status": "complete"},
            {"body": "todo"},
            {"owner": "Jamie", "body": "software"},
        ):
            expected = {
                todo.id
                for todo in everything
                if ("owner" not in params or todo.owner.lower() == params["owner"].lower())
                and ("category" not in params or todo.category.lower() == params["category"].lower())
                and ("status" not in params or todo.status == (params["status"] == "complete"))
                and ("body" not in params or params["body"].lower() in todo.body.lower())
            }
            assert {todo.id for todo in todo_service.list_todos(params)} == expected

    def test_sort_by_owner_descending(self, todo_service: TodoService) -> None:
        owners = [todo.owner for todo in todo_service.list_todos({"sortby": "owner", "sortorder": "desc"})]
        assert owners == ["Sam", "Pat", "Jamie", "Chris", "Chris"]

    def test_repeated_query_is_identical(self, todo_service: TodoService) -> None:
        params = {"status": "complete", "sortby": "category"}
        assert todo_service.list_todos(params) == todo_service.list_todos(params)

    def test_get_todo(self, todo_service: TodoService, sams_id: str) -> None:
        todo = todo_service.get_todo(sams_id)
        assert todo.id == sams_id
        assert todo.owner == "Sam"

    def test_get_todo_bad_id(self, todo_service: TodoService) -> None:
        with raises(MalformedIdError) as excinfo:
            todo_service.get_todo("bad")
        assert str(excinfo.value) == "The requested todo id wasn't a legal identifier"

    def test_get_todo_trailing_newline_is_malformed(self, todo_service: TodoService, sams_id: str) -> None:
        with raises(MalformedIdError):
            todo_service.get_todo(sams_id + "\n")

    def test_empty_text_filters_match_everything(self, todo_service: TodoService) -> None:
        assert len(todo_service.list_todos({"owner": ""})) == 5
        assert len(todo_service.list_todos({"category": "", "body": ""})) == 5

    def test_get_todo_missing(self, todo_service: TodoService) -> None:
        with raises(TodoNotFoundError) as excinfo:
            todo_service.get_todo(new_todo_id())
        assert str(excinfo.value) == "The requested todo was not found"

    def test_store_failure_propagates(self) -> None:
        service = TodoService(FailingStore())
        with raises(ConnectionError):
            service.list_todos()
        with raises(ConnectionError):
            service.todos_by_owner()

    def test_summaries(self, todo_service: TodoService) -> None:
        owners = todo_service.todos_by_owner(sort_by="owner")
        assert [group.owner for group in owners] == ["Chris", "Jamie", "Pat", "Sam"]

        categories = todo_service.todos_by_category(sort_by="count", sort_order="desc")
        assert categories[-1].category == "software design"
