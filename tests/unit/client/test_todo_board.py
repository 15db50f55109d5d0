import pytest
from pytest_mock import MockerFixture

from todo_api.client.board import BoardSnapshot, TodoBoard
from todo_api.client.client import TodoClient
from todo_api.todos.schemas import Todo


def make_todo(id: str, category: str, completed: bool = False) -> Todo:
    return Todo(
        id=id,
        text=f"Todo {id}",
        category=category,
        priority="low",
        completed=completed,
    )


@pytest.fixture
def mock_client(mocker: MockerFixture) -> TodoClient:
    return mocker.AsyncMock(spec=TodoClient)


@pytest.fixture
def board(mock_client: TodoClient) -> TodoBoard:
    return TodoBoard(client=mock_client)


def test_snapshot_grouping_keeps_first_seen_order() -> None:
    a = make_todo("a", "Work")
    b = make_todo("b", "Home")
    c = make_todo("c", "Work")
    snapshot = BoardSnapshot(todos=(a, b, c))

    assert snapshot.categories() == ("Work", "Home")
    assert snapshot.grouped() == {"Work": (a, c), "Home": (b,)}
    assert snapshot.get("b") == b
    assert snapshot.get("missing") is None


def test_empty_snapshot() -> None:
    snapshot = BoardSnapshot()

    assert snapshot.categories() == ()
    assert snapshot.grouped() == {}


async def test_refresh_replaces_snapshot(
    board: TodoBoard, mock_client: TodoClient
) -> None:
    todos = [make_todo("a", "Work")]
    mock_client.list_todos.return_value = todos  # type: ignore
    previous = board.snapshot

    snapshot = await board.refresh()

    assert snapshot is board.snapshot
    assert snapshot is not previous
    assert snapshot.todos == tuple(todos)
    assert previous.todos == ()


async def test_add_creates_then_refetches(
    board: TodoBoard, mock_client: TodoClient
) -> None:
    created = make_todo("a", "Work")
    mock_client.list_todos.return_value = [created]  # type: ignore

    snapshot = await board.add("Todo a", "Work", "high")

    mock_client.create_todo.assert_awaited_once_with(  # type: ignore
        "Todo a", "Work", "high"
    )
    mock_client.list_todos.assert_awaited_once()  # type: ignore
    assert snapshot.todos == (created,)


@pytest.mark.parametrize(
    "text, category", [("", "Work"), ("   ", "Work"), ("Todo", ""), ("Todo", "  ")]
)
async def test_add_ignores_blank_input(
    board: TodoBoard, mock_client: TodoClient, text: str, category: str
) -> None:
    previous = board.snapshot

    snapshot = await board.add(text, category)

    assert snapshot is previous
    mock_client.create_todo.assert_not_awaited()  # type: ignore
    mock_client.list_todos.assert_not_awaited()  # type: ignore


async def test_toggle_flips_completion(
    board: TodoBoard, mock_client: TodoClient
) -> None:
    todo = make_todo("a", "Work")
    mock_client.list_todos.return_value = [todo]  # type: ignore
    await board.refresh()

    done = make_todo("a", "Work", completed=True)
    mock_client.list_todos.return_value = [done]  # type: ignore
    snapshot = await board.toggle("a")

    mock_client.set_completed.assert_awaited_once_with("a", True)  # type: ignore
    assert snapshot.get("a") == done


async def test_toggle_unknown_todo_only_refreshes(
    board: TodoBoard, mock_client: TodoClient
) -> None:
    mock_client.list_todos.return_value = []  # type: ignore

    await board.toggle("missing")

    mock_client.set_completed.assert_not_awaited()  # type: ignore
    mock_client.list_todos.assert_awaited_once()  # type: ignore


async def test_remove_and_remove_category(
    board: TodoBoard, mock_client: TodoClient
) -> None:
    home = make_todo("b", "Home")
    mock_client.list_todos.return_value = [home]  # type: ignore

    await board.remove("a")
    snapshot = await board.remove_category("Work")

    mock_client.delete_todo.assert_awaited_once_with("a")  # type: ignore
    mock_client.delete_category.assert_awaited_once_with("Work")  # type: ignore
    assert mock_client.list_todos.await_count == 2  # type: ignore
    assert snapshot.grouped() == {"Home": (home,)}
