"""Owner scoping of the todo repository"""
from types import SimpleNamespace

import pytest

from app.models.todo import Todo, TodoCategory, TodoCreate, TodoPriority, TodoUpdate

from .conftest import OTHER_ID, OWNER_ID


@pytest.fixture
def seeded(fake_client):
    mine = fake_client.seed("todos", user_id=OWNER_ID, title="mine")
    theirs = fake_client.seed("todos", user_id=OTHER_ID, title="theirs")
    return mine, theirs


@pytest.mark.asyncio
async def test_find_by_user_returns_only_own_rows_newest_first(repo, fake_client, seeded):
    newer = fake_client.seed("todos", user_id=OWNER_ID, title="newer")

    todos = await repo.find_by_user(OWNER_ID)

    assert [t.title for t in todos] == [newer["title"], "mine"]
    assert all(t.user_id == OWNER_ID for t in todos)


@pytest.mark.asyncio
async def test_non_owner_cannot_read_update_or_delete(repo, fake_client, seeded):
    _, theirs = seeded

    assert await repo.find_owned(theirs["id"], OWNER_ID) is None
    assert await repo.update_owned(theirs["id"], OWNER_ID, TodoUpdate(title="hijacked")) is None
    assert await repo.set_completed(theirs["id"], OWNER_ID, True) is None
    assert await repo.delete_owned(theirs["id"], OWNER_ID) is False

    row = next(r for r in fake_client.tables["todos"] if r["id"] == theirs["id"])
    assert row["title"] == "theirs"
    assert row["completed"] is False


@pytest.mark.asyncio
async def test_every_query_is_filtered_by_owner(repo, fake_client, seeded):
    mine, _ = seeded

    await repo.find_by_user(OWNER_ID)
    await repo.find_owned(mine["id"], OWNER_ID)
    await repo.update_owned(mine["id"], OWNER_ID, TodoUpdate(title="renamed"))
    await repo.delete_owned(mine["id"], OWNER_ID)

    for _, _, filters in fake_client.calls:
        assert ("user_id", OWNER_ID) in filters


@pytest.mark.asyncio
async def test_create_serializes_enums_and_categories(repo, fake_client):
    todo = await repo.create(TodoCreate(
        user_id=OWNER_ID,
        title="  팀 회의  ",
        priority=TodoPriority.HIGH,
        category=[TodoCategory.WORK, TodoCategory.STUDY, TodoCategory.WORK],
    ))

    row = fake_client.tables["todos"][0]
    assert row["title"] == "팀 회의"
    assert row["priority"] == "high"
    assert row["category"] == ["업무", "학습"]
    assert todo.id == row["id"]
    assert todo.completed is False


@pytest.mark.asyncio
async def test_empty_update_returns_current_row(repo, seeded):
    mine, _ = seeded

    todo = await repo.update_owned(mine["id"], OWNER_ID, TodoUpdate())

    assert todo is not None
    assert todo.title == "mine"


def test_todo_builds_from_row_attributes():
    row = SimpleNamespace(
        id="todo-1", user_id=OWNER_ID, title="장보기", description=None, due_date=None,
        priority="low", category=["개인"], completed=None, created_date="2024-01-01T00:00:00+00:00",
    )

    todo = Todo.model_validate(row)

    assert Todo.model_config["from_attributes"] is True
    assert todo.completed is False
    assert todo.category == [TodoCategory.PERSONAL]
