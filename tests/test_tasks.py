from __future__ import annotations

from datetime import date

import pytest

from conftest import layout_of
from taskboard.config import BoardConfig, ColumnConfig
from taskboard.models.board import TaskPriority
from taskboard.services.board import BoardStore, build_board
from taskboard.services.task import TaskService


@pytest.mark.unit
def test_add_edit_delete_round_trip(store: BoardStore) -> None:
    service = TaskService(store)
    count = len(store.get_state().task_ids())

    task = service.add_task("todo", {"title": "X"})
    assert task is not None
    assert store.get_state().columns[0].tasks[-1].id == task.id

    edited = service.edit_task(task.id, {"title": "Y"})
    assert edited is not None and edited.title == "Y"

    todo = store.get_state().columns[0]
    assert [t.title for t in todo.tasks if t.id == task.id] == ["Y"]
    assert len([t for t in todo.tasks if t.title == "Y"]) == 1

    assert service.delete_task(task.id) is True
    assert store.get_state().get_task(task.id) is None
    assert len(store.get_state().task_ids()) == count


@pytest.mark.unit
def test_new_ids_do_not_collide(store: BoardStore) -> None:
    service = TaskService(store)
    ids = {service.add_task("todo", {"title": f"T{i}"}).id for i in range(20)}
    assert len(ids) == 20
    board_ids = store.get_state().task_ids()
    assert len(board_ids) == len(set(board_ids))


@pytest.mark.unit
def test_add_to_unknown_column(store: BoardStore) -> None:
    before = store.get_state()
    assert TaskService(store).add_task("archive", {"title": "X"}) is None
    assert store.get_state() is before


@pytest.mark.unit
def test_edit_keeps_position_and_other_fields(store: BoardStore) -> None:
    service = TaskService(store)
    service.edit_task("1", {"description": "first", "priority": "high"})
    task = service.edit_task("1", {"assignee": "imam", "due_date": "2024-02-02"})

    assert task.description == "first"
    assert task.priority is TaskPriority.HIGH
    assert task.due_date == date(2024, 2, 2)
    assert layout_of(store.get_state())["todo"] == ["1", "2"]


@pytest.mark.unit
def test_edit_ignores_id_and_unknown_fields(store: BoardStore) -> None:
    task = TaskService(store).edit_task("2", {"id": "42", "colour": "red", "title": "Z"})
    assert task.id == "2"
    assert store.get_state().get_task("42") is None


@pytest.mark.unit
def test_missing_task_is_noop(store: BoardStore) -> None:
    service = TaskService(store)
    before = store.get_state()
    assert service.edit_task("99", {"title": "nope"}) is None
    assert service.delete_task("99") is False
    assert store.get_state() is before


@pytest.mark.unit
def test_build_board_seeds_demo_tasks() -> None:
    board = build_board(BoardConfig())
    assert [c.id for c in board.columns] == ["todo", "in-progress", "done"]
    assert board.task_ids() == ["1", "2", "3", "4", "5"]
    assert board.get_task("3").title == "Implement dark mode theme"


@pytest.mark.unit
def test_build_board_without_seed() -> None:
    config = BoardConfig(
        columns=[ColumnConfig(id="backlog", title="Backlog"), ColumnConfig(id="todo", title="To-Do")],
        seed_tasks=False,
    )
    board = build_board(config)
    assert [c.title for c in board.columns] == ["Backlog", "To-Do"]
    assert board.task_ids() == []


@pytest.mark.unit
def test_ids_not_reused_after_delete(store: BoardStore, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("taskboard.services.task.time.time", lambda: 1700000000.0)
    service = TaskService(store)

    first = service.add_task("todo", {"title": "A"})
    assert service.delete_task(first.id)
    second = service.add_task("todo", {"title": "B"})

    assert int(second.id) > int(first.id)


@pytest.mark.unit
def test_ids_keep_increasing_when_clock_steps_back(store: BoardStore, monkeypatch: pytest.MonkeyPatch) -> None:
    service = TaskService(store)
    monkeypatch.setattr("taskboard.services.task.time.time", lambda: 1700000000.0)
    first = service.add_task("todo", {"title": "A"})
    monkeypatch.setattr("taskboard.services.task.time.time", lambda: 1600000000.0)
    service.delete_task(first.id)

    assert int(TaskService(store).add_task("todo", {"title": "B"}).id) > int(first.id)


@pytest.mark.unit
def test_non_ascii_digit_ids_are_skipped(make_board) -> None:
    store = BoardStore(make_board({"todo": ["²", "7"]}))
    task = TaskService(store).add_task("todo", {"title": "X"})
    assert task.id not in {"²", "7"}
    assert task.id.isascii() and task.id.isdigit()


@pytest.mark.unit
def test_invalid_field_values_are_dropped(store: BoardStore) -> None:
    service = TaskService(store)
    service.edit_task("1", {"priority": "low", "due_date": "2024-02-02"})

    task = service.edit_task("1", {"priority": "urgent", "due_date": "not-a-date", "title": "Kept"})
    assert task.title == "Kept"
    assert task.priority is TaskPriority.LOW
    assert task.due_date == date(2024, 2, 2)

    added = service.add_task("todo", {"title": "New", "priority": "urgent"})
    assert added.priority is None
