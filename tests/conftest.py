from __future__ import annotations

from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from taskboard import config as config_module
from taskboard.models.board import Board, Column, Task
from taskboard.services.board import BoardStore


BoardFactory = Callable[[dict[str, list[str]]], Board]


def _make_board(layout: dict[str, list[str]]) -> Board:
    columns = tuple(
        Column(id=col_id, title=col_id.upper(), tasks=tuple(Task(id=tid, title=f"Task {tid}") for tid in ids))
        for col_id, ids in layout.items()
    )
    return Board(columns=columns)


def layout_of(board: Board) -> dict[str, list[str]]:
    return {c.id: [t.id for t in c.tasks] for c in board.columns}


@pytest.fixture
def make_board() -> BoardFactory:
    return _make_board


@pytest.fixture
def store() -> BoardStore:
    return BoardStore(_make_board({"todo": ["1", "2"], "in-progress": ["3"], "done": []}))


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("TASKBOARD_CONFIG", str(tmp_path / "missing.yml"))
    for name in ("TASKBOARD_LOG_LEVEL", "TASKBOARD_HOST", "TASKBOARD_PORT", "TASKBOARD_DEBUG", "TASKBOARD_SEED_TASKS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def client() -> Iterator[TestClient]:
    from taskboard.main import app

    with TestClient(app) as c:
        yield c
