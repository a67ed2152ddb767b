# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist import TaskHandler


@pytest.fixture()
def csv_path(tmp_path: Path) -> Path:
    """Fresh CSV location per test; the file itself does not exist yet."""
    return tmp_path / "tasks.csv"


@pytest.fixture()
def handler(csv_path: Path) -> TaskHandler:
    return TaskHandler(csv_path)
