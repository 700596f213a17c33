"""Unit tests for the 'add' command."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from todoly.adapters.file_storage import FileStorage
from todoly.commands.add_command import app
from todoly.utils import exit_codes

runner = CliRunner()


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "tasks.json"


def _run(args, data_file):
    return runner.invoke(app, [*args, "--file", str(data_file)], catch_exceptions=False)


def test_add_creates_task_file(data_file):
    result = _run(["Write report", "--due", "2024-03-01", "--project", "Work"], data_file)

    assert result.exit_code == 0, result.output
    assert "Task added: #1 Write report" in result.output
    assert json.loads(data_file.read_text()) == [
        {
            "id": 1,
            "title": "Write report",
            "project": "Work",
            "due_date": "2024-03-01",
            "status": "Todo",
        }
    ]


def test_add_appends_with_next_id(data_file):
    _run(["First", "-d", "2024-03-01"], data_file)
    result = _run(["Second", "-d", "2024-03-02"], data_file)

    assert "#2" in result.output
    assert [r["id"] for r in json.loads(data_file.read_text())] == [1, 2]


def test_add_empty_title(data_file):
    result = _run(["   ", "--due", "2024-03-01"], data_file)

    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
    assert "Title is required" in result.output
    assert not data_file.exists()


def test_add_bad_date(data_file):
    result = _run(["Write report", "--due", "not-a-date"], data_file)

    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
    assert "Invalid date" in result.output
    assert not data_file.exists()


def test_add_requires_due_date(data_file):
    result = _run(["Write report"], data_file)
    assert result.exit_code != 0
    assert not data_file.exists()


def test_add_save_failure(data_file):
    with patch.object(FileStorage, "write", side_effect=OSError("disk full")):
        result = _run(["Write report", "--due", "2024-03-01"], data_file)

    assert result.exit_code == exit_codes.ERROR_STORAGE
    assert "Could not save tasks" in result.output
    assert "Task added" not in result.output


def test_add_over_corrupt_file_warns(data_file):
    data_file.write_text("garbage")

    result = _run(["Fresh start", "--due", "2024-03-01"], data_file)

    assert result.exit_code == 0
    assert "Could not load tasks" in result.output
    assert json.loads(data_file.read_text())[0]["id"] == 1


def test_add_bad_date_with_markup_characters(data_file):
    result = _run(["Write report", "--due", "[/x]"], data_file)

    assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
    assert "[/x]" in result.output
    assert not data_file.exists()


def test_add_title_with_markup_characters(data_file):
    result = _run(["[bold]Plan[/bold]", "--due", "2024-03-01"], data_file)

    assert result.exit_code == 0
    assert "[bold]Plan[/bold]" in result.output
