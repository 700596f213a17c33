"""Unit tests for the 'show' and 'summary' commands."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from todoly.commands.show_command import app as show_app
from todoly.commands.summary_command import app as summary_app
from todoly.utils import exit_codes

runner = CliRunner()

RECORDS = [
    {"id": 1, "title": "Write report", "project": "Work", "due_date": "2024-03-01", "status": "Todo"},
    {"id": 2, "title": "Buy milk", "project": "", "due_date": "2024-03-02", "status": "Done"},
    {"id": 3, "title": "Call mum", "project": "Home", "due_date": "2024-03-03", "status": "Todo"},
]


@pytest.fixture()
def data_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps(RECORDS))
    return path


def test_show_table(data_file):
    result = runner.invoke(show_app, ["1", "--file", str(data_file)])

    assert result.exit_code == 0, result.output
    assert "Write report" in result.output
    assert "Work" in result.output


def test_show_json(data_file):
    result = runner.invoke(show_app, ["2", "-o", "json", "--file", str(data_file)])
    assert json.loads(result.output) == RECORDS[1]


def test_show_unknown(data_file):
    result = runner.invoke(show_app, ["9", "--file", str(data_file)])
    assert result.exit_code == exit_codes.ERROR_NOT_FOUND


def test_summary(data_file):
    result = runner.invoke(summary_app, ["--file", str(data_file)])

    assert result.exit_code == 0
    assert "You have 2 tasks todo and 1 tasks are done!" in result.output


def test_summary_without_file(tmp_path):
    result = runner.invoke(summary_app, ["--file", str(tmp_path / "none.json")])
    assert "You have 0 tasks todo and 0 tasks are done!" in result.output


def test_show_unknown_output_format(data_file):
    result = runner.invoke(show_app, ["1", "-o", "xml", "--file", str(data_file)])
    assert result.exit_code == 2
