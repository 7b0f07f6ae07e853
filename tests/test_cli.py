"""Mini README: Tests for the Typer command line front end.

The CLI is exercised end to end against a temporary ledger file so that
argument wiring, output messages and exit codes are covered together.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from expense_tracker.configuration import get_settings
from main_expense_tracker import cli

runner = CliRunner()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "expenses.json"


def _run(data_file, *args: str):
    return runner.invoke(cli, ["--data-file", str(data_file), *args])


def test_add_list_and_summary(data_file) -> None:
    """Adding expenses should be visible in listings and totals."""

    result = _run(data_file, "add", "Coffee", "3.5", "--date", "2024-05-01")
    assert result.exit_code == 0, result.output
    assert "Expense added successfully (ID: 1)" in result.output

    assert _run(data_file, "add", "Book", "12.999", "--date", "2024-06-03").exit_code == 0

    listing = _run(data_file, "list")
    assert listing.exit_code == 0
    assert "Coffee" in listing.output
    assert "$13.00" in listing.output

    june = _run(data_file, "list", "--month", "6")
    assert "Book" in june.output
    assert "Coffee" not in june.output

    total = _run(data_file, "summary")
    assert "Total expenses: $16.50" in total.output

    may = _run(data_file, "summary", "--month", "5")
    assert "Total expenses for May: $3.50" in may.output


def test_update_and_delete(data_file) -> None:
    _run(data_file, "add", "Coffee", "3.5")
    _run(data_file, "add", "Book", "13")

    updated = _run(data_file, "update", "2", "--amount", "20", "--description", "Novel")
    assert updated.exit_code == 0
    assert "Expense updated successfully (ID: 2)" in updated.output

    deleted = _run(data_file, "delete", "1")
    assert deleted.exit_code == 0
    assert "Expense deleted successfully (ID: 1)" in deleted.output

    document = json.loads(data_file.read_text(encoding="utf-8"))
    assert document["count"] == 1
    assert document["total"] == 20.0
    assert document["nextId"] == 3
    assert document["expenses"][0]["description"] == "Novel"


def test_empty_list_message(data_file) -> None:
    result = _run(data_file, "list")

    assert result.exit_code == 0
    assert "No expenses recorded." in result.output


@pytest.mark.parametrize(
    "args, message",
    [
        (("add", "   ", "5"), "description required"),
        (("add", "Coffee", "abc"), "amount must be positive"),
        (("delete", "7"), "Expense 7 not found"),
        (("update", "7", "--amount", "2"), "Expense 7 not found"),
        (("summary", "--month", "13"), "month must be between 1 and 12"),
    ],
)
def test_errors_exit_non_zero(data_file, args, message: str) -> None:
    """Ledger errors should be reported and turned into exit code 1."""

    result = _run(data_file, *args)

    assert result.exit_code == 1
    assert f"Error: {message}" in result.output


def test_corrupt_file_is_reported(data_file) -> None:
    data_file.write_text("{broken", encoding="utf-8")

    result = _run(data_file, "list")

    assert result.exit_code == 1
    assert "not valid JSON" in result.output


def test_version_option() -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_invalid_configuration_is_reported(data_file, monkeypatch) -> None:
    """Bad settings should produce a readable error instead of a traceback."""

    monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "chatty")
    get_settings.cache_clear()
    try:
        result = _run(data_file, "list")
    finally:
        get_settings.cache_clear()

    assert result.exit_code == 1
    assert "Error: invalid configuration" in result.output
