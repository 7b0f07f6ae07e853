"""Mini README: Entry point CLI for the expense tracker.

This script exposes a Typer CLI with ``add``, ``update``, ``list``,
``summary`` and ``delete`` commands. Each invocation builds a fresh
``LedgerService`` for the configured data file, performs one operation and
exits. Ledger errors are reported here and turned into a non-zero exit code;
nothing below this layer touches the process.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from pydantic import ValidationError as SettingsError

from expense_tracker import __version__
from expense_tracker.configuration import get_settings
from expense_tracker.ledger import ExpenseTrackerError, LedgerService, LedgerStore
from expense_tracker.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(
    name="expense-tracker",
    help="A simple expense tracker CLI application.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"expense-tracker {__version__}")
        raise typer.Exit()


@cli.callback()
def main(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None, "--data-file", help="Ledger JSON file (defaults to EXPENSE_TRACKER_DATA_FILE)."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Record, list and summarise personal expenses."""

    try:
        settings = get_settings()
    except SettingsError as error:
        typer.secho(f"Error: invalid configuration: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    configure_root_logger(settings.log_level)
    path = data_file.expanduser() if data_file else settings.data_file
    LOGGER.debug("Using ledger file %s", path)
    ctx.obj = LedgerService(LedgerStore(path))


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Print ledger errors in red and exit with status 1."""

    try:
        yield
    except ExpenseTrackerError as error:
        typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error


def _success(message: str) -> None:
    typer.secho(message, fg=typer.colors.GREEN)


@cli.command()
def add(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="What the money was spent on."),
    amount: str = typer.Argument(..., help="Positive amount, rounded to cents."),
    on: Optional[str] = typer.Option(None, "--date", help="Expense date (YYYY-MM-DD), default today."),
) -> None:
    """Add a new expense."""

    with _reported_errors():
        expense = ctx.obj.add_expense(description, amount, on=on)
    _success(f"Expense added successfully (ID: {expense.id})")


@cli.command()
def update(
    ctx: typer.Context,
    expense_id: int = typer.Argument(..., metavar="ID", help="Identifier of the expense."),
    description: Optional[str] = typer.Option(None, "--description", help="New description."),
    amount: Optional[str] = typer.Option(None, "--amount", help="New positive amount."),
) -> None:
    """Change the description or amount of an expense."""

    with _reported_errors():
        expense = ctx.obj.update_expense(expense_id, description=description, amount=amount)
    _success(f"Expense updated successfully (ID: {expense.id})")


@cli.command("list")
def list_expenses(
    ctx: typer.Context,
    month: Optional[int] = typer.Option(None, "--month", "-m", help="Only show this month (1-12)."),
) -> None:
    """Show all the expenses in a list."""

    with _reported_errors():
        expenses = ctx.obj.list_expenses(month)
    if not expenses:
        typer.echo("No expenses recorded.")
        return
    typer.secho(f"{'ID':<6}{'Date':<13}{'Description':<30}{'Amount':>10}", bold=True)
    for expense in expenses:
        typer.echo(
            f"{expense.id:<6}{expense.date.isoformat():<13}"
            f"{expense.description:<30}{'$' + format(expense.amount, '.2f'):>10}"
        )


@cli.command()
def summary(
    ctx: typer.Context,
    month: Optional[int] = typer.Option(None, "--month", "-m", help="Only total this month (1-12)."),
) -> None:
    """Show the total expenses."""

    with _reported_errors():
        result = ctx.obj.get_summary(month)
    label = f"Total expenses for {result.month_name}" if result.month_name else "Total expenses"
    _success(f"{label}: ${result.total:.2f}")


@cli.command()
def delete(
    ctx: typer.Context,
    expense_id: int = typer.Argument(..., metavar="ID", help="Identifier of the expense."),
) -> None:
    """Delete the expense by ID."""

    with _reported_errors():
        expense = ctx.obj.delete_expense(expense_id)
    _success(f"Expense deleted successfully (ID: {expense.id})")


if __name__ == "__main__":
    cli()
