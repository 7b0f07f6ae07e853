"""Mini README: Error taxonomy for ledger operations.

Structure:
    * ExpenseTrackerError - base class caught at the CLI boundary.
    * ValidationError - rejected user input.
    * NotFoundError - unknown expense identifier.
    * StorageError - the ledger file could not be read, parsed or written.
"""

from __future__ import annotations


class ExpenseTrackerError(Exception):
    """Base class for every failure surfaced to the command line."""


class ValidationError(ExpenseTrackerError, ValueError):
    """Raised when supplied values break a ledger rule."""


class NotFoundError(ExpenseTrackerError, LookupError):
    """Raised when no expense carries the requested identifier."""

    def __init__(self, expense_id: int) -> None:
        super().__init__(f"Expense {expense_id} not found")
        self.expense_id = expense_id


class StorageError(ExpenseTrackerError, OSError):
    """Raised when the ledger document cannot be loaded or persisted."""
