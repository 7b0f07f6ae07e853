"""Mini README: Expense ledger models, persistence and business rules.

This package groups the typed ledger schema, the JSON file store and the
service that enforces validation and keeps derived totals consistent. The
command line front end talks to ``LedgerService`` only.
"""

from .errors import ExpenseTrackerError, NotFoundError, StorageError, ValidationError
from .models import Expense, Ledger
from .service import LedgerService, Summary
from .store import LedgerStore

__all__ = [
    "Expense",
    "ExpenseTrackerError",
    "Ledger",
    "LedgerService",
    "LedgerStore",
    "NotFoundError",
    "StorageError",
    "Summary",
    "ValidationError",
]
