"""Mini README: Business rules for recording and reporting expenses.

Structure:
    * Summary - totals over an optionally month-filtered set of expenses.
    * LedgerService - add, update, delete, list and summarise operations.

The service holds no ledger state of its own. Each mutation loads the
document from the store, validates the request, applies the change in
memory and saves the whole document back. Validation always happens before
the save, so a rejected request leaves the file untouched.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional, Union

from ..logging_utils import get_logger
from .errors import NotFoundError, ValidationError
from .models import Expense, Ledger, Number, parse_amount, round_money, sum_money, to_decimal
from .store import LedgerStore

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class Summary:
    """Total spend over a set of expenses."""

    total: float
    count: int
    month_name: Optional[str] = None


def _clean_description(description: Optional[str]) -> str:
    cleaned = (description or "").strip()
    if not cleaned:
        raise ValidationError("description required")
    try:
        cleaned.encode("utf-8")
    except UnicodeEncodeError as error:
        raise ValidationError("description must be valid UTF-8 text") from error
    return cleaned


def _clean_amount(amount: Number) -> float:
    parsed = parse_amount(amount)
    if parsed is None:
        raise ValidationError("amount must be positive")
    return parsed


def _clean_month(month: Optional[int]) -> Optional[int]:
    if month is None:
        return None
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")
    return month


def _clean_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as error:
        raise ValidationError(f"date must use the YYYY-MM-DD format, got {value!r}") from error


class LedgerService:
    """Apply ledger rules on top of a ``LedgerStore``."""

    def __init__(self, store: LedgerStore, today: Callable[[], date] = date.today) -> None:
        self.store = store
        self._today = today

    def add_expense(
        self,
        description: str,
        amount: Number,
        on: Optional[Union[date, str]] = None,
    ) -> Expense:
        """Record a new expense and return it with its assigned id."""

        cleaned_description = _clean_description(description)
        cleaned_amount = _clean_amount(amount)
        expense_date = _clean_date(on) if on is not None else self._today()

        ledger = self.store.load()
        expense = Expense(
            id=ledger.next_id,
            date=expense_date,
            description=cleaned_description,
            amount=cleaned_amount,
        )
        ledger.next_id += 1
        ledger.expenses.append(expense)
        ledger.recompute()
        self.store.save(ledger)
        LOGGER.info("Added expense %s (%.2f) total=%.2f", expense.id, expense.amount, ledger.total)
        return expense

    def update_expense(
        self,
        expense_id: int,
        description: Optional[str] = None,
        amount: Optional[Number] = None,
    ) -> Expense:
        """Change the description and/or amount of an existing expense."""

        if description is None and amount is None:
            raise ValidationError("nothing to update")
        cleaned_description = _clean_description(description) if description is not None else None
        cleaned_amount = _clean_amount(amount) if amount is not None else None

        ledger = self.store.load()
        expense = self._require(ledger, expense_id)
        if cleaned_amount is not None:
            delta = to_decimal(cleaned_amount) - to_decimal(expense.amount)
            ledger.total = round_money(to_decimal(ledger.total) + delta)
            expense.amount = cleaned_amount
        if cleaned_description is not None:
            expense.description = cleaned_description
        ledger.count = len(ledger.expenses)
        self.store.save(ledger)
        LOGGER.info("Updated expense %s total=%.2f", expense.id, ledger.total)
        return expense

    def delete_expense(self, expense_id: int) -> Expense:
        """Remove an expense; remaining ids and ``nextId`` are left alone."""

        ledger = self.store.load()
        expense = self._require(ledger, expense_id)
        ledger.expenses.remove(expense)
        ledger.total = round_money(to_decimal(ledger.total) - to_decimal(expense.amount))
        ledger.count = len(ledger.expenses)
        self.store.save(ledger)
        LOGGER.info("Deleted expense %s total=%.2f", expense.id, ledger.total)
        return expense

    def list_expenses(self, month: Optional[int] = None) -> List[Expense]:
        """Return expenses in the order they were added, optionally for one month."""

        month = _clean_month(month)
        expenses = self.store.load().expenses
        if month is None:
            return list(expenses)
        return [expense for expense in expenses if expense.date.month == month]

    def get_summary(self, month: Optional[int] = None) -> Summary:
        """Sum the (optionally month-filtered) expenses from scratch."""

        expenses = self.list_expenses(month)
        return Summary(
            total=sum_money(expense.amount for expense in expenses),
            count=len(expenses),
            month_name=calendar.month_name[month] if month is not None else None,
        )

    @staticmethod
    def _require(ledger: Ledger, expense_id: int) -> Expense:
        expense = ledger.find(expense_id)
        if expense is None:
            raise NotFoundError(expense_id)
        return expense
