"""Mini README: Typed schema for the persisted expense ledger.

Structure:
    * round_money / parse_amount - half-up two decimal money helpers.
    * Expense - one recorded spending entry.
    * Ledger - the whole document: derived totals, id counter and entries.

The models use a single naming convention for the JSON document
(``id``, ``date``, ``description``, ``amount``, ``count``, ``total``,
``nextId``, ``expenses``). ``Ledger`` checks its own invariants when it is
validated, which is how the store rejects hand-damaged files on load.
"""

from __future__ import annotations

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CENT = Decimal("0.01")

Number = Union[int, float, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to ``Decimal`` via its string form to avoid binary noise."""

    if isinstance(value, bool):
        raise TypeError("Booleans are not amounts")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value).strip())


def round_money(value: Number) -> float:
    """Round half-up to two decimals and return a JSON friendly float."""

    try:
        amount = to_decimal(value)
        if amount.is_finite():
            return float(amount.quantize(CENT, rounding=ROUND_HALF_UP))
    except InvalidOperation as error:
        raise ValueError(f"{value!r} is not a number") from error
    raise ValueError(f"{value!r} is not a finite amount")


def sum_money(amounts: Iterable[Number]) -> float:
    """Sum amounts exactly and round the result to two decimals."""

    return round_money(sum((to_decimal(amount) for amount in amounts), Decimal("0")))


def parse_amount(value: Number) -> Optional[float]:
    """Return the rounded amount, or ``None`` when it is not a positive number."""

    try:
        rounded = round_money(value)
    except (TypeError, ValueError, InvalidOperation):
        return None
    if rounded <= 0:
        return None
    return rounded


def _require_number(value: object) -> object:
    if isinstance(value, (str, bool)):
        raise ValueError("amounts must be stored as JSON numbers")
    return value


class Expense(BaseModel):
    """A single recorded expense."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., ge=1)
    date: dt.date
    description: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)

    @field_validator("description")
    @classmethod
    def _strip_description(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("description must not be blank")
        return stripped

    @field_validator("amount", mode="before")
    @classmethod
    def _reject_text_amount(cls, value: object) -> object:
        return _require_number(value)

    @field_validator("amount")
    @classmethod
    def _round_amount(cls, value: float) -> float:
        rounded = round_money(value)
        if rounded <= 0:
            raise ValueError("amount must be at least 0.01")
        return rounded


class Ledger(BaseModel):
    """The persisted expense ledger."""

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(0, ge=0)
    total: float = 0.0
    next_id: int = Field(1, ge=1, alias="nextId")
    expenses: List[Expense] = Field(default_factory=list)

    @field_validator("total", mode="before")
    @classmethod
    def _reject_text_total(cls, value: object) -> object:
        return _require_number(value)

    @field_validator("total")
    @classmethod
    def _round_total(cls, value: float) -> float:
        return round_money(value)

    @model_validator(mode="after")
    def _check_invariants(self) -> "Ledger":
        if self.count != len(self.expenses):
            raise ValueError(
                f"count is {self.count} but the ledger holds {len(self.expenses)} expenses"
            )
        ids = [expense.id for expense in self.expenses]
        if len(ids) != len(set(ids)):
            raise ValueError("expense ids must be unique")
        if ids and self.next_id <= max(ids):
            raise ValueError(f"nextId {self.next_id} must exceed the largest id {max(ids)}")
        expected_total = sum_money(expense.amount for expense in self.expenses)
        if self.total != expected_total:
            raise ValueError(f"total is {self.total} but expenses sum to {expected_total}")
        return self

    def find(self, expense_id: int) -> Optional[Expense]:
        """Return the expense with the given id, if present."""

        for expense in self.expenses:
            if expense.id == expense_id:
                return expense
        return None

    def recompute(self) -> None:
        """Refresh ``count`` and ``total`` from the current expenses."""

        self.count = len(self.expenses)
        self.total = sum_money(expense.amount for expense in self.expenses)

    def as_document(self) -> dict:
        """Export the ledger using the persisted JSON field names."""

        return self.model_dump(mode="json", by_alias=True)
