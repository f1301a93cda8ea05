"""Loans of catalogue items to patrons, and the ledger that records them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

from librarydesk.console import Console

NORMAL = "Normal"
OVERDUE = "Overdue"
RETURNED = "Returned"
LOST = "Lost"

_DATE = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")

# A due date that cannot be read falls back to the day before 1 January 1900,
# so such a loan always counts as overdue.
_UNREADABLE_DUE_DATE = date(1899, 12, 31)


class LoanNotFoundError(KeyError):
    """Raised when no loan has the requested ID number."""

    def __str__(self) -> str:
        return f"Loan ID Number {self.args[0]} does not exist."


def _calendar_date(year: int, month: int, day: int) -> date:
    """A calendar date, rolling out-of-range months and days over."""
    zero_based = month - 1
    year += zero_based // 12
    month = zero_based % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def parse_date(text: str) -> date:
    """Read a date written as MM-DD-YYYY.

    Months and days outside their usual range roll over into the next
    month or year. Raises ValueError when the text is not in that form or
    names a date that cannot be represented.
    """
    match = _DATE.match(text)
    if match is None:
        raise ValueError(f"invalid date {text!r}; expected MM-DD-YYYY")
    month, day, year = (int(part) for part in match.groups())
    try:
        return _calendar_date(year, month, day)
    except (OverflowError, ValueError):
        raise ValueError(f"date out of range: {text!r}") from None


def _as_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)


def days_between(start: date | str, end: date | str) -> int:
    """Whole days from ``start`` to ``end``; negative if ``end`` comes first.

    Either argument may be a date or MM-DD-YYYY text.
    """
    return (_as_date(end) - _as_date(start)).days


def _format_date(day: date) -> str:
    return f"{day.month}-{day.day}-{day.year}"


@dataclass
class Loan:
    """One item lent to one patron until a due date."""

    loan_id: int = 0
    item_id: int = 0
    patron_id: int = 0
    item_category: str = "Undefined"
    due_date: str = "Undefined"
    loan_date: str = "Undefined"
    status: str = NORMAL

    @property
    def due(self) -> date:
        """The due date; an unreadable one counts as long past."""
        try:
            return parse_date(self.due_date)
        except ValueError:
            return _UNREADABLE_DUE_DATE

    def is_overdue(self, today: date) -> bool:
        """Whether the loan is overdue; it is so from the start of its due date."""
        return self.due <= _as_date(today)

    def update_status(self, today: date) -> str:
        """Set the status to Overdue or Normal by the due date and return it."""
        self.status = OVERDUE if self.is_overdue(today) else NORMAL
        return self.status

    def return_item(self) -> None:
        """Mark the item as returned."""
        self.status = RETURNED

    def report_lost(self) -> None:
        """Mark the item as lost."""
        self.status = LOST

    def recheck(self, due_date: str) -> None:
        """Extend the loan to a new MM-DD-YYYY due date."""
        self.due_date = due_date

    def details(self) -> str:
        """Return the loan's details as printable text."""
        return "\n".join(
            [
                "Loan Details:",
                f"Loan ID Number: {self.loan_id}",
                f"Patron ID Number: {self.patron_id}",
                f"Library Item ID Number: {self.item_id}",
                f"Library Item Category: {self.item_category}",
                f"Due Date: {self.due_date}",
                f"Current Status: {self.status}",
            ]
        )

    def overdue_details(self, today: date) -> str | None:
        """The overdue report for this loan, or None if it is not overdue."""
        if self.status != OVERDUE and not self.is_overdue(today):
            return None
        active = days_between(self.due, today)
        return "\n".join(
            [
                "Loan Details(Overdue):",
                f"Loan ID Number: {self.loan_id}",
                f"Library Item ID Number: {self.item_id}",
                f"Patron ID Number: {self.patron_id}",
                f"Library Item Category: {self.item_category}",
                f"Due Date: {self.due_date}",
                f"Loan Active for: {active} days",
            ]
        )

    def fill_from(self, console: Console, today: date) -> None:
        """Prompt for a new loan, dated ``today``."""
        self.loan_id = console.ask_int("\nEnter Loan ID Number: ")
        self.item_id = console.ask_int("Enter Library Item ID Number: ")
        self.patron_id = console.ask_int("Enter Patron ID Number: ")
        self.item_category = console.ask(
            "Select Library Item Category (Book, AudioCD, DVD): "
        )
        self.due_date = console.ask("Enter due date(MM-DD-YYYY): ")
        self.loan_date = _format_date(_as_date(today))
        self.status = NORMAL
        console.say("Loan has been added.")

    def edit_from(self, console: Console) -> None:
        """Prompt for a new due date and status."""
        console.say(
            f"\nEnter the new details for loan with Loan ID Number: {self.loan_id}"
        )
        self.due_date = console.ask("Enter new due date(MM-DD-YYYY): ")
        self.status = console.ask("Enter new status (Normal, Overdue, etc.): ")
        console.say("Loan has been edited and rechecked.")


class LoanLedger:
    """Loans in the order they were made, looked up by loan ID number."""

    def __init__(self) -> None:
        self._loans: list[Loan] = []

    def add(self, loan: Loan) -> Loan:
        """Record a loan and return it."""
        self._loans.append(loan)
        return loan

    def get(self, loan_id: int) -> Loan:
        """Return the first loan with the ID; raise LoanNotFoundError otherwise."""
        for loan in self._loans:
            if loan.loan_id == loan_id:
                return loan
        raise LoanNotFoundError(loan_id)

    def remove(self, loan_id: int) -> Loan:
        """Remove and return the first loan with the ID."""
        loan = self.get(loan_id)
        self._loans.remove(loan)
        return loan

    def overdue(self, today: date) -> list[Loan]:
        """Refresh every loan's status and return those that are overdue."""
        found = []
        for loan in self._loans:
            loan.update_status(today)
            if loan.status == OVERDUE or loan.is_overdue(today):
                found.append(loan)
        return found

    def __iter__(self) -> Iterator[Loan]:
        return iter(list(self._loans))

    def __len__(self) -> int:
        return len(self._loans)