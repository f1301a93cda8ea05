"""Library patrons and the registry that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from librarydesk.console import Console


def _money(value: float) -> str:
    return f"{value:g}"


class PatronNotFoundError(KeyError):
    """Raised when no patron has the requested ID number."""

    def __str__(self) -> str:
        return f"Patron ID Number {self.args[0]} does not exist."


@dataclass
class Patron:
    """A library member with an outstanding fine balance."""

    name: str = "Undefined"
    id: int = 0
    fine_balance: float = 0.0
    books_out: int = 0

    def pay(self, amount: float) -> float:
        """Deduct a payment from the fine balance, never going below zero."""
        self.fine_balance = max(self.fine_balance - amount, 0.0)
        return self.fine_balance

    def details(self) -> str:
        """Return the patron's details as printable text."""
        return "\n".join(
            [
                "Patron Details:",
                f"Name: {self.name}",
                f"ID Number: {self.id}",
                f"Fine Balance: ${_money(self.fine_balance)}",
                f"Current Number of Books Out: {self.books_out}",
            ]
        )

    def fill_from(self, console: Console) -> None:
        """Prompt for every field of a new patron."""
        console.say("\nPlease enter the patron details")
        self.name = console.ask("Enter Name: ")
        self.id = console.ask_int("Enter ID Number: ")
        self.fine_balance = console.ask_float("Enter Fine Balance: ")
        self.books_out = console.ask_int("Enter Current Number of Books Out: ")
        console.say("Patron has been added.")

    def edit_from(self, console: Console) -> None:
        """Prompt for new name, fine balance and books-out count."""
        console.say(f"\nEdit the new details for patron with ID Number: {self.id}")
        self.name = console.ask("Enter New Name: ")
        self.fine_balance = console.ask_float("Enter New Fine Balance: ")
        self.books_out = console.ask_int("Enter New Number of Books Out: ")
        console.say("Patron has been edited.")


class PatronRegistry:
    """Patrons in the order they were added, looked up by ID number."""

    def __init__(self) -> None:
        self._patrons: list[Patron] = []

    def add(self, patron: Patron) -> Patron:
        """Append a patron and return it."""
        self._patrons.append(patron)
        return patron

    def get(self, patron_id: int) -> Patron:
        """Return the first patron with the ID; raise PatronNotFoundError otherwise."""
        for patron in self._patrons:
            if patron.id == patron_id:
                return patron
        raise PatronNotFoundError(patron_id)

    def remove(self, patron_id: int) -> Patron:
        """Remove and return the first patron with the ID."""
        patron = self.get(patron_id)
        self._patrons.remove(patron)
        return patron

    def fines_report(self) -> list[str]:
        """One line per patron giving the fines owed."""
        return [
            f"Patron ID: {patron.id}, Fines Owed: ${_money(patron.fine_balance)}"
            for patron in self._patrons
        ]

    def __iter__(self) -> Iterator[Patron]:
        return iter(list(self._patrons))

    def __len__(self) -> int:
        return len(self._patrons)