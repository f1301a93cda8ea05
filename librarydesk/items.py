"""Catalogue items: books, audio CDs and DVDs, and loan-period arithmetic."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from librarydesk.console import Console

_SECONDS_PER_DAY = 60 * 60 * 24

_DUE_DATE = re.compile(
    r"(?P<month>[+-]?\d+)(?!\d)(?P<sep1>.)"
    r"(?P<day>[+-]?\d+)(?!\d)(?P<sep2>.)"
    r"(?P<year>[+-]?\d+)"
)

_INVALID_DATE_MESSAGE = "Invalid date format. Setting loan period to 0 days."


def _money(value: float) -> str:
    return f"{value:g}"


def _midnight(year: int, month: int, day: int) -> datetime:
    """Midnight of a calendar date, rolling out-of-range months and days over."""
    zero_based = month - 1
    year += zero_based // 12
    month = zero_based % 12 + 1
    start = date(year, month, 1) + timedelta(days=day - 1)
    return datetime(start.year, start.month, start.day)


def loan_period_until(due_text: str, now: datetime) -> int:
    """Whole days from ``now`` until the MM-DD-YYYY due date, never below zero.

    Only the first whitespace-separated word of ``due_text`` is read. Raises
    ValueError when it is not in MM-DD-YYYY form. A date that cannot be
    represented gives a loan period of zero.
    """
    words = due_text.split()
    match = _DUE_DATE.match(words[0]) if words else None
    if match is None or match["sep1"] != "-" or match["sep2"] != "-":
        raise ValueError(f"invalid date {due_text!r}; expected MM-DD-YYYY")
    try:
        due = _midnight(int(match["year"]), int(match["month"]), int(match["day"]))
    except (OverflowError, ValueError):
        return 0
    days = int((due - now).total_seconds() / _SECONDS_PER_DAY)
    return max(days, 0)


def _ask_loan_period(console: Console, prompt: str) -> int:
    answer = console.ask(prompt)
    try:
        return loan_period_until(answer, datetime.now())
    except ValueError:
        console.say(_INVALID_DATE_MESSAGE)
        return 0


@dataclass(kw_only=True)
class LibraryItem(ABC):
    """Anything the library lends: an ID number, a cost, a status and a loan period."""

    library_id: int = 0
    cost: float = 0.0
    status: str = "In"
    loan_period: int = 0

    def details(self) -> str:
        """Return the lending details shared by every kind of item."""
        return "\n".join(
            [
                f"Library ID Number: {self.library_id}",
                f"Cost: ${_money(self.cost)}",
                f"Status: {self.status}",
                f"Loan Period: {self.loan_period} days",
            ]
        )

    @abstractmethod
    def fill_from(self, console: Console) -> None:
        """Prompt for every field of a new item."""

    @abstractmethod
    def edit_from(self, console: Console) -> None:
        """Prompt for new values of the item's fields."""


@dataclass(kw_only=True)
class Book(LibraryItem):
    """A book, identified in the catalogue by its library ID number."""

    title: str = "Undefined"
    author: str = "Undefined"
    isbn: str = "Undefined"
    category: str = "Undefined"
    status: str = "In, Out, Repair, Lost"

    def details(self) -> str:
        """Return the lending details followed by the book's own details."""
        return "\n".join(
            [
                super().details(),
                "",
                f"Book Details for Library ID Number {self.library_id} is:",
                f"Title: {self.title}",
                f"Author: {self.author}",
                f"ISBN Number: {self.isbn}",
                f"Category: {self.category}",
            ]
        )

    def fill_from(self, console: Console) -> None:
        """Prompt for a new book, its cost, status and due date."""
        self.library_id = console.ask_int("Enter Library ID Number: ")
        console.say("\nPlease enter book details")
        self.title = console.ask("Enter Title: ")
        self.author = console.ask("Enter Author: ")
        self.isbn = console.ask("Enter ISBN Number: ")
        self.category = console.ask(
            "Enter Category (Biography, Fiction, SciFi, History, etc.): "
        )
        self.cost = console.ask_float("Enter Cost: ")
        self.status = console.ask("Enter Status (In, Out, Repair, Lost): ")
        self.loan_period = _ask_loan_period(
            console, "Enter Due Date for Loan Period (MM-DD-YYYY): "
        )
        console.say(f"Book has been added with a loan period of {self.loan_period} days.")

    def edit_from(self, console: Console) -> None:
        """Prompt for new title, author, ISBN, category, cost, status and due date."""
        console.say(f"\nEnter the New details for {self.library_id}")
        self.title = console.ask("Enter New Title: ")
        self.author = console.ask("Enter New Author: ")
        self.isbn = console.ask("Enter New ISBN Number: ")
        self.category = console.ask(
            "Enter New Category (Biography, Fiction, SciFi, History, etc.): "
        )
        self.cost = console.ask_float("Enter New Cost: ")
        self.status = console.ask("Enter New Status (In, Out, Repair, Lost): ")
        self.loan_period = _ask_loan_period(
            console, "Enter New Due Date for Loan Period(MM-DD-YYYY): "
        )
        console.say(
            f"Book has been edited with a new loan period of {self.loan_period} days."
        )


@dataclass(kw_only=True)
class AudioCD(LibraryItem):
    """An audio CD, identified in the catalogue by its artist."""

    artist: str = "Undefined"
    title: str = "Undefined"
    num_tracks: int = 0
    release_date: str = "Undefined"
    genre: str = "Undefined"

    def details(self) -> str:
        """Return the CD's details."""
        return "\n".join(
            [
                "AudioCD Details:",
                f"Artist: {self.artist}",
                f"Title: {self.title}",
                f"Number of Tracks: {self.num_tracks}",
                f"Release Date: {self.release_date}",
                f"Genre: {self.genre}",
            ]
        )

    def fill_from(self, console: Console) -> None:
        """Prompt for every field of a new CD."""
        console.say("\nEnter Audio CD Details: ")
        self.artist = console.ask("Enter Artist Name: ")
        self.title = console.ask("Enter Title: ")
        self.num_tracks = console.ask_int("Enter Number of Tracks: ")
        self.release_date = console.ask("Enter Release Date: ")
        self.genre = console.ask(
            "Enter Genre (Pop, Classic Rock, Classical, Christian, Jazz, New age, etc): "
        )
        console.say("AudioCD has been added.")

    def edit_from(self, console: Console) -> None:
        """Prompt for new values of every field."""
        console.say("\nEnter Audio CD Details to Edit: ")
        self.artist = console.ask("Enter New Artist Name: ")
        self.title = console.ask("Enter New Title: ")
        self.num_tracks = console.ask_int("Enter New Number of Tracks: ")
        self.release_date = console.ask("Enter New Release Date: ")
        self.genre = console.ask(
            "Enter New Genre (Pop, Classic Rock, Classical, Christian, Jazz, New age, etc): "
        )
        console.say("AudioCD has been edited.")


@dataclass(kw_only=True)
class DVD(LibraryItem):
    """A DVD, identified in the catalogue by its title."""

    title: str = "Undefined"
    category: str = "Undefined"
    runtime: int = 0
    studio: str = "Undefined"
    release_date: str = "Undefined"

    def details(self) -> str:
        """Return the DVD's details."""
        return "\n".join(
            [
                "DVD Details:",
                f"Title: {self.title}",
                f"Category: {self.category}",
                f"Runtime: {self.runtime} Minutes",
                f"Studio: {self.studio}",
                f"Release Date: {self.release_date}",
            ]
        )

    def fill_from(self, console: Console) -> None:
        """Prompt for every field of a new DVD."""
        console.say("\nEnter DVD Details: ")
        self.title = console.ask("Enter Title: ")
        self.category = console.ask("Enter Category (Action, SciFi, Drama, etc.): ")
        self.runtime = console.ask_int("Enter Runtime (In Minutes): ")
        self.studio = console.ask("Enter Studio (Marvel, Pixar, Disney, etc.): ")
        self.release_date = console.ask("Enter Release Date: ")
        console.say("DVD has been added.")

    def edit_from(self, console: Console) -> None:
        """Prompt for new values of every field."""
        console.say("\nEnter DVD Details to Edit: ")
        self.title = console.ask("Enter New Title: ")
        self.category = console.ask("Enter New Category (Action, SciFi, Drama, etc.): ")
        self.runtime = console.ask_int("Enter New Runtime (In Minutes): ")
        self.studio = console.ask("Enter New Studio (Marvel, Pixar, Disney, etc.): ")
        self.release_date = console.ask("Enter New Release Date: ")
        console.say("DVD has been edited.")