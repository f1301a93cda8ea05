"""Interactive menus for managing patrons, catalogue items and loans."""

from __future__ import annotations

import argparse
from datetime import date
from typing import Callable, Sequence

from librarydesk.catalog import Catalog, ItemKind, ItemNotFoundError
from librarydesk.console import Console
from librarydesk.items import DVD, AudioCD, LibraryItem
from librarydesk.loans import OVERDUE, Loan, LoanLedger, LoanNotFoundError
from librarydesk.patrons import Patron, PatronNotFoundError, PatronRegistry

_BANNER = (
    "+-------------------------------------------------+",
    "|      Library Management System                  |",
    "+-------------------------------------------------+\n",
)

_KIND_CHOICES = ("1. Book", "2. AudioCD", "3. DVD")


def _money(value: float) -> str:
    return f"{value:g}"


class LibraryApp:
    """The menu-driven front desk over a patron registry, a catalogue and a loan ledger."""

    def __init__(
        self,
        console: Console | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.console = console if console is not None else Console()
        self.today = today
        self.patrons = PatronRegistry()
        self.catalog = Catalog()
        self.loans = LoanLedger()

    # -- generic menu machinery -------------------------------------------

    def _read_choice(self, prompt: str) -> int | None:
        try:
            return self.console.ask_int(prompt)
        except ValueError:
            return None

    def _menu(
        self,
        heading: str,
        options: Sequence[str],
        handlers: dict[int, Callable[[], None]],
        exit_message: str,
        invalid_message: str,
    ) -> None:
        exit_choice = len(options)
        prompt = f"Choose an option (1 to {exit_choice}): "
        while True:
            self.console.say(heading)
            for number, option in enumerate(options, start=1):
                self.console.say(f"{number}. {option}")
            choice = self._read_choice(prompt)
            if choice == exit_choice:
                self.console.say(exit_message)
                return
            handler = handlers.get(choice) if choice is not None else None
            if handler is None:
                self.console.say(invalid_message)
                continue
            try:
                handler()
            except ValueError as error:
                self.console.say(str(error))

    def run(self) -> None:
        """Show the banner and the main menu until the user exits."""
        for line in _BANNER:
            self.console.say(line)
        self._menu(
            "\nThe Menu:",
            (
                "Manage Patrons",
                "Manage Library Items",
                "Manage Loans",
                "Reporting Functions",
                "Exit Menu",
            ),
            {
                1: self.patrons_menu,
                2: self.items_menu,
                3: self.loans_menu,
                4: self.reporting_menu,
            },
            "Exit Complete",
            "Invalid option, please try again.",
        )

    # -- patrons -----------------------------------------------------------

    def patrons_menu(self) -> None:
        """Add, edit, delete, find and print patrons, and take fine payments."""
        self._menu(
            "\nPatrons Management:",
            (
                "Add Patron",
                "Edit Patron",
                "Delete Patron",
                "Find Patron",
                "Pay Fines",
                "Print All Patrons",
                "Go Back",
            ),
            {
                1: self._add_patron,
                2: self._edit_patron,
                3: self._delete_patron,
                4: self._find_patron,
                5: self._pay_fines,
                6: self._print_patrons,
            },
            "Back to the Menu",
            "Invalid option. Please try again.",
        )

    def _lookup_patron(self, prompt: str) -> Patron | None:
        patron_id = self.console.ask_int(prompt)
        try:
            return self.patrons.get(patron_id)
        except PatronNotFoundError:
            self.console.say("Patron ID Number does not exist.")
            return None

    def _add_patron(self) -> None:
        patron = Patron()
        patron.fill_from(self.console)
        self.patrons.add(patron)

    def _edit_patron(self) -> None:
        patron = self._lookup_patron("\nEnter Patron ID Number to edit: ")
        if patron is not None:
            patron.edit_from(self.console)

    def _delete_patron(self) -> None:
        patron = self._lookup_patron("\nEnter Patron ID Number to delete: ")
        if patron is not None:
            self.patrons.remove(patron.id)
            self.console.say(f"\nPatron with ID Number: {patron.id} has been deleted.")

    def _find_patron(self) -> None:
        patron = self._lookup_patron("\nEnter Patron ID Number to find: ")
        if patron is not None:
            self.console.say("\n" + patron.details())

    def _pay_fines(self) -> None:
        patron = self._lookup_patron("\nEnter Patron ID Number to pay fines: ")
        if patron is None:
            return
        payment = self.console.ask_float("Enter payment amount: ")
        balance = patron.pay(payment)
        self.console.say("Payment Successful.")
        self.console.say(f"New Fine Balance: ${_money(balance)}")

    def _print_patrons(self) -> None:
        for patron in self.patrons:
            self.console.say("\n" + patron.details())

    # -- library items -----------------------------------------------------

    def items_menu(self) -> None:
        """Add, edit, delete, search and list books, audio CDs and DVDs."""
        self._menu(
            "\nLibrary Items Menu:",
            (
                "Add Item",
                "Edit Item",
                "Delete Item",
                "Search Item",
                "View All Items",
                "Exit",
            ),
            {
                1: self._add_item,
                2: self._edit_item,
                3: self._delete_item,
                4: self._search_item,
                5: self._print_items,
            },
            "Exiting menu.",
            "Invalid option. Please try again.",
        )

    def _choose_kind(self, heading: str) -> ItemKind | None:
        self.console.say(heading)
        for line in _KIND_CHOICES:
            self.console.say(line)
        choice = self._read_choice("Choose an option (1 to 3): ")
        try:
            return ItemKind.parse(choice) if choice is not None else None
        except ValueError:
            return None

    def _say_item(self, item: LibraryItem) -> None:
        self.console.say("\n" + item.details())

    def _add_item(self) -> None:
        kind = self._choose_kind("\nChoose item type: ")
        if kind is None:
            self.console.say("Invalid item type.")
            return
        item = kind.item_class()
        item.fill_from(self.console)
        self.catalog.add(item)

    def _edit_item(self) -> None:
        kind = self._choose_kind("\nChoose item type to edit:")
        if kind is None:
            self.console.say("Invalid item type.")
            return
        candidates = self.catalog.items_of_kind(kind)
        if not candidates:
            self.console.say("No items of the selected type found.")
            return
        if kind is ItemKind.AUDIO_CD:
            artist = self.console.ask("\nEnter Audio CD Artist to edit: ")
            target = next(
                (i for i in candidates if isinstance(i, AudioCD) and i.artist == artist),
                None,
            )
            missing = f"AudioCD with Artist Name {artist} not found."
        elif kind is ItemKind.DVD:
            title = self.console.ask("\nEnter DVD title to edit: ")
            target = next(
                (i for i in candidates if isinstance(i, DVD) and i.title == title),
                None,
            )
            missing = f'DVD with Title "{title}" not found.'
        else:
            library_id = self.console.ask_int(
                "\nEnter the Library ID number of the item to edit: "
            )
            target = next((i for i in candidates if i.library_id == library_id), None)
            missing = f"Item with Library ID {library_id} not found."
        if target is None:
            self.console.say(missing)
            return
        target.edit_from(self.console)

    def _delete_item(self) -> None:
        kind = self._choose_kind("\nChoose item type to delete:")
        if kind is None:
            self.console.say("Invalid item type.")
            return
        identifier = ""
        if not self.catalog.items_of_kind(kind):
            self.console.say(f"No {kind.label} items found.")
        elif kind is ItemKind.BOOK:
            words = self.console.ask(
                "\nEnter the Library ID number of the Book to delete: "
            ).split()
            identifier = words[0] if words else ""
        elif kind is ItemKind.AUDIO_CD:
            identifier = self.console.ask(
                "\nEnter the Artist Name of the AudioCD to delete: "
            )
        else:
            identifier = self.console.ask("\nEnter the Title of the DVD to delete: ")
        try:
            self.catalog.remove(identifier, kind)
        except ItemNotFoundError as error:
            self.console.say(str(error))
        else:
            self.console.say("The specified item has been deleted.")

    def _search_item(self) -> None:
        kind = self._choose_kind("\nChoose item type to search:")
        if kind is ItemKind.BOOK:
            library_id = self.console.ask_int("\nEnter the Library ID number for Book: ")
            try:
                self._say_item(self.catalog.find_book(library_id))
            except ItemNotFoundError as error:
                self.console.say(str(error))
        elif kind is ItemKind.AUDIO_CD:
            artist = self.console.ask("Enter the Artist name: ")
            found = self.catalog.find_by_artist(artist)
            for cd in found:
                self._say_item(cd)
            if not found:
                self.console.say(f"No AudioCD found with Artist: {artist}")
        elif kind is ItemKind.DVD:
            title = self.console.ask("Enter the DVD Title: ")
            found = self.catalog.find_by_title(title)
            for dvd in found:
                self._say_item(dvd)
            if not found:
                self.console.say(f"No DVD found with Title: {title}")
        else:
            self.console.say("Invalid option.")

    def _print_items(self) -> None:
        for item in self.catalog:
            self._say_item(item)

    # -- loans -------------------------------------------------------------

    def loans_menu(self) -> None:
        """Add, edit, delete, find and list loans."""
        self._menu(
            "\nLoans Management:",
            (
                "Add Loan",
                "Edit Loan",
                "Delete Loan",
                "Search/Find Loan",
                "Print All Overdue Loans",
                "Print Loan Details",
                "Go Back",
            ),
            {
                1: self._add_loan,
                2: self._edit_loan,
                3: self._delete_loan,
                4: self._find_loan,
                5: self._print_overdue_loans,
                6: self._print_loans,
            },
            "Back to the Menu",
            "Invalid option. Please try again.",
        )

    def _lookup_loan(self, prompt: str) -> Loan | None:
        loan_id = self.console.ask_int(prompt)
        try:
            return self.loans.get(loan_id)
        except LoanNotFoundError:
            self.console.say("Loan ID Number does not exist.")
            return None

    def _add_loan(self) -> None:
        loan = Loan()
        loan.fill_from(self.console, self.today())
        self.loans.add(loan)

    def _edit_loan(self) -> None:
        loan = self._lookup_loan("\nEnter Loan ID Number to edit: ")
        if loan is not None:
            loan.edit_from(self.console)

    def _delete_loan(self) -> None:
        loan = self._lookup_loan("\nEnter Loan ID Number to delete: ")
        if loan is not None:
            self.loans.remove(loan.loan_id)
            self.console.say(f"\nLoan with ID Number {loan.loan_id} has been deleted.")

    def _find_loan(self) -> None:
        loan = self._lookup_loan("\nEnter Loan ID Number to Search or Find: ")
        if loan is None:
            return
        report = loan.overdue_details(self.today()) if loan.status == OVERDUE else None
        self.console.say("\n" + (report if report is not None else loan.details()))

    def _print_overdue_loans(self) -> None:
        today = self.today()
        found = False
        for loan in self.loans:
            self.console.say(f"\nUpdating loan status for Loan ID {loan.loan_id}")
            if loan.update_status(today) == OVERDUE:
                self.console.say("Loan is overdue.")
            else:
                self.console.say("Loan status is normal.")
            report = loan.overdue_details(today)
            if report is not None:
                self.console.say("\n" + report)
                found = True
        if not found:
            self.console.say("No overdue loans found.")

    def _print_loans(self) -> None:
        if not len(self.loans):
            self.console.say("No loans found.")
            return
        for loan in self.loans:
            self.console.say("\n" + loan.details())

    # -- reports -----------------------------------------------------------

    def reporting_menu(self) -> None:
        """List patrons, items, loans, overdue loans and fines owed."""
        self._menu(
            "\nReporting Menu:",
            (
                "List All Patrons",
                "List All Library Items",
                "List All Loans",
                "List Overdue Loans",
                "Show Fines Owed by Patrons",
                "Go Back",
            ),
            {
                1: self._print_patrons,
                2: self._print_items,
                3: self._print_loans,
                4: self._print_overdue_loans,
                5: self._print_fines,
            },
            "Back to the Menu",
            "Invalid option. Please try again.",
        )

    def _print_fines(self) -> None:
        for line in self.patrons.fines_report():
            self.console.say(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive library desk on the terminal."""
    parser = argparse.ArgumentParser(
        prog="librarydesk",
        description="Manage library patrons, items and loans interactively.",
    )
    parser.parse_args(argv)
    try:
        LibraryApp(Console()).run()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())