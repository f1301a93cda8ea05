# librarydesk

A menu-driven console for running a small library's front desk. It keeps
track of patrons and their fines, a catalog of books, audio CDs and DVDs,
and the loans that connect them.

## Installing

```
pip install .
```

## Running

```
librarydesk
```

The main menu offers:

1. **Manage Patrons**: add, edit, delete and find patrons by ID number, take
   fine payments, and list everyone. A payment never takes a fine balance
   below zero.
2. **Manage Library Items**: add books, audio CDs and DVDs; edit or delete a
   book by library ID, an audio CD by artist, or a DVD by title; search for a
   book by library ID, audio CDs by artist or DVDs by title; list the whole
   catalog.
3. **Manage Loans**: record loans, edit or delete them, look one up by loan
   ID, list overdue loans, and print every loan.
4. **Reporting Functions**: list patrons, items and loans, show overdue loans,
   and show the fines each patron owes.
5. **Exit Menu**

Menus are chosen by number. An answer that is not a number where one is
expected is reported and you are returned to the menu. The session also ends
quietly when input runs out (for example on Ctrl-D) or on Ctrl-C.

Dates are entered as `MM-DD-YYYY`; a month or day out of range rolls over
into the next month or year. When a book is added or edited, its loan period
is worked out from the due date you give: a date in the past gives a loan
period of zero days, and a date not in `MM-DD-YYYY` form is reported and also
gives zero days. A loan counts as overdue from the start of its due date, and
a loan whose due date cannot be read always counts as overdue. Listing overdue
loans first refreshes every loan's status to `Overdue` or `Normal`.

## Using it from Python

The pieces behind the menus can be used directly:

- `librarydesk.console`: `Console`, which reads answers to prompts and writes
  messages on a pair of text streams (standard input and output by default).
- `librarydesk.patrons`: `Patron` and `PatronRegistry`; lookups of a missing
  ID raise `PatronNotFoundError`.
- `librarydesk.items`: `LibraryItem`, `Book`, `AudioCD`, `DVD` and
  `loan_period_until(due_text, now)`.
- `librarydesk.catalog`: `Catalog`, `ItemKind` and `BookShelf`, a list of
  books kept in step with a catalog; failed lookups raise `ItemNotFoundError`.
- `librarydesk.loans`: `Loan`, `LoanLedger`, `parse_date` and
  `days_between`; a missing loan ID raises `LoanNotFoundError`.
- `librarydesk.cli`: `LibraryApp`, the interactive session itself, and
  `main`, the command's entry point.

```python
import io
from datetime import date

from librarydesk.cli import LibraryApp
from librarydesk.console import Console

answers = io.StringIO("5\n")
output = io.StringIO()
LibraryApp(Console(answers, output), today=lambda: date(2024, 1, 15)).run()
print(output.getvalue())
```

## What it does not do

Everything lives in memory for the length of one session: nothing is saved
to or loaded from disk. Loans are not checked against the patrons or items
that exist, and recording, returning or losing an item does not change the
item's status or a patron's count of books out.

## Running the tests

```
pip install ".[test]"
pytest
```