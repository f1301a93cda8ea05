import io
import sys
from datetime import date

from librarydesk.cli import LibraryApp, main
from librarydesk.console import Console
from librarydesk.items import DVD, AudioCD, Book


def _run(lines, today=date(2024, 1, 10)):
    out = io.StringIO()
    console = Console(io.StringIO("".join(f"{line}\n" for line in lines)), out)
    app = LibraryApp(console, today=lambda: today)
    app.run()
    return app, out.getvalue()


def test_exit_immediately():
    _, output = _run(["5"])
    assert "Library Management System" in output
    assert output.rstrip().endswith("Exit Complete")


def test_invalid_main_option():
    _, output = _run(["9", "abc", "5"])
    assert output.count("Invalid option, please try again.") == 2


def test_add_patron():
    app, output = _run(["1", "1", "Ann", "7", "2.5", "1", "7", "5"])
    patron = app.patrons.get(7)
    assert patron.name == "Ann"
    assert patron.fine_balance == 2.5
    assert patron.books_out == 1
    assert "Patron has been added." in output
    assert "Back to the Menu" in output


def test_pay_fines_never_below_zero():
    app, output = _run(["1", "1", "Ann", "7", "2.5", "1", "5", "7", "10", "7", "5"])
    assert app.patrons.get(7).fine_balance == 0.0
    assert "Payment Successful." in output
    assert "New Fine Balance: $0" in output


def test_delete_missing_patron():
    app, output = _run(["1", "3", "99", "7", "5"])
    assert len(app.patrons) == 0
    assert "Patron ID Number does not exist." in output


def test_delete_patron():
    app, output = _run(["1", "1", "Ann", "7", "0", "0", "3", "7", "7", "5"])
    assert len(app.patrons) == 0
    assert "Patron with ID Number: 7 has been deleted." in output


def test_fines_report():
    app, output = _run(["1", "1", "Ann", "7", "2.5", "1", "7", "4", "5", "6", "5"])
    assert "Patron ID: 7, Fines Owed: $2.5" in output


def test_add_and_search_dvd():
    app, output = _run(
        ["2", "1", "3", "Up", "Family", "96", "Pixar", "2009",
         "4", "3", "Up", "6", "5"]
    )
    items = list(app.catalog)
    assert len(items) == 1 and isinstance(items[0], DVD)
    assert items[0].runtime == 96
    assert "DVD Details:" in output
    assert "Title: Up" in output


def test_delete_dvd_by_title():
    app, output = _run(
        ["2", "1", "3", "Up", "Family", "96", "Pixar", "2009",
         "3", "3", "Up", "6", "5"]
    )
    assert len(app.catalog) == 0
    assert "The specified item has been deleted." in output


def test_delete_from_empty_catalog():
    app, output = _run(["2", "3", "1", "6", "5"])
    assert "No Book items found." in output
    assert "Item is incorrect and not found." in output


def test_invalid_item_type_on_add():
    app, output = _run(["2", "1", "7", "6", "5"])
    assert len(app.catalog) == 0
    assert "Invalid item type." in output


def test_edit_audio_cd_by_artist():
    app, output = _run(
        ["2", "1", "2", "Abba", "Gold", "19", "1992", "Pop",
         "2", "2", "Abba", "Abba", "More Gold", "9", "1993", "Pop",
         "6", "5"]
    )
    cd = next(iter(app.catalog))
    assert isinstance(cd, AudioCD)
    assert cd.title == "More Gold"
    assert cd.num_tracks == 9
    assert "AudioCD has been edited." in output


def test_edit_missing_dvd():
    _, output = _run(
        ["2", "1", "3", "Up", "Family", "96", "Pixar", "2009",
         "2", "3", "Down", "6", "5"]
    )
    assert 'DVD with Title "Down" not found.' in output


def test_add_book_with_bad_due_date():
    app, output = _run(
        ["2", "1", "1", "42", "Dune", "Herbert", "123", "SciFi", "9.5", "In", "bad",
         "4", "1", "42", "6", "5"]
    )
    book = app.catalog.find_book(42)
    assert isinstance(book, Book)
    assert book.loan_period == 0
    assert book.cost == 9.5
    assert "Invalid date format. Setting loan period to 0 days." in output
    assert "Book Details for Library ID Number 42 is:" in output


def test_overdue_loan_report():
    app, output = _run(
        ["3", "1", "11", "4", "7", "Book", "01-05-2024", "5", "7", "5"]
    )
    loan = app.loans.get(11)
    assert loan.status == "Overdue"
    assert loan.loan_date == "1-10-2024"
    assert "Loan is overdue." in output
    assert "Loan Details(Overdue):" in output
    assert "Loan Active for: 5 days" in output


def test_no_overdue_loans():
    app, output = _run(
        ["3", "1", "11", "4", "7", "Book", "02-05-2024", "5", "7", "5"]
    )
    assert app.loans.get(11).status == "Normal"
    assert "No overdue loans found." in output


def test_find_missing_loan_and_empty_listing():
    _, output = _run(["3", "4", "3", "6", "7", "5"])
    assert "Loan ID Number does not exist." in output
    assert "No loans found." in output


def test_delete_loan():
    app, output = _run(
        ["3", "1", "11", "4", "7", "Book", "02-05-2024", "3", "11", "7", "5"]
    )
    assert len(app.loans) == 0
    assert "Loan with ID Number 11 has been deleted." in output


def test_main_runs_until_exit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main([]) == 0
    assert "Exit Complete" in capsys.readouterr().out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 0
    assert "The Menu:" in capsys.readouterr().out