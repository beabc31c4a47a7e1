import json

import pytest

from library_catalog.ui_helpers import (
    OUTPUT_MODE_ENV,
    get_output_mode,
    print_book_details,
    print_book_list,
    print_overdue_result,
    print_stats_result,
    set_output_mode,
)


@pytest.fixture(autouse=True)
def plain_mode(monkeypatch):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


def test_set_output_mode_ignores_unknown_values():
    set_output_mode("JSON")
    assert get_output_mode() == "json"
    set_output_mode("xml")
    assert get_output_mode() == "json"


def test_empty_list_prints_message(capsys):
    print_book_list([], "No available books!")
    assert capsys.readouterr().out.strip() == "No available books!"


def test_plain_list(seeded_lib, capsys):
    print_book_list(seeded_lib.search_by_genre("Fiction"))
    out = capsys.readouterr().out
    assert "Found 2 book(s):" in out
    assert "Title: The Great Gatsby" in out
    assert "Title: To Kill a Mockingbird" in out


def test_json_list(seeded_lib, capsys):
    set_output_mode("json")
    print_book_list(seeded_lib.search_by_author("Orwell"))
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["book_id"] == 1003
    assert payload[0]["available"] is True


def test_rich_list(seeded_lib, capsys):
    set_output_mode("rich")
    print_book_list(seeded_lib.list_books(), title="All Books")
    out = capsys.readouterr().out
    assert "All Books" in out
    assert "1001" in out
    assert "7 book(s)" in out


def test_book_details_not_found(capsys):
    print_book_details(None, 4242)
    assert "Book with ID 4242 not found." in capsys.readouterr().out


def test_book_details_borrowed(lib, clock, capsys):
    book_id = lib.add_book("1984", "George Orwell", "978-0451524935", "Dystopian")
    lib.borrow_book(book_id, "Alice")
    print_book_details(lib.find_book(book_id))
    out = capsys.readouterr().out
    assert "Status: Borrowed" in out
    assert "Borrowed by: Alice" in out


def test_overdue_condensed_view(lib, clock, capsys):
    book_id = lib.add_book("1984", "George Orwell", "978-0451524935", "Dystopian")
    lib.borrow_book(book_id, "Alice")
    clock.advance(days=20)

    print_overdue_result(lib.list_overdue())
    out = capsys.readouterr().out
    assert "Book ID: 1001" in out
    assert "Borrowed by: Alice" in out
    assert "Status: OVERDUE" in out
    assert "ISBN" not in out


def test_no_overdue_books(capsys):
    print_overdue_result([])
    assert "No overdue books!" in capsys.readouterr().out


def test_stats_plain_and_json(seeded_lib, capsys):
    seeded_lib.borrow_book(1001, "Alice")
    print_stats_result(seeded_lib.get_statistics())
    out = capsys.readouterr().out
    assert "Total Books: 7" in out
    assert "Available Books: 6" in out
    assert "Borrowed Books: 1" in out

    set_output_mode("json")
    print_stats_result(seeded_lib.get_statistics())
    assert json.loads(capsys.readouterr().out) == {
        "total_books": 7, "available_books": 6, "borrowed_books": 1,
    }
