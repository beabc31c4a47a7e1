import logging

from library_catalog.library import Library


def test_add_list_and_find(lib):
    assert lib.list_books() == []

    book_id = lib.add_book("Ulysses", "James Joyce", "9780199535675", "Fiction")

    assert book_id == 1001
    assert lib.find_book(book_id) is not None
    assert len(lib.list_books()) == 1
    assert lib.list_books()[0].title == "Ulysses"


def test_ids_increase_and_are_never_reused(lib):
    first = lib.add_book("A", "Author", "1", "G")
    second = lib.add_book("B", "Author", "2", "G")
    assert lib.remove_book(second) is True
    third = lib.add_book("C", "Author", "3", "G")

    assert (first, second, third) == (1001, 1002, 1003)


def test_first_book_id_from_settings(monkeypatch):
    monkeypatch.setattr("library_catalog.library.settings.first_book_id", 5000)
    assert Library().add_book("A", "Author", "1", "G") == 5000


def test_list_books_returns_copy(lib):
    lib.add_book("A", "Author", "1", "G")
    listing = lib.list_books()
    listing.clear()
    assert lib.total_count() == 1


def test_remove(lib):
    book_id = lib.add_book("Test", "Author", "123", "G")
    assert lib.remove_book(book_id) is True
    assert lib.remove_book(book_id) is False  # Should return False if not found


def test_remove_borrowed_book_fails(lib):
    book_id = lib.add_book("Test", "Author", "123", "G")
    lib.borrow_book(book_id, "Alice")

    assert lib.remove_book(book_id) is False
    assert lib.total_count() == 1
    assert lib.find_book(book_id).borrower_name == "Alice"


def test_find_missing_book(lib):
    lib.add_book("Test", "Author", "123", "G")
    assert lib.find_book(9999) is None
    assert lib.check_availability(9999) is None


def test_check_availability_returns_borrowed_book(lib):
    book_id = lib.add_book("Test", "Author", "123", "G")
    lib.borrow_book(book_id, "Alice")
    assert lib.check_availability(book_id).available is False


def test_search_is_case_sensitive_substring(seeded_lib):
    titles = [b.title for b in seeded_lib.search_by_title("The")]
    assert titles == ["The Great Gatsby", "The Hobbit"]
    assert seeded_lib.search_by_title("the") == []
    assert [b.title for b in seeded_lib.search_by_title("obb")] == ["The Hobbit"]


def test_search_by_author_and_genre(seeded_lib):
    assert [b.author for b in seeded_lib.search_by_author("Orwell")] == ["George Orwell"]
    technical = seeded_lib.search_by_genre("Technical")
    assert [b.title for b in technical] == ["C++ Primer", "Data Structures"]


def test_search_without_match_returns_empty_list(seeded_lib):
    assert seeded_lib.search_by_title("zzz-nomatch") == []
    assert seeded_lib.search_by_author("zzz-nomatch") == []
    assert seeded_lib.search_by_genre("zzz-nomatch") == []


def test_borrow_and_return_scenario(lib, clock):
    book_id = lib.add_book("1984", "George Orwell", "978-0451524935", "Dystopian")
    assert book_id == 1001

    assert lib.borrow_book(1001, "Alice") is True
    assert lib.borrow_book(1001, "Bob") is False
    assert lib.find_book(1001).borrower_name == "Alice"

    assert lib.return_book(1001) is True
    book = lib.find_book(1001)
    assert book.available is True
    assert book.borrower_name == ""

    assert lib.remove_book(1001) is True
    assert lib.total_count() == 0


def test_borrow_uses_library_loan_period(clock):
    lib = Library(loan_days=7)
    book_id = lib.add_book("A", "Author", "1", "G")
    lib.borrow_book(book_id, "Alice")
    assert lib.find_book(book_id).days_until_due() == 7

    other = lib.add_book("B", "Author", "2", "G")
    lib.borrow_book(other, "Bob", loan_days=1)
    assert lib.find_book(other).days_until_due() == 1


def test_borrow_missing_book(lib):
    assert lib.borrow_book(4242, "Alice") is False


def test_return_missing_or_available_book(lib):
    book_id = lib.add_book("A", "Author", "1", "G")
    assert lib.return_book(4242) is False
    assert lib.return_book(book_id) is False


def test_rejected_borrow_logs_current_borrower(lib, caplog):
    book_id = lib.add_book("A", "Author", "1", "G")
    lib.borrow_book(book_id, "Alice")
    with caplog.at_level(logging.WARNING, logger="library_catalog.library"):
        lib.borrow_book(book_id, "Bob")
    assert "currently borrowed by Alice" in caplog.text


def test_overdue_return_warns_and_succeeds(lib, clock, caplog):
    book_id = lib.add_book("A", "Author", "1", "G")
    lib.borrow_book(book_id, "Alice")
    clock.advance(days=15)

    with caplog.at_level(logging.WARNING, logger="library_catalog.library"):
        assert lib.return_book(book_id) is True
    assert "returned overdue" in caplog.text
    assert lib.find_book(book_id).available is True


def test_filtered_listings(seeded_lib, clock):
    seeded_lib.borrow_book(1001, "Alice")
    seeded_lib.borrow_book(1003, "Bob", loan_days=1)
    clock.advance(days=2)

    assert [b.book_id for b in seeded_lib.list_borrowed()] == [1001, 1003]
    assert [b.book_id for b in seeded_lib.list_available()] == [1002, 1004, 1005, 1006, 1007]
    assert [b.book_id for b in seeded_lib.list_overdue()] == [1003]


def test_empty_listings(lib):
    assert lib.list_books() == []
    assert lib.list_available() == []
    assert lib.list_borrowed() == []
    assert lib.list_overdue() == []


def test_counts_and_statistics(seeded_lib):
    seeded_lib.borrow_book(1002, "Alice")
    seeded_lib.remove_book(1007)

    assert seeded_lib.total_count() == 6
    assert seeded_lib.available_count() == 5
    assert seeded_lib.borrowed_count() == 1
    assert seeded_lib.get_statistics() == {
        "total_books": 6,
        "available_books": 5,
        "borrowed_books": 1,
    }
