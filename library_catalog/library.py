import logging
from typing import Callable, Dict, List, Optional

from library_catalog.book import Book
from library_catalog.config import settings

logger = logging.getLogger(__name__)


class Library:
    """Manages the collection of books and their borrow/return state."""

    def __init__(self, first_book_id: Optional[int] = None, loan_days: Optional[int] = None) -> None:
        self.books: List[Book] = []
        self.next_id: int = first_book_id if first_book_id is not None else settings.first_book_id
        self.loan_days: int = loan_days if loan_days is not None else settings.loan_days

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str, isbn: str, genre: str) -> int:
        """Create a new available book and return its assigned id."""
        book_id = self.next_id
        self.next_id += 1
        self.books.append(Book(book_id, title, author, isbn, genre))
        logger.info(f"Book added: id={book_id}, title={title!r}")
        return book_id

    def remove_book(self, book_id: int) -> bool:
        book = self.find_book(book_id)
        if not book:
            logger.warning(f"Cannot remove book {book_id}: not found")
            return False
        if not book.available:
            logger.warning(f"Cannot remove book {book_id}: currently borrowed by {book.borrower_name}")
            return False

        self.books = [b for b in self.books if b.book_id != book_id]
        logger.info(f"Book removed: id={book_id}")
        return True

    def find_book(self, book_id: int) -> Optional[Book]:
        for book in self.books:
            if book.book_id == book_id:
                return book
        return None

    def check_availability(self, book_id: int) -> Optional[Book]:
        """Return the book whatever its state, or None when the id is unknown."""
        return self.find_book(book_id)

    # ------------------------- Search ------------------------- #
    def search_by_title(self, query: str) -> List[Book]:
        return self._search(query, lambda b: b.title)

    def search_by_author(self, query: str) -> List[Book]:
        return self._search(query, lambda b: b.author)

    def search_by_genre(self, query: str) -> List[Book]:
        return self._search(query, lambda b: b.genre)

    def _search(self, query: str, field: Callable[[Book], str]) -> List[Book]:
        # Case-sensitive substring match, collection order preserved
        return [b for b in self.books if query in field(b)]

    # ------------------------- Borrowing ------------------------- #
    def borrow_book(self, book_id: int, borrower_name: str, loan_days: Optional[int] = None) -> bool:
        book = self.find_book(book_id)
        if not book:
            logger.warning(f"Cannot borrow book {book_id}: not found")
            return False
        if not book.available:
            logger.warning(f"Cannot borrow book {book_id}: currently borrowed by {book.borrower_name}")
            return False

        book.borrow(borrower_name, loan_days if loan_days is not None else self.loan_days)
        logger.info(f"Book borrowed: id={book_id}, borrower={borrower_name!r}, due={book.due_date_str()}")
        return True

    def return_book(self, book_id: int) -> bool:
        book = self.find_book(book_id)
        if not book:
            logger.warning(f"Cannot return book {book_id}: not found")
            return False
        if book.available:
            logger.warning(f"Cannot return book {book_id}: it is not borrowed")
            return False

        # Overdue returns are accepted; no fee is applied
        if book.is_overdue():
            logger.warning(f"Book {book_id} returned overdue by {book.borrower_name}")

        book.return_book()
        logger.info(f"Book returned: id={book_id}")
        return True

    # ------------------------- Listings ------------------------- #
    def list_books(self) -> List[Book]:
        return list(self.books)

    def list_available(self) -> List[Book]:
        return [b for b in self.books if b.available]

    def list_borrowed(self) -> List[Book]:
        return [b for b in self.books if not b.available]

    def list_overdue(self) -> List[Book]:
        return [b for b in self.books if b.is_overdue()]

    # ------------------------- Statistics ------------------------- #
    def total_count(self) -> int:
        return len(self.books)

    def available_count(self) -> int:
        return sum(1 for b in self.books if b.available)

    def borrowed_count(self) -> int:
        return sum(1 for b in self.books if not b.available)

    def get_statistics(self) -> Dict[str, int]:
        """Get library statistics."""
        return {
            "total_books": self.total_count(),
            "available_books": self.available_count(),
            "borrowed_books": self.borrowed_count(),
        }
