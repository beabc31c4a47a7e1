from __future__ import annotations

import time
from typing import Optional

SECONDS_PER_DAY = 24 * 60 * 60
DEFAULT_LOAN_DAYS = 14


def _now() -> float:
    return time.time()


class Book:
    """Represents a single book in the catalog and its borrowing state."""

    def __init__(self, book_id: int, title: str, author: str, isbn: str, genre: str) -> None:
        self._book_id = book_id
        self._title = title.strip()
        self._author = author.strip()
        self._isbn = isbn.strip()
        self._genre = genre.strip()

        # Borrowing state, only changed through borrow() / return_book()
        self._available = True
        self._borrower_name = ""
        self._borrowed_at: Optional[float] = None
        self._due_at: Optional[float] = None

    @property
    def book_id(self) -> int:
        return self._book_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def genre(self) -> str:
        return self._genre

    @property
    def available(self) -> bool:
        return self._available

    @property
    def borrower_name(self) -> str:
        return self._borrower_name

    @property
    def borrowed_at(self) -> Optional[float]:
        return self._borrowed_at

    @property
    def due_at(self) -> Optional[float]:
        return self._due_at

    @property
    def status(self) -> str:
        return "Available" if self._available else "Borrowed"

    # ------------------------- Lifecycle ------------------------- #
    def borrow(self, borrower_name: str, loan_days: int = DEFAULT_LOAN_DAYS) -> None:
        """Lend the book out. The caller checks availability beforehand."""
        now = _now()
        self._available = False
        self._borrower_name = borrower_name
        self._borrowed_at = now
        self._due_at = now + loan_days * SECONDS_PER_DAY

    def return_book(self) -> None:
        self._available = True
        self._borrower_name = ""
        self._borrowed_at = None
        self._due_at = None

    def is_overdue(self) -> bool:
        if self._available:
            return False
        return _now() > self._due_at

    def days_until_due(self) -> int:
        """Whole days left on the loan; 0 once overdue, -1 when not borrowed."""
        if self._available:
            return -1
        days_left = int((self._due_at - _now()) // SECONDS_PER_DAY)
        return max(0, days_left)

    # ------------------------- Rendering ------------------------- #
    def due_date_str(self) -> str:
        if self._due_at is None:
            return ""
        return time.ctime(self._due_at)

    def display(self) -> str:
        lines = [
            "=" * 40,
            f"Book ID: {self._book_id}",
            f"Title: {self._title}",
            f"Author: {self._author}",
            f"ISBN: {self._isbn}",
            f"Genre: {self._genre}",
            f"Status: {self.status}",
        ]
        if not self._available:
            lines.append(f"Borrowed by: {self._borrower_name}")
            lines.append(f"Due Date: {self.due_date_str()}")
        lines.append("=" * 40)
        return "\n".join(lines)

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self._title} by {self._author} (ID: {self._book_id})"

    def to_dict(self) -> dict:
        return {
            "book_id": self._book_id,
            "title": self._title,
            "author": self._author,
            "isbn": self._isbn,
            "genre": self._genre,
            "available": self._available,
            "borrower_name": self._borrower_name,
            "borrowed_at": self._borrowed_at,
            "due_at": self._due_at,
        }
