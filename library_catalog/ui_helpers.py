import os
import json
from typing import List, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from library_catalog.book import Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def _book_table(books: List[Book], title: str) -> Table:
    table = Table(title=title, show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Author", style="white")
    table.add_column("Genre", style="white")
    table.add_column("Status", no_wrap=True)
    table.add_column("Borrower", style="white")
    table.add_column("Due", style="white")
    for b in books:
        status = "[green]Available[/]" if b.available else "[yellow]Borrowed[/]"
        table.add_row(str(b.book_id), escape(b.title), escape(b.author), escape(b.genre),
                      status, escape(b.borrower_name), b.due_date_str())
    return table


def print_book_list(books: List[Book], empty_message: str = "No books in the library.",
                    title: str = "📚 Books") -> None:
    """Print a list of books in the current output mode.
    - plain: each book's display() block, or the empty message
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        # Empty results print the same message in every mode
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        _console.print(_book_table(books, title))
        _console.print(f"[dim]{len(books)} book(s)[/]")
    else:
        print(f"Found {len(books)} book(s):")
        for b in books:
            print(b.display())


def print_book_details(book: Optional[Book], book_id: Optional[int] = None) -> None:
    mode = get_output_mode()

    if book is None:
        print(f"Book with ID {book_id} not found.")
        return

    if mode == "json":
        print(json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Book ID:[/] {book.book_id}\n"
            f"[bold]Title:[/] {escape(book.title)}\n"
            f"[bold]Author:[/] {escape(book.author)}\n"
            f"[bold]ISBN:[/] {escape(book.isbn)}\n"
            f"[bold]Genre:[/] {escape(book.genre)}\n"
            f"[bold]Status:[/] {book.status}"
        )
        if not book.available:
            content += (
                f"\n[bold]Borrowed by:[/] {escape(book.borrower_name)}"
                f"\n[bold]Due Date:[/] {book.due_date_str()}"
                f"\n[bold]Days until due:[/] {book.days_until_due()}"
            )
        border = "green" if book.available else "yellow"
        _console.print(Panel.fit(content, title="🔍 Book Details", border_style=border))
    else:
        print(book.display())


def print_overdue_result(books: List[Book]) -> None:
    """Condensed overdue view: id, title, borrower and status only."""
    mode = get_output_mode()

    if not books:
        print("No overdue books!")
        return

    if mode == "json":
        payload = [
            {"book_id": b.book_id, "title": b.title, "borrower_name": b.borrower_name, "status": "OVERDUE"}
            for b in books
        ]
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="⏰ Overdue Books", show_lines=True, header_style="bold red")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Borrowed by", style="white")
        table.add_column("Status", style="bold red")
        for b in books:
            table.add_row(str(b.book_id), escape(b.title), escape(b.borrower_name), "OVERDUE")
        _console.print(table)
    else:
        for b in books:
            print(f"Book ID: {b.book_id}")
            print(f"Title: {b.title}")
            print(f"Borrowed by: {b.borrower_name}")
            print("Status: OVERDUE")
            print()


def print_stats_result(stats: Dict[str, int]) -> None:
    """Print catalog statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_books", 0)
    available = stats.get("available_books", 0)
    borrowed = stats.get("borrowed_books", 0)

    if mode == "json":
        print(json.dumps({"total_books": total, "available_books": available, "borrowed_books": borrowed}))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {total}\n"
            f"[bold]Available Books:[/] {available}\n"
            f"[bold]Borrowed Books:[/] {borrowed}"
        )
        _console.print(Panel.fit(content, title="📊 Library Statistics", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Available Books: {available}")
        print(f"Borrowed Books: {borrowed}")
