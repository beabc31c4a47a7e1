import logging
import os
import sys
from enum import Enum
from typing import Optional, List, Tuple

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from library_catalog.config import settings
from library_catalog.library import Library
from library_catalog.ui_helpers import (
    OUTPUT_MODE_ENV,
    get_output_mode,
    print_book_details,
    print_book_list,
    print_overdue_result,
    print_stats_result,
    set_output_mode,
)
from library_catalog.validators import ISBNValidator, TextValidator

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)

# (title, author, isbn, genre) loaded at startup
SAMPLE_BOOKS: List[Tuple[str, str, str, str]] = [
    ("The Great Gatsby", "F. Scott Fitzgerald", "978-0743273565", "Fiction"),
    ("To Kill a Mockingbird", "Harper Lee", "978-0061120084", "Fiction"),
    ("1984", "George Orwell", "978-0451524935", "Dystopian"),
    ("Pride and Prejudice", "Jane Austen", "978-0141439518", "Romance"),
    ("The Hobbit", "J.R.R. Tolkien", "978-0547928227", "Fantasy"),
    ("C++ Primer", "Stanley Lippman", "978-0321714114", "Technical"),
    ("Data Structures", "Mark Allen Weiss", "978-0132576277", "Technical"),
]


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or settings.log_level).upper()
    if settings.debug:
        level_name = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def seed_library(lib: Library) -> None:
    """Load the sample books through the regular add operation."""
    for title, author, isbn, genre in SAMPLE_BOOKS:
        lib.add_book(title, author, isbn, genre)
    logger.info(f"Seeded catalog with {len(SAMPLE_BOOKS)} sample books")


# Single Library instance for the lifetime of the process
class LibraryManager:
    _instance: Optional[Library] = None

    @classmethod
    def get_instance(cls) -> Library:
        """Get or create the Library singleton."""
        if cls._instance is None:
            cls._instance = Library()
            if settings.seed_sample_books:
                seed_library(cls._instance)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


# --- Typer CLI Application ---
app = typer.Typer(help="Library catalog CLI")


class SearchField(str, Enum):
    title = "title"
    author = "author"
    genre = "genre"


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global options for the CLI (e.g. output mode)."""
    if output:
        set_output_mode(output)


@app.command("list")
def cli_list(
    available: bool = typer.Option(False, "--available", help="Only books that can be borrowed"),
    borrowed: bool = typer.Option(False, "--borrowed", help="Only books currently lent out"),
    overdue: bool = typer.Option(False, "--overdue", help="Only overdue books (condensed view)"),
):
    """List books in the catalog."""
    lib = LibraryManager.get_instance()
    if overdue:
        print_overdue_result(lib.list_overdue())
    elif available:
        print_book_list(lib.list_available(), "No available books!", "📗 Available Books")
    elif borrowed:
        print_book_list(lib.list_borrowed(), "No borrowed books!", "📕 Borrowed Books")
    else:
        print_book_list(lib.list_books(), "No books in the library!", "📚 All Books")


@app.command("search")
def cli_search(
    query: str = typer.Argument(..., help="Case-sensitive text to look for"),
    by: SearchField = typer.Option(SearchField.title, "--by", "-b", help="Field to search"),
):
    """Search books by title, author or genre."""
    lib = LibraryManager.get_instance()
    searches = {
        SearchField.title: (lib.search_by_title, "No books found with that title!"),
        SearchField.author: (lib.search_by_author, "No books found by that author!"),
        SearchField.genre: (lib.search_by_genre, "No books found in that genre!"),
    }
    search, empty_message = searches[by]
    print_book_list(search(query), empty_message, f"🔎 Search results for '{escape(query)}'")


@app.command("show")
def cli_show(book_id: int = typer.Argument(..., help="Book ID")):
    """Show a book and its availability."""
    lib = LibraryManager.get_instance()
    print_book_details(lib.check_availability(book_id), book_id)


@app.command("stats")
def cli_stats():
    """Show library statistics."""
    print_stats_result(LibraryManager.get_instance().get_statistics())


@app.command("menu")
def cli_menu():
    """Start the interactive menu."""
    run_menu()


# --- Interactive menu actions ---
def _ask_text(label: str) -> str:
    return Prompt.ask(label).strip()


def _ask_book_id(label: str = "Enter book ID") -> int:
    return IntPrompt.ask(label)


def add(lib: Library) -> None:
    """Add a new book from prompted details."""
    console.print("\n[bold]--- Add New Book ---[/]")
    title = _ask_text("Enter book title")
    author = _ask_text("Enter author name")
    isbn = _ask_text("Enter ISBN")
    genre = _ask_text("Enter genre")

    if not TextValidator.validate_title(title):
        console.print("[bold red]✗ Title cannot be empty.[/]")
        return
    if not TextValidator.validate_author(author):
        console.print("[bold red]✗ Please enter a valid author name.[/]")
        return
    if not ISBNValidator.is_valid_isbn(isbn):
        console.print("[bold red]✗ Invalid ISBN. Use a valid ISBN-10 or ISBN-13.[/]")
        return
    if not TextValidator.validate_genre(genre):
        console.print("[bold red]✗ Genre cannot be empty.[/]")
        return

    book_id = lib.add_book(title, author, isbn, genre)
    console.print(Panel.fit(
        f"[green]✓ Book added successfully![/] Book ID: [bold]{book_id}[/]",
        title="✅ Success",
        border_style="green",
    ))


def remove(lib: Library) -> None:
    """Remove a book after confirmation."""
    console.print("\n[bold]--- Remove Book ---[/]")
    book_id = _ask_book_id("Enter book ID to remove")

    book = lib.find_book(book_id)
    if not book:
        console.print("[yellow]✗ Book not found![/]")
        return
    if not book.available:
        console.print("[yellow]✗ Cannot remove book. It's currently borrowed![/]")
        return

    console.print(Panel(
        f"[bold]Title:[/] {escape(book.title)}\n"
        f"[bold]Author:[/] {escape(book.author)}\n"
        f"[bold]ID:[/] {book.book_id}",
        title="📚 Book to remove",
        border_style="yellow",
    ))
    if not Confirm.ask("🗑️ Remove this book?", default=False):
        console.print("[blue]🚫 Removal cancelled.[/]")
        return

    if lib.remove_book(book_id):
        console.print("[green]✓ Book removed successfully![/]")
    else:
        console.print("[red]✗ Removal failed.[/]")


def _search(lib: Library, field: SearchField) -> None:
    labels = {
        SearchField.title: ("Enter book title to search", lib.search_by_title, "No books found with that title!"),
        SearchField.author: ("Enter author name to search", lib.search_by_author, "No books found by that author!"),
        SearchField.genre: ("Enter genre to search", lib.search_by_genre, "No books found in that genre!"),
    }
    label, search, empty_message = labels[field]
    console.print(f"\n[bold]--- Search by {field.value.title()} ---[/]")
    query = Prompt.ask(label)
    print_book_list(search(query), f"✗ {empty_message}", f"🔎 Results for '{escape(query)}'")


def search_title(lib: Library) -> None:
    _search(lib, SearchField.title)


def search_author(lib: Library) -> None:
    _search(lib, SearchField.author)


def search_genre(lib: Library) -> None:
    _search(lib, SearchField.genre)


def check_availability(lib: Library) -> None:
    console.print("\n[bold]--- Check Availability ---[/]")
    book_id = _ask_book_id()
    book = lib.check_availability(book_id)
    if book is None:
        console.print("[yellow]✗ Book not found![/]")
        return
    print_book_details(book)


def borrow(lib: Library) -> None:
    """Lend a book to a borrower."""
    console.print("\n[bold]--- Borrow a Book ---[/]")
    book_id = _ask_book_id()
    borrower = _ask_text("Enter borrower name")
    if not TextValidator.validate_borrower(borrower):
        console.print("[bold red]✗ Please enter a valid borrower name.[/]")
        return

    book = lib.find_book(book_id)
    if lib.borrow_book(book_id, borrower):
        console.print("[green]✓ Book borrowed successfully![/]")
        console.print(f"Return within {lib.loan_days} days, by {book.due_date_str()}.")
    elif book is None:
        console.print("[yellow]✗ Book not found![/]")
    else:
        console.print(f"[yellow]✗ Book is currently borrowed by: {escape(book.borrower_name)}[/]")


def return_(lib: Library) -> None:
    """Take a borrowed book back, warning when it is overdue."""
    console.print("\n[bold]--- Return a Book ---[/]")
    book_id = _ask_book_id()

    book = lib.find_book(book_id)
    if book is None:
        console.print("[yellow]✗ Book not found![/]")
        return
    if book.available:
        console.print("[yellow]✗ This book is not borrowed![/]")
        return

    if book.is_overdue():
        console.print("[bold yellow]⚠ Warning: This book is overdue![/]")
    if lib.return_book(book_id):
        console.print("[green]✓ Book returned successfully![/]")


def list_all(lib: Library) -> None:
    print_book_list(lib.list_books(), "✗ No books in the library!", "📚 All Books")


def list_available(lib: Library) -> None:
    print_book_list(lib.list_available(), "✗ No available books!", "📗 Available Books")


def list_borrowed(lib: Library) -> None:
    print_book_list(lib.list_borrowed(), "✗ No borrowed books!", "📕 Borrowed Books")


def list_overdue(lib: Library) -> None:
    print_overdue_result(lib.list_overdue())


def stats(lib: Library) -> None:
    print_stats_result(lib.get_statistics())


MENU_ITEMS = [
    ("1", "Add a new book", "➕", add),
    ("2", "Remove a book", "🗑️", remove),
    ("3", "Search books by title", "🔎", search_title),
    ("4", "Search books by author", "✍️", search_author),
    ("5", "Search books by genre", "🏷️", search_genre),
    ("6", "Check book availability", "🔍", check_availability),
    ("7", "Borrow a book", "📤", borrow),
    ("8", "Return a book", "📥", return_),
    ("9", "Display all books", "📚", list_all),
    ("10", "Display available books", "📗", list_available),
    ("11", "Display borrowed books", "📕", list_borrowed),
    ("12", "Display overdue books", "⏰", list_overdue),
    ("13", "Display library statistics", "📊", stats),
]


def run_menu(lib: Optional[Library] = None) -> None:
    """Simple interactive menu for the library catalog."""
    if lib is None:
        lib = LibraryManager.get_instance()
    # The menu renders rich output unless a mode was chosen explicitly
    set_output_mode(get_output_mode() if OUTPUT_MODE_ENV in os.environ else "rich")
    actions = {key: action for key, _, _, action in MENU_ITEMS}

    def render_menu() -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon, _ in MENU_ITEMS:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")
        table.add_row("[reverse]0[/]", "🚪 Exit")

        console.print(Panel(
            table,
            title=APP_NAME,
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        ))

    console.print(Panel.fit(
        "[bold]Welcome to the Library Management System[/]\n"
        "Manage books, borrowing, and returns easily!",
        border_style="cyan",
    ))
    while True:
        render_menu()
        choice = Prompt.ask("Enter your choice", choices=["0"] + list(actions), default="9").strip()

        if choice == "0":
            console.print("[green]Thank you for using the Library Management System. Goodbye![/]")
            break
        action = actions.get(choice)
        if action is None:
            console.print("[yellow]✗ Invalid choice! Please try again.[/]")
            continue
        action(lib)
        print()  # blank line between actions


def run() -> None:
    configure_logging()
    if len(sys.argv) > 1:
        app()
    else:
        run_menu()


if __name__ == "__main__":
    run()
