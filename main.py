import logging
import sys
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from config import settings
from library_core import (
    Book,
    DuplicateIdError,
    LibraryError,
    Library,
    LibraryAccounts,
    Member,
)
from utils.ui_helpers import (
    print_account_summary,
    print_book_list,
    print_member_list,
    set_output_mode,
)
from utils.validators import AuthCodeValidator, NumberParser, TextValidator

APP_NAME = settings.app_name

MENU_ITEMS = [
    ("1", "Add Book"),
    ("2", "Remove Book"),
    ("3", "Add Member"),
    ("4", "Remove Member"),
    ("5", "Checkout/Purchase Book"),
    ("6", "Return Book"),
    ("7", "View All Books"),
    ("8", "View All Members"),
    ("9", "Add Donation"),
    ("10", "Withdraw Salary"),
    ("11", "Find Book by Name"),
    ("12", "Who Has Book"),
    ("13", "Account Summary"),
    ("0", "Exit"),
]


def configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


class LibrarySession:
    """One interactive session at the front desk.

    The session only translates prompts into calls on the library and the
    accounts it was given; a full-time librarian (authenticated by code) may
    additionally handle money, purchase missing books and revoke members.
    """

    def __init__(self, library: Optional[Library] = None, accounts: Optional[LibraryAccounts] = None,
                 console: Optional[Console] = None) -> None:
        self.library = library if library is not None else Library()
        self.accounts = accounts if accounts is not None else LibraryAccounts()
        self.console = console or Console()
        self.auth_code: Optional[str] = None

    @property
    def is_full_time(self) -> bool:
        return self.auth_code is not None

    # ------------------------- Prompting ------------------------- #
    def ask(self, prompt: str, default: str = "") -> str:
        answer = Prompt.ask(prompt, default=default, show_default=False, console=self.console)
        return TextValidator.sanitize_text(answer)

    def say(self, message: str) -> None:
        self.console.print(message, soft_wrap=True)

    def authenticate(self, code: Optional[str] = None) -> bool:
        if code is None:
            code = self.ask("Enter Full-Time Librarian Code (or press Enter to access as a Volunteer Librarian)")
        code = AuthCodeValidator.normalize_code(code)
        librarians = self.accounts.get_librarians()
        if code and librarians.authenticate(code):
            self.auth_code = code
            self.say(f"Authenticated as full-time librarian: {escape(librarians.get_name(code))}")
            return True
        self.auth_code = None
        if code:
            self.say("[yellow]Unknown librarian code.[/]")
        self.say("Proceeding as volunteer librarian (limited permissions).")
        return False

    def _require_full_time(self, action: str) -> bool:
        if not self.is_full_time:
            self.say(f"Only full-time librarians may {action}.")
            return False
        return True

    def prompt_book_details(self, book_id: Optional[str] = None) -> Book:
        name = self.ask("Enter title")
        author = self.ask("Enter author")
        raw_year = self.ask("Enter year")
        year = NumberParser.parse_year(raw_year)
        if raw_year.strip() and year == 0 and raw_year.strip() != "0":
            self.say("Invalid year; defaulting to 0.")
        isbn = self.ask("Enter ISBN")
        if book_id is None:
            book_id = self.ask("Enter book ID")
        genre = self.ask("Enter genre")
        return Book(name, author, year, isbn, book_id, genre)

    def _ask_amount(self, prompt: str) -> Optional[float]:
        try:
            return NumberParser.parse_amount(self.ask(prompt))
        except ValueError as e:
            self.say(str(e))
            return None

    # ------------------------- Actions ------------------------- #
    def add_book(self) -> None:
        try:
            book = self.prompt_book_details()
            self.library.add_book(book)
        except (DuplicateIdError, ValueError) as e:
            self.say(f"[red]Error:[/] {escape(str(e))}")
            return
        self.say(f"Added book: {escape(book.get_info())}")

    def remove_book(self) -> None:
        book_id = self.ask("Enter book ID to remove")
        if self.library.remove_book(book_id):
            self.say(f"Removed book ID {escape(book_id)}.")
        else:
            self.say(f"Book ID {escape(book_id)} not found.")

    def add_member(self) -> None:
        name = self.ask("Enter name")
        email = self.ask("Enter email")
        member_id = self.ask("Enter member ID")
        try:
            member = Member(name, email, member_id)
            self.library.add_member(member)
        except (DuplicateIdError, ValueError) as e:
            self.say(f"[red]Error:[/] {escape(str(e))}")
            return
        self.say(f"Added member: {escape(member.get_info())}")

    def remove_member(self) -> None:
        if not self._require_full_time("revoke memberships"):
            return
        member_id = self.ask("Enter member ID to remove")
        if self.library.revoke_membership(member_id):
            self.say(f"Revoked membership for ID {escape(member_id)}.")
        else:
            self.say(f"Member ID {escape(member_id)} not found.")

    def checkout_book(self) -> None:
        member = self.library.get_member_by_id(self.ask("Enter member ID"))
        if member is None:
            self.say("Invalid member ID.")
            return

        book_id = self.ask("Enter book ID")
        book = self.library.get_book_by_id(book_id)
        if book is None:
            if not self.is_full_time:
                self.say("Book not found. Please call a full-time librarian for assistance.")
                return
            book = self._purchase_book(book_id)
            if book is None:
                return

        if not book.available:
            self.say(f"\"{escape(str(book.name))}\" is already checked out by {escape(self.library.who_has_book(book.book_id))}.")
            return
        self.library.checkout_book(member, book)
        self.say(f"Checked out \"{escape(str(book.name))}\" to {escape(member.name)}")

    def _purchase_book(self, book_id: str) -> Optional[Book]:
        if not Confirm.ask("Book not found. Purchase and add it?", default=False, console=self.console):
            self.say("Purchase cancelled; checkout aborted.")
            return None
        try:
            self.say("Enter its details:")
            book = self.prompt_book_details(book_id=book_id)
            cost = self.accounts.order_new_book(auth_code=self.auth_code)
        except (LibraryError, ValueError) as e:
            self.say(f"[red]Purchase failed:[/] {escape(str(e))}")
            return None
        self.library.add_book(book)
        self.say(f"Purchased for ${cost:.2f}")
        return book

    def return_book(self) -> None:
        member = self.library.get_member_by_id(self.ask("Enter member ID"))
        book = self.library.get_book_by_id(self.ask("Enter book ID"))
        if member is None or book is None:
            self.say("Invalid member or book ID.")
            return
        self.library.return_book(member, book)
        self.say(f"Returned \"{escape(str(book.name))}\" from {escape(member.name)}")

    def view_books(self) -> None:
        print_book_list(self.library.list_books(), console=self.console)

    def view_members(self) -> None:
        print_member_list(self.library.list_members(), console=self.console)

    def add_donation(self) -> None:
        if not self._require_full_time("add donations"):
            return
        amount = self._ask_amount("Enter donation amount")
        if amount is None:
            return
        try:
            self.accounts.add_donation(amount)
        except LibraryError as e:
            self.say(f"[red]Error:[/] {escape(str(e))}")
            return
        self.say(f"Donation added. New balance: ${self.accounts.get_operating_cash_balance():.2f}")

    def withdraw_salary(self) -> None:
        if not self._require_full_time("withdraw salary"):
            return
        amount = self._ask_amount("Enter salary withdrawal amount")
        if amount is None:
            return
        try:
            self.accounts.withdraw_salary(amount, auth_code=self.auth_code)
        except LibraryError as e:
            self.say(f"[red]Error:[/] {escape(str(e))}")
            return
        self.say(f"Withdrew ${amount:.2f}. New balance: ${self.accounts.get_operating_cash_balance():.2f}")

    def find_book(self) -> None:
        name = self.ask("Enter book name")
        book = self.library.find_book_by_name(name)
        if book:
            self.say(escape(book.get_info()))
        else:
            self.say(f"No book named \"{escape(name)}\".")

    def who_has_book(self) -> None:
        self.say(escape(self.library.who_has_book(self.ask("Enter book ID"))))

    def account_summary(self) -> None:
        if not self._require_full_time("view the accounts"):
            return
        print_account_summary(self.accounts.summary(), console=self.console)

    # ------------------------- Menu loop ------------------------- #
    def render_menu(self) -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label in MENU_ITEMS:
            table.add_row(key, label)

        role = "full-time" if self.is_full_time else "volunteer"
        self.console.print(Panel(table, title=f"{APP_NAME} ({role})", border_style="cyan", box=box.HEAVY))

    def run(self, code: Optional[str] = None) -> None:
        actions = {
            1: self.add_book,
            2: self.remove_book,
            3: self.add_member,
            4: self.remove_member,
            5: self.checkout_book,
            6: self.return_book,
            7: self.view_books,
            8: self.view_members,
            9: self.add_donation,
            10: self.withdraw_salary,
            11: self.find_book,
            12: self.who_has_book,
            13: self.account_summary,
        }

        self.console.rule(f"[bold]{escape(APP_NAME)}[/] v{escape(settings.app_version)}")
        try:
            self.authenticate(code)
            while True:
                self.render_menu()
                choice = NumberParser.parse_menu_choice(self.ask("Choose an option"))
                if choice == 0:
                    self.say("Exiting...")
                    return
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self.say("Invalid choice.")
                    continue
                action()
        except (EOFError, KeyboardInterrupt):
            self.say("\nExiting...")


# --- Typer CLI Application ---
app = typer.Typer(help="Library CLI")


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    configure_logging()
    set_output_mode(output or settings.cli_output)


@app.command("menu")
def cli_menu(code: Optional[str] = typer.Option(None, "--code", "-c", help="Full-time librarian code")):
    """Start an interactive front-desk session."""
    LibrarySession().run(code=code)


@app.command("info")
def cli_info():
    """Show the configured ledger and purchasing settings."""
    console = Console()
    accounts = LibraryAccounts()
    purchasing = accounts.purchasing
    console.print(f"{escape(APP_NAME)} v{escape(settings.app_version)}")
    console.print(f"Initial balance: ${accounts.get_operating_cash_balance():.2f}")
    console.print(f"Book cost range: ${purchasing.min_cost:.2f} - ${purchasing.max_cost:.2f}")
    console.print(f"Full-time librarians: {len(accounts.get_librarians())}")


if __name__ == "__main__":
    if len(sys.argv) > 1:
        app()
    else:
        configure_logging()
        set_output_mode(settings.cli_output)
        LibrarySession().run()
