import os
import json
from typing import List, Any, Dict, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = ("plain", "json", "rich")

_console = Console()


def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    # Invalid values are ignored; keep the current default
    return False


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"


def print_book_list(books: List[Any], console: Optional[Console] = None) -> None:
    """Print books according to the current output mode.
    - plain: one ``Book.get_info()`` line per book, or 'No books currently in System!'
    - json: JSON array of ``Book.to_dict()``
    - rich: Rich table
    """
    console = console or _console
    mode = get_output_mode()

    if not books:
        console.print("No books currently in System!")
        return

    if mode == "json":
        console.print_json(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Author", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Genre", style="white")
        table.add_column("Available", justify="center")
        for b in books:
            table.add_row(
                escape(b.book_id), escape(str(b.name)), escape(str(b.author)), str(b.year),
                escape(str(b.genre)), "[green]yes[/]" if b.available else "[red]no[/]",
            )
        console.print(table)
    else:
        for b in books:
            console.print(escape(b.get_info()), soft_wrap=True)


def print_member_list(members: List[Any], console: Optional[Console] = None) -> None:
    console = console or _console
    mode = get_output_mode()

    if not members:
        console.print("No members currently in System!")
        return

    if mode == "json":
        console.print_json(json.dumps([m.to_dict() for m in members], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="Members", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Email", style="white")
        table.add_column("Borrowed", justify="right")
        for m in members:
            table.add_row(escape(m.member_id), escape(m.name), escape(m.email), str(len(m.borrowed_books)))
        console.print(table)
    else:
        for m in members:
            console.print(escape(m.get_info()), soft_wrap=True)


def print_account_summary(summary: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Print the ledger balance and per-librarian totals."""
    console = console or _console
    mode = get_output_mode()

    balance = summary.get("balance", 0.0)
    librarians = summary.get("librarians", [])

    if mode == "json":
        console.print_json(json.dumps(summary, ensure_ascii=False))
    elif mode == "rich":
        lines = [f"[bold]Operating Cash Balance:[/] ${balance:,.2f}"]
        for entry in librarians:
            lines.append(
                f"[cyan]{escape(entry['name'])}[/]: salary ${entry['total_salary_withdrawn']:,.2f}, "
                f"{entry['books_purchased']} books (${entry['total_purchase_cost']:,.2f})"
            )
        console.print(Panel.fit("\n".join(lines), title="Accounts", border_style="blue"))
    else:
        console.print(f"Operating Cash Balance: ${balance:.2f}")
        for entry in librarians:
            console.print(
                f"{escape(entry['name'])}: salary withdrawn ${entry['total_salary_withdrawn']:.2f}, "
                f"books purchased {entry['books_purchased']} (${entry['total_purchase_cost']:.2f})",
                soft_wrap=True,
            )
