import pytest

from library_core import Book, Library, LibraryAccounts, Librarians, Member
from utils.ui_helpers import OUTPUT_MODE_ENV


class FixedCostPurchasing:
    """Deterministic stand-in for Purchasing that always quotes the same cost."""

    def __init__(self, cost: float) -> None:
        self.cost = float(cost)
        self.calls = 0

    def generate_book_cost(self) -> float:
        self.calls += 1
        return self.cost


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Every test starts in plain output mode; the CLI may switch it
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def lib():
    return Library()


@pytest.fixture
def stocked_lib(lib):
    """Library with one book (B1) and one member (M1, Alice)."""
    lib.add_book(Book("Dune", "Frank Herbert", 1965, "9780441013593", "B1", "Sci-Fi"))
    lib.add_member(Member("Alice", "alice@example.com", "M1"))
    return lib


@pytest.fixture
def librarians():
    return Librarians({"123456": "Mike", "654321": "Ekim", "000000": "Ghost"})


@pytest.fixture
def fixed_cost():
    return FixedCostPurchasing


@pytest.fixture
def accounts(librarians):
    return LibraryAccounts(purchasing=FixedCostPurchasing(50), librarians=librarians, initial_balance=39_000.00)
