from __future__ import annotations

from typing import List, Optional, Tuple

from library_core.book import Book


def _require(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"Member {field_name} cannot be empty.")
    return value


class Member:
    """A library member and the books they currently hold.

    Borrowed books are kept in checkout order with set semantics on
    ``book_id``: the same book is never listed twice.
    """

    def __init__(self, name: str, email: str, member_id: str) -> None:
        self.name = _require(name, "name")
        self.email = _require(email, "email")
        self._member_id = _require(member_id, "ID")
        self._borrowed: List[Book] = []

    @property
    def member_id(self) -> str:
        return self._member_id

    @property
    def borrowed_books(self) -> Tuple[Book, ...]:
        """Snapshot of the borrowed books; mutating it does not affect the member."""
        return tuple(self._borrowed)

    def get_borrowed_book_list(self) -> List[Book]:
        return list(self._borrowed)

    def has_book(self, book_id: str) -> bool:
        return any(book.book_id == book_id for book in self._borrowed)

    def add_borrowed_book(self, book: Book) -> bool:
        """Add a book unless a book with the same id is already held."""
        if self.has_book(book.book_id):
            return False
        self._borrowed.append(book)
        return True

    def remove_borrowed_book(self, book_id: str) -> bool:
        if book_id is None:
            raise ValueError("Book ID cannot be None.")
        before = len(self._borrowed)
        self._borrowed = [book for book in self._borrowed if book.book_id != book_id]
        return len(self._borrowed) != before

    def update_info(self, name: str, email: str) -> None:
        self.name = _require(name, "name")
        self.email = _require(email, "email")

    def get_info(self) -> str:
        return f"ID: {self.member_id} | Name: {self.name} | Email: {self.email}"

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return self.get_info()

    def to_dict(self) -> dict:
        return {
            "member_id": self.member_id,
            "name": self.name,
            "email": self.email,
            "borrowed_books": [book.book_id for book in self._borrowed],
        }
