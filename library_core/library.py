import logging
from typing import Any, Dict, List, Optional

from library_core.book import Book
from library_core.exceptions import DuplicateIdError
from library_core.member import Member

logger = logging.getLogger(__name__)

NOT_CHECKED_OUT = "Not checked out."


class Library:
    """Manages the catalog of books, the roster of members and checkouts between them."""

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}
        self._members: Dict[str, Member] = {}

    # ------------------------- Books ------------------------- #
    def add_book(self, book: Book) -> None:
        """Add a pre-constructed Book. Duplicate IDs are rejected, never overwritten."""
        if book.book_id in self._books:
            logger.warning(f"Rejected duplicate book ID {book.book_id}")
            raise DuplicateIdError(f"Book with ID {book.book_id} already exists.")
        self._books[book.book_id] = book
        logger.info(f"Book added: {book.book_id} ({book.name})")

    def remove_book(self, book_id: str) -> bool:
        """Remove a book by ID. Members still holding it keep their reference."""
        book = self._books.pop(book_id, None)
        if book is None:
            return False
        logger.info(f"Book removed: {book_id}")
        return True

    def get_book_by_id(self, book_id: str) -> Optional[Book]:
        return self._books.get(book_id)

    def find_book_by_name(self, name: str) -> Optional[Book]:
        if name is None:
            return None
        wanted = name.casefold()
        for book in self._books.values():
            if book.name is not None and book.name.casefold() == wanted:
                return book
        return None

    def update_book(self, book_id: str, *, name: Optional[str] = None, author: Optional[str] = None,
                    year: Optional[int] = None, isbn: Optional[str] = None,
                    genre: Optional[str] = None) -> Optional[Book]:
        """Update descriptive fields of a book by ID. Returns updated book or None if not found."""
        if all(value is None for value in (name, author, year, isbn, genre)):
            raise ValueError("Nothing to update. Provide at least one field.")

        book = self.get_book_by_id(book_id)
        if not book:
            return None

        book.update_info(
            name=name if name is not None else book.name,
            author=author if author is not None else book.author,
            year=year if year is not None else book.year,
            isbn=isbn if isbn is not None else book.isbn,
            genre=genre if genre is not None else book.genre,
        )
        return book

    def list_books(self) -> List[Book]:
        return list(self._books.values())

    def list_available_books(self) -> List[Book]:
        return [book for book in self._books.values() if book.available]

    # ------------------------- Members ------------------------- #
    def add_member(self, member: Member) -> None:
        if member.member_id in self._members:
            logger.warning(f"Rejected duplicate member ID {member.member_id}")
            raise DuplicateIdError(f"Member with ID {member.member_id} already exists.")
        self._members[member.member_id] = member
        logger.info(f"Member added: {member.member_id} ({member.name})")

    def revoke_membership(self, member_id: str) -> bool:
        member = self._members.pop(member_id, None)
        if member is None:
            return False
        logger.info(f"Membership revoked: {member_id}")
        return True

    def get_member_by_id(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def update_member(self, member_id: str, *, name: Optional[str] = None,
                      email: Optional[str] = None) -> Optional[Member]:
        if name is None and email is None:
            raise ValueError("Nothing to update. Provide name and/or email.")

        member = self.get_member_by_id(member_id)
        if not member:
            return None

        member.update_info(
            name=name if name is not None else member.name,
            email=email if email is not None else member.email,
        )
        return member

    def list_members(self) -> List[Member]:
        return list(self._members.values())

    def get_borrowed_books(self, member_id: str) -> List[Book]:
        member = self.get_member_by_id(member_id)
        if not member:
            return []
        return member.get_borrowed_book_list()

    # ------------------------- Checkout / return ------------------------- #
    def checkout_book(self, member: Member, book: Book) -> None:
        """Lend ``book`` to ``member`` if it is available; an unavailable book is left alone."""
        if not book.available:
            logger.info(f"Checkout skipped, book {book.book_id} is not available")
            return
        member.add_borrowed_book(book)
        book.set_available(False)
        logger.info(f"Book {book.book_id} checked out to {member.member_id}")

    def return_book(self, member: Member, book: Book) -> None:
        """Take ``book`` back from ``member`` and mark it available.

        The member is not required to actually hold the book.
        """
        member.remove_borrowed_book(book.book_id)
        book.set_available(True)
        logger.info(f"Book {book.book_id} returned by {member.member_id}")

    def who_has_book(self, book_id: str) -> str:
        for member in self._members.values():
            if member.has_book(book_id):
                return member.name
        return NOT_CHECKED_OUT

    # ------------------------- Reporting ------------------------- #
    def get_statistics(self) -> Dict[str, Any]:
        total_books = len(self._books)
        available = len(self.list_available_books())
        return {
            "total_books": total_books,
            "available_books": available,
            "checked_out_books": total_books - available,
            "total_members": len(self._members),
        }
