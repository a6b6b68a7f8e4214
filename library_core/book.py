from __future__ import annotations


class Book:
    """Represents a single book in the library catalog."""

    def __init__(self, name: str, author: str, year: int, isbn: str, book_id: str, genre: str,
                 available: bool = True) -> None:
        if book_id is None or not str(book_id).strip():
            raise ValueError("Book ID cannot be empty.")
        self._book_id = str(book_id).strip()
        self.name = name
        self.author = author
        self.year = year
        self.isbn = isbn
        self.genre = genre
        self.available = available

    @property
    def book_id(self) -> str:
        return self._book_id

    def update_info(self, name: str, author: str, year: int, isbn: str, genre: str) -> None:
        """Replace the descriptive fields. The id and availability are left untouched."""
        self.name = name
        self.author = author
        self.year = year
        self.isbn = isbn
        self.genre = genre

    def set_available(self, available: bool) -> None:
        self.available = bool(available)

    def is_available(self) -> bool:
        return self.available

    def get_info(self) -> str:
        return (
            f"ID: {self.book_id} | Name: {self.name} | Author: {self.author} | Year: {self.year} | "
            f"ISBN: {self.isbn} | Genre: {self.genre} | Available: {str(self.available).lower()}"
        )

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return self.get_info()

    def __repr__(self) -> str:  # pragma: no cover
        return f"Book(book_id={self.book_id!r}, name={self.name!r}, available={self.available!r})"

    def to_dict(self) -> dict:
        return {
            "book_id": self.book_id,
            "name": self.name,
            "author": self.author,
            "year": self.year,
            "isbn": self.isbn,
            "genre": self.genre,
            "available": self.available,
        }
