"""Library Core - Registry and Ledger Package

This package contains the core modules of the library system:
- Book and member entities (book.py, member.py)
- Catalog and roster registry (library.py)
- Operating cash ledger (accounts.py)
- Staff directory (librarians.py)
- Book cost generator (purchasing.py)
"""
from library_core.accounts import LibraryAccounts
from library_core.book import Book
from library_core.exceptions import (
    ConfigurationError,
    DuplicateIdError,
    InsufficientFundsError,
    InvalidAmountError,
    LibraryError,
    UnknownCodeError,
)
from library_core.librarians import Librarians
from library_core.library import Library, NOT_CHECKED_OUT
from library_core.member import Member
from library_core.purchasing import CostGenerator, Purchasing

__all__ = [
    "Book",
    "ConfigurationError",
    "CostGenerator",
    "DuplicateIdError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "Librarians",
    "Library",
    "LibraryAccounts",
    "LibraryError",
    "Member",
    "NOT_CHECKED_OUT",
    "Purchasing",
    "UnknownCodeError",
]
