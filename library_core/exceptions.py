class LibraryError(Exception):
    """Base exception for library system errors."""


class InvalidAmountError(LibraryError, ValueError):
    """A monetary amount is negative."""


class InsufficientFundsError(LibraryError, ValueError):
    """The requested amount exceeds the operating cash balance."""


class UnknownCodeError(LibraryError, LookupError):
    """The librarian authorization code is not recognized."""


class DuplicateIdError(LibraryError, ValueError):
    """Trying to add a book or member whose id is already registered."""


class ConfigurationError(LibraryError):
    """Staff roster or pricing bounds are malformed."""
