from __future__ import annotations

import logging
import math
from typing import Optional

from config import settings
from library_core.exceptions import InsufficientFundsError, InvalidAmountError, UnknownCodeError
from library_core.librarians import Librarians
from library_core.purchasing import CostGenerator, Purchasing

logger = logging.getLogger(__name__)


def _require_amount(amount: float, label: str) -> None:
    if not math.isfinite(amount) or amount < 0:
        logger.warning(f"Rejected {label.lower()}: {amount}")
        raise InvalidAmountError(f"{label} must be non-negative")


class LibraryAccounts:
    """Operating cash ledger of the library.

    Holds a single balance that starts at ``settings.initial_balance``
    (39000.00 by default) and can never go negative. Every operation checks
    its preconditions before touching the balance, so a failed call leaves
    the ledger exactly as it was.

    Operations that name a librarian (``auth_code``) validate the code first
    and only then move money and record it against that librarian.
    """

    def __init__(self, purchasing: Optional[CostGenerator] = None, librarians: Optional[Librarians] = None,
                 initial_balance: Optional[float] = None) -> None:
        balance = settings.initial_balance if initial_balance is None else float(initial_balance)
        _require_amount(balance, "Initial balance")
        self._balance = balance
        self.purchasing = purchasing or Purchasing()
        self._librarians = librarians or Librarians()

    # ------------------------- Queries ------------------------- #
    @property
    def balance(self) -> float:
        return self._balance

    def get_operating_cash_balance(self) -> float:
        return self._balance

    @property
    def librarians(self) -> Librarians:
        return self._librarians

    def get_librarians(self) -> Librarians:
        return self._librarians

    # ------------------------- Money in ------------------------- #
    def add_donation(self, amount: float) -> None:
        _require_amount(amount, "Donation amount")
        self._balance += amount
        logger.info(f"Donation received: {amount:.2f} (balance {self._balance:.2f})")

    # ------------------------- Money out ------------------------- #
    def withdraw_salary(self, amount: float, auth_code: Optional[str] = None) -> None:
        """Withdraw a salary payment, optionally recording it against a librarian.

        Raises:
            UnknownCodeError: If ``auth_code`` is given but not a librarian code.
            InvalidAmountError: If ``amount`` is negative or not finite.
            InsufficientFundsError: If ``amount`` exceeds the balance.
        """
        if auth_code is not None:
            self._require_librarian(auth_code)
        _require_amount(amount, "Salary withdrawal amount")
        self._require_funds(amount, "Insufficient funds")

        self._balance -= amount
        if auth_code is not None:
            self._librarians.record_salary_withdrawal(auth_code, amount)
        logger.info(f"Salary withdrawn: {amount:.2f} (balance {self._balance:.2f})")

    def order_new_book(self, auth_code: Optional[str] = None) -> float:
        """Buy a new book at a quoted cost and return that cost."""
        if auth_code is not None:
            self._require_librarian(auth_code)
        cost = self.purchasing.generate_book_cost()
        _require_amount(cost, "Book cost")
        self._require_funds(cost, "Insufficient funds to order book")

        self._balance -= cost
        if auth_code is not None:
            self._librarians.record_book_purchase(auth_code, cost)
        logger.info(f"New book ordered for {cost:.2f} (balance {self._balance:.2f})")
        return cost

    def order_book(self, cost: float, auth_code: Optional[str] = None) -> None:
        if auth_code is not None:
            self._require_librarian(auth_code)
        _require_amount(cost, "Book cost")
        self._require_funds(cost, "Insufficient funds to order book")

        self._balance -= cost
        if auth_code is not None:
            self._librarians.record_book_purchase(auth_code, cost)
        logger.info(f"Book ordered for {cost:.2f} (balance {self._balance:.2f})")

    # ------------------------- Helpers ------------------------- #
    def _require_librarian(self, auth_code: str) -> None:
        if not self._librarians.authenticate(auth_code):
            logger.warning("Rejected operation for unknown librarian code")
            raise UnknownCodeError("Invalid librarian code")

    def _require_funds(self, amount: float, message: str) -> None:
        if amount > self._balance:
            logger.warning(f"{message}: requested {amount:.2f}, available {self._balance:.2f}")
            raise InsufficientFundsError(message)

    def summary(self) -> dict:
        """Balance plus per-librarian totals, for reporting."""
        librarians = []
        for code in sorted(self._librarians.get_auth_codes()):
            purchases = self._librarians.get_purchased_books(code)
            librarians.append({
                "name": self._librarians.get_name(code),
                "total_salary_withdrawn": self._librarians.get_total_salary_withdrawn(code),
                "books_purchased": len(purchases),
                "total_purchase_cost": sum(purchases),
            })
        return {"balance": self._balance, "librarians": librarians}
