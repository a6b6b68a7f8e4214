from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from config import parse_staff_roster, settings
from library_core.exceptions import ConfigurationError, InvalidAmountError, UnknownCodeError
from utils.validators import AuthCodeValidator

logger = logging.getLogger(__name__)


@dataclass
class LibrarianRecord:
    """Cumulative accounting for one full-time librarian."""

    name: str
    auth_code: str
    total_salary: float = 0.0
    purchased_books: List[float] = field(default_factory=list)

    def add_salary(self, amount: float) -> None:
        if not math.isfinite(amount) or amount < 0:
            raise InvalidAmountError("Salary amount must be non-negative")
        self.total_salary += amount

    def add_purchased_book(self, cost: float) -> None:
        if not math.isfinite(cost) or cost < 0:
            raise InvalidAmountError("Book cost must be non-negative")
        self.purchased_books.append(cost)


class Librarians:
    """Fixed directory of full-time librarians keyed by their 6-digit authorization code.

    The roster is set once at construction; afterwards only the salary and
    purchase counters of existing records change. Without an explicit roster
    the one from ``settings.staff_roster`` is used (Mike, Ekim and Ghost by
    default).
    """

    def __init__(self, roster: Optional[Mapping[str, str]] = None) -> None:
        if roster is None:
            try:
                roster = parse_staff_roster(settings.staff_roster)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        if not roster:
            raise ConfigurationError("Staff roster must name at least one librarian")

        self._records: Dict[str, LibrarianRecord] = {}
        for code, name in roster.items():
            if not AuthCodeValidator.is_valid_code(code):
                raise ConfigurationError(f"Auth code must be exactly 6 digits: {code!r}")
            if not name:
                raise ConfigurationError(f"Librarian name missing for code {code}")
            self._records[code] = LibrarianRecord(name=name, auth_code=code)
        logger.info(f"Staff directory initialized with {len(self._records)} librarians")

    def authenticate(self, auth_code: str) -> bool:
        return auth_code in self._records

    def get_name(self, auth_code: str) -> str:
        return self._get_record(auth_code).name

    def get_auth_codes(self) -> FrozenSet[str]:
        return frozenset(self._records)

    def record_salary_withdrawal(self, auth_code: str, amount: float) -> None:
        record = self._get_record(auth_code)
        record.add_salary(amount)
        logger.info(f"Salary withdrawal recorded for {record.name}: {amount:.2f}")

    def record_book_purchase(self, auth_code: str, cost: float) -> None:
        record = self._get_record(auth_code)
        record.add_purchased_book(cost)
        logger.info(f"Book purchase recorded for {record.name}: {cost:.2f}")

    def get_total_salary_withdrawn(self, auth_code: str) -> float:
        return self._get_record(auth_code).total_salary

    def get_purchased_books(self, auth_code: str) -> Tuple[float, ...]:
        return tuple(self._get_record(auth_code).purchased_books)

    def _get_record(self, auth_code: str) -> LibrarianRecord:
        record = self._records.get(auth_code)
        if record is None:
            logger.warning("Rejected unknown librarian code")
            raise UnknownCodeError("Invalid librarian code")
        return record

    def __len__(self) -> int:
        return len(self._records)
