from __future__ import annotations

import logging
import random
from typing import Optional, Protocol, runtime_checkable

from config import settings
from library_core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@runtime_checkable
class CostGenerator(Protocol):
    """Anything that can quote the acquisition cost of a new book."""

    def generate_book_cost(self) -> float:
        ...


class Purchasing:
    """Quotes a uniformly random whole-number cost between the configured bounds (inclusive)."""

    def __init__(self, rng: Optional[random.Random] = None, min_cost: Optional[int] = None,
                 max_cost: Optional[int] = None) -> None:
        self.min_cost = settings.min_book_cost if min_cost is None else int(min_cost)
        self.max_cost = settings.max_book_cost if max_cost is None else int(max_cost)
        if self.min_cost < 0 or self.min_cost > self.max_cost:
            raise ConfigurationError(
                f"Invalid book cost range: [{self.min_cost}, {self.max_cost}]"
            )
        self._rng = rng or random.Random()

    def generate_book_cost(self) -> float:
        cost = float(self._rng.randint(self.min_cost, self.max_cost))
        logger.debug(f"Generated book cost: {cost:.2f}")
        return cost
