"""
In-memory store of trader transactions with query operations.

The store is not thread-safe; callers sharing one across threads must
serialize access themselves.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional

import pandas as pd

from ..core.models import Trader, Transaction
from ..core.exceptions import EmptyCollectionError
from ..config.store_config import StoreConfig
from ..reporting.frames import transactions_to_frame


logger = logging.getLogger(__name__)


class TransactionStore:
    """Ordered collection of transactions between traders"""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None,
                 config: Optional[StoreConfig] = None):
        self.config = config or StoreConfig()
        self._transactions: List[Transaction] = []

        for transaction in transactions or []:
            self.add(transaction)

    def add(self, transaction: Transaction) -> None:
        """Append a transaction to the end of the store"""
        self._transactions.append(transaction)
        logger.debug("Added %s", transaction)

    def size(self) -> int:
        """Number of stored transactions"""
        return len(self._transactions)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def transactions_in_year(self, year: int) -> List[Transaction]:
        """Transactions of the given year, sorted by value (ties keep insertion order)"""
        in_year = [t for t in self._transactions if t.year == year]
        return sorted(in_year, key=lambda t: t.value)

    def distinct_cities(self) -> List[str]:
        """Cities of all traders, in the order they are first seen"""
        return list(dict.fromkeys(t.trader.city for t in self._transactions))

    def traders(self) -> List[Trader]:
        """Distinct traders in the order they are first seen"""
        # Trader hashes by identity, so same-named traders stay separate
        return list(dict.fromkeys(t.trader for t in self._transactions))

    def traders_in_city(self, city: str) -> List[Trader]:
        """Traders currently based in ``city``, sorted by name"""
        in_city = [trader for trader in self.traders() if trader.city == city]
        return sorted(in_city, key=lambda trader: trader.name)

    def has_trader_in_city(self, city: str) -> bool:
        """Check if any trader is based in ``city``"""
        return len(self.traders_in_city(city)) > 0

    def transactions_by_year(self) -> Dict[int, List[Transaction]]:
        """Group transactions by year, keeping insertion order within a year"""
        by_year: Dict[int, List[Transaction]] = {}
        for transaction in self._transactions:
            by_year.setdefault(transaction.year, []).append(transaction)
        return by_year

    def relocate_traders(self, from_city: str, to_city: str) -> List[Trader]:
        """Move every trader based in ``from_city`` to ``to_city``.

        The change is made on the shared trader objects, so it shows up
        through every transaction that references them.

        Returns:
            The relocated traders, sorted by name.
        """
        relocated = self.traders_in_city(from_city)
        for trader in relocated:
            trader.relocate(to_city)

        if relocated:
            logger.info("Relocated %d trader(s) from %s to %s",
                        len(relocated), from_city, to_city)
        return relocated

    def highest_value(self) -> int:
        """Highest transaction value"""
        if not self._transactions:
            raise EmptyCollectionError("highest value")
        return max(t.value for t in self._transactions)

    def total_value(self) -> int:
        """Sum of all transaction values, 0 when empty"""
        return sum(t.value for t in self._transactions)

    def lowest_value_transaction(self) -> Transaction:
        """Transaction with the lowest value; the earliest one wins ties"""
        if not self._transactions:
            raise EmptyCollectionError("lowest value transaction")
        return min(self._transactions, key=lambda t: t.value)

    def trader_names(self, separator: Optional[str] = None) -> str:
        """Names of all distinct traders, sorted and joined.

        Names are joined with ``config.name_separator`` unless an explicit
        ``separator`` is given. The default separator is the empty string.
        """
        if separator is None:
            separator = self.config.name_separator
        names = sorted(trader.name for trader in self.traders())
        return separator.join(names)

    def to_frame(self) -> pd.DataFrame:
        """Transactions as a pandas DataFrame"""
        return transactions_to_frame(self._transactions)

    def __str__(self) -> str:
        return (f"TransactionStore(Transactions: {self.size()}, "
                f"Traders: {len(self.traders())}, Total: {self.total_value()})")

    def __repr__(self) -> str:
        return self.__str__()
