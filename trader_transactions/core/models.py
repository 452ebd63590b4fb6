"""
Core data models for trader transactions.
Contains the trader and transaction dataclasses.
"""

from dataclasses import dataclass


@dataclass(eq=False)
class Trader:
    """A trader based in a city.

    Equality and hashing are by identity: two traders sharing a name are
    still different traders unless they are the same object.
    """
    name: str
    city: str

    def relocate(self, city: str) -> None:
        """Move the trader to another city"""
        self.city = city

    def __str__(self) -> str:
        return f"Trader({self.name} in {self.city})"


@dataclass(frozen=True)
class Transaction:
    """A trade made by a trader in a given year"""
    trader: Trader
    year: int
    value: int

    def __str__(self) -> str:
        return f"Transaction({self.year}: {self.trader.name} {self.value})"
