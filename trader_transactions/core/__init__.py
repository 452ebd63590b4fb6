"""Core components of the trader transactions package."""

from .models import Trader, Transaction
from .exceptions import (
    TraderTransactionsError, EmptyCollectionError, ConfigurationError
)

__all__ = [
    'Trader', 'Transaction',
    'TraderTransactionsError', 'EmptyCollectionError', 'ConfigurationError'
]
