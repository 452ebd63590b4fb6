"""
Trader Transactions - an in-memory query layer over trader transactions.

This package provides:
- Trader and transaction models with shared, identity-based traders
- A transaction store with filtering, grouping and aggregate queries
- Trader relocation across every transaction that references them
- pandas reporting views
"""

__version__ = "1.0.0"
__author__ = "Trader Transactions Team"

from .core.models import Trader, Transaction
from .core.exceptions import TraderTransactionsError, EmptyCollectionError, ConfigurationError
from .config.store_config import StoreConfig
from .store.transaction_store import TransactionStore
from .reporting.frames import transactions_to_frame, yearly_summary

# Convenience factory functions
def create_store(transactions: list = None, config: StoreConfig = None) -> TransactionStore:
    """Create a transaction store, optionally pre-filled"""
    return TransactionStore(transactions, config)

__all__ = [
    # Core models
    'Trader', 'Transaction',
    # Errors
    'TraderTransactionsError', 'EmptyCollectionError', 'ConfigurationError',
    # Main components
    'StoreConfig', 'TransactionStore',
    # Reporting
    'transactions_to_frame', 'yearly_summary',
    # Convenience functions
    'create_store'
]
