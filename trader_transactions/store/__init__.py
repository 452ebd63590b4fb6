"""In-memory transaction store and queries."""

from .transaction_store import TransactionStore

__all__ = ['TransactionStore']
