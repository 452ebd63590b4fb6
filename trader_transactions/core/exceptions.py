"""
Custom exceptions for the trader transactions package.
"""


class TraderTransactionsError(Exception):
    """Base exception for trader transactions"""
    pass


class EmptyCollectionError(TraderTransactionsError, ValueError):
    """Raised when an aggregate needs at least one transaction"""
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot compute {operation} of an empty transaction store")


class ConfigurationError(TraderTransactionsError):
    """Raised when store configuration cannot be loaded"""
    pass
