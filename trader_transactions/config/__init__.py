"""Configuration for the transaction store."""

from .store_config import StoreConfig, LOG_FORMAT, LOG_LEVELS

__all__ = ['StoreConfig', 'LOG_FORMAT', 'LOG_LEVELS']
