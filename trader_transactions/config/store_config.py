"""
Store configuration loading and logging setup.
"""

from dataclasses import dataclass, asdict
import json
import logging
import os

from ..core.exceptions import ConfigurationError


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

ENV_NAME_SEPARATOR = 'TRADER_TRANSACTIONS_NAME_SEPARATOR'
ENV_LOG_LEVEL = 'TRADER_TRANSACTIONS_LOG_LEVEL'

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


@dataclass
class StoreConfig:
    """Settings for a transaction store"""
    # Joined between trader names; empty keeps names run together
    name_separator: str = ""

    log_level: str = "WARNING"

    def __post_init__(self):
        for name in ('name_separator', 'log_level'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string, got {type(value).__name__}"
                )

    @classmethod
    def from_file(cls, config_path: str) -> 'StoreConfig':
        """Load configuration from JSON file"""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return cls(**data)
        except (OSError, ValueError, TypeError) as e:
            raise ConfigurationError(f"Failed to load store config from {config_path}: {e}")

    def save_to_file(self, config_path: str):
        """Save configuration to JSON file"""
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def from_env(cls) -> 'StoreConfig':
        """Create configuration from environment variables"""
        defaults = cls()
        return cls(
            name_separator=os.getenv(ENV_NAME_SEPARATOR, defaults.name_separator),
            log_level=os.getenv(ENV_LOG_LEVEL, defaults.log_level)
        )

    def configure_logging(self) -> None:
        """Apply the configured log level to the root logger"""
        name = self.log_level.upper()
        if name not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

        logging.basicConfig(level=getattr(logging, name), format=LOG_FORMAT)
