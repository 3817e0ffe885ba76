"""
Configuration classes for the inventory tracker.
Defines store defaults in a type-safe, extensible way, with environment overrides.
"""

import os
from dataclasses import dataclass

from models.errors import ValidationError
from utils.env import load_project_dotenv

ENV_PREFIX = "INVENTORY_"


@dataclass
class StoreConfig:
    low_stock_threshold: int = 10
    out_of_stock_threshold: int = 0
    expiring_soon_days: int = 7
    csv_line_separator: str = "\n"
    currency_symbol: str = "$"

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """
        Build a config from ``INVENTORY_*`` environment variables.
        The project ``.env`` is loaded first; variables already set in the
        environment take precedence over it.
        """
        load_project_dotenv()
        defaults = cls()
        return cls(
            low_stock_threshold=_env_int("LOW_STOCK_THRESHOLD", defaults.low_stock_threshold),
            out_of_stock_threshold=_env_int("OUT_OF_STOCK_THRESHOLD", defaults.out_of_stock_threshold),
            expiring_soon_days=_env_int("EXPIRING_SOON_DAYS", defaults.expiring_soon_days),
            currency_symbol=os.getenv(f"{ENV_PREFIX}CURRENCY_SYMBOL", defaults.currency_symbol),
        )


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{key}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from exc


# Example usage:
# store = Store(name="Corner Shop", config=StoreConfig.from_env())
