from unittest.mock import patch

import pytest

from config.config import StoreConfig
from models.errors import ValidationError

ENV_KEYS = [
    "INVENTORY_LOW_STOCK_THRESHOLD",
    "INVENTORY_OUT_OF_STOCK_THRESHOLD",
    "INVENTORY_EXPIRING_SOON_DAYS",
    "INVENTORY_CURRENCY_SYMBOL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_store_config_defaults():
    """Test StoreConfig initializes with correct default values."""
    config = StoreConfig()
    assert config.low_stock_threshold == 10
    assert config.out_of_stock_threshold == 0
    assert config.expiring_soon_days == 7
    assert config.csv_line_separator == "\n"
    assert config.currency_symbol == "$"


def test_store_config_custom():
    """Test StoreConfig initialization with custom values."""
    config = StoreConfig(low_stock_threshold=5, currency_symbol="€")
    assert config.low_stock_threshold == 5
    assert config.currency_symbol == "€"
    # Check a default value is still correct
    assert config.expiring_soon_days == 7


@patch("config.config.load_project_dotenv")
def test_from_env_defaults(mock_load_dotenv, clean_env):
    config = StoreConfig.from_env()
    mock_load_dotenv.assert_called_once()
    assert config == StoreConfig()


@patch("config.config.load_project_dotenv")
def test_from_env_overrides(mock_load_dotenv, clean_env):
    clean_env.setenv("INVENTORY_LOW_STOCK_THRESHOLD", "25")
    clean_env.setenv("INVENTORY_OUT_OF_STOCK_THRESHOLD", "2")
    clean_env.setenv("INVENTORY_EXPIRING_SOON_DAYS", " 3 ")
    clean_env.setenv("INVENTORY_CURRENCY_SYMBOL", "£")

    config = StoreConfig.from_env()

    assert config.low_stock_threshold == 25
    assert config.out_of_stock_threshold == 2
    assert config.expiring_soon_days == 3
    assert config.currency_symbol == "£"


@patch("config.config.load_project_dotenv")
def test_from_env_blank_value_uses_default(mock_load_dotenv, clean_env):
    clean_env.setenv("INVENTORY_LOW_STOCK_THRESHOLD", "")
    assert StoreConfig.from_env().low_stock_threshold == 10


@patch("config.config.load_project_dotenv")
def test_from_env_rejects_non_integer(mock_load_dotenv, clean_env):
    clean_env.setenv("INVENTORY_EXPIRING_SOON_DAYS", "a week")
    with pytest.raises(ValidationError, match="INVENTORY_EXPIRING_SOON_DAYS must be an integer"):
        StoreConfig.from_env()
