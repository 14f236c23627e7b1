"""Tests for the JSON trade loader and the toml configuration.

**Feature: trade-analytics**
"""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from optiontracker.config import CONFIG_ENV_VAR, DEFAULT_CONFIG, currency_symbol, get_config_path, load_config
from optiontracker.loader import load_trades, parse_trades
from optiontracker.models import StrategyType

CAMEL_TRADE = {
    "id": "t-1",
    "ticker": "aapl",
    "strategyType": "Cash-Secured Put",
    "tradeDate": "2024-03-04",
    "expirationDate": "2024-03-15",
    "premiumPerContract": "1.50",
    "quantity": 2,
    "isClosed": True,
    "realizedPL": "-42.10",
}


class TestLoadTrades:
    """Trade snapshots read from JSON files."""

    def test_camel_case_list(self, tmp_path: Path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps([CAMEL_TRADE]))

        (trade,) = load_trades(path)

        assert trade.id == "t-1"
        assert trade.ticker == "AAPL"
        assert trade.strategy_type == StrategyType.CASH_SECURED_PUT
        assert trade.trade_date == date(2024, 3, 4)
        assert trade.realized_pl == Decimal("-42.10")
        assert trade.total_premium == Decimal("300.00")
        assert trade.is_realized

    def test_wrapped_snake_case(self):
        payload = {
            "trades": [
                {
                    "ticker": "SPY",
                    "strategy_type": "Put",
                    "trade_date": "2024-03-04",
                    "expiration_date": "2024-04-19",
                    "premium_per_contract": 3,
                    "quantity": 1,
                    "total_premium": "299.00",
                }
            ]
        }

        (trade,) = parse_trades(payload)

        assert trade.total_premium == Decimal("299.00")
        assert not trade.is_closed
        assert trade.realized_pl is None
        assert trade.id

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_trades(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "trades.json"
        path.write_text("{not json")

        with pytest.raises(ValueError):
            load_trades(path)

    def test_invalid_trade(self):
        with pytest.raises(ValueError):
            parse_trades([dict(CAMEL_TRADE, quantity=0)])

    def test_wrong_shape(self):
        with pytest.raises(ValueError, match="list of trades"):
            parse_trades({"rows": []})

    def test_trades_are_frozen(self):
        (trade,) = parse_trades([CAMEL_TRADE])

        with pytest.raises(ValueError):
            trade.realized_pl = Decimal("1")


class TestConfig:
    """Settings file merged over defaults."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "nope.toml") == DEFAULT_CONFIG

    def test_overrides_merge(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text('[display]\ncurrency = "EUR"\n\n[analytics]\ntop_count = 5\n')

        config = load_config(path)

        assert config["display"]["currency"] == "EUR"
        assert config["analytics"]["top_count"] == 5
        assert config["analytics"]["default_window"] == "Max"
        assert DEFAULT_CONFIG["display"]["currency"] == "USD"

    def test_unreadable_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text("[display\ncurrency = ")

        assert load_config(path) == DEFAULT_CONFIG

    def test_env_var_overrides_path(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.toml"))

        assert get_config_path() == tmp_path / "custom.toml"

    def test_currency_symbol(self):
        assert currency_symbol({"display": {"currency": "usd"}}) == "$"
        assert currency_symbol({"display": {"currency": "CHF"}}) == "CHF "
        assert currency_symbol({}) == "$"
