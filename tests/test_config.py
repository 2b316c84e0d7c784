"""Tests for configuration loading."""

import json

import pytest

from storefront.config import DEFAULT_CART_STORAGE_KEY, load_env, validate_currency


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DATABASE_URL", "SECRET_KEY", "LOG_LEVEL", "CURRENCY", "CART_STORAGE_KEY", "STOREFRONT_DATA_DIR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("storefront.config.load_dotenv", lambda: False)


def test_defaults(tmp_path):
    config = load_env(tmp_path)

    assert config.database_url == "sqlite:///data/app.db"
    assert config.currency == "EUR"
    assert config.log_level == "INFO"
    assert config.cart_storage_key == DEFAULT_CART_STORAGE_KEY
    assert config.settings_file == tmp_path / "settings.json"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("CURRENCY", "usd")
    monkeypatch.setenv("CART_STORAGE_KEY", "basket")

    config = load_env(tmp_path)

    assert config.currency == "USD"
    assert config.cart_storage_key == "basket"


def test_settings_file_wins_over_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("CURRENCY", "USD")
    (tmp_path / "settings.json").write_text(json.dumps({"CURRENCY": "GBP"}), encoding="utf-8")

    assert load_env(tmp_path).currency == "GBP"


def test_malformed_settings_file(tmp_path):
    (tmp_path / "settings.json").write_text("not json", encoding="utf-8")

    with pytest.raises(ValueError):
        load_env(tmp_path)


def test_invalid_currency():
    with pytest.raises(ValueError):
        validate_currency("EURO")


def test_invalid_log_level(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError):
        load_env(tmp_path)
