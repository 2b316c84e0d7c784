import os
from dataclasses import dataclass
from pathlib import Path
import json
from typing import Optional

from dotenv import load_dotenv


DEFAULT_CART_STORAGE_KEY = "cart-storage"


@dataclass
class AppConfig:
    database_url: str
    secret_key: str
    log_level: str
    currency: str
    cart_storage_key: str
    data_dir: Path

    @property
    def settings_file(self) -> Path:
        return self.data_dir / "settings.json"


def validate_currency(value: Optional[str]) -> str:
    v = (value or "EUR").strip().upper()
    if len(v) != 3:
        raise ValueError("Invalid currency code: expected ISO4217 length 3")
    return v


def validate_log_level(value: Optional[str]) -> str:
    v = (value or "INFO").strip().upper()
    if v not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        raise ValueError(f"Invalid log level: {value}")
    return v


def _default_data_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "data"


def _load_settings_file(data_dir: Path) -> dict:
    path = data_dir / "settings.json"
    if not path.exists():
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"settings file is not valid JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"settings file must hold an object: {path}")
    return payload


def load_env(data_dir: Optional[Path] = None) -> AppConfig:
    # data/settings.json wins, then environment (.env included), then defaults
    load_dotenv()
    data_dir = Path(data_dir or os.getenv("STOREFRONT_DATA_DIR") or _default_data_dir())
    s = _load_settings_file(data_dir)
    database_url = s.get("DATABASE_URL") or os.getenv("DATABASE_URL", "sqlite:///data/app.db")
    secret_key = os.getenv("SECRET_KEY", "dev_secret")
    log_level = validate_log_level(s.get("LOG_LEVEL") or os.getenv("LOG_LEVEL"))
    currency = validate_currency(s.get("CURRENCY") or os.getenv("CURRENCY"))
    cart_storage_key = (
        s.get("CART_STORAGE_KEY") or os.getenv("CART_STORAGE_KEY") or DEFAULT_CART_STORAGE_KEY
    ).strip()
    return AppConfig(
        database_url=database_url,
        secret_key=secret_key,
        log_level=log_level,
        currency=currency,
        cart_storage_key=cart_storage_key,
        data_dir=data_dir,
    )
