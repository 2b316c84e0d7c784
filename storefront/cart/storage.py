"""Key-value stores the cart persists itself into.

Every backend is addressed by string keys and holds string values, the same
contract a browser's session storage offers.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, MutableMapping, Optional


class CartStorage(ABC):
    """Interface for session-scoped durable key-value storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage(CartStorage):
    """Process-local storage; survives as long as the object does."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(CartStorage):
    """Stores all keys in a single JSON object on disk."""

    def __init__(self, data_file: Path) -> None:
        self._data_file = Path(data_file)

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._write(data)

    def _load(self) -> Dict[str, str]:
        if not self._data_file.exists():
            return {}
        raw = self._data_file.read_bytes()
        try:
            text = raw.decode("utf-8")
            if not text.strip():
                return {}
            payload = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError):
            # the cart treats an unreadable file like a missing one
            return {}
        return payload if isinstance(payload, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self._data_file.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(data, ensure_ascii=False, indent=2)
        self._data_file.write_text(content + "\n", encoding="utf-8")


class SessionStorage(CartStorage):
    """Adapter over a mapping such as ``flask.session``.

    Writes reassign the key so that Flask notices the session was modified.
    """

    def __init__(self, session: MutableMapping) -> None:
        self._session = session

    def get_item(self, key: str) -> Optional[str]:
        value = self._session.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        self._session[key] = value

    def remove_item(self, key: str) -> None:
        self._session.pop(key, None)
