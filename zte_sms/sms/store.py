"""
Durable storage for the last-seen SMS fingerprint.

Every store exposes the same two-method slot interface::

    get(name) -> str | None
    set(name, value) -> None
"""

import json
import sys
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..config import DEFAULT_STATE_FILE, REGISTRY_KEY_PATH
from ..logging_setup import log


@runtime_checkable
class PersistenceSlot(Protocol):
    """Named string values that survive between runs."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...


class MemoryStore:
    """In-process store, forgotten on exit."""

    def __init__(self, initial: dict | None = None):
        self._values = dict(initial or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value


class JsonFileStore:
    """Values kept as one JSON object in a file on disk."""

    def __init__(self, path: Path = DEFAULT_STATE_FILE):
        self.path = Path(path)

    def _load(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable state file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, name: str) -> str | None:
        value = self._load().get(name)
        return value if isinstance(value, str) else None

    def set(self, name: str, value: str) -> None:
        data = self._load()
        data[name] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        log.debug("Saved %s → %s", name, self.path)


class RegistryStore:
    """HKEY_CURRENT_USER registry values (Windows only)."""

    def __init__(self, key_path: str = REGISTRY_KEY_PATH):
        if sys.platform != "win32":
            raise OSError("The registry store is only available on Windows")
        import winreg
        self._winreg = winreg
        self.key_path = key_path

    def get(self, name: str) -> str | None:
        winreg = self._winreg
        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, self.key_path) as key:
                value, _ = winreg.QueryValueEx(key, name)
        except FileNotFoundError:
            return None
        return str(value)

    def set(self, name: str, value: str) -> None:
        winreg = self._winreg
        with winreg.CreateKey(winreg.HKEY_CURRENT_USER, self.key_path) as key:
            winreg.SetValueEx(key, name, 0, winreg.REG_SZ, value)
