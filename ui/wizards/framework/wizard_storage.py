# -*- coding: utf-8 -*-
"""
Wizard Storage - Key-value persistence for wizard snapshots.

The engine only needs get/set/delete by string key with string values.
Adapters:
- MemoryWizardStorage: dict-backed (tests, ephemeral sessions)
- SettingsWizardStorage: QSettings, survives application restarts
- FileWizardStorage: one JSON file per key under Config.DRAFTS_DIR
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from PyQt5.QtCore import QSettings

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardStorage(ABC):
    """Port implemented by every snapshot store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is missing."""
        pass

    @abstractmethod
    def set(self, key: str, value: str):
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str):
        """Remove key. Deleting a missing key is not an error."""
        pass


class MemoryWizardStorage(WizardStorage):
    """In-memory storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str):
        self._values[key] = value

    def delete(self, key: str):
        self._values.pop(key, None)

    def keys(self):
        return list(self._values.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._values


class SettingsWizardStorage(WizardStorage):
    """
    QSettings-backed storage.

    Values live under the "wizard/" group of the application settings.
    """

    GROUP = "wizard"

    def __init__(self, settings: Optional[QSettings] = None):
        self.settings = settings or QSettings(
            Config.SETTINGS_ORGANIZATION,
            Config.SETTINGS_APPLICATION
        )

    def _full_key(self, key: str) -> str:
        return f"{self.GROUP}/{key}"

    def get(self, key: str) -> Optional[str]:
        value = self.settings.value(self._full_key(key))
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str):
        self.settings.setValue(self._full_key(key), value)
        self._sync()

    def delete(self, key: str):
        self.settings.remove(self._full_key(key))
        self._sync()

    def _sync(self):
        self.settings.sync()
        if self.settings.status() != QSettings.NoError:
            raise OSError(f"QSettings sync failed (status {self.settings.status()})")


class FileWizardStorage(WizardStorage):
    """
    One file per key in a drafts directory.

    Characters outside [A-Za-z0-9_.-] are replaced with "_" in file names, so
    keys differing only in such characters (e.g. "a/b" and "a_b") share a file.
    """

    _UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")

    def __init__(self, directory: Optional[Path] = None):
        self.directory = Path(directory) if directory else Config.DRAFTS_DIR

    def _path(self, key: str) -> Path:
        return self.directory / f"{self._UNSAFE_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str):
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def delete(self, key: str):
        path = self._path(key)
        if path.exists():
            path.unlink()


_BACKENDS = {
    "settings": SettingsWizardStorage,
    "file": FileWizardStorage,
    "memory": MemoryWizardStorage,
}


def create_wizard_storage(backend: Optional[str] = None) -> WizardStorage:
    """
    Create the storage adapter selected by name or by Config.

    Args:
        backend: "settings", "file" or "memory" (defaults to Config.WIZARD_STORAGE_BACKEND)

    Raises:
        ValueError: If the backend name is unknown
    """
    name = (backend or Config.WIZARD_STORAGE_BACKEND).lower()
    storage_class = _BACKENDS.get(name)
    if storage_class is None:
        raise ValueError(
            f"Unknown wizard storage backend: {name}. "
            f"Must be one of {', '.join(sorted(_BACKENDS))}"
        )
    logger.debug(f"Using {storage_class.__name__} for wizard snapshots")
    return storage_class()
