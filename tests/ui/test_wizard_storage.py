# -*- coding: utf-8 -*-
"""
Tests for the wizard snapshot stores.
"""
import pytest
from PyQt5.QtCore import QSettings

from ui.wizards.framework import (
    MemoryWizardStorage,
    FileWizardStorage,
    SettingsWizardStorage,
    create_wizard_storage,
)


def test_memory_storage_round_trip():
    storage = MemoryWizardStorage()
    assert storage.get("key") is None

    storage.set("key", "value")
    assert storage.get("key") == "value"
    assert "key" in storage

    storage.delete("key")
    assert storage.get("key") is None


def test_memory_storage_delete_missing_key():
    storage = MemoryWizardStorage()
    storage.delete("missing")
    assert storage.keys() == []


def test_file_storage_writes_one_file_per_key(tmp_path):
    storage = FileWizardStorage(tmp_path)
    storage.set("production-wizard", '{"a": 1}')

    assert (tmp_path / "production-wizard.json").read_text(encoding="utf-8") == '{"a": 1}'
    assert storage.get("production-wizard") == '{"a": 1}'


def test_file_storage_sanitizes_key(tmp_path):
    storage = FileWizardStorage(tmp_path)
    storage.set("../escape/key", "x")

    assert storage.get("../escape/key") == "x"
    assert list(tmp_path.iterdir()) == [tmp_path / ".._escape_key.json"]


def test_file_storage_delete(tmp_path):
    storage = FileWizardStorage(tmp_path)
    storage.set("k", "v")
    storage.delete("k")
    storage.delete("k")

    assert storage.get("k") is None


def test_settings_storage_round_trip(qapp, tmp_path):
    settings = QSettings(str(tmp_path / "wizards.ini"), QSettings.IniFormat)
    storage = SettingsWizardStorage(settings)

    storage.set("sequestration-wizard", '{"data": {}}')
    assert storage.get("sequestration-wizard") == '{"data": {}}'

    storage.delete("sequestration-wizard")
    assert storage.get("sequestration-wizard") is None


def test_factory_by_name(tmp_path):
    assert isinstance(create_wizard_storage("memory"), MemoryWizardStorage)
    assert isinstance(create_wizard_storage("FILE"), FileWizardStorage)


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        create_wizard_storage("redis")


def test_file_storage_keys_differing_in_unsafe_chars_share_a_file(tmp_path):
    storage = FileWizardStorage(tmp_path)
    storage.set("a/b", "first")
    storage.set("a_b", "second")

    assert storage.get("a/b") == "second"
    assert [p.name for p in tmp_path.iterdir()] == ["a_b.json"]
