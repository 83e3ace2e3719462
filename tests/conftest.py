# -*- coding: utf-8 -*-
"""Shared fixtures for the test suite."""
import os
import sys
from pathlib import Path

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ui.wizards.framework import WizardStep, MemoryWizardStorage  # noqa: E402


@pytest.fixture
def memory_storage():
    return MemoryWizardStorage()


@pytest.fixture
def three_steps():
    """Required, optional, required."""
    return [
        WizardStep("first", "First"),
        WizardStep("second", "Second", is_optional=True),
        WizardStep("third", "Third"),
    ]


class FakeApiClient:
    """Records submissions; raises `error` when set."""

    def __init__(self, error=None, result=None):
        self.error = error
        self.result = result if result is not None else {"id": "new-id"}
        self.calls = []

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if self.error is not None:
            raise self.error
        return self.result

    def create_production_batch(self, payload):
        return self._call("create_production_batch", payload)

    def update_production_batch(self, batch_id, payload):
        return self._call("update_production_batch", batch_id, payload)

    def create_sequestration_event(self, payload):
        return self._call("create_sequestration_event", payload)

    def update_sequestration_event(self, event_id, payload):
        return self._call("update_sequestration_event", event_id, payload)


@pytest.fixture
def fake_api_client():
    return FakeApiClient()
