# -*- coding: utf-8 -*-
"""
Tests for WizardState: data bag, position and snapshot persistence.
"""
import json

import pytest

from ui.wizards.framework import WizardState, WizardStep, MemoryWizardStorage, FileWizardStorage
from ui.wizards.framework.wizard_storage import WizardStorage

KEY = "test-wizard"


class FailingStorage(WizardStorage):
    """Every write fails."""

    def __init__(self):
        self.deleted = []

    def get(self, key):
        return None

    def set(self, key, value):
        raise OSError("disk full")

    def delete(self, key):
        self.deleted.append(key)


class UnreachableStorage(WizardStorage):
    """Every read and delete fails."""

    def get(self, key):
        raise OSError("permission denied")

    def set(self, key, value):
        pass

    def delete(self, key):
        raise OSError("permission denied")


def make_state(steps, storage=None, initial_data=None, key=KEY):
    state = WizardState(steps, storage_key=key, initial_data=initial_data,
                        storage=storage if storage is not None else MemoryWizardStorage())
    state.initialize()
    return state


def test_starts_at_first_step_with_initial_data(three_steps):
    state = make_state(three_steps, initial_data={"production_date": "2026-01-05"})

    assert state.current_step_index == 0
    assert state.data == {"production_date": "2026-01-05"}
    assert [s.id for s in state.steps] == ["first", "second", "third"]


def test_update_data_merges(three_steps):
    state = make_state(three_steps, initial_data={"a": 1})
    state.update_data({"b": 2})
    state.update_data({"a": 3})

    assert state.data == {"a": 3, "b": 2}


def test_data_property_is_a_copy(three_steps):
    state = make_state(three_steps)
    state.data["leak"] = True

    assert "leak" not in state.data


def test_snapshot_written_on_every_mutation(three_steps, memory_storage):
    state = make_state(three_steps, storage=memory_storage)
    state.update_data({"input_feedstock_weight_tonnes": 12.5})
    state.set_current_step_index(1)

    stored = json.loads(memory_storage.get(KEY))
    assert stored == {"current_step_index": 1, "data": {"input_feedstock_weight_tonnes": 12.5}}


def test_resumes_from_snapshot(three_steps, memory_storage):
    memory_storage.set(KEY, json.dumps({"current_step_index": 2, "data": {"a": 1}}))
    state = make_state(three_steps, storage=memory_storage, initial_data={"a": 0, "b": 0})

    assert state.current_step_index == 2
    assert state.data == {"a": 1}


def test_no_write_before_initialize(three_steps, memory_storage):
    state = WizardState(three_steps, storage_key=KEY, storage=memory_storage)
    state.update_data({"a": 1})

    assert memory_storage.get(KEY) is None


def test_initialize_is_idempotent(three_steps, memory_storage):
    state = make_state(three_steps, storage=memory_storage)
    state.update_data({"a": 1})
    memory_storage.set(KEY, json.dumps({"current_step_index": 2, "data": {"other": True}}))

    state.initialize()

    assert state.data == {"a": 1}
    assert state.current_step_index == 0


@pytest.mark.parametrize("raw", [
    "{not json",
    "[1, 2, 3]",
    json.dumps({"current_step_index": "2", "data": {}}),
    json.dumps({"current_step_index": True, "data": {}}),
    json.dumps({"current_step_index": 1, "data": []}),
    json.dumps({"data": {}}),
])
def test_corrupt_snapshot_is_discarded(three_steps, memory_storage, raw):
    memory_storage.set(KEY, raw)
    state = make_state(three_steps, storage=memory_storage, initial_data={"a": 0})

    assert state.current_step_index == 0
    assert state.data == {"a": 0}


def test_out_of_range_snapshot_index_is_clamped(three_steps, memory_storage):
    memory_storage.set(KEY, json.dumps({"current_step_index": 9, "data": {}}))
    state = make_state(three_steps, storage=memory_storage)

    assert state.current_step_index == 2


def test_resolve_steps_runs_before_clamping(memory_storage):
    full = [WizardStep("a", "A"), WizardStep("b", "B"), WizardStep("c", "C"), WizardStep("d", "D")]
    memory_storage.set(KEY, json.dumps({"current_step_index": 3, "data": {"long": True}}))

    state = WizardState(full[:3], storage_key=KEY, storage=memory_storage)
    state.initialize(lambda data: full if data.get("long") else full[:3])

    assert state.current_step_index == 3
    assert len(state.steps) == 4


def test_update_steps_clamps_when_shrinking(three_steps, memory_storage):
    state = make_state(three_steps, storage=memory_storage)
    state.set_current_step_index(2)

    state.update_steps(three_steps[:2])

    assert state.current_step_index == 1
    assert json.loads(memory_storage.get(KEY))["current_step_index"] == 1


def test_update_steps_rejects_duplicates(three_steps):
    state = make_state(three_steps)
    with pytest.raises(ValueError):
        state.update_steps([three_steps[0], three_steps[0]])


def test_reset_restores_initial_values_and_deletes_snapshot(three_steps, memory_storage):
    state = make_state(three_steps, storage=memory_storage, initial_data={"a": 0})
    state.update_data({"a": 1, "b": 2})
    state.set_current_step_index(2)
    state.update_steps(three_steps[:2])

    state.reset()

    assert state.current_step_index == 0
    assert state.data == {"a": 0}
    assert len(state.steps) == 3
    assert KEY not in memory_storage


def test_no_storage_key_never_persists(three_steps, memory_storage):
    state = make_state(three_steps, storage=memory_storage, key=None)
    state.update_data({"a": 1})

    assert memory_storage.keys() == []


def test_write_failure_is_swallowed(three_steps):
    storage = FailingStorage()
    state = make_state(three_steps, storage=storage)

    state.update_data({"a": 1})
    state.set_current_step_index(1)

    assert state.data == {"a": 1}
    assert state.current_step_index == 1


def test_unserializable_values_are_stringified(three_steps, memory_storage):
    from datetime import date

    state = make_state(three_steps, storage=memory_storage)
    state.update_data({"production_date": date(2026, 1, 5)})

    assert json.loads(memory_storage.get(KEY))["data"]["production_date"] == "2026-01-05"


def test_undecodable_snapshot_file_is_discarded(three_steps, tmp_path):
    (tmp_path / f"{KEY}.json").write_bytes(b"\xff\xfe{not utf8")
    state = make_state(three_steps, storage=FileWizardStorage(tmp_path), initial_data={"x": 1})

    assert state.is_initialized
    assert state.current_step_index == 0
    assert state.data == {"x": 1}


def test_read_failure_starts_from_initial_values(three_steps):
    state = make_state(three_steps, storage=UnreachableStorage(), initial_data={"x": 1})

    assert state.is_initialized
    assert state.current_step_index == 0
    assert state.data == {"x": 1}


def test_delete_failure_on_reset_is_swallowed(three_steps):
    state = make_state(three_steps, storage=UnreachableStorage(), initial_data={"x": 1})
    state.update_data({"x": 2})
    state.set_current_step_index(2)

    state.reset()

    assert state.current_step_index == 0
    assert state.data == {"x": 1}
