# -*- coding: utf-8 -*-
"""
Tests for WizardController navigation rules and signals.
"""
import json
import random

import pytest

from ui.wizards.framework import WizardController, WizardStep, MemoryWizardStorage

KEY = "k"


@pytest.fixture
def controller(qapp, three_steps, memory_storage):
    controller = WizardController(three_steps, storage_key=KEY, storage=memory_storage)
    controller.initialize()
    return controller


def test_initial_view(controller):
    assert controller.is_initialized
    assert controller.current_step_index == 0
    assert controller.current_step.id == "first"
    assert controller.is_first_step
    assert not controller.is_last_step
    assert not controller.can_go_previous
    assert not controller.can_go_next
    assert controller.progress == pytest.approx(100 / 3)


def test_go_previous_on_first_step_is_noop(controller):
    before = (controller.current_step_index, controller.data)
    assert controller.go_previous() is False
    assert (controller.current_step_index, controller.data) == before


def test_go_next_blocked_by_invalid_required_step(controller):
    assert controller.go_next() is False
    assert controller.current_step_index == 0


def test_go_next_allowed_from_invalid_optional_step(controller):
    controller.set_step_valid("first", True)
    controller.go_next()

    assert controller.current_step.is_optional
    assert controller.go_next() is True
    assert controller.current_step_index == 2


def test_scenario_required_optional_required(controller):
    assert controller.go_next() is False

    controller.set_step_valid("first", True)
    assert controller.go_next() is True
    assert controller.current_step_index == 1

    assert controller.skip() is True
    assert controller.current_step_index == 2
    assert controller.is_last_step

    calls = []
    assert controller.complete(lambda: calls.append(1)) is True
    assert calls == [1]


def test_go_next_never_passes_last_step(controller):
    controller.set_step_valid("first", True)
    controller.set_step_valid("third", True)
    controller.go_to_step(2)

    assert controller.go_next() is False
    assert controller.current_step_index == 2


def test_skip_rejects_required_step(controller):
    assert controller.skip() is False
    assert controller.current_step_index == 0


def test_complete_only_on_last_step(controller):
    calls = []
    assert controller.complete(lambda: calls.append(1)) is False
    assert calls == []


def test_go_to_step_backward_always_allowed(controller):
    controller.set_step_valid("first", True)
    controller.go_to_step(2)
    controller.set_step_valid("first", False)

    assert controller.go_to_step(0) is True
    assert controller.current_step_index == 0


def test_go_to_step_forward_requires_passable_steps(controller):
    assert controller.go_to_step(2) is False

    controller.set_step_valid("first", True)
    assert controller.go_to_step(2) is True


def test_blocking_step_names_first_unpassable_step(controller):
    assert controller.blocking_step(2).id == "first"
    assert controller.blocking_step(0) is None

    controller.set_step_valid("first", True)
    assert controller.blocking_step(2) is None


@pytest.mark.parametrize("index", [-1, 3, 0])
def test_go_to_step_rejects_invalid_or_current_index(controller, index):
    assert controller.go_to_step(index) is False
    assert controller.current_step_index == 0


def test_submitting_blocks_every_verb(controller):
    controller.set_step_valid("first", True)
    controller.go_next()
    controller.set_submitting(True)

    assert controller.go_next() is False
    assert controller.go_previous() is False
    assert controller.skip() is False
    assert controller.go_to_step(0) is False
    assert controller.current_step_index == 1


def test_complete_blocked_while_submitting(controller):
    controller.set_step_valid("first", True)
    controller.go_to_step(2)
    controller.set_submitting(True)

    calls = []
    assert controller.complete(lambda: calls.append(1)) is False
    assert calls == []


def test_update_data_merges(controller):
    controller.update_data({"a": 1})
    controller.update_data({"b": 2})
    assert controller.data == {"a": 1, "b": 2}

    controller.update_data({"a": 3})
    assert controller.data == {"a": 3, "b": 2}


def test_round_trip_through_fresh_session(qapp, three_steps, memory_storage):
    first = WizardController(three_steps, storage_key=KEY, storage=memory_storage)
    first.initialize()
    first.update_data({"x": 5})
    first.set_step_valid("first", True)
    first.go_next()

    second = WizardController(three_steps, storage_key=KEY, storage=memory_storage)
    second.initialize()

    assert second.current_step_index == 1
    assert second.data == {"x": 5}


def test_reset_clears_snapshot(qapp, three_steps, memory_storage):
    first = WizardController(three_steps, storage_key=KEY, initial_data={"x": 0}, storage=memory_storage)
    first.initialize()
    first.update_data({"x": 5})
    first.set_step_valid("first", True)
    first.go_next()
    first.reset()

    assert KEY not in memory_storage

    second = WizardController(three_steps, storage_key=KEY, initial_data={"x": 0}, storage=memory_storage)
    second.initialize()
    assert second.current_step_index == 0
    assert second.data == {"x": 0}


def test_update_steps_clamps_index(controller):
    controller.set_step_valid("first", True)
    controller.go_to_step(2)

    controller.update_steps([WizardStep("only", "Only")])

    assert controller.current_step_index == 0
    assert controller.current_step.id == "only"


def test_index_stays_in_bounds_under_random_calls(qapp):
    rng = random.Random(7)
    steps = [WizardStep(f"s{i}", f"S{i}", is_optional=bool(i % 2)) for i in range(5)]
    controller = WizardController(steps, storage=MemoryWizardStorage())
    controller.initialize()

    for _ in range(300):
        action = rng.choice(["next", "previous", "valid", "steps"])
        if action == "next":
            controller.go_next()
        elif action == "previous":
            controller.go_previous()
        elif action == "valid":
            controller.set_step_valid(rng.choice(steps).id, rng.random() > 0.5)
        else:
            controller.update_steps(steps[:rng.randint(1, len(steps))])
        assert 0 <= controller.current_step_index < len(controller.steps)


def test_set_step_valid_ignores_unknown_id(controller, qtbot):
    with qtbot.assertNotEmitted(controller.steps_changed):
        controller.set_step_valid("missing", True)


def test_set_step_valid_emits_once_per_change(controller, qtbot):
    with qtbot.waitSignal(controller.navigation_changed):
        controller.set_step_valid("first", True)
    with qtbot.assertNotEmitted(controller.steps_changed):
        controller.set_step_valid("first", True)
    assert controller.can_go_next


def test_step_changed_signal(controller, qtbot):
    controller.set_step_valid("first", True)
    with qtbot.waitSignal(controller.step_changed) as blocker:
        controller.go_next()
    assert blocker.args == [0, 1]


def test_data_changed_carries_partial(controller, qtbot):
    with qtbot.waitSignal(controller.data_changed) as blocker:
        controller.update_data({"a": 1})
    assert blocker.args == [{"a": 1}]


def test_submitting_changed_signal(controller, qtbot):
    with qtbot.waitSignal(controller.submitting_changed) as blocker:
        controller.set_submitting(True)
    assert blocker.args == [True]
    assert controller.is_submitting


def test_rehydrated_position_and_snapshot_shape(qapp, three_steps, memory_storage):
    memory_storage.set(KEY, json.dumps({"current_step_index": 1, "data": {"a": 1}}))
    controller = WizardController(three_steps, storage_key=KEY, storage=memory_storage)
    assert not controller.is_initialized

    controller.initialize()
    controller.go_previous()

    assert json.loads(memory_storage.get(KEY)) == {"current_step_index": 0, "data": {"a": 1}}


def test_index_of(controller):
    assert controller.index_of("third") == 2
    assert controller.index_of("missing") == -1
