# -*- coding: utf-8 -*-
"""
Tests for the Sequestration Event Wizard, including the conditional
Storage Details step.
"""
import json

import pytest
from PyQt5.QtCore import Qt

from app.config import StorageKeys
from ui.wizards.framework import MemoryWizardStorage
from ui.wizards.sequestration import SequestrationWizard, sequestration_steps
from ui.wizards.sequestration.steps.summary_step import sequestration_summary

KEY = StorageKeys.SEQUESTRATION_WIZARD

BATCHES = [
    {"id": "b1", "production_date": "2026-01-05", "output_biochar_weight_tonnes": 3},
    {"id": "b2", "production_date": "2026-01-12", "output_biochar_weight_tonnes": 4.5},
]


@pytest.fixture
def storage():
    return MemoryWizardStorage()


@pytest.fixture
def wizard(qtbot, storage, fake_api_client):
    wizard = SequestrationWizard(batch_options=BATCHES, api_client=fake_api_client, storage=storage)
    qtbot.addWidget(wizard)
    return wizard


def step_ids(wizard):
    return [step.id for step in wizard.controller.steps]


def fill_delivery(wizard, sequestration_type="soil"):
    step = wizard.step_widgets["delivery_info"]
    step.delivery_date_input.set_date_text("2026-03-01")
    step.postcode_input.setText("AB1 2CD")
    step.type_combo.setCurrentIndex(step.type_combo.findData(sequestration_type))
    return step


def test_storage_details_hidden_by_default(wizard):
    assert step_ids(wizard) == ["storage_flag", "batch_linkage", "delivery_info", "regulatory", "summary"]
    assert wizard.controller.can_go_next
    assert len(wizard.stepper.indicators) == 5


def test_storage_flag_adds_and_removes_step(wizard):
    flag = wizard.step_widgets["storage_flag"].storage_checkbox

    flag.setChecked(True)
    assert step_ids(wizard)[1] == "storage_details"
    assert len(wizard.stepper.indicators) == 6
    assert wizard.controller.data["storage_before_delivery"] is True

    flag.setChecked(False)
    assert "storage_details" not in step_ids(wizard)
    assert len(wizard.stepper.indicators) == 5


def test_storage_details_must_be_completed(wizard):
    wizard.step_widgets["storage_flag"].storage_checkbox.setChecked(True)
    assert wizard.controller.go_next()
    assert wizard.controller.current_step.id == "storage_details"
    assert not wizard.controller.can_go_next

    details = wizard.step_widgets["storage_details"]
    details.location_input.setText("Warehouse A")
    details.start_date_input.set_date_text("2026-02-01")
    details.end_date_input.set_date_text("2026-02-10")
    details.container_input.setText("BAG-001")

    assert wizard.controller.can_go_next
    assert wizard.controller.data["storage_conditions"] == "indoor"


def test_storage_end_before_start_blocks_next(wizard):
    wizard.step_widgets["storage_flag"].storage_checkbox.setChecked(True)
    wizard.controller.go_next()

    details = wizard.step_widgets["storage_details"]
    details.location_input.setText("Warehouse A")
    details.start_date_input.set_date_text("2026-02-10")
    details.end_date_input.set_date_text("2026-02-01")
    details.container_input.setText("BAG-001")

    assert not wizard.controller.can_go_next
    assert "on or after" in details.last_result.errors[0]


def test_batch_selection_defaults_to_full_output(wizard):
    wizard.controller.go_next()
    linkage = wizard.step_widgets["batch_linkage"]
    assert not wizard.controller.can_go_next

    checkbox, quantity = linkage.rows["b2"]
    checkbox.setChecked(True)

    assert quantity.value() == pytest.approx(4.5)
    assert wizard.controller.data["production_batches"] == [
        {"production_batch_id": "b2", "quantity_tonnes": 4.5}
    ]
    assert wizard.controller.can_go_next
    assert linkage.total_label.text() == "Total biochar selected: 4.5 tonnes"


def test_other_type_field_visibility(wizard):
    step = wizard.step_widgets["delivery_info"]
    step.initialize()

    step.type_combo.setCurrentIndex(step.type_combo.findData("other"))
    assert not step.other_input.isHidden()

    step.type_combo.setCurrentIndex(step.type_combo.findData("soil"))
    assert step.other_input.isHidden()


def test_resume_inside_conditional_step_is_not_clamped(qtbot, storage, fake_api_client):
    storage.set(KEY, json.dumps({
        "current_step_index": 5,
        "data": {"storage_before_delivery": True, "notes": "resumed"},
    }))
    wizard = SequestrationWizard(batch_options=BATCHES, api_client=fake_api_client, storage=storage)
    qtbot.addWidget(wizard)

    assert len(wizard.controller.steps) == 6
    assert wizard.controller.current_step.id == "summary"
    assert wizard.step_widgets["summary"].notes_input.toPlainText() == "resumed"
    assert wizard.step_widgets["storage_flag"].storage_checkbox.isChecked()


def test_unchecking_storage_clamps_position(wizard):
    controller = wizard.controller
    wizard.step_widgets["storage_flag"].storage_checkbox.setChecked(True)
    controller.update_steps([step.with_validity(True) for step in controller.steps])
    controller.go_to_step(5)

    wizard.step_widgets["storage_flag"].storage_checkbox.setChecked(False)

    assert controller.current_step_index == 4
    assert controller.current_step.id == "summary"


def test_submit_without_storage(qtbot, wizard, storage, fake_api_client):
    controller = wizard.controller
    controller.go_next()
    wizard.step_widgets["batch_linkage"].rows["b1"][0].setChecked(True)
    controller.go_next()
    fill_delivery(wizard)
    assert controller.go_next()
    assert controller.skip()
    assert controller.is_last_step
    assert wizard.navigation.btn_next.text() == "Create Event"

    with qtbot.waitSignal(wizard.wizard_completed):
        qtbot.mouseClick(wizard.navigation.btn_next, Qt.LeftButton)

    name, payload = fake_api_client.calls[0]
    assert name == "create_sequestration_event"
    assert payload["production_batches"] == [{"production_batch_id": "b1", "quantity_tonnes": 3.0}]
    assert payload["final_delivery_date"] == "2026-03-01"
    assert payload["sequestration_type"] == "soil"
    assert payload["wizard_step"] == 6
    assert "storage_location" not in payload
    assert KEY not in storage
    assert controller.current_step_index == 0


def test_edit_mode_updates_event(qtbot, fake_api_client):
    wizard = SequestrationWizard(
        batch_options=BATCHES,
        initial_data={
            "storage_before_delivery": True,
            "storage_location": "Barn",
            "storage_start_date": "2026-02-01",
            "storage_end_date": "2026-02-02",
            "storage_container_ids": "BAG-9",
            "production_batches": [{"production_batch_id": "b1", "quantity_tonnes": 1}],
            "final_delivery_date": "2026-03-01",
            "delivery_postcode": "AB1 2CD",
            "sequestration_type": "compost",
        },
        event_id="e1",
        api_client=fake_api_client,
        storage=MemoryWizardStorage(),
    )
    qtbot.addWidget(wizard)
    assert len(wizard.controller.steps) == 6

    assert wizard.controller.go_to_step(5)
    qtbot.mouseClick(wizard.navigation.btn_next, Qt.LeftButton)

    name, event_id, payload = fake_api_client.calls[0]
    assert (name, event_id) == ("update_sequestration_event", "e1")
    assert payload["storage_location"] == "Barn"


def test_sequestration_steps_helper():
    assert len(sequestration_steps(True)) == 6
    assert "storage_details" not in [s.id for s in sequestration_steps(False)]


def test_summary_rows():
    rows = dict(sequestration_summary({
        "storage_before_delivery": False,
        "production_batches": [{"production_batch_id": "b1", "quantity_tonnes": 2}],
        "sequestration_type": "other",
        "sequestration_type_other": "Road base",
    }))
    assert rows["Storage Before Delivery"] == "No"
    assert rows["Linked Batches"] == "1 (2 t)"
    assert rows["Sequestration Type"] == "Other: Road base"
    assert "Storage Location" not in rows
