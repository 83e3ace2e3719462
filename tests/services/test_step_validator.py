# -*- coding: utf-8 -*-
"""
Tests for the wizard step validators.
"""
from datetime import date

import pytest

from services.wizard.step_validator import (
    ProductionStepValidator,
    SequestrationStepValidator,
    StepValidator,
    parse_date,
    to_number,
)


def test_parse_date():
    assert parse_date("2026-01-05") == date(2026, 1, 5)
    assert parse_date("2026-01-05T10:00:00Z") == date(2026, 1, 5)
    assert parse_date("") is None
    assert parse_date("not a date") is None


def test_to_number():
    assert to_number("12.5") == 12.5
    assert to_number(3) == 3.0
    assert to_number(" ") is None
    assert to_number(True) is None
    assert to_number("abc") is None


def test_unknown_step_is_valid():
    assert StepValidator.validate_step("anything", {}) == (True, [])


class TestProductionRules:

    def test_basic_info_requires_date(self):
        valid, errors = ProductionStepValidator.validate_step("basic_info", {})
        assert not valid
        assert errors == ["Production date is required"]

        assert ProductionStepValidator.validate_step(
            "basic_info", {"production_date": "2026-01-05"})[0]

    @pytest.mark.parametrize("value,expected", [
        (None, False), ("", False), (0, False), (-1, False), ("12.5", True), (3, True),
    ])
    def test_input_weight_must_be_positive(self, value, expected):
        valid, _ = ProductionStepValidator.validate_step(
            "input_feedstock", {"input_feedstock_weight_tonnes": value})
        assert valid is expected

    def test_output_weight_must_be_positive(self):
        assert not ProductionStepValidator.validate_step("output_biochar", {})[0]
        assert ProductionStepValidator.validate_step(
            "output_biochar", {"output_biochar_weight_tonnes": 2})[0]

    def test_temperature_blank_is_fine(self):
        assert ProductionStepValidator.validate_step("temperature", {}) == (True, [])

    def test_temperature_rejects_negative_and_text(self):
        valid, errors = ProductionStepValidator.validate_step(
            "temperature", {"temperature_min": -5, "temperature_max": "hot", "temperature_avg": 500})
        assert not valid
        assert errors == ["Min temperature must be at least 0", "Max temperature must be a number"]

    def test_validate_all_collects_errors(self):
        valid, errors = ProductionStepValidator.validate_all(
            ["basic_info", "input_feedstock", "summary"], {})
        assert not valid
        assert len(errors) == 2


class TestSequestrationRules:

    def test_storage_flag_always_valid(self):
        assert SequestrationStepValidator.validate_step("storage_flag", {})[0]

    def test_storage_details_skipped_without_storage(self):
        assert SequestrationStepValidator.validate_step(
            "storage_details", {"storage_before_delivery": False})[0]

    def test_storage_details_required_fields(self):
        valid, errors = SequestrationStepValidator.validate_step(
            "storage_details", {"storage_before_delivery": True})
        assert not valid
        assert "Storage location is required" in errors
        assert "Container IDs are required" in errors

    def test_storage_end_before_start(self):
        data = {
            "storage_before_delivery": True,
            "storage_location": "Warehouse A",
            "storage_start_date": "2026-02-10",
            "storage_end_date": "2026-02-01",
            "storage_container_ids": "BAG-001",
        }
        valid, errors = SequestrationStepValidator.validate_step("storage_details", data)
        assert not valid
        assert errors == ["Storage end date must be on or after the start date"]

        data["storage_end_date"] = "2026-02-10"
        assert SequestrationStepValidator.validate_step("storage_details", data)[0]

    def test_batch_linkage_needs_positive_quantity(self):
        assert not SequestrationStepValidator.validate_step("batch_linkage", {})[0]

        valid, errors = SequestrationStepValidator.validate_step("batch_linkage", {
            "production_batches": [{"production_batch_id": "b1", "quantity_tonnes": 0}]
        })
        assert not valid
        assert errors == ["Quantity for batch b1 must be positive"]

        assert SequestrationStepValidator.validate_step("batch_linkage", {
            "production_batches": [{"production_batch_id": "b1", "quantity_tonnes": 1.5}]
        })[0]

    def test_delivery_info_other_type_needs_description(self):
        data = {
            "final_delivery_date": "2026-03-01",
            "delivery_postcode": "AB1 2CD",
            "sequestration_type": "other",
        }
        valid, errors = SequestrationStepValidator.validate_step("delivery_info", data)
        assert not valid
        assert errors == ["Please specify the sequestration type"]

        data["sequestration_type_other"] = "Road base"
        assert SequestrationStepValidator.validate_step("delivery_info", data)[0]
