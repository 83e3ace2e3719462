# -*- coding: utf-8 -*-
"""
Step validation service for the entry wizards.

Validates the accumulated data bag for each step without UI coupling.
Each subclass defines a `_validate_<step_id>` method per step it knows;
unknown step ids are valid.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple


def parse_date(value: Any) -> Optional[date]:
    """Parse a date, datetime or ISO string; None when blank or malformed."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).strip()[:10]).date()
    except ValueError:
        return None


def to_number(value: Any) -> Optional[float]:
    """Coerce a value to float; None when blank or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class StepValidator:
    """Validates wizard step data based on the data bag."""

    @classmethod
    def validate_step(cls, step_id: str, data: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate one step.

        Args:
            step_id: Step identifier
            data: Accumulated wizard data

        Returns:
            Tuple of (is_valid, error_messages)
        """
        rule = getattr(cls, f"_validate_{step_id}", None)
        if rule is None:
            return True, []

        errors = rule(data)
        return len(errors) == 0, errors

    @classmethod
    def validate_all(cls, step_ids: Iterable[str], data: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """Validate several steps and collect every error."""
        errors: List[str] = []
        for step_id in step_ids:
            _, step_errors = cls.validate_step(step_id, data)
            errors.extend(step_errors)
        return len(errors) == 0, errors


class ProductionStepValidator(StepValidator):
    """Rules for the production batch wizard."""

    @staticmethod
    def _validate_basic_info(data: Dict[str, Any]) -> List[str]:
        if parse_date(data.get("production_date")) is None:
            return ["Production date is required"]
        return []

    @staticmethod
    def _validate_input_feedstock(data: Dict[str, Any]) -> List[str]:
        weight = to_number(data.get("input_feedstock_weight_tonnes"))
        if weight is None or weight <= 0:
            return ["Input weight must be positive"]
        return []

    @staticmethod
    def _validate_output_biochar(data: Dict[str, Any]) -> List[str]:
        weight = to_number(data.get("output_biochar_weight_tonnes"))
        if weight is None or weight <= 0:
            return ["Output weight must be positive"]
        return []

    @staticmethod
    def _validate_temperature(data: Dict[str, Any]) -> List[str]:
        errors = []
        for key, label in (
            ("temperature_min", "Min temperature"),
            ("temperature_max", "Max temperature"),
            ("temperature_avg", "Avg temperature"),
        ):
            value = data.get(key)
            if is_blank(value):
                continue
            number = to_number(value)
            if number is None:
                errors.append(f"{label} must be a number")
            elif number < 0:
                errors.append(f"{label} must be at least 0")
        return errors


class SequestrationStepValidator(StepValidator):
    """Rules for the sequestration event wizard."""

    @staticmethod
    def _validate_storage_flag(data: Dict[str, Any]) -> List[str]:
        return []

    @staticmethod
    def _validate_storage_details(data: Dict[str, Any]) -> List[str]:
        if not data.get("storage_before_delivery"):
            return []

        errors = []
        if is_blank(data.get("storage_location")):
            errors.append("Storage location is required")

        start = parse_date(data.get("storage_start_date"))
        end = parse_date(data.get("storage_end_date"))
        if start is None:
            errors.append("Storage start date is required")
        if end is None:
            errors.append("Storage end date is required")
        if start and end and end < start:
            errors.append("Storage end date must be on or after the start date")

        if is_blank(data.get("storage_container_ids")):
            errors.append("Container IDs are required")
        return errors

    @staticmethod
    def _validate_batch_linkage(data: Dict[str, Any]) -> List[str]:
        batches = data.get("production_batches") or []
        if not batches:
            return ["Link at least one production batch"]

        errors = []
        for link in batches:
            quantity = to_number(link.get("quantity_tonnes"))
            if quantity is None or quantity <= 0:
                errors.append(
                    f"Quantity for batch {link.get('production_batch_id', '?')} must be positive"
                )
        return errors

    @staticmethod
    def _validate_delivery_info(data: Dict[str, Any]) -> List[str]:
        errors = []
        if parse_date(data.get("final_delivery_date")) is None:
            errors.append("Delivery date is required")
        if is_blank(data.get("delivery_postcode")):
            errors.append("Delivery postcode is required")

        sequestration_type = data.get("sequestration_type")
        if is_blank(sequestration_type):
            errors.append("Sequestration type is required")
        elif sequestration_type == "other" and is_blank(data.get("sequestration_type_other")):
            errors.append("Please specify the sequestration type")
        return errors
