# -*- coding: utf-8 -*-
"""
Temperature Step - Step 4 of the Production Batch Wizard (optional).
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QFormLayout, QLabel

from ui.components.input_field import NumberField
from ui.wizards.framework import BaseStep

TEMPERATURE_FIELDS = (
    ("temperature_min", "Min Temperature (°C)"),
    ("temperature_max", "Max Temperature (°C)"),
    ("temperature_avg", "Avg Temperature (°C)"),
)


class TemperatureStep(BaseStep):
    """Step 4: Pyrolysis temperature profile."""

    step_id = "temperature"

    def setup_ui(self):
        hint = QLabel("Temperature data is optional but helps with quality tracking.")
        hint.setStyleSheet("color: #6c757d;")
        self.main_layout.addWidget(hint)

        form = QFormLayout()
        self.inputs = {}
        for key, label in TEMPERATURE_FIELDS:
            field = NumberField(minimum=0, decimals=0)
            field.textChanged.connect(self.on_field_changed)
            form.addRow(label, field)
            self.inputs[key] = field
        self.main_layout.addLayout(form)
        self.main_layout.addStretch()

    def populate_data(self):
        for key, field in self.inputs.items():
            field.set_number(self.get_value(key))

    def collect_data(self) -> Dict[str, Any]:
        return {key: field.number() for key, field in self.inputs.items()}
