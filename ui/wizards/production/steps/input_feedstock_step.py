# -*- coding: utf-8 -*-
"""
Input Feedstock Step - Step 2 of the Production Batch Wizard.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QFormLayout, QLabel

from ui.components.input_field import NumberField
from ui.wizards.framework import BaseStep, StepValidationResult


class InputFeedstockStep(BaseStep):
    """Step 2: Total feedstock weight fed into the batch."""

    step_id = "input_feedstock"

    def setup_ui(self):
        form = QFormLayout()
        self.weight_input = NumberField(placeholder="0.00", minimum=0)
        self.weight_input.textChanged.connect(self.on_field_changed)
        form.addRow("Input Feedstock Weight (tonnes) *", self.weight_input)
        self.main_layout.addLayout(form)

        hint = QLabel("Enter the total weight of feedstock input for this production batch.")
        hint.setWordWrap(True)
        hint.setStyleSheet("color: #6c757d;")
        self.main_layout.addWidget(hint)
        self.main_layout.addStretch()

    def populate_data(self):
        self.weight_input.set_number(self.get_value("input_feedstock_weight_tonnes"))

    def collect_data(self) -> Dict[str, Any]:
        return {"input_feedstock_weight_tonnes": self.weight_input.number()}

    def show_validation(self, result: StepValidationResult):
        super().show_validation(result)
        if self.error_messages_label.isHidden():
            self.weight_input.set_default()
        else:
            self.weight_input.set_error()
