# -*- coding: utf-8 -*-
"""
Output Biochar Step - Step 3 of the Production Batch Wizard.

Shows the conversion rate once both weights are known.
"""

from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QFormLayout, QLabel

from ui.components.input_field import NumberField
from ui.wizards.framework import BaseStep, StepValidationResult
from services.wizard.step_validator import to_number


TYPICAL_CONVERSION_RANGE = (20.0, 30.0)


def conversion_rate(input_tonnes, output_tonnes) -> Optional[float]:
    """Output as a percentage of input; None unless both are positive."""
    input_value = to_number(input_tonnes)
    output_value = to_number(output_tonnes)
    if not input_value or not output_value or input_value <= 0 or output_value <= 0:
        return None
    return output_value / input_value * 100.0


class OutputBiocharStep(BaseStep):
    """Step 3: Biochar weight produced."""

    step_id = "output_biochar"

    def setup_ui(self):
        form = QFormLayout()
        self.weight_input = NumberField(placeholder="0.00", minimum=0)
        self.weight_input.textChanged.connect(self.on_field_changed)
        self.weight_input.textChanged.connect(self._update_hint)
        form.addRow("Output Biochar Weight (tonnes) *", self.weight_input)
        self.main_layout.addLayout(form)

        self.hint_label = QLabel()
        self.hint_label.setWordWrap(True)
        self.hint_label.setStyleSheet("color: #6c757d;")
        self.main_layout.addWidget(self.hint_label)
        self.main_layout.addStretch()

    def populate_data(self):
        self.weight_input.set_number(self.get_value("output_biochar_weight_tonnes"))
        self._update_hint()

    def collect_data(self) -> Dict[str, Any]:
        return {"output_biochar_weight_tonnes": self.weight_input.number()}

    def validate(self) -> StepValidationResult:
        result = super().validate()
        rate = conversion_rate(
            self.get_value("input_feedstock_weight_tonnes"),
            self.weight_input.number()
        )
        low, high = TYPICAL_CONVERSION_RANGE
        if rate is not None and not low <= rate <= high:
            result.add_warning(
                f"Conversion rate of {rate:.1f}% is outside the typical {low:g}-{high:g}% range."
            )
        return result

    def show_validation(self, result: StepValidationResult):
        super().show_validation(result)
        if self.error_messages_label.isHidden():
            self.weight_input.set_default()
        else:
            self.weight_input.set_error()

    def _update_hint(self, *args):
        input_weight = to_number(self.get_value("input_feedstock_weight_tonnes"))
        if not input_weight:
            self.hint_label.hide()
            return

        text = f"Input weight: {input_weight:g} tonnes. Typical conversion rates are 20-30%."
        rate = conversion_rate(input_weight, self.weight_input.number())
        if rate is not None:
            text += f" Current conversion rate: {rate:.1f}%."
        self.hint_label.setText(text)
        self.hint_label.show()
