# -*- coding: utf-8 -*-
"""
Delivery Info Step - Step 4 of the Sequestration Event Wizard.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QComboBox, QFormLayout, QLabel

from ui.components.input_field import DateField, InputField
from ui.wizards.framework import BaseStep
from app.config import Vocabularies


class DeliveryInfoStep(BaseStep):
    """Step 4: Final delivery to the sequestration site."""

    step_id = "delivery_info"

    def setup_ui(self):
        form = QFormLayout()
        form.setSpacing(12)

        self.delivery_date_input = DateField()
        self.delivery_date_input.dateChanged.connect(self.on_field_changed)
        form.addRow("Final Delivery Date *", self.delivery_date_input)

        self.vehicle_input = InputField(placeholder="e.g., Flatbed truck AB12 CDE")
        self.vehicle_input.textChanged.connect(self.on_field_changed)
        form.addRow("Delivery Vehicle", self.vehicle_input)

        self.postcode_input = InputField(placeholder="Delivery postcode")
        self.postcode_input.textChanged.connect(self.on_field_changed)
        form.addRow("Delivery Postcode *", self.postcode_input)

        self.type_combo = QComboBox()
        self.type_combo.addItem("Select type...", "")
        for code, label in Vocabularies.SEQUESTRATION_TYPES:
            self.type_combo.addItem(label, code)
        self.type_combo.currentIndexChanged.connect(self.on_field_changed)
        self.type_combo.currentIndexChanged.connect(self._update_other_visibility)
        form.addRow("Sequestration Type *", self.type_combo)

        self.other_label = QLabel("Specify Type *")
        self.other_input = InputField(placeholder="Describe the sequestration type")
        self.other_input.textChanged.connect(self.on_field_changed)
        form.addRow(self.other_label, self.other_input)

        self.main_layout.addLayout(form)
        self.main_layout.addStretch()
        self._update_other_visibility()

    def _update_other_visibility(self, *args):
        is_other = self.type_combo.currentData() == "other"
        self.other_label.setVisible(is_other)
        self.other_input.setVisible(is_other)

    def populate_data(self):
        self.delivery_date_input.set_date_text(self.get_value("final_delivery_date"))
        self.vehicle_input.setText(self.get_value("delivery_vehicle_description") or "")
        self.postcode_input.setText(self.get_value("delivery_postcode") or "")
        index = self.type_combo.findData(self.get_value("sequestration_type") or "")
        self.type_combo.setCurrentIndex(max(index, 0))
        self.other_input.setText(self.get_value("sequestration_type_other") or "")
        self._update_other_visibility()

    def collect_data(self) -> Dict[str, Any]:
        sequestration_type = self.type_combo.currentData() or None
        return {
            "final_delivery_date": self.delivery_date_input.date_text(),
            "delivery_vehicle_description": self.vehicle_input.text().strip() or None,
            "delivery_postcode": self.postcode_input.text().strip() or None,
            "sequestration_type": sequestration_type,
            "sequestration_type_other": (
                self.other_input.text().strip() or None
                if sequestration_type == "other" else None
            ),
        }
