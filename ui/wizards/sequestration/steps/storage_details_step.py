# -*- coding: utf-8 -*-
"""
Storage Details Step - Step 2 of the Sequestration Event Wizard.

Only part of the flow when storage_before_delivery is set.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QComboBox, QFormLayout

from ui.components.input_field import DateField, InputField
from ui.wizards.framework import BaseStep
from app.config import Vocabularies

DEFAULT_STORAGE_CONDITION = "indoor"


class StorageDetailsStep(BaseStep):
    """Step 2: Where and how long the biochar was stored."""

    step_id = "storage_details"

    def setup_ui(self):
        form = QFormLayout()
        form.setSpacing(12)

        self.location_input = InputField(placeholder="e.g., Warehouse A, Field Storage")
        self.location_input.textChanged.connect(self.on_field_changed)
        form.addRow("Storage Location *", self.location_input)

        self.start_date_input = DateField()
        self.start_date_input.dateChanged.connect(self.on_field_changed)
        form.addRow("Storage Start Date *", self.start_date_input)

        self.end_date_input = DateField()
        self.end_date_input.dateChanged.connect(self.on_field_changed)
        form.addRow("Storage End Date *", self.end_date_input)

        self.container_input = InputField(placeholder="e.g., BAG-001, BAG-002")
        self.container_input.textChanged.connect(self.on_field_changed)
        form.addRow("Container IDs *", self.container_input)

        self.conditions_combo = QComboBox()
        for code, label in Vocabularies.STORAGE_CONDITIONS:
            self.conditions_combo.addItem(label, code)
        self.conditions_combo.currentIndexChanged.connect(self.on_field_changed)
        form.addRow("Storage Conditions", self.conditions_combo)

        self.main_layout.addLayout(form)
        self.main_layout.addStretch()

    def populate_data(self):
        self.location_input.setText(self.get_value("storage_location") or "")
        self.start_date_input.set_date_text(self.get_value("storage_start_date"))
        self.end_date_input.set_date_text(self.get_value("storage_end_date"))
        self.container_input.setText(self.get_value("storage_container_ids") or "")
        index = self.conditions_combo.findData(
            self.get_value("storage_conditions") or DEFAULT_STORAGE_CONDITION
        )
        self.conditions_combo.setCurrentIndex(max(index, 0))

    def collect_data(self) -> Dict[str, Any]:
        return {
            "storage_location": self.location_input.text().strip() or None,
            "storage_start_date": self.start_date_input.date_text(),
            "storage_end_date": self.end_date_input.date_text(),
            "storage_container_ids": self.container_input.text().strip() or None,
            "storage_conditions": self.conditions_combo.currentData(),
        }
