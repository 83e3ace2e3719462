# -*- coding: utf-8 -*-
"""
Regulatory Step - Step 5 of the Sequestration Event Wizard (optional).
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QFormLayout, QTextEdit

from ui.components.input_field import InputField
from ui.wizards.framework import BaseStep


class RegulatoryStep(BaseStep):
    """Step 5: Licenses and permits covering the application site."""

    step_id = "regulatory"

    def setup_ui(self):
        form = QFormLayout()

        self.permit_input = InputField(placeholder="e.g., Environmental permit number")
        self.permit_input.textChanged.connect(self.on_field_changed)
        form.addRow("Permit / License Reference", self.permit_input)

        self.notes_input = QTextEdit()
        self.notes_input.setFixedHeight(80)
        self.notes_input.textChanged.connect(self.on_field_changed)
        form.addRow("Regulatory Notes", self.notes_input)

        self.main_layout.addLayout(form)
        self.main_layout.addStretch()

    def populate_data(self):
        self.permit_input.setText(self.get_value("regulatory_permit_reference") or "")
        self.notes_input.setPlainText(self.get_value("regulatory_notes") or "")

    def collect_data(self) -> Dict[str, Any]:
        return {
            "regulatory_permit_reference": self.permit_input.text().strip() or None,
            "regulatory_notes": self.notes_input.toPlainText().strip() or None,
        }
