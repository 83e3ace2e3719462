# -*- coding: utf-8 -*-
"""
Storage Flag Step - Step 1 of the Sequestration Event Wizard.

Toggling the flag adds or removes the Storage Details step.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QCheckBox, QLabel

from ui.wizards.framework import BaseStep


class StorageFlagStep(BaseStep):
    """Step 1: Was the biochar stored before final delivery?"""

    step_id = "storage_flag"

    def setup_ui(self):
        self.storage_checkbox = QCheckBox("Storage before delivery")
        self.storage_checkbox.toggled.connect(self.on_field_changed)
        self.main_layout.addWidget(self.storage_checkbox)

        hint = QLabel(
            "Check this if the biochar was stored at an intermediate location "
            "before final delivery to the sequestration site."
        )
        hint.setWordWrap(True)
        hint.setStyleSheet("color: #6c757d;")
        self.main_layout.addWidget(hint)
        self.main_layout.addStretch()

    def populate_data(self):
        self.storage_checkbox.setChecked(bool(self.get_value("storage_before_delivery")))

    def collect_data(self) -> Dict[str, Any]:
        return {"storage_before_delivery": self.storage_checkbox.isChecked()}
