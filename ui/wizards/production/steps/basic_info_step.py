# -*- coding: utf-8 -*-
"""
Basic Info Step - Step 1 of the Production Batch Wizard.

Captures:
- Production date (required)
- Linked feedstock delivery (optional)
"""

from typing import Any, Dict, List, Optional

from PyQt5.QtWidgets import QComboBox, QFormLayout, QLabel

from ui.components.input_field import DateField
from ui.wizards.framework import BaseStep
from services.wizard.step_validator import parse_date
from app.config import Config


def format_feedstock_option(option: Dict[str, Any]) -> str:
    """Label for a feedstock delivery, e.g. "05 Jan 2026 - Wood chips (12.5t)"."""
    parsed = parse_date(option.get("date"))
    label = parsed.strftime(Config.DATE_FORMAT_DISPLAY) if parsed else "-"
    label += f" - {option.get('feedstock_type') or 'Unknown'}"
    if option.get("weight_tonnes"):
        label += f" ({option['weight_tonnes']}t)"
    return label


class BasicInfoStep(BaseStep):
    """Step 1: Production date and feedstock linkage."""

    step_id = "basic_info"

    def __init__(self, controller, validator=None,
                 feedstock_options: Optional[List[Dict[str, Any]]] = None, parent=None):
        self.feedstock_options = feedstock_options or []
        super().__init__(controller, validator, parent)

    def setup_ui(self):
        form = QFormLayout()
        form.setSpacing(12)

        self.date_input = DateField()
        self.date_input.dateChanged.connect(self.on_field_changed)
        form.addRow("Production Date *", self.date_input)

        self.feedstock_combo = QComboBox()
        self.feedstock_combo.addItem("Select feedstock delivery...", "")
        for option in self.feedstock_options:
            self.feedstock_combo.addItem(format_feedstock_option(option), option.get("id"))
        self.feedstock_combo.currentIndexChanged.connect(self.on_field_changed)
        form.addRow("Link to Feedstock Delivery", self.feedstock_combo)

        self.main_layout.addLayout(form)
        if not self.feedstock_options:
            hint = QLabel("No feedstock deliveries available to link.")
            hint.setStyleSheet("color: #6c757d;")
            self.main_layout.addWidget(hint)
        self.main_layout.addStretch()

    def populate_data(self):
        self.date_input.set_date_text(self.get_value("production_date"))
        index = self.feedstock_combo.findData(self.get_value("feedstock_delivery_id") or "")
        self.feedstock_combo.setCurrentIndex(max(index, 0))

    def collect_data(self) -> Dict[str, Any]:
        return {
            "production_date": self.date_input.date_text(),
            "feedstock_delivery_id": self.feedstock_combo.currentData() or None,
        }
