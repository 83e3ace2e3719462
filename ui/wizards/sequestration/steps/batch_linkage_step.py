# -*- coding: utf-8 -*-
"""
Batch Linkage Step - Step 3 of the Sequestration Event Wizard.

Links the event to one or more production batches, each with the quantity
of biochar drawn from it.
"""

from typing import Any, Dict, List, Optional

from PyQt5.QtWidgets import QCheckBox, QDoubleSpinBox, QGridLayout, QLabel

from ui.wizards.framework import BaseStep
from services.wizard.step_validator import parse_date, to_number
from app.config import Config


def format_batch_option(option: Dict[str, Any]) -> str:
    parsed = parse_date(option.get("production_date"))
    label = parsed.strftime(Config.DATE_FORMAT_DISPLAY) if parsed else "Undated batch"
    weight = to_number(option.get("output_biochar_weight_tonnes"))
    if weight:
        label += f" ({weight:g}t)"
    return label


class BatchLinkageStep(BaseStep):
    """Step 3: Production batches delivered in this event."""

    step_id = "batch_linkage"

    def __init__(self, controller, validator=None,
                 batch_options: Optional[List[Dict[str, Any]]] = None, parent=None):
        self.batch_options = batch_options or []
        self.rows: Dict[str, tuple] = {}
        super().__init__(controller, validator, parent)

    def setup_ui(self):
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        grid.addWidget(QLabel("Production Batch"), 0, 0)
        grid.addWidget(QLabel("Quantity (tonnes)"), 0, 1)

        for row, option in enumerate(self.batch_options, start=1):
            checkbox = QCheckBox(format_batch_option(option))
            quantity = QDoubleSpinBox()
            quantity.setDecimals(2)
            quantity.setMaximum(to_number(option.get("output_biochar_weight_tonnes")) or 1e6)
            quantity.setEnabled(False)

            checkbox.toggled.connect(lambda checked, batch_id=option["id"]: self._on_toggled(batch_id, checked))
            quantity.valueChanged.connect(self.on_field_changed)

            grid.addWidget(checkbox, row, 0)
            grid.addWidget(quantity, row, 1)
            self.rows[option["id"]] = (checkbox, quantity)

        self.main_layout.addLayout(grid)

        if not self.batch_options:
            empty = QLabel("No production batches available.")
            empty.setStyleSheet("color: #6c757d;")
            self.main_layout.addWidget(empty)

        self.total_label = QLabel()
        self.main_layout.addWidget(self.total_label)
        self.main_layout.addStretch()

    def _on_toggled(self, batch_id: str, checked: bool):
        checkbox, quantity = self.rows[batch_id]
        quantity.setEnabled(checked)
        if checked and not self._populating and quantity.value() == 0:
            # Default to the whole batch output
            quantity.setValue(quantity.maximum())
        self.on_field_changed()
        self._update_total()

    def populate_data(self):
        linked = {
            link.get("production_batch_id"): link.get("quantity_tonnes")
            for link in self.get_value("production_batches") or []
        }
        for batch_id, (checkbox, quantity) in self.rows.items():
            checkbox.setChecked(batch_id in linked)
            quantity.setEnabled(batch_id in linked)
            quantity.setValue(to_number(linked.get(batch_id)) or 0)
        self._update_total()

    def collect_data(self) -> Dict[str, Any]:
        links = [
            {"production_batch_id": batch_id, "quantity_tonnes": quantity.value()}
            for batch_id, (checkbox, quantity) in self.rows.items()
            if checkbox.isChecked()
        ]
        return {"production_batches": links}

    def _update_total(self):
        total = sum(link["quantity_tonnes"] for link in self.collect_data()["production_batches"])
        self.total_label.setText(f"Total biochar selected: {total:g} tonnes")
