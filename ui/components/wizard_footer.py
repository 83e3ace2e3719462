# -*- coding: utf-8 -*-
"""
Wizard Navigation Component - Footer bound to a WizardController.

Buttons:
- Previous: disabled on the first step and while submitting
- Skip: shown only on optional steps that are not the last one
- Next / terminal action: disabled while the current step blocks forward
  navigation (except on the last step) or while submitting
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from ui.components.action_button import ActionButton
from ui.design_system import ButtonDimensions, Colors


class WizardNavigation(QWidget):
    """
    Navigation footer.

    The footer applies Previous/Skip/Next directly on the controller. The
    terminal action is only announced through complete_requested; the host
    screen owns what completion means.

    Usage:
        footer = WizardNavigation(controller, complete_label="Create Batch")
        footer.complete_requested.connect(self._handle_complete)
    """

    # Signals
    complete_requested = pyqtSignal()
    cancel_clicked = pyqtSignal()

    NEXT_TEXT = "Next"
    PREVIOUS_TEXT = "Previous"
    SKIP_TEXT = "Skip"
    SUBMITTING_TEXT = "Saving..."

    def __init__(
        self,
        controller: 'WizardController',
        complete_label: str = "Complete",
        show_cancel: bool = True,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)
        self.controller = controller
        self.complete_label = complete_label
        self.show_cancel = show_cancel

        self._setup_ui()

        self.controller.navigation_changed.connect(self.refresh)
        self.controller.steps_changed.connect(self.refresh)
        self.refresh()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: {Colors.BACKGROUND};
                border-top: 1px solid {Colors.BORDER_DEFAULT};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        if self.show_cancel:
            self.btn_cancel = ActionButton("Cancel", variant="secondary")
            self.btn_cancel.clicked.connect(self.cancel_clicked.emit)
            layout.addWidget(self.btn_cancel)

        self.btn_previous = ActionButton(self.PREVIOUS_TEXT, variant="secondary")
        self.btn_previous.clicked.connect(self._on_previous)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_skip = ActionButton(self.SKIP_TEXT, variant="ghost", width=90)
        self.btn_skip.clicked.connect(self._on_skip)
        layout.addWidget(self.btn_skip)

        self.btn_next = ActionButton(
            self.NEXT_TEXT,
            variant="primary",
            width=ButtonDimensions.WIDE_WIDTH
        )
        self.btn_next.clicked.connect(self._on_next)
        layout.addWidget(self.btn_next)

    # =========================================================================
    # State
    # =========================================================================

    def refresh(self):
        """Recompute button states from the controller."""
        controller = self.controller
        submitting = controller.is_submitting
        is_last = controller.is_last_step

        self.btn_previous.setEnabled(controller.can_go_previous and not submitting)

        self.btn_skip.setVisible(controller.current_step.is_optional and not is_last)
        self.btn_skip.setEnabled(not submitting)

        self.btn_next.setEnabled(not ((not controller.can_go_next and not is_last) or submitting))
        if submitting:
            self.btn_next.setText(self.SUBMITTING_TEXT)
        elif is_last:
            self.btn_next.setText(self.complete_label)
        else:
            self.btn_next.setText(self.NEXT_TEXT)

        if self.show_cancel:
            self.btn_cancel.setEnabled(not submitting)

    # =========================================================================
    # Handlers
    # =========================================================================

    def _on_previous(self):
        self.controller.go_previous()

    def _on_skip(self):
        self.controller.skip()

    def _on_next(self):
        if self.controller.is_last_step:
            self.complete_requested.emit()
        else:
            self.controller.go_next()
