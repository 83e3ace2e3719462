# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard step content widgets.

All step widgets should inherit from this class and implement:
- setup_ui(): Create the step's UI
- collect_data(): Read the step's fields from the UI

And usually override:
- populate_data(): Restore the UI from controller.data
- validate(): Defaults to the step validator handed in by the wizard

A step widget never navigates. It merges its fields into the shared data
bag (commit) and reports its own validity to the controller.
"""

from typing import List, Dict, Any, Optional, Type
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from services.wizard.step_validator import StepValidator
from ui.design_system import Colors


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for step widgets.

    Subclasses set `step_id` to the id of the WizardStep they render.
    """

    step_id: str = ""

    # Signals
    validation_changed = pyqtSignal(bool)

    def __init__(
        self,
        controller: 'WizardController',
        validator: Optional[Type[StepValidator]] = None,
        parent: Optional[QWidget] = None
    ):
        """
        Initialize the step.

        Args:
            controller: The flow's controller (shared data bag and navigation)
            validator: Rules for this step's fields
            parent: Parent widget
        """
        super().__init__(parent)
        self.controller = controller
        self.validator = validator
        self._is_initialized = False
        self._populating = False
        # Errors stay hidden until the user edits the step or submission is attempted
        self._show_errors = False
        self.last_result: Optional[StepValidationResult] = None

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

        self.error_messages_label = self._create_message_label(Colors.ERROR)
        self.warning_messages_label = self._create_message_label(Colors.WARNING)

    def initialize(self):
        """Build the UI the first time the step is needed."""
        if not self._is_initialized:
            self.setup_ui()
            self._add_message_labels()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes the current one."""
        self.initialize()
        self.restore()

    def on_hide(self):
        """Called when another step becomes current. Override for cleanup."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts (called once)."""
        pass

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """
        Collect data from the step's UI.

        Returns:
            The step's fields, merged into the data bag by commit()
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """Fill the UI from controller.data."""
        pass

    def validate(self) -> StepValidationResult:
        """Validate the step against the data bag plus the UI's current fields."""
        result = self.create_validation_result()
        if self.validator is None:
            return result

        data = self.controller.data
        data.update(self.collect_data())
        _, errors = self.validator.validate_step(self.step_id, data)
        for error in errors:
            result.add_error(error)
        return result

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def restore(self):
        """Populate without echoing the populated values back as edits."""
        self._populating = True
        try:
            self.populate_data()
        finally:
            self._populating = False
        self.refresh_validity()

    def commit(self) -> Dict[str, Any]:
        """Merge the step's fields into the data bag and report validity."""
        partial = self.collect_data()
        if partial:
            self.controller.update_data(partial)
        self.refresh_validity()
        return partial

    def refresh_validity(self) -> StepValidationResult:
        """Run validate(), report the outcome to the controller and render its messages."""
        result = self.validate()
        self.last_result = result
        self.controller.set_step_valid(self.step_id, result.is_valid)
        self.show_validation(result)
        self.validation_changed.emit(result.is_valid)
        return result

    def reveal_errors(self, shown: bool = True):
        """Show (or hide) error messages from the next refresh_validity() on."""
        self._show_errors = shown

    def show_validation(self, result: StepValidationResult):
        """Render errors and warnings below the step's fields."""
        errors = result.errors if self._show_errors and result.has_errors() else []
        warnings = result.warnings if result.has_warnings() else []
        self._set_messages(self.error_messages_label, errors)
        self._set_messages(self.warning_messages_label, warnings)

    def on_field_changed(self, *args):
        """Slot for widget change signals."""
        if self._populating or not self._is_initialized:
            return
        self._show_errors = True
        self.commit()

    def get_value(self, key: str, default: Any = None) -> Any:
        """Read one field from the data bag."""
        return self.controller.data.get(key, default)

    def create_validation_result(self) -> StepValidationResult:
        """Create a new validation result object."""
        return StepValidationResult(is_valid=True, errors=[], warnings=[])

    def _create_message_label(self, color: str) -> QLabel:
        label = QLabel(self)
        label.setWordWrap(True)
        label.setStyleSheet(f"color: {color};")
        label.hide()
        return label

    def _add_message_labels(self):
        # Above a trailing stretch, if setup_ui() ended with one
        index = self.main_layout.count()
        last = self.main_layout.itemAt(index - 1) if index else None
        if last is not None and last.spacerItem() is not None:
            index -= 1
        self.main_layout.insertWidget(index, self.error_messages_label)
        self.main_layout.insertWidget(index + 1, self.warning_messages_label)

    @staticmethod
    def _set_messages(label: QLabel, messages: List[str]):
        label.setText("\n".join(messages))
        label.setVisible(bool(messages))
