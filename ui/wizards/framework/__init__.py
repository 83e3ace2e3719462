# -*- coding: utf-8 -*-
"""
Wizard Framework - Multi-step entry wizards for Biochar Tracker.

Provides the wizard engine (state, persistence, navigation guards) and the
base classes the entry flows build on.
"""

from .wizard_step import WizardStep, ensure_unique_ids
from .wizard_storage import (
    WizardStorage,
    MemoryWizardStorage,
    SettingsWizardStorage,
    FileWizardStorage,
    create_wizard_storage
)
from .wizard_state import WizardState
from .wizard_controller import WizardController
from .base_step import BaseStep, StepValidationResult
from .base_wizard import BaseWizard

__all__ = [
    'WizardStep',
    'ensure_unique_ids',
    'WizardStorage',
    'MemoryWizardStorage',
    'SettingsWizardStorage',
    'FileWizardStorage',
    'create_wizard_storage',
    'WizardState',
    'WizardController',
    'BaseStep',
    'StepValidationResult',
    'BaseWizard'
]
