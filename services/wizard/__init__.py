# -*- coding: utf-8 -*-
"""Wizard step validation rules."""

from .step_validator import (
    StepValidator,
    ProductionStepValidator,
    SequestrationStepValidator
)

__all__ = [
    "StepValidator",
    "ProductionStepValidator",
    "SequestrationStepValidator",
]
