# -*- coding: utf-8 -*-
"""Sequestration Event Wizard."""

from .sequestration_wizard import SequestrationWizard, SEQUESTRATION_STEPS, sequestration_steps

__all__ = ['SequestrationWizard', 'SEQUESTRATION_STEPS', 'sequestration_steps']
