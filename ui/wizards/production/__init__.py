# -*- coding: utf-8 -*-
"""Production Batch Wizard."""

from .production_wizard import ProductionWizard, PRODUCTION_STEPS

__all__ = ['ProductionWizard', 'PRODUCTION_STEPS']
