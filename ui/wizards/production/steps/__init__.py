# -*- coding: utf-8 -*-
"""Production Batch Wizard steps."""

from .basic_info_step import BasicInfoStep
from .input_feedstock_step import InputFeedstockStep
from .output_biochar_step import OutputBiocharStep
from .temperature_step import TemperatureStep
from .summary_step import SummaryStep

__all__ = [
    'BasicInfoStep',
    'InputFeedstockStep',
    'OutputBiocharStep',
    'TemperatureStep',
    'SummaryStep'
]
