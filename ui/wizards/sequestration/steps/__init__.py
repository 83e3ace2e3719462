# -*- coding: utf-8 -*-
"""Sequestration Event Wizard steps."""

from .storage_flag_step import StorageFlagStep
from .storage_details_step import StorageDetailsStep
from .batch_linkage_step import BatchLinkageStep
from .delivery_info_step import DeliveryInfoStep
from .regulatory_step import RegulatoryStep
from .summary_step import SequestrationSummaryStep

__all__ = [
    'StorageFlagStep',
    'StorageDetailsStep',
    'BatchLinkageStep',
    'DeliveryInfoStep',
    'RegulatoryStep',
    'SequestrationSummaryStep'
]
