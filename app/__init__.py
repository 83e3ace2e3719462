# -*- coding: utf-8 -*-
"""
Biochar Tracker Application Core Module
"""

from .config import Config, StorageKeys, Vocabularies

__all__ = ["Config", "StorageKeys", "Vocabularies"]
